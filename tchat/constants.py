"""
Configuration constants for tchat

Each constant can be overridden by setting an environment variable with the
same name.
"""

import os
import sys


def _get_env_int(name: str, default: int) -> int:
    """Retrieve an integer value from an environment variable.

    Falls back to ``default`` with a warning on stderr when the value does
    not parse.
    """
    value = os.getenv(name)
    if value is not None:
        try:
            return int(value)
        except ValueError:
            print(
                f"Warning: Invalid integer value for {name}='{value}', using default {default}",
                file=sys.stderr,
            )
    return default


def _get_env_float(name: str, default: float) -> float:
    value = os.getenv(name)
    if value is not None:
        try:
            return float(value)
        except ValueError:
            print(
                f"Warning: Invalid float value for {name}='{value}', using default {default}",
                file=sys.stderr,
            )
    return default


def _get_env_bool(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None:
        return default
    return value.strip().lower() in ("true", "1", "yes", "on")


def _get_env_str(name: str, default: str, choices: tuple[str, ...] = ()) -> str:
    value = os.getenv(name)
    if value is None:
        return default
    value = value.strip().lower()
    if choices and value not in choices:
        print(
            f"Warning: Invalid value for {name}='{value}', using default {default}",
            file=sys.stderr,
        )
        return default
    return value


# Twitch IRC endpoints
IRC_HOST = os.getenv("TCHAT_IRC_HOST", "irc.chat.twitch.tv")
IRC_PORT = _get_env_int("TCHAT_IRC_PORT", 6697)
IRC_USE_TLS = _get_env_bool("TCHAT_IRC_TLS", True)
IRC_WS_URL = os.getenv("TCHAT_WS_URL", "wss://irc-ws.chat.twitch.tv:443")

# Transport used by the IRC client: "tcp" (asyncio streams) or "websocket"
IRC_TRANSPORT = _get_env_str("TCHAT_TRANSPORT", "tcp", ("tcp", "websocket"))

# Seconds to wait for the TCP/WebSocket handshake
IRC_CONNECT_TIMEOUT = _get_env_float("TCHAT_CONNECT_TIMEOUT", 10.0)

# Anonymous login: any justinfan<digits> nick with a dummy password is read-only
ANONYMOUS_NICK_PREFIX = "justinfan"
ANONYMOUS_PASSWORD = "SCHMOOPIIE"

# Diagnostics level when DEBUG is not set
LOG_LEVEL = _get_env_str(
    "TCHAT_LOG_LEVEL",
    "warning",
    ("debug", "info", "warning", "error", "critical"),
)

# Twitch login names: lowercase alphanumerics and underscore, 1..25 chars
CHANNEL_NAME_PATTERN = r"^[a-z0-9_]{1,25}$"
