"""IRC subsystem package.

Contains the line transports, parser, dispatcher and client used to read
Twitch chat anonymously.
"""

from .client import AsyncTwitchIRC, build_transport, validate_channel  # noqa: F401
from .dispatcher import IRCDispatcher  # noqa: F401
from .models import Badge, ChatEvent, ConnectionState  # noqa: F401
from .parser import IRCMessage, build_chat_event, parse_irc_message  # noqa: F401
from .transport import TcpTransport, WebSocketTransport  # noqa: F401

__all__ = [
    "AsyncTwitchIRC",
    "Badge",
    "ChatEvent",
    "ConnectionState",
    "IRCDispatcher",
    "IRCMessage",
    "TcpTransport",
    "WebSocketTransport",
    "build_chat_event",
    "build_transport",
    "parse_irc_message",
    "validate_channel",
]
