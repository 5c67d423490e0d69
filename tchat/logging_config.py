r"""
Logging configuration module for tchat.

Diagnostics go to stderr through colorlog so that standard output carries
nothing but chat lines.
"""

import logging
import os
import sys
from typing import Any

import colorlog

from .constants import LOG_LEVEL

LOG_COLORS = {
    "DEBUG": "cyan",
    "INFO": "green",
    "WARNING": "yellow",
    "ERROR": "red",
    "CRITICAL": "magenta",
}


def log_structured_error(
    error_type: str,
    message: str,
    exception: Exception | None = None,
    context: dict[str, Any] | None = None,
    level: int = logging.ERROR,
) -> None:
    """Log an error with structured context.

    Args:
        error_type: Category of the error (e.g., 'network', 'logfile', 'channel')
        message: Descriptive error message
        exception: The exception that occurred (optional)
        context: Additional context data for debugging
        level: Logging level (default: ERROR)
    """
    structured_message = f"[{error_type.upper()}] {message}"

    if exception:
        structured_message += f" | Exception: {type(exception).__name__}"

    if context:
        context_str = " | ".join(f"{k}={v}" for k, v in context.items())
        structured_message += f" | Context: {context_str}"

    logging.log(level, structured_message)


def resolve_log_level() -> int:
    """Return the configured level: DEBUG env wins, then TCHAT_LOG_LEVEL."""
    debug_env = os.environ.get("DEBUG", "").lower()
    if debug_env in ("true", "1", "yes"):
        return logging.DEBUG
    return logging.getLevelName(LOG_LEVEL.upper())


class TchatStreamHandler(logging.StreamHandler):
    """Marker type so repeated configuration swaps only our own handler."""


class LoggerConfigurator:
    """Handles logging configuration cleanly using colorlog."""

    def __init__(self, stream=None):
        self.stream = stream or sys.stderr

    def build_formatter(self) -> colorlog.ColoredFormatter:
        return colorlog.ColoredFormatter(
            "%(asctime)s %(log_color)s%(levelname)-8s%(reset)s %(message_log_color)s%(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
            log_colors=LOG_COLORS,
            secondary_log_colors={
                "message": {
                    "ERROR": "red",
                    "CRITICAL": "magenta",
                }
            },
            reset=True,
            stream=self.stream,
        )

    def configure(self) -> logging.Handler:
        """Install the colored stderr handler on the root logger.

        Calling it again replaces the handler from the previous call.
        """
        log_level = resolve_log_level()

        handler = TchatStreamHandler(self.stream)
        handler.setFormatter(self.build_formatter())

        root_logger = logging.getLogger()
        for existing in list(root_logger.handlers):
            if isinstance(existing, TchatStreamHandler):
                root_logger.removeHandler(existing)
        root_logger.addHandler(handler)
        root_logger.setLevel(log_level)

        # Suppress websockets library frame-level debug messages
        logging.getLogger("websockets").setLevel(max(log_level, logging.INFO))
        return handler
