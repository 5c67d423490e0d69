"""Error types and logging helpers."""

from .handling import log_error
from .internal import (
    ChannelJoinError,
    IRCConnectionError,
    LogFileError,
    StreamClosedError,
    TchatError,
)

__all__ = [
    "TchatError",
    "ChannelJoinError",
    "IRCConnectionError",
    "LogFileError",
    "StreamClosedError",
    "log_error",
]
