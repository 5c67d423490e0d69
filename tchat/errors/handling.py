from __future__ import annotations

from ..logging_config import log_structured_error
from .internal import (
    ChannelJoinError,
    IRCConnectionError,
    LogFileError,
    StreamClosedError,
    TchatError,
)


def _classify(error: Exception) -> str:
    if isinstance(error, ChannelJoinError):
        return "channel"
    if isinstance(error, LogFileError):
        return "logfile"
    if isinstance(error, IRCConnectionError | StreamClosedError | ConnectionError):
        return "network"
    if isinstance(error, TchatError):
        return "internal"
    return "unknown"


def log_error(message: str, error: Exception, context: dict | None = None) -> None:
    """Log an error message with the associated exception details.

    The error type is derived from the exception class, and any ``data``
    carried by a ``TchatError`` is merged into the logged context.

    Args:
        message: A descriptive message about the error context.
        error: The exception instance to be logged.
        context: Optional additional context data for debugging.
    """
    merged: dict[str, object] = {}
    if isinstance(error, TchatError):
        merged.update(error.data)
    if context:
        merged.update(context)
    log_structured_error(
        error_type=_classify(error),
        message=f"{message}: {error}",
        exception=error,
        context=merged or None,
    )


__all__ = ["log_error"]
