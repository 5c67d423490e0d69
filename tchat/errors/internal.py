"""Centralized internal error hierarchy.

Every failure tchat treats as fatal is raised as one of these. The entry
point catches ``TchatError``, logs it and exits non-zero; nothing is retried.

Classes:
  TchatError           – Base for all internal errors.
  ChannelJoinError     – A channel name was rejected before or during JOIN.
  IRCConnectionError   – Connecting to or talking with the chat server failed.
  LogFileError         – The transcript file could not be opened or written.
  StreamClosedError    – The chat event stream ended.
"""

from __future__ import annotations

from collections.abc import Mapping


class TchatError(Exception):
    """Base class for all tchat errors with metadata support.

    Attributes:
        data: Dictionary containing arbitrary structured context data.
    """

    data: dict[str, object]

    def __init__(
        self, message: str, *, data: Mapping[str, object] | None = None
    ) -> None:
        super().__init__(message)
        # Copy into a plain dict to avoid unexpected mutations from caller.
        self.data = dict(data) if data else {}


class ChannelJoinError(TchatError):
    """Raised when a channel name is invalid or the join cannot be sent."""

    def __init__(self, channel: str, reason: str = "invalid channel name") -> None:
        super().__init__(f"Cannot join #{channel}: {reason}", data={"channel": channel})
        self.channel = channel


class IRCConnectionError(TchatError):
    """Raised for connection, handshake and transport write failures."""


class LogFileError(TchatError):
    """Raised when the transcript file cannot be opened or appended to."""

    def __init__(self, path: object, error: OSError) -> None:
        super().__init__(
            f"Log file error for {path}: {error}",
            data={"path": str(path), "errno": error.errno},
        )
        self.path = path


class StreamClosedError(TchatError):
    """Raised when the chat event stream ends."""


__all__ = [
    "TchatError",
    "ChannelJoinError",
    "IRCConnectionError",
    "LogFileError",
    "StreamClosedError",
]
