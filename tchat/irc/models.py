"""Shared IRC data models."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum, auto

RGB = tuple[int, int, int]


class ConnectionState(Enum):
    DISCONNECTED = auto()
    CONNECTING = auto()
    CONNECTED = auto()


@dataclass(frozen=True, slots=True)
class Badge:
    name: str
    version: str = ""


@dataclass(frozen=True, slots=True)
class ChatEvent:
    """A decoded chat message, read-only for everything downstream."""

    sender: str
    channel: str
    text: str
    received_at: datetime
    login: str = ""
    color: RGB | None = None
    badges: tuple[Badge, ...] = field(default_factory=tuple)
    bits: int | None = None
    is_action: bool = False

    @property
    def badge_ids(self) -> tuple[str, ...]:
        return tuple(b.name for b in self.badges)
