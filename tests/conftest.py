from __future__ import annotations

import logging
from datetime import UTC, datetime

import pytest

from tchat.irc.models import Badge, ChatEvent
from tchat.logging_config import TchatStreamHandler
from tchat.options import Options


@pytest.fixture
def make_event():
    """Factory for ChatEvent with sensible defaults."""

    def _make(**overrides) -> ChatEvent:
        badges = overrides.pop("badges", ())
        fields = {
            "sender": "Ann",
            "login": "ann",
            "channel": "teststream",
            "text": "hi",
            "received_at": datetime(2024, 5, 1, 12, 34, tzinfo=UTC),
            "color": (1, 2, 3),
            "badges": tuple(b if isinstance(b, Badge) else Badge(b, "1") for b in badges),
        }
        fields.update(overrides)
        return ChatEvent(**fields)

    return _make


@pytest.fixture
def make_options():
    def _make(**overrides) -> Options:
        overrides.setdefault("channels", ("teststream",))
        return Options(**overrides)

    return _make


@pytest.fixture(autouse=True)
def _reset_root_logging():
    """Drop handlers installed by LoggerConfigurator during a test."""
    root = logging.getLogger()
    level = root.level
    yield
    for handler in list(root.handlers):
        if isinstance(handler, TchatStreamHandler):
            root.removeHandler(handler)
    root.setLevel(level)
