"""Human-readable text for structured log events.

``event_templates.json`` maps each domain to its actions and a ``str.format``
template; ``BotLogger.log_event`` looks events up here by ``(domain, action)``.
"""

from __future__ import annotations

import json
from collections.abc import Mapping
from pathlib import Path
from typing import Any

EVENT_TEMPLATES: dict[tuple[str, str], str] = {}
TEMPLATES_PATH = Path(__file__).with_name("event_templates.json")


def _flatten(raw: Any) -> dict[tuple[str, str], str]:
    """``{"irc": {"ping": "..."}}`` -> ``{("irc", "ping"): "..."}``; junk skipped."""
    if not isinstance(raw, Mapping):
        return {}
    return {
        (domain, action): text
        for domain, actions in raw.items()
        if isinstance(domain, str) and isinstance(actions, Mapping)
        for action, text in actions.items()
        if isinstance(action, str) and isinstance(text, str)
    }


def load_event_templates(path: Path | None = None) -> dict[tuple[str, str], str]:
    path = path or TEMPLATES_PATH
    try:
        return _flatten(json.loads(path.read_text(encoding="utf-8")))
    except FileNotFoundError:
        return {("app", "load_error"): "Event templates file missing"}
    except (OSError, ValueError) as e:
        return {("app", "load_error"): f"Failed to load event templates: {e}"[:200]}


def reload_event_templates(path: Path | None = None) -> None:
    # Mutate in place so modules holding a reference see the new templates.
    EVENT_TEMPLATES.clear()
    EVENT_TEMPLATES.update(load_event_templates(path))


reload_event_templates()

__all__ = ["EVENT_TEMPLATES", "TEMPLATES_PATH", "load_event_templates", "reload_event_templates"]
