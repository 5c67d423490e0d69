"""Compose one terminal line per chat event."""

from __future__ import annotations

from .ansi import paint, strip_ansi
from .badges import BITS_COLOR, WHITE, badge_color, render_blocks
from .irc.models import RGB, ChatEvent
from .options import ColorMode, Options


def is_ignored(event: ChatEvent, options: Options) -> bool:
    if not options.ignored:
        return False
    return (
        event.sender.casefold() in options.ignored
        or (event.login or "").casefold() in options.ignored
    )


def name_color(event: ChatEvent, mode: ColorMode) -> RGB | None:
    """Colour for the sender name, or None when names are left plain."""
    if mode is ColorMode.ASSIGNED:
        return event.color or WHITE
    if mode is ColorMode.BADGE:
        return badge_color(event.badges[0].name) if event.badges else WHITE
    return None


def format_line(event: ChatEvent, options: Options) -> str:
    """Build the display line for ``event``; always ends with text + newline."""
    parts: list[str] = []

    if options.show_time:
        parts.append(event.received_at.astimezone().strftime("%H:%M "))
    if options.show_origin:
        parts.append(f"[{event.channel}]: ")
    if options.show_bits and event.bits is not None:
        parts.append(paint(f"!{event.bits}!", BITS_COLOR, bold=True))
    parts.append(render_blocks(event.badge_ids, options.display_mode))

    prefix = "".join(parts)
    if prefix and not strip_ansi(prefix).endswith(" "):
        prefix += " "

    color = name_color(event, options.color_mode)
    # /me messages get an italic name
    name = paint(event.sender, color, bold=color is not None, italic=event.is_action)

    return f"{prefix}{name}: {event.text}\n"


__all__ = ["format_line", "is_ignored", "name_color"]
