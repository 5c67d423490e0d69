"""Badge labels and colours.

A badge id maps through a fixed table to a colour and the short/mini labels;
anything not in the table renders with a grey fallback.
"""

from __future__ import annotations

from dataclasses import dataclass

from .ansi import RGB, paint
from .options import DisplayMode

WHITE: RGB = (255, 255, 255)
FALLBACK_COLOR: RGB = (128, 128, 128)
MINI_FALLBACK = "?"


@dataclass(frozen=True, slots=True)
class BadgeStyle:
    color: RGB
    short: str
    mini: str


BADGE_STYLES: dict[str, BadgeStyle] = {
    "broadcaster": BadgeStyle((233, 25, 22), "brd", "B"),
    "moderator": BadgeStyle((0, 173, 3), "mod", "m"),
    "vip": BadgeStyle((244, 5, 185), "vip", "v"),
    "founder": BadgeStyle((170, 64, 213), "fnd", "f"),
    "subscriber": BadgeStyle((130, 5, 180), "sub", "s"),
    "bits": BadgeStyle((193, 178, 17), "bit", "b"),
}

BITS_COLOR: RGB = BADGE_STYLES["bits"].color


def badge_color(badge_id: str) -> RGB:
    style = BADGE_STYLES.get(badge_id)
    return style.color if style else FALLBACK_COLOR


def badge_label(badge_id: str, mode: DisplayMode) -> str:
    style = BADGE_STYLES.get(badge_id)
    if mode is DisplayMode.SHORT:
        return style.short if style else badge_id[:3]
    if mode is DisplayMode.MINI:
        return style.mini if style else MINI_FALLBACK
    if mode is DisplayMode.FULL:
        return badge_id
    return ""


def render(badge_id: str, mode: DisplayMode) -> tuple[str, RGB]:
    """Return ``(label, colour)`` for a badge in the given display mode."""
    return badge_label(badge_id, mode), badge_color(badge_id)


def render_blocks(badge_ids, mode: DisplayMode) -> str:
    """Concatenate one coloured ``|label|`` block per badge, in order."""
    if mode is DisplayMode.NONE:
        return ""
    blocks = []
    for badge_id in badge_ids:
        label, color = render(badge_id, mode)
        blocks.append(paint(f"|{label}|", color))
    return "".join(blocks)


__all__ = [
    "BADGE_STYLES",
    "BITS_COLOR",
    "FALLBACK_COLOR",
    "WHITE",
    "badge_color",
    "badge_label",
    "render",
    "render_blocks",
]
