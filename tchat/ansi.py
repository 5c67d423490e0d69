"""
ANSI escape helpers for terminal output
"""

from __future__ import annotations

import re

RGB = tuple[int, int, int]

ESC = "\033["
RESET = "\033[0m"
BOLD = "1"
ITALIC = "3"

# CSI sequences (colours, cursor moves), OSC strings and two-byte escapes
_ANSI_RE = re.compile(
    r"\x1b(?:\[[0-?]*[ -/]*[@-~]|\][^\x07\x1b]*(?:\x07|\x1b\\)|[@-Z\\-_])"
)


def paint(text: str, color: RGB | None, *, bold: bool = False, italic: bool = False) -> str:
    """Wrap text in a 24-bit foreground colour, optionally bold or italic.

    With no colour and no style the text comes back untouched.
    """
    codes = [BOLD] if bold else []
    if italic:
        codes.append(ITALIC)
    if color is not None:
        r, g, b = color
        codes.append(f"38;2;{r};{g};{b}")
    if not codes:
        return text
    return f"{ESC}{';'.join(codes)}m{text}{RESET}"


def strip_ansi(text: str) -> str:
    """Remove every escape sequence, leaving all other characters intact."""
    return _ANSI_RE.sub("", text)


def parse_hex_color(value: str) -> RGB | None:
    """Parse ``#RRGGBB`` into an RGB triple; anything else yields None."""
    if len(value) != 7 or not value.startswith("#"):
        return None
    try:
        return int(value[1:3], 16), int(value[3:5], 16), int(value[5:7], 16)
    except ValueError:
        return None


__all__ = ["RGB", "RESET", "paint", "strip_ansi", "parse_hex_color"]
