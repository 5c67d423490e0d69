"""Command line parsing into an immutable option set."""

from __future__ import annotations

import argparse
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

from . import __version__

DESCRIPTION = "tchat - Monitor any Twitch chat on the terminal"


class DisplayMode(Enum):
    """How badges are shown in front of the sender name."""

    NONE = "none"
    SHORT = "short"
    MINI = "mini"
    FULL = "full"


class ColorMode(Enum):
    """Where the sender name colour comes from."""

    NONE = "none"
    ASSIGNED = "assigned"
    BADGE = "badge"


@dataclass(frozen=True, slots=True)
class Options:
    channels: tuple[str, ...]
    display_mode: DisplayMode = DisplayMode.NONE
    color_mode: ColorMode = ColorMode.NONE
    show_bits: bool = False
    show_origin: bool = False
    show_time: bool = False
    quiet: bool = False
    log_file: Path | None = None
    ignored: frozenset[str] = frozenset()


def normalize_channel(name: str) -> str:
    return name.strip().lstrip("#").lower()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tchat",
        description=DESCRIPTION,
        epilog="Short flags may be combined, e.g. `tchat -cbT somechannel`.",
    )
    parser.add_argument(
        "-V", "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "-c", "--color", action="store_true",
        help="colour names with the colour the user picked on Twitch",
    )
    parser.add_argument(
        "-C", "--badge-color", action="store_true",
        help="colour names with the colour of their first badge",
    )
    parser.add_argument(
        "-b", "--badges", action="store_true", help="show 3-letter badges"
    )
    parser.add_argument(
        "-B", "--mini-badges", action="store_true", help="show 1-letter badges"
    )
    parser.add_argument(
        "-F", "--full-badges", action="store_true", help="show full badge names"
    )
    parser.add_argument(
        "-t", "--bits", action="store_true", help="show bits cheered with a message"
    )
    parser.add_argument(
        "-T", "--time", action="store_true", help="prepend the local time (HH:MM)"
    )
    parser.add_argument(
        "-o", "--origin", action="store_true",
        help="prepend the channel a message was sent in",
    )
    parser.add_argument(
        "-q", "--quiet", action="store_true", help="print nothing to stdout"
    )
    parser.add_argument(
        "-f", "--file", metavar="PATH", type=Path,
        help="append a plain-text transcript to PATH",
    )
    parser.add_argument(
        "-i", "--ignore", metavar="USERNAME", action="append", default=[],
        help="hide messages from USERNAME (repeatable)",
    )
    parser.add_argument(
        "channels", metavar="CHANNEL", nargs="*", help="channel(s) to join"
    )
    return parser


def _display_mode(ns: argparse.Namespace) -> DisplayMode:
    # Fixed precedence when several are given: F > B > b
    if ns.full_badges:
        return DisplayMode.FULL
    if ns.mini_badges:
        return DisplayMode.MINI
    if ns.badges:
        return DisplayMode.SHORT
    return DisplayMode.NONE


def _color_mode(ns: argparse.Namespace) -> ColorMode:
    # C > c
    if ns.badge_color:
        return ColorMode.BADGE
    if ns.color:
        return ColorMode.ASSIGNED
    return ColorMode.NONE


def parse_args(argv: Sequence[str] | None = None) -> Options:
    """Parse ``argv`` (without the program name) into ``Options``.

    Usage errors print to stderr and raise ``SystemExit(2)``; ``--help`` and
    ``--version`` raise ``SystemExit(0)``.
    """
    parser = build_parser()
    ns = parser.parse_intermixed_args(argv)

    channels = tuple(c for c in (normalize_channel(ch) for ch in ns.channels) if c)
    if not channels:
        parser.error("no channel given; try `tchat --help` for more info")

    return Options(
        channels=channels,
        display_mode=_display_mode(ns),
        color_mode=_color_mode(ns),
        show_bits=ns.bits,
        show_origin=ns.origin,
        show_time=ns.time,
        quiet=ns.quiet,
        log_file=ns.file,
        ignored=frozenset(name.casefold() for name in ns.ignore),
    )


__all__ = [
    "ColorMode",
    "DisplayMode",
    "Options",
    "build_parser",
    "normalize_channel",
    "parse_args",
]
