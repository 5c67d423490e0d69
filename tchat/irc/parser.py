"""IRC message parsing utilities."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime

from ..ansi import parse_hex_color
from .models import Badge, ChatEvent

_TAG_ESCAPES = {":": ";", "s": " ", "\\": "\\", "r": "\r", "n": "\n"}
_ACTION_PREFIX = "\x01ACTION "


@dataclass
class IRCMessage:
    raw: str
    prefix: str | None
    command: str | None
    params: str
    tags: dict[str, str]


def parse_irc_message(raw_line: str) -> IRCMessage:
    tags: dict[str, str] = {}
    prefix: str | None = None
    params = ""
    command: str | None = None

    original = raw_line

    if raw_line.startswith("@"):
        tags_part, _, raw_line = raw_line.partition(" ")
        tags = _parse_tags(tags_part[1:])

    if raw_line.startswith(":"):
        remainder = raw_line[1:]
        if " " in remainder:
            prefix, raw_line = remainder.split(" ", 1)
        else:  # malformed; treat whole remainder as prefix and leave rest empty
            prefix = remainder
            raw_line = ""

    if " :" in raw_line:
        raw_line, params = raw_line.split(" :", 1)

    parts = raw_line.split()
    if parts:
        command = parts[0]
        if len(parts) > 1:
            middle = parts[1:]
            params = " ".join(middle) + (f" {params}" if params else "")

    return IRCMessage(
        raw=original, prefix=prefix, command=command, params=params, tags=tags
    )


def unescape_tag_value(value: str) -> str:
    out: list[str] = []
    i = 0
    while i < len(value):
        ch = value[i]
        if ch == "\\":
            i += 1
            if i < len(value):
                out.append(_TAG_ESCAPES.get(value[i], value[i]))
        else:
            out.append(ch)
        i += 1
    return "".join(out)


def _parse_tags(raw_tags: str) -> dict[str, str]:
    tags: dict[str, str] = {}
    for tag in raw_tags.split(";"):
        if not tag:
            continue
        k, _, v = tag.partition("=")
        tags[k] = unescape_tag_value(v)
    return tags


def parse_badges(value: str) -> tuple[Badge, ...]:
    """``subscriber/12,moderator/1`` -> Badge tuple, order preserved."""
    badges = []
    for part in value.split(","):
        if not part:
            continue
        name, _, version = part.partition("/")
        badges.append(Badge(name=name, version=version))
    return tuple(badges)


def _parse_bits(value: str | None) -> int | None:
    if not value:
        return None
    try:
        return int(value)
    except ValueError:
        return None


def _parse_timestamp(value: str | None, now: datetime | None) -> datetime:
    if value:
        try:
            return datetime.fromtimestamp(int(value) / 1000, tz=UTC)
        except (ValueError, OverflowError, OSError):
            pass
    return now or datetime.now(UTC)


def build_chat_event(parsed: IRCMessage, now: datetime | None = None) -> ChatEvent | None:
    """Build a ``ChatEvent`` from a parsed PRIVMSG; other commands give None."""
    if parsed.command != "PRIVMSG":
        return None
    channel_token, sep, text = parsed.params.partition(" ")
    if not sep:
        return None
    channel = channel_token.lstrip("#").lower()
    # Login from prefix (nick!user@host)
    login = (parsed.prefix or "?").split("!", 1)[0]
    tags = parsed.tags

    is_action = text.startswith(_ACTION_PREFIX)
    if is_action:
        text = text[len(_ACTION_PREFIX):].removesuffix("\x01")

    return ChatEvent(
        sender=tags.get("display-name") or login,
        login=login,
        channel=channel,
        text=text,
        received_at=_parse_timestamp(tags.get("tmi-sent-ts"), now),
        color=parse_hex_color(tags.get("color", "")),
        badges=parse_badges(tags.get("badges", "")),
        bits=_parse_bits(tags.get("bits")),
        is_action=is_action,
    )
