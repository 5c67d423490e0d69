"""Message dispatch & parsing logic."""

from __future__ import annotations

import logging
from datetime import datetime
from typing import TYPE_CHECKING

from ..logs.logger import logger
from .models import ChatEvent
from .parser import IRCMessage, build_chat_event, parse_irc_message

if TYPE_CHECKING:  # pragma: no cover
    from .client import AsyncTwitchIRC


class IRCDispatcher:
    """Turns raw lines into events, answering PINGs along the way."""

    def __init__(self, client: AsyncTwitchIRC):
        self.client = client

    async def handle_line(
        self, raw_line: str, now: datetime | None = None
    ) -> ChatEvent | IRCMessage | None:
        """Return the decoded event for ``raw_line``; PINGs return None."""
        if raw_line.startswith("PING"):
            await self._handle_ping(raw_line)
            return None

        logger.log_event("irc", "raw", level=logging.DEBUG, raw=raw_line)
        parsed = parse_irc_message(raw_line)
        if parsed.command in ("366", "RPL_ENDOFNAMES"):
            self._handle_channel_confirmation(parsed.params)
        elif parsed.command == "PRIVMSG" and parsed.prefix:
            event = build_chat_event(parsed, now=now)
            if event is not None:
                return event
        return parsed

    async def _handle_ping(self, raw_message: str) -> None:
        server = raw_message.split(":", 1)[1] if ":" in raw_message else "tmi.twitch.tv"
        await self.client.send_line(f"PONG :{server}")
        logger.log_event("irc", "ping", level=logging.DEBUG)

    def _handle_channel_confirmation(self, params: str) -> None:
        if " #" in params:
            channel = params.split(" #")[1].split()[0].lower()
            self.client.confirmed_channels.add(channel)
            logger.log_event("irc", "join_confirmed", channel=channel)
