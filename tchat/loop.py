"""Drain the chat event stream, one event at a time."""

from __future__ import annotations

import logging
from collections.abc import AsyncIterable

from .formatter import format_line, is_ignored
from .irc.models import ChatEvent
from .logs.logger import logger
from .options import Options
from .sink import Sink


async def run_message_loop(events: AsyncIterable[object], options: Options, sink: Sink) -> int:
    """Format and emit every chat event in arrival order.

    Non-chat events are skipped. Returns the number of lines emitted once the
    stream ends; errors raised by the stream or the sink propagate.
    """
    count = 0
    logger.log_event("chat", "loop_start", level=logging.DEBUG)
    async for event in events:
        if not isinstance(event, ChatEvent):
            continue
        if is_ignored(event, options):
            logger.log_event("chat", "ignored", level=logging.DEBUG, author=event.sender)
            continue
        sink.emit(format_line(event, options))
        count += 1
    logger.log_event("chat", "loop_end", level=logging.DEBUG, count=count)
    return count


__all__ = ["run_message_loop"]
