"""Anonymous, read-only Twitch IRC client."""

from __future__ import annotations

import logging
import re
import secrets
from collections.abc import AsyncIterator

from .. import constants
from ..errors import ChannelJoinError, IRCConnectionError
from ..logs.logger import logger
from ..options import normalize_channel
from .dispatcher import IRCDispatcher
from .models import ChatEvent, ConnectionState
from .parser import IRCMessage
from .transport import TcpTransport, WebSocketTransport

_CHANNEL_RE = re.compile(constants.CHANNEL_NAME_PATTERN)


def validate_channel(channel: str) -> str:
    """Return the normalized channel name or raise ``ChannelJoinError``."""
    name = normalize_channel(channel)
    if not _CHANNEL_RE.match(name):
        raise ChannelJoinError(name or channel)
    return name


def build_transport(kind: str | None = None):
    kind = kind or constants.IRC_TRANSPORT
    if kind == "websocket":
        return WebSocketTransport(constants.IRC_WS_URL, timeout=constants.IRC_CONNECT_TIMEOUT)
    return TcpTransport(
        constants.IRC_HOST,
        constants.IRC_PORT,
        use_tls=constants.IRC_USE_TLS,
        timeout=constants.IRC_CONNECT_TIMEOUT,
    )


class AsyncTwitchIRC:
    """Joins channels anonymously and yields decoded events.

    No reconnection: once the transport ends, ``events()`` ends too.
    """

    def __init__(self, transport=None):
        self.transport = transport or build_transport()
        self.nick = f"{constants.ANONYMOUS_NICK_PREFIX}{secrets.randbelow(90000) + 10000}"
        self.state = ConnectionState.DISCONNECTED
        self.joined_channels: list[str] = []
        self.confirmed_channels: set[str] = set()
        self.dispatcher = IRCDispatcher(self)

    def _set_state(self, new_state: ConnectionState) -> None:
        if self.state != new_state:
            logger.log_event(
                "irc",
                "state_change",
                level=logging.DEBUG,
                old_state=self.state.name,
                new_state=new_state.name,
            )
            self.state = new_state

    async def connect(self) -> None:
        self._set_state(ConnectionState.CONNECTING)
        logger.log_event(
            "irc",
            "connect_start",
            server=self.transport.description,
            transport=type(self.transport).__name__,
        )
        try:
            await self.transport.open()
            await self.send_line(f"PASS {constants.ANONYMOUS_PASSWORD}")
            await self.send_line(f"NICK {self.nick}")
            await self.send_line("CAP REQ :twitch.tv/tags twitch.tv/commands")
        except IRCConnectionError as e:
            logger.log_event("irc", "connect_failed", level=logging.ERROR, error=str(e))
            await self.disconnect()
            raise
        self._set_state(ConnectionState.CONNECTED)
        logger.log_event("irc", "connect_success", nick=self.nick)

    async def send_line(self, line: str) -> None:
        await self.transport.send_line(line)

    async def join(self, channel: str) -> None:
        name = validate_channel(channel)
        if self.state is not ConnectionState.CONNECTED:
            raise ChannelJoinError(name, "not connected")
        try:
            await self.send_line(f"JOIN #{name}")
        except IRCConnectionError as e:
            raise ChannelJoinError(name, str(e)) from e
        self.joined_channels.append(name)
        logger.log_event("irc", "join_sent", channel=name)

    async def events(self) -> AsyncIterator[ChatEvent | IRCMessage]:
        """Yield decoded events in arrival order until the server closes."""
        async for line in self.transport.lines():
            event = await self.dispatcher.handle_line(line)
            if event is not None:
                yield event
        logger.log_event("irc", "stream_closed", level=logging.WARNING)

    async def disconnect(self) -> None:
        await self.transport.close()
        self._set_state(ConnectionState.DISCONNECTED)
        logger.log_event("irc", "disconnected", level=logging.DEBUG)
