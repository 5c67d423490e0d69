"""Line transports for Twitch IRC.

Both transports expose the same small surface: ``open()``, ``send_line()``,
``lines()`` (an async iterator of decoded lines without CRLF) and ``close()``.
``lines()`` simply ends when the server closes the connection.
"""

from __future__ import annotations

import asyncio
import logging
import ssl
from collections.abc import AsyncIterator

import websockets
from websockets.exceptions import ConnectionClosed

from ..errors import IRCConnectionError


class TcpTransport:
    """Plain or TLS TCP using asyncio streams."""

    def __init__(self, host: str, port: int, *, use_tls: bool = True, timeout: float = 10.0):
        self.host = host
        self.port = port
        self.use_tls = use_tls
        self.timeout = timeout
        self.reader: asyncio.StreamReader | None = None
        self.writer: asyncio.StreamWriter | None = None

    @property
    def description(self) -> str:
        scheme = "tls" if self.use_tls else "tcp"
        return f"{scheme}://{self.host}:{self.port}"

    async def open(self) -> None:
        ssl_context = ssl.create_default_context() if self.use_tls else None
        try:
            self.reader, self.writer = await asyncio.wait_for(
                asyncio.open_connection(self.host, self.port, ssl=ssl_context),
                timeout=self.timeout,
            )
        except TimeoutError as e:
            raise IRCConnectionError(
                f"Timed out connecting to {self.description}",
                data={"timeout": self.timeout},
            ) from e
        except OSError as e:
            raise IRCConnectionError(
                f"Could not connect to {self.description}: {e}"
            ) from e

    async def send_line(self, line: str) -> None:
        if not self.writer:
            raise IRCConnectionError("Transport is not open")
        try:
            self.writer.write(f"{line}\r\n".encode("utf-8"))
            await self.writer.drain()
        except OSError as e:
            raise IRCConnectionError(f"Write to {self.description} failed: {e}") from e

    async def lines(self) -> AsyncIterator[str]:
        if not self.reader:
            raise IRCConnectionError("Transport is not open")
        while True:
            try:
                data = await self.reader.readline()
            except OSError as e:
                raise IRCConnectionError(f"Read from {self.description} failed: {e}") from e
            if not data:
                return
            line = data.decode("utf-8", errors="replace").rstrip("\r\n")
            if line:
                yield line

    async def close(self) -> None:
        if self.writer:
            try:
                self.writer.close()
                await self.writer.wait_closed()
            except OSError as e:
                logging.debug(f"Ignoring error while closing {self.description}: {e}")
            finally:
                self.writer = None
                self.reader = None


class WebSocketTransport:
    """IRC over WebSocket; each text frame may carry several CRLF lines."""

    def __init__(self, url: str, *, timeout: float = 10.0):
        self.url = url
        self.timeout = timeout
        self.ws = None

    @property
    def description(self) -> str:
        return self.url

    async def open(self) -> None:
        try:
            self.ws = await websockets.connect(self.url, open_timeout=self.timeout)
        except TimeoutError as e:
            raise IRCConnectionError(
                f"Timed out connecting to {self.url}", data={"timeout": self.timeout}
            ) from e
        except (OSError, websockets.InvalidHandshake, websockets.InvalidURI) as e:
            raise IRCConnectionError(f"Could not connect to {self.url}: {e}") from e

    async def send_line(self, line: str) -> None:
        if not self.ws:
            raise IRCConnectionError("Transport is not open")
        try:
            await self.ws.send(f"{line}\r\n")
        except ConnectionClosed as e:
            raise IRCConnectionError(f"Write to {self.url} failed: {e}") from e

    async def lines(self) -> AsyncIterator[str]:
        if not self.ws:
            raise IRCConnectionError("Transport is not open")
        try:
            async for frame in self.ws:
                if isinstance(frame, bytes):
                    frame = frame.decode("utf-8", errors="replace")
                for line in frame.split("\r\n"):
                    if line:
                        yield line
        except ConnectionClosed as e:
            # Abnormal close; a clean close just ends the iteration above.
            raise IRCConnectionError(f"Connection to {self.url} lost: {e}") from e

    async def close(self) -> None:
        if self.ws:
            try:
                await self.ws.close()
            finally:
                self.ws = None
