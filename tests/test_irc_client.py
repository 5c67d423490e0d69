"""
Tests for the IRC dispatcher and client, using an in-memory transport
"""

import pytest

from tchat.errors import ChannelJoinError, IRCConnectionError
from tchat.irc import AsyncTwitchIRC, ConnectionState, build_transport, validate_channel
from tchat.irc.dispatcher import IRCDispatcher
from tchat.irc.models import ChatEvent
from tchat.irc.parser import IRCMessage
from tchat.irc.transport import TcpTransport, WebSocketTransport
from tchat.options import normalize_channel


class FakeTransport:
    description = "fake://irc"

    def __init__(self, incoming=(), fail_open=False):
        self.incoming = list(incoming)
        self.sent: list[str] = []
        self.fail_open = fail_open
        self.opened = False
        self.closed = False

    async def open(self):
        if self.fail_open:
            raise IRCConnectionError("refused")
        self.opened = True

    async def send_line(self, line):
        self.sent.append(line)

    async def lines(self):
        for line in self.incoming:
            yield line

    async def close(self):
        self.closed = True


class TestDispatcher:
    @pytest.mark.asyncio
    async def test_ping_pong_response(self):
        transport = FakeTransport()
        client = AsyncTwitchIRC(transport)
        result = await IRCDispatcher(client).handle_line("PING :tmi.twitch.tv")
        assert result is None
        assert transport.sent == ["PONG :tmi.twitch.tv"]

    @pytest.mark.asyncio
    async def test_privmsg_becomes_chat_event(self):
        client = AsyncTwitchIRC(FakeTransport())
        event = await client.dispatcher.handle_line(":ann!ann@ann PRIVMSG #chan :hello world")
        assert isinstance(event, ChatEvent)
        assert (event.sender, event.channel, event.text) == ("ann", "chan", "hello world")

    @pytest.mark.asyncio
    async def test_end_of_names_confirms_channel(self):
        client = AsyncTwitchIRC(FakeTransport())
        result = await client.dispatcher.handle_line(
            ":justinfan1.tmi.twitch.tv 366 justinfan1 #Chan :End of /NAMES list"
        )
        assert isinstance(result, IRCMessage)
        assert client.confirmed_channels == {"chan"}

    @pytest.mark.asyncio
    async def test_other_lines_pass_through(self):
        client = AsyncTwitchIRC(FakeTransport())
        result = await client.dispatcher.handle_line(":tmi.twitch.tv CAP * ACK :twitch.tv/tags")
        assert isinstance(result, IRCMessage)
        assert result.command == "CAP"


class TestClient:
    @pytest.mark.asyncio
    async def test_connect_sends_anonymous_login(self):
        transport = FakeTransport()
        client = AsyncTwitchIRC(transport)
        await client.connect()
        assert transport.opened
        assert client.state is ConnectionState.CONNECTED
        assert transport.sent[0] == "PASS SCHMOOPIIE"
        assert transport.sent[1] == f"NICK {client.nick}"
        assert client.nick.startswith("justinfan")
        assert transport.sent[2] == "CAP REQ :twitch.tv/tags twitch.tv/commands"

    @pytest.mark.asyncio
    async def test_connect_failure(self):
        transport = FakeTransport(fail_open=True)
        client = AsyncTwitchIRC(transport)
        with pytest.raises(IRCConnectionError):
            await client.connect()
        assert client.state is ConnectionState.DISCONNECTED
        assert transport.closed

    @pytest.mark.asyncio
    async def test_join(self):
        transport = FakeTransport()
        client = AsyncTwitchIRC(transport)
        await client.connect()
        await client.join("#TestStream")
        assert transport.sent[-1] == "JOIN #teststream"
        assert client.joined_channels == ["teststream"]

    @pytest.mark.asyncio
    async def test_join_invalid_channel(self):
        transport = FakeTransport()
        client = AsyncTwitchIRC(transport)
        await client.connect()
        with pytest.raises(ChannelJoinError) as exc:
            await client.join("not a channel!")
        assert "JOIN" not in " ".join(transport.sent)
        assert exc.value.channel == "not a channel!"

    @pytest.mark.asyncio
    async def test_join_before_connect(self):
        client = AsyncTwitchIRC(FakeTransport())
        with pytest.raises(ChannelJoinError):
            await client.join("teststream")

    @pytest.mark.asyncio
    async def test_events_in_arrival_order(self):
        transport = FakeTransport(
            [
                ":tmi.twitch.tv 001 justinfan1 :Welcome, GLHF!",
                ":a!a@a PRIVMSG #c :one",
                "PING :tmi.twitch.tv",
                ":b!b@b PRIVMSG #c :two",
            ]
        )
        client = AsyncTwitchIRC(transport)
        await client.connect()
        events = [e async for e in client.events()]
        chats = [e.text for e in events if isinstance(e, ChatEvent)]
        assert chats == ["one", "two"]
        assert len(events) == 3
        assert "PONG :tmi.twitch.tv" in transport.sent

    @pytest.mark.asyncio
    async def test_disconnect(self):
        transport = FakeTransport()
        client = AsyncTwitchIRC(transport)
        await client.connect()
        await client.disconnect()
        assert transport.closed
        assert client.state is ConnectionState.DISCONNECTED


@pytest.mark.parametrize("name", ["teststream", "#TestStream", "a", "x" * 25, "under_score9"])
def test_validate_channel_accepts(name):
    assert validate_channel(name) == name.lstrip("#").lower()


def test_validate_channel_normalizes_like_options():
    assert validate_channel("  #TestStream ") == "teststream"
    assert validate_channel("  #TestStream ") == normalize_channel("  #TestStream ")


@pytest.mark.parametrize("name", ["", "#", "x" * 26, "bad-name", "sp ace", "ünï"])
def test_validate_channel_rejects(name):
    with pytest.raises(ChannelJoinError):
        validate_channel(name)


def test_build_transport_kinds():
    assert isinstance(build_transport("tcp"), TcpTransport)
    ws = build_transport("websocket")
    assert isinstance(ws, WebSocketTransport)
    assert ws.url.startswith("wss://")


@pytest.mark.asyncio
async def test_tcp_transport_requires_open():
    transport = TcpTransport("localhost", 1, use_tls=False)
    with pytest.raises(IRCConnectionError):
        await transport.send_line("PING")
