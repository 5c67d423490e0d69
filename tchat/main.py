#!/usr/bin/env python3
"""
Main entry point for tchat
"""

import asyncio
import contextlib
import logging
import os
import sys
from collections.abc import Sequence

from . import __version__
from .errors import StreamClosedError, TchatError, log_error
from .irc import AsyncTwitchIRC, validate_channel
from .logging_config import LoggerConfigurator
from .logs.logger import logger
from .loop import run_message_loop
from .options import Options, parse_args
from .sink import Sink


async def main(options: Options, client: AsyncTwitchIRC | None = None) -> None:
    """Join every requested channel and print chat until the stream ends.

    Raises:
        TchatError: On an invalid channel, connection, log file or stream
            failure. A normal end of stream raises ``StreamClosedError``.
    """
    logger.log_event("app", "start", level=logging.DEBUG, version=__version__)
    # Reject bad names before any network action.
    for channel in options.channels:
        validate_channel(channel)

    if client is None:
        client = AsyncTwitchIRC()
    with Sink(options) as sink:
        await client.connect()
        try:
            for channel in options.channels:
                await client.join(channel)
            count = await run_message_loop(client.events(), options, sink)
        finally:
            await client.disconnect()
    raise StreamClosedError(
        "Chat connection closed by the server", data={"lines": count}
    )


def _silence_stdout() -> None:
    with contextlib.suppress(OSError, ValueError):
        devnull = os.open(os.devnull, os.O_WRONLY)
        os.dup2(devnull, sys.stdout.fileno())


def run(argv: Sequence[str] | None = None) -> None:
    """Synchronous entry point for the application.

    Raises:
        SystemExit: 0 on Ctrl-C, a closed stdout pipe or informational
            flags, 2 on usage errors, 1 on any runtime failure.
    """
    options = parse_args(sys.argv[1:] if argv is None else argv)
    LoggerConfigurator().configure()
    try:
        asyncio.run(main(options))
    except KeyboardInterrupt:
        logger.log_event("app", "interrupted", level=logging.DEBUG)
        sys.exit(0)
    except BrokenPipeError:
        # stdout reader closed the pipe (e.g. `tchat chan | head`)
        _silence_stdout()
        sys.exit(0)
    except TchatError as e:
        log_error("Fatal error", e)
        print(f"tchat: {e}", file=sys.stderr)
        sys.exit(1)
    finally:
        logger.log_event("app", "shutdown", level=logging.DEBUG)


if __name__ == "__main__":
    run()
