"""Output sink: stdout plus an optional append-only plain-text transcript."""

from __future__ import annotations

import sys
from pathlib import Path
from typing import TextIO

from .ansi import strip_ansi
from .errors import LogFileError
from .logs.logger import logger
from .options import Options


class Sink:
    """Writes formatted lines; use as a context manager to own the log file."""

    def __init__(self, options: Options, stdout: TextIO | None = None):
        self.quiet = options.quiet
        self.log_path: Path | None = options.log_file
        self.stdout = stdout or sys.stdout
        self._log: TextIO | None = None

    def open(self) -> Sink:
        if self.log_path is not None and self._log is None:
            try:
                self._log = self.log_path.open("a", encoding="utf-8", newline="")
            except OSError as e:
                raise LogFileError(self.log_path, e) from e
            logger.log_event("sink", "log_opened", path=str(self.log_path))
        return self

    def close(self) -> None:
        if self._log is not None:
            try:
                self._log.close()
            except OSError as e:
                raise LogFileError(self.log_path, e) from e
            finally:
                self._log = None
            logger.log_event("sink", "log_closed", path=str(self.log_path))

    def __enter__(self) -> Sink:
        return self.open()

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def emit(self, line: str) -> None:
        if not self.quiet:
            self.stdout.write(line)
            self.stdout.flush()
        if self._log is not None:
            try:
                self._log.write(strip_ansi(line))
                self._log.flush()
            except OSError as e:
                raise LogFileError(self.log_path, e) from e


__all__ = ["Sink"]
