"""Leveled logging to standard output with an animated progress spinner."""

from __future__ import annotations

import itertools
import sys
import threading
from abc import ABC, abstractmethod
from enum import IntEnum
from typing import TextIO

from .terminal import error_emoji, red

SPINNER_CHARSET = "⠋⠙⠹⠸⠼⠴⠦⠧⠇⠏"
_FRAME_INTERVAL = 0.1
_ERASE_PREVIOUS_LINE = "\033[1A\033[2K"


class LogLevel(IntEnum):
    NONE = 0
    ERROR = 1
    DEBUG = 2
    INFO = 3


class Logger(ABC):
    """Interface for reporting messages and progress."""

    @abstractmethod
    def debug(self, msg: str) -> None: ...

    @abstractmethod
    def info(self, msg: str) -> None: ...

    @abstractmethod
    def error(self, msg: str) -> None: ...

    @abstractmethod
    def start_progress(self, msg: str) -> None: ...

    @abstractmethod
    def stop_progress(self) -> None: ...


class Spinner:
    """Redraws ``prefix``, a spinning glyph and ``suffix`` every 100 ms in a thread."""

    def __init__(self, prefix: str, suffix: str = "", stream: TextIO | None = None):
        self.prefix = prefix
        self.suffix = suffix
        self._stream = stream if stream is not None else sys.stdout
        self._done = threading.Event()
        self._thread: threading.Thread | None = None

    def start(self) -> None:
        if self._thread is not None:
            raise RuntimeError("spinner already started")
        self._thread = threading.Thread(target=self._run, daemon=True)
        self._thread.start()

    def _run(self) -> None:
        drawn = False
        for frame in itertools.cycle(SPINNER_CHARSET):
            if self._done.wait(_FRAME_INTERVAL):
                break
            if drawn:
                self._stream.write(_ERASE_PREVIOUS_LINE)
            self._stream.write(f"{self.prefix}{frame}{self.suffix}\n")
            self._stream.flush()
            drawn = True
        if drawn:
            self._stream.write(_ERASE_PREVIOUS_LINE)
        self._stream.write("\r")
        self._stream.flush()

    def stop(self) -> None:
        """Stop the animation and wait for the drawing thread to finish."""
        if self._thread is None:
            return
        self._done.set()
        self._thread.join()
        self._thread = None


class StdoutLogger(Logger):
    """Writes messages at or below the configured level to a stream."""

    def __init__(self, level: int = LogLevel.INFO, stream: TextIO | None = None):
        self.level = LogLevel(level)
        self._stream = stream
        self._spinner: Spinner | None = None

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def _log(self, msg: str, level: LogLevel) -> None:
        if self.level < level:
            return
        self.stream.write(f"{msg}\n")
        self.stream.flush()

    def info(self, msg: str) -> None:
        self.stop_progress()
        self._log(msg, LogLevel.INFO)

    def debug(self, msg: str) -> None:
        self._log(msg, LogLevel.DEBUG)

    def error(self, msg: str) -> None:
        self._log(f"{error_emoji()} {red(msg)}", LogLevel.ERROR)

    def start_progress(self, msg: str) -> None:
        if self.level == LogLevel.NONE:
            return
        if self._spinner is not None:
            self._spinner.stop()
        self._spinner = Spinner(msg, "", self.stream)
        self._spinner.start()

    def stop_progress(self) -> None:
        if self.level == LogLevel.NONE:
            return
        if self._spinner is not None:
            self._spinner.stop()
            self._spinner = None