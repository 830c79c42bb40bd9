"""Line-oriented command source reading on a daemon thread."""

from __future__ import annotations

import logging
import queue
import threading
from typing import TextIO, cast

from termstack.api.commands import Command, CommandParser
from termstack.runtime.commands import RuntimeCommandParser
from termstack.runtime.errors import RECOVERABLE_RUNTIME_ERRORS, log_recoverable

_LOG = logging.getLogger("termstack.input")
_EOF = object()


class LineCommandSource:
    """Parse lines from a text stream into commands.

    The reader thread only parses and enqueues; the driver thread is the sole
    consumer.
    """

    def __init__(self, stream: TextIO, *, parser: CommandParser | None = None) -> None:
        self._stream = stream
        self._parser = parser if parser is not None else RuntimeCommandParser()
        self._queue: queue.Queue[Command | object] = queue.Queue()
        self._closed = threading.Event()
        self._eof_seen = threading.Event()
        self._reader = threading.Thread(target=self._read, name="termstack-input", daemon=True)

    @property
    def parser(self) -> CommandParser:
        return self._parser

    @property
    def closed(self) -> bool:
        return self._closed.is_set()

    def start(self) -> None:
        if not self._reader.is_alive() and not self._eof_seen.is_set():
            self._reader.start()

    def poll(self, timeout_seconds: float) -> Command | None:
        self.start()
        if self.closed:
            return None
        try:
            item = self._queue.get(timeout=timeout_seconds) if timeout_seconds > 0 else self._queue.get_nowait()
        except queue.Empty:
            return None
        if item is _EOF:
            self._closed.set()
            return None
        return cast(Command, item)

    def _read(self) -> None:
        try:
            for line in self._stream:
                self._queue.put(self._parser.parse_line(line))
        except RECOVERABLE_RUNTIME_ERRORS:
            log_recoverable(_LOG, "input stream read failed", level=logging.WARNING)
        finally:
            self._eof_seen.set()
            self._queue.put(_EOF)


CommandSource = LineCommandSource
