from __future__ import annotations

import io
import time

from termstack.api.commands import Command
from termstack.runtime.commands import RuntimeCommandParser
from termstack.runtime.input import LineCommandSource


def _drain(source: LineCommandSource, *, deadline_seconds: float = 2.0) -> list[Command]:
    commands: list[Command] = []
    deadline = time.monotonic() + deadline_seconds
    while not source.closed and time.monotonic() < deadline:
        command = source.poll(0.05)
        if command is not None:
            commands.append(command)
    return commands


def test_line_source_parses_lines_then_closes() -> None:
    source = LineCommandSource(io.StringIO("docs\n:refresh\n:q now\n"))

    commands = _drain(source)

    assert commands == [
        Command(raw="docs"),
        Command(verb="refresh"),
        Command(verb="q", args="now"),
    ]
    assert source.closed
    assert source.poll(0.0) is None


def test_line_source_uses_supplied_parser() -> None:
    parser = RuntimeCommandParser()
    parser.bind_key("esc", "back")
    source = LineCommandSource(io.StringIO("esc\n"), parser=parser)

    assert _drain(source) == [Command(verb="back")]
    assert source.parser is parser


def test_non_blocking_poll_returns_none_when_queue_empty() -> None:
    class _Silent(io.StringIO):
        def __iter__(self):
            time.sleep(0.5)
            return iter(())

    source = LineCommandSource(_Silent())

    assert source.poll(0.0) is None
    assert not source.closed
