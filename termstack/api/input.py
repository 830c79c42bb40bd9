"""Public command-source API contracts."""

from __future__ import annotations

from typing import Protocol, TextIO

from termstack.api.commands import Command, CommandParser


class CommandSource(Protocol):
    """Supplies parsed commands to the driver."""

    @property
    def closed(self) -> bool:
        """Return whether no more commands will arrive."""

    def poll(self, timeout_seconds: float) -> Command | None:
        """Return the next command, or None when none arrived within timeout."""


class CancelSignal(Protocol):
    """External close request, e.g. `threading.Event`."""

    def is_set(self) -> bool:
        """Return whether closing was requested."""


class ResizeSignal(Protocol):
    """Terminal geometry change notification, e.g. `threading.Event`."""

    def is_set(self) -> bool:
        """Return whether the terminal was resized since the last clear."""

    def clear(self) -> None:
        """Acknowledge the resize."""


def create_line_command_source(stream: TextIO, parser: CommandParser | None = None) -> CommandSource:
    """Create default line-reading command source."""
    from termstack.runtime.input import LineCommandSource

    return LineCommandSource(stream, parser=parser)
