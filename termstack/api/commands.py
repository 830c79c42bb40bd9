"""Public command value and command-parsing API contracts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Protocol


@dataclass(slots=True)
class Command:
    """One user-issued action.

    `raw` holds input text still to be consumed, or re-parsed by a state
    revealed after a pop. `verb` and `args` carry an explicit verb request.
    States may mutate the command they are given; the same object is then
    handed onward by the driver.
    """

    raw: str = ""
    verb: str | None = None
    args: str = ""

    def is_empty(self) -> bool:
        return not self.raw and self.verb is None and not self.args

    def take_verb(self) -> str | None:
        """Consume the verb in place and return it."""
        verb = self.verb
        self.verb = None
        self.args = ""
        return verb

    def clear(self) -> None:
        self.raw = ""
        self.verb = None
        self.args = ""


class CommandParser(Protocol):
    """Public text/key-to-command parsing contract."""

    def bind_key(self, key_name: str, verb: str) -> None:
        """Bind a normalized key name to a verb."""

    def parse_line(self, line: str) -> Command:
        """Parse one line of input text."""

    def resolve_key(self, key_name: str) -> Command | None:
        """Resolve a key press to a verb command."""


def create_command_parser() -> CommandParser:
    """Create default command parser implementation."""
    from termstack.runtime.commands import RuntimeCommandParser

    return RuntimeCommandParser()
