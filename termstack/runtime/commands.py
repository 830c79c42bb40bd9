"""Input-to-command parsing primitives."""

from __future__ import annotations

from termstack.api.commands import Command

VERB_PREFIX = ":"


class RuntimeCommandParser:
    """Maps raw lines and key presses to commands.

    A line equal to a bound key resolves to its verb, `:verb args` requests a
    verb, anything else is kept as raw input for the active state to
    interpret.
    """

    def __init__(self) -> None:
        self._key_bindings: dict[str, str] = {}

    def bind_key(self, key_name: str, verb: str) -> None:
        """Bind normalized key name to a verb."""
        normalized = key_name.strip().lower()
        if not normalized:
            raise ValueError("key_name must not be empty")
        if not verb.strip():
            raise ValueError("verb must not be empty")
        self._key_bindings[normalized] = verb.strip()

    def resolve_key(self, key_name: str) -> Command | None:
        verb = self._key_bindings.get(key_name.strip().lower())
        return Command(verb=verb) if verb is not None else None

    def parse_line(self, line: str) -> Command:
        text = line.rstrip("\r\n")
        if text.strip():
            bound = self.resolve_key(text)
            if bound is not None:
                return bound
        if not text.startswith(VERB_PREFIX):
            return Command(raw=text)
        body = text[len(VERB_PREFIX) :].strip()
        if not body:
            return Command()
        verb, _, args = body.partition(" ")
        return Command(verb=verb, args=args.strip())


CommandParser = RuntimeCommandParser
