"""Verb registry shared by states and the driver."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Verb:
    """Registered verb with its stable action index."""

    index: int
    name: str
    shortcut: str | None = None
    description: str = ""


class VerbStore:
    """Resolve verb names and shortcuts to registered verbs."""

    def __init__(self) -> None:
        self._verbs: list[Verb] = []
        self._by_key: dict[str, Verb] = {}

    def register(self, name: str, *, shortcut: str | None = None, description: str = "") -> Verb:
        """Register one verb and return it with its assigned index."""
        normalized = name.strip()
        if not normalized:
            raise ValueError("verb name must not be empty")
        keys = [normalized]
        if shortcut is not None:
            shortcut = shortcut.strip()
            if not shortcut:
                raise ValueError("verb shortcut must not be empty")
            keys.append(shortcut)
        for key in keys:
            if key in self._by_key:
                raise ValueError(f"duplicate verb key: {key}")
        verb = Verb(index=len(self._verbs), name=normalized, shortcut=shortcut, description=description)
        self._verbs.append(verb)
        for key in keys:
            self._by_key[key] = verb
        return verb

    def lookup(self, name_or_shortcut: str) -> Verb | None:
        return self._by_key.get(name_or_shortcut.strip())

    def index_of(self, name_or_shortcut: str) -> int | None:
        verb = self.lookup(name_or_shortcut)
        return verb.index if verb is not None else None

    def verbs(self) -> tuple[Verb, ...]:
        return tuple(self._verbs)

    def __len__(self) -> int:
        return len(self._verbs)

    def __contains__(self, name_or_shortcut: object) -> bool:
        return isinstance(name_or_shortcut, str) and self.lookup(name_or_shortcut) is not None


DEFAULT_VERBS: tuple[tuple[str, str, str], ...] = (
    ("quit", "q", "Quit the program"),
    ("back", "b", "Return to the previous screen"),
    ("refresh", "r", "Recompute the current screen"),
    ("help", "?", "Show help"),
)


def create_verb_store(extra: Iterable[tuple[str, str | None, str]] = ()) -> VerbStore:
    """Create a verb store with builtin verbs plus `extra` (name, shortcut, description)."""
    store = VerbStore()
    for name, shortcut, description in DEFAULT_VERBS:
        store.register(name, shortcut=shortcut, description=description)
    for name, shortcut, description in extra:
        store.register(name, shortcut=shortcut, description=description)
    return store
