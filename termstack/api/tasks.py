"""Public task-lifetime API contracts."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Protocol


class GenerationSource(Protocol):
    """Anything exposing the current task generation."""

    @property
    def generation(self) -> int:
        """Return current generation."""


@dataclass(frozen=True, slots=True)
class TaskLifetime:
    """Generation handle binding background work to the state that asked for it."""

    generation: int
    source: GenerationSource | None = field(default=None, compare=False, repr=False)

    def is_expired(self) -> bool:
        """Return whether a newer generation superseded this one."""
        if self.source is None:
            return False
        return self.source.generation != self.generation


class TaskLifetimeSource(Protocol):
    """Driver-owned generation counter."""

    @property
    def generation(self) -> int:
        """Return current generation."""

    def current(self) -> TaskLifetime:
        """Return a token for the current generation."""

    def invalidate(self) -> TaskLifetime:
        """Start a new generation and return its token."""


def create_task_lifetime_source() -> TaskLifetimeSource:
    """Create default task-lifetime source implementation."""
    from termstack.runtime.task_sync import RuntimeTaskLifetimeSource

    return RuntimeTaskLifetimeSource()
