"""Public application-state capability contract."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

from rich.console import Console

from termstack.api.commands import Command
from termstack.api.context import AppContext
from termstack.api.surface import RenderSurface
from termstack.api.tasks import TaskLifetime

if TYPE_CHECKING:
    from termstack.api.outcomes import Outcome


class AppState(ABC):
    """One stackable screen.

    The driver only talks to screens through this interface. Output methods
    must not mutate the state; `apply` must not block on external I/O and
    defers long work to a background task polled through `do_pending_task`.
    """

    @property
    def name(self) -> str:
        return type(self).__name__

    @abstractmethod
    def apply(self, command: Command, surface: RenderSurface, context: AppContext) -> Outcome:
        """Handle one command. May consume part of `command` in place."""

    @abstractmethod
    def can_execute(self, action_id: int, context: AppContext) -> bool:
        """Return whether the verb with `action_id` is currently offerable."""

    @abstractmethod
    def refresh(self, surface: RenderSurface, context: AppContext) -> Command:
        """Recompute the view and return the command describing it."""

    @abstractmethod
    def do_pending_task(self, surface: RenderSurface, lifetime: TaskLifetime) -> bool:
        """Absorb one increment of background work; drop it if `lifetime` is stale.

        Must not block. Returns whether anything visible changed; `False`
        while the work is still running.
        """

    @abstractmethod
    def has_pending_task(self) -> bool:
        """Return whether background work is outstanding."""

    @abstractmethod
    def display(self, sink: Console, surface: RenderSurface, context: AppContext) -> None:
        """Render the main area."""

    def write_flags(self, sink: Console, surface: RenderSurface, context: AppContext) -> None:
        """Render state flags (none by default)."""

    def write_status(
        self,
        sink: Console,
        command: Command,
        surface: RenderSurface,
        context: AppContext,
    ) -> None:
        """Render the status line for the current command."""
        sink.print(command.raw, markup=False, highlight=False)

    def clear_cache(self) -> None:
        """Discard memoized render data before a refresh."""
