"""Public state-stack API contracts."""

from __future__ import annotations

from abc import ABC, abstractmethod

from termstack.api.states import AppState


class StateStack(ABC):
    """Ordered, bottom-to-top stack of application states."""

    @abstractmethod
    def push(self, state: AppState) -> None:
        """Push a new top state."""

    @abstractmethod
    def pop(self) -> AppState:
        """Pop the top state; the root state is never poppable."""

    @abstractmethod
    def top(self) -> AppState:
        """Return the active state."""

    @abstractmethod
    def root(self) -> AppState:
        """Return the bottom state."""

    @property
    @abstractmethod
    def depth(self) -> int:
        """Return number of stacked states."""

    @abstractmethod
    def states(self) -> tuple[AppState, ...]:
        """Return bottom-first snapshot."""


def create_state_stack(root: AppState) -> StateStack:
    """Create default state stack implementation."""
    from termstack.runtime.state_stack import RuntimeStateStack

    return RuntimeStateStack(root)
