"""State stack primitives for the driver."""

from __future__ import annotations

from termstack.api.errors import StackUnderflowError
from termstack.api.stack import StateStack as PublicStateStack
from termstack.api.states import AppState


class RuntimeStateStack(PublicStateStack):
    """Root + pushed states; top is the last element."""

    def __init__(self, root: AppState) -> None:
        self._states: list[AppState] = [root]

    def push(self, state: AppState) -> None:
        """Push a new active state."""
        self._states.append(state)

    def pop(self) -> AppState:
        """Pop the active state. The root state is never poppable."""
        if len(self._states) <= 1:
            raise StackUnderflowError(f"cannot pop the root state {self._states[0].name!r}")
        return self._states.pop()

    def top(self) -> AppState:
        """Return the active state."""
        return self._states[-1]

    def root(self) -> AppState:
        """Return the bottom state."""
        return self._states[0]

    @property
    def depth(self) -> int:
        return len(self._states)

    def states(self) -> tuple[AppState, ...]:
        """Return bottom-first snapshot."""
        return tuple(self._states)


StateStack = RuntimeStateStack
