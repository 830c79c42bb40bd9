"""Public driver event types and event bus API contracts."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Protocol, TypeVar

from termstack.api.commands import Command

TEvent = TypeVar("TEvent")


@dataclass(frozen=True, slots=True)
class Subscription:
    """Opaque subscription token."""

    id: int


@dataclass(frozen=True, slots=True)
class CommandDispatched:
    state_name: str
    command: Command
    outcome: str


@dataclass(frozen=True, slots=True)
class StatePushed:
    state_name: str
    depth: int


@dataclass(frozen=True, slots=True)
class StatePopped:
    state_name: str
    depth: int
    reapply: bool


@dataclass(frozen=True, slots=True)
class ErrorDisplayed:
    state_name: str
    message: str


@dataclass(frozen=True, slots=True)
class LaunchRequested:
    state_name: str
    kind: str
    program: str


@dataclass(frozen=True, slots=True)
class DriverStopped:
    exit_code: int
    reason: str


class EventBus(Protocol):
    """Public in-process pub/sub contract."""

    def subscribe(
        self,
        event_type: type[TEvent],
        handler: Callable[[TEvent], None],
    ) -> Subscription:
        """Subscribe handler for event type."""

    def unsubscribe(self, subscription: Subscription) -> None:
        """Unsubscribe token."""

    def publish(self, event: object) -> int:
        """Publish event and return invocation count."""


def create_event_bus() -> EventBus:
    """Create default event bus implementation."""
    from termstack.runtime.events import RuntimeEventBus

    return RuntimeEventBus()
