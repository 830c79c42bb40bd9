from __future__ import annotations

import io
from collections.abc import Callable
from pathlib import Path

import pytest
from rich.console import Console

from termstack.api.commands import Command
from termstack.api.context import AppContext, create_app_context
from termstack.api.launch import LaunchDescriptor, LaunchDisposition
from termstack.api.outcomes import Keep, Outcome
from termstack.api.states import AppState
from termstack.api.surface import RenderSurface
from termstack.api.tasks import TaskLifetime
from termstack.runtime.config import load_runtime_config

Handler = Callable[[Command], Outcome]


class FakeState(AppState):
    """Scriptable state recording every call the driver makes."""

    def __init__(self, label: str, handler: Handler | None = None) -> None:
        self.label = label
        self.handler = handler
        self.calls: list[tuple[str, object]] = []
        self.denied_actions: set[int] = set()
        self.refresh_command = Command()
        self.cache_cleared = 0

    @property
    def name(self) -> str:
        return self.label

    def apply(self, command: Command, surface: RenderSurface, context: AppContext) -> Outcome:
        self.calls.append(("apply", command))
        if self.handler is None:
            return Keep()
        return self.handler(command)

    def can_execute(self, action_id: int, context: AppContext) -> bool:
        return action_id not in self.denied_actions

    def refresh(self, surface: RenderSurface, context: AppContext) -> Command:
        self.calls.append(("refresh", None))
        return self.refresh_command

    def do_pending_task(self, surface: RenderSurface, lifetime: TaskLifetime) -> bool:
        self.calls.append(("do_pending_task", lifetime))
        return False

    def has_pending_task(self) -> bool:
        return False

    def display(self, sink: Console, surface: RenderSurface, context: AppContext) -> None:
        sink.print(f"[{self.label}]", markup=False)

    def clear_cache(self) -> None:
        self.cache_cleared += 1

    def applied(self) -> list[Command]:
        return [arg for name, arg in self.calls if name == "apply"]  # type: ignore[misc]


class TaskState(FakeState):
    """State with one background computation made of `steps` increments."""

    def __init__(self, label: str, steps: int = 1, handler: Handler | None = None) -> None:
        super().__init__(label, handler)
        self.remaining = steps
        self.held: TaskLifetime | None = None
        self.accepted: list[int] = []
        self.dropped: list[int] = []

    def has_pending_task(self) -> bool:
        return self.remaining > 0

    def do_pending_task(self, surface: RenderSurface, lifetime: TaskLifetime) -> bool:
        super().do_pending_task(surface, lifetime)
        if self.held is None:
            self.held = lifetime
        if self.held != lifetime:
            self.dropped.append(self.held.generation)
            self.held = lifetime
            return True
        self.accepted.append(lifetime.generation)
        self.remaining -= 1
        if self.remaining == 0:
            self.held = None
        return True


class RecordingLauncher:
    def __init__(self, disposition: LaunchDisposition = LaunchDisposition.RESUME) -> None:
        self.disposition = disposition
        self.launched: list[LaunchDescriptor] = []
        self.error: Exception | None = None

    def launch(self, descriptor: LaunchDescriptor, surface: RenderSurface) -> LaunchDisposition:
        self.launched.append(descriptor)
        if self.error is not None:
            raise self.error
        return self.disposition


class ScriptedSource:
    """Command source replaying a fixed script, then closing.

    A `None` entry in the script is an idle poll.
    """

    def __init__(self, commands: list[Command | None], *, idle_polls: int = 0) -> None:
        self._commands = list(commands)
        self._idle_polls = idle_polls
        self.timeouts: list[float] = []

    @property
    def closed(self) -> bool:
        return not self._commands and self._idle_polls <= 0

    def poll(self, timeout_seconds: float) -> Command | None:
        self.timeouts.append(timeout_seconds)
        if self._commands:
            return self._commands.pop(0)
        if self._idle_polls > 0:
            self._idle_polls -= 1
        return None


class SetAfter:
    """Cancel signal that trips after `count` checks."""

    def __init__(self, count: int) -> None:
        self._count = count

    def is_set(self) -> bool:
        self._count -= 1
        return self._count < 0


def make_surface(width: int = 80, height: int = 24) -> RenderSurface:
    console = Console(file=io.StringIO(), width=width, height=height, force_terminal=False, color_system=None)
    return RenderSurface(console)


def surface_text(surface: RenderSurface) -> str:
    file = surface.sink.file
    assert isinstance(file, io.StringIO)
    return file.getvalue()


@pytest.fixture
def context() -> AppContext:
    return create_app_context(config=load_runtime_config(env={}), launch_dir=Path("/tmp"))


@pytest.fixture
def surface() -> RenderSurface:
    return make_surface()
