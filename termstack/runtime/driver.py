"""State stack driver: the interaction loop over stacked application states."""

from __future__ import annotations

import logging
import shutil
from collections.abc import Callable
from enum import Enum

from rich.text import Text

from termstack.api.commands import Command
from termstack.api.context import AppContext
from termstack.api.errors import LaunchError, ProgramError
from termstack.api.events import (
    CommandDispatched,
    DriverStopped,
    ErrorDisplayed,
    EventBus,
    LaunchRequested,
    StatePopped,
    StatePushed,
)
from termstack.api.input import CancelSignal, CommandSource, ResizeSignal
from termstack.api.launch import LaunchDescriptor, LaunchDisposition, Launcher
from termstack.api.outcomes import (
    DisplayError,
    Keep,
    Launch,
    NewState,
    Outcome,
    PopState,
    PopStateAndReapply,
    Quit,
    RefreshState,
    verb_not_found,
)
from termstack.api.states import AppState
from termstack.api.surface import RenderSurface
from termstack.api.tasks import TaskLifetime
from termstack.runtime.debug_config import load_debug_config
from termstack.runtime.state_stack import RuntimeStateStack
from termstack.runtime.task_sync import RuntimeTaskLifetimeSource

_LOG = logging.getLogger("termstack.driver")


class DriverState(Enum):
    RUNNING = "running"
    QUITTING = "quitting"


class StateStackDriver:
    """Owns the state stack and interprets every command outcome.

    `NewState` and `PopStateAndReapply` are not tail actions: the resulting
    command is dispatched to the new top before control returns to input
    reading. The chain runs as an explicit loop so the cancel signal is
    checked between hops.
    """

    def __init__(
        self,
        root: AppState,
        *,
        context: AppContext,
        surface: RenderSurface,
        launcher: Launcher | None = None,
        source: CommandSource | None = None,
        cancel: CancelSignal | None = None,
        events: EventBus | None = None,
        resized: ResizeSignal | None = None,
        terminal_size: Callable[[], tuple[int, int]] | None = None,
    ) -> None:
        self._stack = RuntimeStateStack(root)
        self._context = context
        self._surface = surface
        self._launcher = launcher
        self._source = source
        self._cancel = cancel
        self._events = events
        self._resized = resized
        self._terminal_size = terminal_size if terminal_size is not None else _terminal_size
        self._tasks = RuntimeTaskLifetimeSource()
        self._status = DriverState.RUNNING
        self._command = Command()
        self._error: str | None = None
        self._redraw_count = 0
        self._stop_reason = ""
        debug = load_debug_config()
        self._trace_dispatch = debug.dispatch_trace_enabled
        self._trace_tasks = debug.task_trace_enabled
        self._trace_log = logging.getLogger("termstack.dispatchtrace")

    @property
    def state(self) -> DriverState:
        return self._status

    @property
    def stack(self) -> tuple[AppState, ...]:
        return self._stack.states()

    @property
    def depth(self) -> int:
        return self._stack.depth

    @property
    def top(self) -> AppState:
        return self._stack.top()

    @property
    def current_command(self) -> Command:
        return self._command

    @property
    def error(self) -> str | None:
        return self._error

    @property
    def redraw_count(self) -> int:
        return self._redraw_count

    @property
    def task_lifetime(self) -> TaskLifetime:
        return self._tasks.current()

    def dispatch(self, command: Command) -> DriverState:
        """Dispatch one command and every hop it chains into."""
        pending: Command | None = command
        hops = 0
        max_hops = self._context.config.loop.max_dispatch_hops
        while pending is not None and self._status is DriverState.RUNNING:
            if self._cancel_requested():
                self._quit("cancelled")
                break
            hops += 1
            if hops > max_hops:
                raise ProgramError(f"dispatch chain exceeded {max_hops} hops")
            state = self._stack.top()
            self._error = None
            self._command = pending
            outcome = self._apply(state, pending)
            if self._trace_dispatch:
                self._trace_log.info(
                    "dispatch hop=%d state=%s verb=%s raw=%r outcome=%s depth=%d",
                    hops,
                    state.name,
                    pending.verb,
                    pending.raw,
                    type(outcome).__name__,
                    self._stack.depth,
                )
            self._publish(CommandDispatched(state.name, pending, type(outcome).__name__))
            pending = self._handle(state, pending, outcome)
        return self._status

    def refresh(self, *, clear_cache: bool = False) -> None:
        """Recompute the active state after an external event.

        In-flight background work stays valid: a refresh never moves the task
        lifetime.
        """
        state = self._stack.top()
        if clear_cache:
            state.clear_cache()
        self._command = state.refresh(self._surface, self._context)
        self._redraw()

    def resize(self, width: int, height: int) -> bool:
        """Apply new terminal geometry; refresh when it changed."""
        changed = self._surface.resize(width, height)
        if changed:
            self.refresh()
        return changed

    def poll_pending_task(self) -> bool:
        """Let the active state absorb one increment of background work.

        Returns whether a task was pending. Redraws only when the state
        reports visible progress.
        """
        state = self._stack.top()
        if not state.has_pending_task():
            return False
        lifetime = self._tasks.current()
        if self._trace_tasks:
            self._trace_log.info("pending_task state=%s generation=%d", state.name, lifetime.generation)
        if state.do_pending_task(self._surface, lifetime):
            self._redraw()
        return True

    def run(self) -> int:
        """Run the interaction loop until quitting. Returns the exit status."""
        if self._source is None:
            raise ProgramError("driver has no command source")
        exit_code = 0
        reason = "quit"
        try:
            self._redraw()
            while self._status is DriverState.RUNNING:
                if self._cancel_requested():
                    self._quit("cancelled")
                    break
                if self._resized is not None and self._resized.is_set():
                    self._resized.clear()
                    self.resize(*self._terminal_size())
                busy = self._stack.top().has_pending_task()
                loop = self._context.config.loop
                timeout = loop.busy_poll_seconds if busy else loop.input_poll_seconds
                command = self._source.poll(timeout)
                if command is not None:
                    self.dispatch(command)
                    continue
                if busy:
                    self.poll_pending_task()
                elif self._source.closed:
                    self._quit("input closed")
        except ProgramError:
            _LOG.exception("driver_aborted depth=%d", self._stack.depth)
            self._status = DriverState.QUITTING
            exit_code = 1
            reason = "fatal error"
        if exit_code == 0:
            reason = self._stop_reason
        self._publish(DriverStopped(exit_code, reason))
        return exit_code

    def _apply(self, state: AppState, command: Command) -> Outcome:
        if command.verb is not None:
            verb = self._context.verbs.lookup(command.verb)
            # Denied verbs never reach apply.
            if verb is None or not state.can_execute(verb.index, self._context):
                return verb_not_found(command.verb)
        outcome = state.apply(command, self._surface, self._context)
        # A new command supersedes in-flight work; a refresh request alone does not.
        if not isinstance(outcome, RefreshState):
            self._tasks.invalidate()
        return outcome

    def _handle(self, state: AppState, command: Command, outcome: Outcome) -> Command | None:
        """Apply one outcome; return the command to dispatch next, if any."""
        if isinstance(outcome, Quit):
            self._quit("quit")
            return None
        if isinstance(outcome, Keep):
            self._redraw()
            return None
        if isinstance(outcome, DisplayError):
            self._error = outcome.message
            _LOG.debug("error_displayed state=%s message=%s", state.name, outcome.message)
            self._publish(ErrorDisplayed(state.name, outcome.message))
            self._redraw()
            return None
        if isinstance(outcome, NewState):
            self._stack.push(outcome.state)
            self._tasks.invalidate()
            self._publish(StatePushed(outcome.state.name, self._stack.depth))
            return outcome.command
        if isinstance(outcome, PopStateAndReapply):
            self._pop(reapply=True)
            return command
        if isinstance(outcome, PopState):
            self._pop(reapply=False)
            self._redraw()
            return None
        if isinstance(outcome, RefreshState):
            self.refresh(clear_cache=outcome.clear_cache)
            return None
        if isinstance(outcome, Launch):
            self._launch(state, outcome.descriptor)
            return None
        raise ProgramError(f"unknown command outcome: {outcome!r}")

    def _pop(self, *, reapply: bool) -> None:
        popped = self._stack.pop()
        self._tasks.invalidate()
        self._publish(StatePopped(popped.name, self._stack.depth, reapply))

    def _launch(self, state: AppState, descriptor: LaunchDescriptor) -> None:
        if self._launcher is None:
            raise ProgramError("launch requested but no launcher is configured")
        self._publish(LaunchRequested(state.name, descriptor.kind, descriptor.program))
        try:
            disposition = self._launcher.launch(descriptor, self._surface)
        except LaunchError as exc:
            _LOG.warning("launch_failed state=%s error=%s", state.name, exc)
            self._error = str(exc)
            self._publish(ErrorDisplayed(state.name, self._error))
            self._redraw()
            return
        if disposition is LaunchDisposition.TERMINATE:
            self._quit("launch terminated")
            return
        self.refresh()

    def _redraw(self) -> None:
        state = self._stack.top()
        sink = self._surface.sink
        try:
            self._surface.clear()
            state.display(sink, self._surface, self._context)
            state.write_flags(sink, self._surface, self._context)
            if self._error is not None:
                sink.print(Text(self._error, style="bold red"))
            else:
                state.write_status(sink, self._command, self._surface, self._context)
        except OSError as exc:
            raise ProgramError(f"render failed: {exc}") from exc
        self._redraw_count += 1

    def _quit(self, reason: str) -> None:
        if self._status is DriverState.QUITTING:
            return
        _LOG.info("driver_quitting reason=%s depth=%d", reason, self._stack.depth)
        self._status = DriverState.QUITTING
        self._stop_reason = reason

    def _cancel_requested(self) -> bool:
        return self._cancel is not None and self._cancel.is_set()

    def _publish(self, event: object) -> None:
        if self._events is not None:
            self._events.publish(event)


def _terminal_size() -> tuple[int, int]:
    size = shutil.get_terminal_size()
    return size.columns, size.lines
