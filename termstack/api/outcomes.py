"""Closed set of effects a state's command handling can request."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from termstack.api.commands import Command
from termstack.api.errors import StateBuildError
from termstack.api.launch import LaunchDescriptor
from termstack.api.states import AppState


@dataclass(frozen=True, slots=True)
class Quit:
    """End the program with a success status."""


@dataclass(frozen=True, slots=True)
class Keep:
    """No stack effect; redraw."""


@dataclass(frozen=True, slots=True)
class Launch:
    """Run an external program outside the render loop."""

    descriptor: LaunchDescriptor


@dataclass(frozen=True, slots=True)
class DisplayError:
    """Recoverable, user-facing failure shown over the current state."""

    message: str


@dataclass(frozen=True, slots=True)
class NewState:
    """Push `state` and immediately dispatch `command` to it."""

    state: AppState
    command: Command


@dataclass(frozen=True, slots=True)
class PopStateAndReapply:
    """Drop the top state and replay the same command on the one beneath."""


@dataclass(frozen=True, slots=True)
class PopState:
    """Drop the top state."""


@dataclass(frozen=True, slots=True)
class RefreshState:
    """Recompute the active state, optionally discarding cached data first."""

    clear_cache: bool = False


type Outcome = Quit | Keep | Launch | DisplayError | NewState | PopStateAndReapply | PopState | RefreshState

type StateBuilder = Callable[[], AppState | None]


_ESCAPES = {'"': '\\"', "\\": "\\\\", "\n": "\\n", "\r": "\\r", "\t": "\\t", "\0": "\\0"}


def quote_text(text: str) -> str:
    """Double-quote `text`, escaping quotes, backslashes and non-printables.

    Non-printable characters are written as `\\u{hex}`, so `"\\x1b"` reads
    `"\\u{1b}"`.
    """
    parts = ['"']
    for char in text:
        escaped = _ESCAPES.get(char)
        if escaped is None and not char.isprintable():
            escaped = f"\\u{{{ord(char):x}}}"
        parts.append(escaped if escaped is not None else char)
    parts.append('"')
    return "".join(parts)


def verb_not_found(text: str) -> DisplayError:
    """Build the error shown for an unknown or unavailable verb."""
    return DisplayError(f"verb not found: {quote_text(text)}")


def from_optional_state(build: StateBuilder, command: Command) -> Outcome:
    """Normalize a built/declined/failed state build into an outcome."""
    try:
        state = build()
    except StateBuildError as exc:
        return DisplayError(str(exc))
    if state is None:
        return Keep()
    return NewState(state, command)


def launch(descriptor: LaunchDescriptor) -> Launch:
    return Launch(descriptor)
