"""Stacked application-state engine for full-screen terminal programs."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from termstack.api.context import AppContext
    from termstack.api.events import EventBus
    from termstack.api.input import CommandSource
    from termstack.api.launch import Launcher
    from termstack.api.states import AppState
    from termstack.api.surface import RenderSurface


def run(
    *,
    root: "AppState",
    context: "AppContext | None" = None,
    surface: "RenderSurface | None" = None,
    source: "CommandSource | None" = None,
    launcher: "Launcher | None" = None,
    events: "EventBus | None" = None,
) -> int:
    """Run `root` as the bottom state of a new driver and return the exit status."""
    from termstack.runtime.entrypoint import run as runtime_run

    return runtime_run(
        root=root,
        context=context,
        surface=surface,
        source=source,
        launcher=launcher,
        events=events,
    )


__all__ = ["run"]
