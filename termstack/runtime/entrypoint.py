"""Runtime-owned public entrypoint for running a root state."""

from __future__ import annotations

import logging
import signal
import sys
import threading
from collections.abc import Iterator
from contextlib import contextmanager

from termstack.api.context import AppContext, create_app_context
from termstack.api.events import EventBus
from termstack.api.input import CommandSource
from termstack.api.launch import Launcher
from termstack.api.states import AppState
from termstack.api.surface import RenderSurface, create_render_surface
from termstack.runtime.config import get_runtime_config
from termstack.runtime.driver import StateStackDriver
from termstack.runtime.input import LineCommandSource
from termstack.runtime.launcher import SubprocessLauncher
from termstack.runtime.logging import configure_termstack_logging, stop_termstack_logging

_LOG = logging.getLogger("termstack.runtime")


def run(
    *,
    root: AppState,
    context: AppContext | None = None,
    surface: RenderSurface | None = None,
    source: CommandSource | None = None,
    launcher: Launcher | None = None,
    events: EventBus | None = None,
) -> int:
    """Run the interaction loop for `root` and return the exit status."""
    config = context.config if context is not None else get_runtime_config()
    configure_termstack_logging(config.logging)
    app_context = context if context is not None else create_app_context(config=config)
    app_surface = surface if surface is not None else create_render_surface(
        width=config.terminal.width,
        height=config.terminal.height,
    )
    cancel = threading.Event()
    resized = threading.Event()
    pinned = config.terminal.width is not None or config.terminal.height is not None
    driver = StateStackDriver(
        root,
        context=app_context,
        surface=app_surface,
        launcher=launcher if launcher is not None else SubprocessLauncher(),
        source=source if source is not None else LineCommandSource(sys.stdin),
        cancel=cancel,
        events=events,
        resized=None if pinned else resized,
    )
    _LOG.info("driver_start root=%s", root.name)
    try:
        with (
            _cancel_on_signals(cancel),
            _resize_on_signal(resized),
            _screen(app_surface, enabled=config.terminal.alt_screen),
        ):
            return driver.run()
    finally:
        stop_termstack_logging()


@contextmanager
def _cancel_on_signals(cancel: threading.Event) -> Iterator[None]:
    if threading.current_thread() is not threading.main_thread():
        yield
        return

    def _request_close(signum: int, _frame: object) -> None:
        _LOG.info("close_requested signal=%d", signum)
        cancel.set()

    previous = {sig: signal.signal(sig, _request_close) for sig in (signal.SIGINT, signal.SIGTERM)}
    try:
        yield
    finally:
        for sig, handler in previous.items():
            signal.signal(sig, handler)


@contextmanager
def _resize_on_signal(resized: threading.Event) -> Iterator[None]:
    sigwinch = getattr(signal, "SIGWINCH", None)
    if sigwinch is None or threading.current_thread() is not threading.main_thread():
        yield
        return

    def _request_resize(_signum: int, _frame: object) -> None:
        resized.set()

    previous = signal.signal(sigwinch, _request_resize)
    try:
        yield
    finally:
        signal.signal(sigwinch, previous)


@contextmanager
def _screen(surface: RenderSurface, *, enabled: bool) -> Iterator[None]:
    console = surface.sink
    if not enabled or not console.is_terminal:
        yield
        return
    with console.screen(hide_cursor=True):
        yield
