"""Subprocess-backed external program launcher."""

from __future__ import annotations

import logging
import os
import subprocess
from collections.abc import Iterator
from contextlib import contextmanager

from termstack.api.errors import LaunchError
from termstack.api.launch import LaunchDescriptor, LaunchDisposition
from termstack.api.surface import RenderSurface
from termstack.runtime.errors import log_recoverable

_LOG = logging.getLogger("termstack.launcher")


class SubprocessLauncher:
    """Run launch descriptors with the terminal back in normal mode."""

    def launch(self, descriptor: LaunchDescriptor, surface: RenderSurface) -> LaunchDisposition:
        with suspended_screen(surface):
            if descriptor.kind == "print":
                surface.sink.print(descriptor.text, markup=False, highlight=False)
            else:
                self._run_program(descriptor)
        return LaunchDisposition.RESUME if descriptor.resume else LaunchDisposition.TERMINATE

    def _run_program(self, descriptor: LaunchDescriptor) -> None:
        env = {**os.environ, **descriptor.env} if descriptor.env else None
        _LOG.info(
            "launch_start program=%s args=%d wait=%s",
            descriptor.program,
            len(descriptor.args),
            descriptor.wait,
        )
        try:
            if descriptor.wait:
                completed = subprocess.run(descriptor.argv, env=env, cwd=descriptor.cwd, check=False)
                _LOG.info("launch_done program=%s returncode=%d", descriptor.program, completed.returncode)
                return
            subprocess.Popen(
                descriptor.argv,
                env=env,
                cwd=descriptor.cwd,
                stdin=subprocess.DEVNULL,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
                start_new_session=True,
            )
        except OSError as exc:
            raise LaunchError(f"failed to launch {descriptor.program}: {exc.strerror or exc}") from exc


@contextmanager
def suspended_screen(surface: RenderSurface) -> Iterator[None]:
    """Leave the alternate screen for the duration of the block."""
    console = surface.sink
    was_alt = console.is_alt_screen
    if was_alt:
        console.set_alt_screen(False)
    console.show_cursor(True)
    try:
        yield
    finally:
        try:
            if was_alt:
                console.set_alt_screen(True)
                console.show_cursor(False)
        except OSError:
            log_recoverable(_LOG, "terminal restore after launch failed", level=logging.WARNING)


Launcher = SubprocessLauncher
