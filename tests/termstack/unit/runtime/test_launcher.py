from __future__ import annotations

import subprocess

import pytest

from termstack.api.errors import LaunchError
from termstack.api.launch import LaunchDescriptor, LaunchDisposition
from termstack.runtime import launcher as launcher_module
from termstack.runtime.launcher import SubprocessLauncher
from tests.termstack.conftest import surface_text


class _Completed:
    returncode = 0


def test_waiting_program_runs_with_merged_env(monkeypatch, surface) -> None:
    calls: list[tuple[list[str], dict]] = []

    def fake_run(argv, **kwargs):
        calls.append((argv, kwargs))
        return _Completed()

    monkeypatch.setenv("TERMSTACK_TEST_BASE", "kept")
    monkeypatch.setattr(launcher_module.subprocess, "run", fake_run)
    descriptor = LaunchDescriptor.program_call("vi", "notes.txt", env={"EDITOR_MODE": "1"}, cwd="/tmp")

    disposition = SubprocessLauncher().launch(descriptor, surface)

    assert disposition is LaunchDisposition.RESUME
    argv, kwargs = calls[0]
    assert argv == ["vi", "notes.txt"]
    assert kwargs["cwd"] == "/tmp"
    assert kwargs["env"]["EDITOR_MODE"] == "1"
    assert kwargs["env"]["TERMSTACK_TEST_BASE"] == "kept"


def test_detached_program_does_not_wait(monkeypatch, surface) -> None:
    spawned: list[dict] = []
    monkeypatch.setattr(launcher_module.subprocess, "Popen", lambda argv, **kwargs: spawned.append(kwargs))
    monkeypatch.setattr(
        launcher_module.subprocess, "run", lambda *a, **k: pytest.fail("run must not be called")
    )
    descriptor = LaunchDescriptor.program_call("xdg-open", "report.pdf", wait=False)

    SubprocessLauncher().launch(descriptor, surface)

    assert spawned[0]["start_new_session"] is True
    assert spawned[0]["stdin"] is subprocess.DEVNULL
    assert spawned[0]["env"] is None


def test_missing_program_raises_launch_error(monkeypatch, surface) -> None:
    def fake_run(argv, **kwargs):
        raise FileNotFoundError(2, "No such file or directory")

    monkeypatch.setattr(launcher_module.subprocess, "run", fake_run)

    with pytest.raises(LaunchError, match="failed to launch missing: No such file or directory"):
        SubprocessLauncher().launch(LaunchDescriptor.program_call("missing"), surface)


def test_print_descriptor_writes_text_and_terminates(surface) -> None:
    disposition = SubprocessLauncher().launch(LaunchDescriptor.printer("/srv/data"), surface)

    assert disposition is LaunchDisposition.TERMINATE
    assert "/srv/data" in surface_text(surface)


def test_program_without_resume_terminates(monkeypatch, surface) -> None:
    monkeypatch.setattr(launcher_module.subprocess, "run", lambda argv, **kwargs: _Completed())

    disposition = SubprocessLauncher().launch(LaunchDescriptor.program_call("true", resume=False), surface)

    assert disposition is LaunchDisposition.TERMINATE
