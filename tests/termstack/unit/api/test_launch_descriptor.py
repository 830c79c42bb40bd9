from __future__ import annotations

import pytest

from termstack.api.launch import LaunchDescriptor, create_launcher
from termstack.runtime.launcher import SubprocessLauncher


def test_program_call_builds_argv() -> None:
    descriptor = LaunchDescriptor.program_call("git", "log", "--oneline", cwd="/repo", wait=False)

    assert descriptor.kind == "program"
    assert descriptor.argv == ["git", "log", "--oneline"]
    assert descriptor.cwd == "/repo"
    assert descriptor.wait is False
    assert descriptor.resume is True


def test_program_call_rejects_empty_program() -> None:
    with pytest.raises(ValueError):
        LaunchDescriptor.program_call("  ")


def test_printer_terminates_by_default() -> None:
    descriptor = LaunchDescriptor.printer("/tmp/out")

    assert descriptor.kind == "print"
    assert descriptor.text == "/tmp/out"
    assert descriptor.resume is False


def test_create_launcher_returns_subprocess_launcher() -> None:
    assert isinstance(create_launcher(), SubprocessLauncher)
