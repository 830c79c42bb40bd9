"""Public external-process launch API contracts."""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from enum import Enum
from typing import Literal, Protocol

from termstack.api.surface import RenderSurface

LaunchKind = Literal["program", "print"]


class LaunchDisposition(Enum):
    """What the driver does once a launch returns."""

    RESUME = "resume"
    TERMINATE = "terminate"


@dataclass(frozen=True, slots=True)
class LaunchDescriptor:
    """Immutable description of one external invocation."""

    kind: LaunchKind
    program: str = ""
    args: tuple[str, ...] = ()
    env: Mapping[str, str] = field(default_factory=dict, compare=False)
    cwd: str | None = None
    wait: bool = True
    resume: bool = True
    text: str = ""

    @classmethod
    def program_call(
        cls,
        program: str,
        *args: str,
        env: Mapping[str, str] | None = None,
        cwd: str | None = None,
        wait: bool = True,
        resume: bool = True,
    ) -> LaunchDescriptor:
        if not program.strip():
            raise ValueError("program must not be empty")
        return cls(
            kind="program",
            program=program,
            args=tuple(args),
            env=dict(env or {}),
            cwd=cwd,
            wait=wait,
            resume=resume,
        )

    @classmethod
    def printer(cls, text: str, *, resume: bool = False) -> LaunchDescriptor:
        """Describe text to print on the normal screen (usually on exit)."""
        return cls(kind="print", text=text, resume=resume)

    @property
    def argv(self) -> list[str]:
        return [self.program, *self.args]


class Launcher(Protocol):
    """External-process collaborator contract."""

    def launch(self, descriptor: LaunchDescriptor, surface: RenderSurface) -> LaunchDisposition:
        """Run the descriptor outside the render loop and report how to continue."""


def create_launcher() -> Launcher:
    """Create default subprocess launcher implementation."""
    from termstack.runtime.launcher import SubprocessLauncher

    return SubprocessLauncher()
