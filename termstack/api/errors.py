"""Public error taxonomy.

Two classes of failure exist. Recoverable ones (`StateBuildError`,
`LaunchError`) end up as a displayed error over the current state.
`ProgramError` and its subclasses are fatal and abort the driver loop.
"""

from __future__ import annotations


class TermstackError(Exception):
    """Base class for termstack errors."""


class ProgramError(TermstackError):
    """Violated precondition; the driver stops with a failure status."""


class StackUnderflowError(ProgramError):
    """Raised when popping would leave the state stack empty."""


class StateBuildError(TermstackError):
    """Recoverable failure while building a new state."""


class LaunchError(TermstackError):
    """Recoverable failure while launching an external program."""
