"""Termstack runtime modules."""

from termstack.runtime.background import BackgroundWork
from termstack.runtime.commands import CommandParser, RuntimeCommandParser
from termstack.runtime.config import RuntimeConfig, get_runtime_config, load_runtime_config
from termstack.runtime.debug_config import DebugConfig, load_debug_config
from termstack.runtime.driver import DriverState, StateStackDriver
from termstack.runtime.events import EventBus, RuntimeEventBus
from termstack.runtime.input import LineCommandSource
from termstack.runtime.launcher import SubprocessLauncher
from termstack.runtime.logging import configure_termstack_logging, setup_termstack_logging
from termstack.runtime.state_stack import RuntimeStateStack, StateStack
from termstack.runtime.task_sync import RuntimeTaskLifetimeSource, TaskLifetimeSource

__all__ = [
    "BackgroundWork",
    "CommandParser",
    "DebugConfig",
    "DriverState",
    "EventBus",
    "LineCommandSource",
    "RuntimeCommandParser",
    "RuntimeConfig",
    "RuntimeEventBus",
    "RuntimeStateStack",
    "RuntimeTaskLifetimeSource",
    "StateStack",
    "StateStackDriver",
    "SubprocessLauncher",
    "TaskLifetimeSource",
    "configure_termstack_logging",
    "get_runtime_config",
    "load_debug_config",
    "load_runtime_config",
    "setup_termstack_logging",
]
