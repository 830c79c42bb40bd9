"""Public termstack API contracts."""

from termstack.api.commands import Command, CommandParser, create_command_parser
from termstack.api.context import AppContext, create_app_context
from termstack.api.errors import (
    LaunchError,
    ProgramError,
    StackUnderflowError,
    StateBuildError,
    TermstackError,
)
from termstack.api.events import (
    CommandDispatched,
    DriverStopped,
    ErrorDisplayed,
    EventBus,
    LaunchRequested,
    StatePopped,
    StatePushed,
    Subscription,
    create_event_bus,
)
from termstack.api.input import CancelSignal, CommandSource, ResizeSignal, create_line_command_source
from termstack.api.launch import LaunchDescriptor, LaunchDisposition, Launcher, create_launcher
from termstack.api.logging import LoggingConfig
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
    from_optional_state,
    launch,
    quote_text,
    verb_not_found,
)
from termstack.api.stack import StateStack, create_state_stack
from termstack.api.states import AppState
from termstack.api.surface import RenderSurface, create_render_surface
from termstack.api.tasks import TaskLifetime, TaskLifetimeSource, create_task_lifetime_source
from termstack.api.verbs import Verb, VerbStore, create_verb_store

__all__ = [
    "AppContext",
    "AppState",
    "CancelSignal",
    "Command",
    "CommandDispatched",
    "CommandParser",
    "CommandSource",
    "DisplayError",
    "DriverStopped",
    "ErrorDisplayed",
    "EventBus",
    "Keep",
    "Launch",
    "LaunchDescriptor",
    "LaunchDisposition",
    "LaunchError",
    "LaunchRequested",
    "Launcher",
    "LoggingConfig",
    "NewState",
    "Outcome",
    "PopState",
    "PopStateAndReapply",
    "ProgramError",
    "Quit",
    "RefreshState",
    "RenderSurface",
    "ResizeSignal",
    "StackUnderflowError",
    "StateBuildError",
    "StatePopped",
    "StatePushed",
    "StateStack",
    "Subscription",
    "TaskLifetime",
    "TaskLifetimeSource",
    "TermstackError",
    "Verb",
    "VerbStore",
    "create_app_context",
    "create_command_parser",
    "create_event_bus",
    "create_launcher",
    "create_line_command_source",
    "create_render_surface",
    "create_state_stack",
    "create_task_lifetime_source",
    "create_verb_store",
    "from_optional_state",
    "launch",
    "quote_text",
    "verb_not_found",
]
