"""Driver debug configuration sourced from environment."""

from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Mapping


def _get(name: str, env: Mapping[str, str] | None) -> str | None:
    return os.getenv(name) if env is None else env.get(name)


def _flag(name: str, default: bool = False, *, env: Mapping[str, str] | None = None) -> bool:
    raw = _get(name, env)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


@dataclass(frozen=True, slots=True)
class DebugConfig:
    """Immutable driver debug configuration."""

    dispatch_trace_enabled: bool
    task_trace_enabled: bool


def resolve_log_level_name(default: str = "INFO", *, env: Mapping[str, str] | None = None) -> str:
    """Resolve log level with the termstack-prefixed override."""
    value = _get("TERMSTACK_LOG_LEVEL", env)
    if value is None:
        value = _get("LOG_LEVEL", env)
    if value is None or not value.strip():
        value = default
    return value.strip().upper()


def load_debug_config(*, env: Mapping[str, str] | None = None) -> DebugConfig:
    """Load immutable debug configuration from env vars."""
    return DebugConfig(
        dispatch_trace_enabled=_flag("TERMSTACK_DEBUG_DISPATCH_TRACE", False, env=env),
        task_trace_enabled=_flag("TERMSTACK_DEBUG_TASK_TRACE", False, env=env),
    )
