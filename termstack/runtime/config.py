"""Centralized runtime configuration ownership for driver execution."""

from __future__ import annotations

import os
from contextvars import ContextVar
from dataclasses import dataclass
from typing import Mapping

from termstack.api.logging import LoggingConfig
from termstack.runtime.debug_config import resolve_log_level_name


@dataclass(frozen=True, slots=True)
class RuntimeLoopConfig:
    input_poll_seconds: float
    busy_poll_seconds: float
    max_dispatch_hops: int


@dataclass(frozen=True, slots=True)
class RuntimeTerminalConfig:
    alt_screen: bool
    width: int | None
    height: int | None


@dataclass(frozen=True, slots=True)
class RuntimeConfig:
    loop: RuntimeLoopConfig
    terminal: RuntimeTerminalConfig
    logging: LoggingConfig


_RUNTIME_CONFIG: ContextVar[RuntimeConfig | None] = ContextVar("termstack_runtime_config", default=None)


def _raw(name: str, *, env: Mapping[str, str] | None = None) -> str | None:
    value = os.getenv(name) if env is None else env.get(name)
    return None if value is None else str(value)


def _flag(name: str, default: bool, *, env: Mapping[str, str] | None = None) -> bool:
    raw = _raw(name, env=env)
    if raw is None:
        return bool(default)
    value = raw.strip().lower()
    if value in {"1", "true", "yes", "on"}:
        return True
    if value in {"0", "false", "no", "off"}:
        return False
    return bool(default)


def _int(
    name: str,
    default: int,
    *,
    minimum: int | None = None,
    env: Mapping[str, str] | None = None,
) -> int:
    raw = _raw(name, env=env)
    if raw is None:
        value = int(default)
    else:
        try:
            value = int(raw.strip())
        except ValueError:
            value = int(default)
    if minimum is None:
        return value
    return max(int(minimum), value)


def _float(
    name: str,
    default: float,
    *,
    minimum: float | None = None,
    env: Mapping[str, str] | None = None,
) -> float:
    raw = _raw(name, env=env)
    if raw is None:
        value = float(default)
    else:
        try:
            value = float(raw.strip())
        except ValueError:
            value = float(default)
    if minimum is None:
        return value
    return max(float(minimum), value)


def _text(name: str, default: str, *, env: Mapping[str, str] | None = None) -> str:
    raw = _raw(name, env=env)
    if raw is None:
        return str(default)
    value = raw.strip()
    return value if value else str(default)


def _optional_size(name: str, *, env: Mapping[str, str] | None = None) -> int | None:
    raw = _text(name, "", env=env)
    if not raw:
        return None
    try:
        value = int(raw)
    except ValueError:
        return None
    return value if value > 0 else None


def _normalize_log_format(raw: str, fallback: str) -> str:
    value = str(raw).strip().lower()
    if value not in {"text", "json"}:
        return str(fallback)
    return value


def load_runtime_config(*, env: Mapping[str, str] | None = None) -> RuntimeConfig:
    scope_env = env
    log_file = _text("TERMSTACK_LOG_FILE", "", env=scope_env)
    alt_screen = _flag("TERMSTACK_ALT_SCREEN", True, env=scope_env)
    return RuntimeConfig(
        loop=RuntimeLoopConfig(
            input_poll_seconds=_float("TERMSTACK_INPUT_POLL_SECONDS", 0.1, minimum=0.0, env=scope_env),
            busy_poll_seconds=_float("TERMSTACK_BUSY_POLL_SECONDS", 0.01, minimum=0.0, env=scope_env),
            max_dispatch_hops=_int("TERMSTACK_MAX_DISPATCH_HOPS", 64, minimum=1, env=scope_env),
        ),
        terminal=RuntimeTerminalConfig(
            alt_screen=alt_screen,
            width=_optional_size("TERMSTACK_TERMINAL_WIDTH", env=scope_env),
            height=_optional_size("TERMSTACK_TERMINAL_HEIGHT", env=scope_env),
        ),
        logging=LoggingConfig(
            level_name=resolve_log_level_name(env=scope_env),
            console_format=_normalize_log_format(
                _text("TERMSTACK_LOG_CONSOLE_FORMAT", "text", env=scope_env), "text"
            ),
            # Console logging shares the tty with the alternate screen.
            console_enabled=not log_file and not alt_screen,
            file_path=log_file or None,
            file_format=_normalize_log_format(_text("TERMSTACK_LOG_FORMAT", "json", env=scope_env), "json"),
        ),
    )


def initialize_runtime_config(*, env: Mapping[str, str] | None = None) -> RuntimeConfig:
    config = load_runtime_config(env=env)
    _RUNTIME_CONFIG.set(config)
    return config


def set_runtime_config(config: RuntimeConfig) -> RuntimeConfig:
    _RUNTIME_CONFIG.set(config)
    return config


def get_runtime_config() -> RuntimeConfig:
    config = _RUNTIME_CONFIG.get()
    if config is not None:
        return config
    return initialize_runtime_config()


__all__ = [
    "RuntimeConfig",
    "RuntimeLoopConfig",
    "RuntimeTerminalConfig",
    "get_runtime_config",
    "initialize_runtime_config",
    "load_runtime_config",
    "set_runtime_config",
]
