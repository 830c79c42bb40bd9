"""Public logging API."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class LoggingConfig:
    """Logging pipeline configuration.

    A full-screen program owns the terminal, so console output defaults to
    stderr and file logging is the usual choice while the driver runs.
    """

    level_name: str = "INFO"
    console_format: str = "text"  # text|json
    console_enabled: bool = True
    file_path: str | None = None
    file_format: str = "json"  # text|json
