from __future__ import annotations

from termstack.runtime.config import (
    get_runtime_config,
    initialize_runtime_config,
    load_runtime_config,
    set_runtime_config,
)


def test_load_runtime_config_defaults() -> None:
    cfg = load_runtime_config(env={})

    assert cfg.loop.input_poll_seconds == 0.1
    assert cfg.loop.busy_poll_seconds == 0.01
    assert cfg.loop.max_dispatch_hops == 64
    assert cfg.terminal.alt_screen is True
    assert cfg.terminal.width is None
    assert cfg.terminal.height is None
    assert cfg.logging.level_name == "INFO"
    assert cfg.logging.console_enabled is False
    assert cfg.logging.file_path is None


def test_console_logging_only_without_alt_screen_or_file() -> None:
    inline = load_runtime_config(env={"TERMSTACK_ALT_SCREEN": "0"})
    filed = load_runtime_config(env={"TERMSTACK_ALT_SCREEN": "0", "TERMSTACK_LOG_FILE": "t.log"})

    assert inline.logging.console_enabled is True
    assert filed.logging.console_enabled is False


def test_load_runtime_config_reads_overrides() -> None:
    cfg = load_runtime_config(
        env={
            "TERMSTACK_INPUT_POLL_SECONDS": "0.25",
            "TERMSTACK_BUSY_POLL_SECONDS": "0.05",
            "TERMSTACK_MAX_DISPATCH_HOPS": "8",
            "TERMSTACK_ALT_SCREEN": "off",
            "TERMSTACK_TERMINAL_WIDTH": "132",
            "TERMSTACK_TERMINAL_HEIGHT": "43",
            "TERMSTACK_LOG_LEVEL": "debug",
            "TERMSTACK_LOG_FILE": "logs/termstack.log",
            "TERMSTACK_LOG_FORMAT": "text",
        }
    )

    assert cfg.loop.input_poll_seconds == 0.25
    assert cfg.loop.busy_poll_seconds == 0.05
    assert cfg.loop.max_dispatch_hops == 8
    assert cfg.terminal.alt_screen is False
    assert (cfg.terminal.width, cfg.terminal.height) == (132, 43)
    assert cfg.logging.level_name == "DEBUG"
    assert cfg.logging.file_path == "logs/termstack.log"
    assert cfg.logging.file_format == "text"
    assert cfg.logging.console_enabled is False


def test_load_runtime_config_clamps_and_falls_back_on_bad_values() -> None:
    cfg = load_runtime_config(
        env={
            "TERMSTACK_INPUT_POLL_SECONDS": "-1",
            "TERMSTACK_MAX_DISPATCH_HOPS": "lots",
            "TERMSTACK_ALT_SCREEN": "maybe",
            "TERMSTACK_TERMINAL_WIDTH": "0",
            "TERMSTACK_LOG_CONSOLE_FORMAT": "yaml",
        }
    )

    assert cfg.loop.input_poll_seconds == 0.0
    assert cfg.loop.max_dispatch_hops == 64
    assert cfg.terminal.alt_screen is True
    assert cfg.terminal.width is None
    assert cfg.logging.console_format == "text"


def test_runtime_config_context_cache(monkeypatch) -> None:
    monkeypatch.setenv("TERMSTACK_MAX_DISPATCH_HOPS", "5")
    cfg = initialize_runtime_config()
    assert get_runtime_config() is cfg
    assert cfg.loop.max_dispatch_hops == 5

    pinned = set_runtime_config(load_runtime_config(env={}))
    assert get_runtime_config() is pinned
