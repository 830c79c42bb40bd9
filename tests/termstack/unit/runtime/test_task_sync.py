from __future__ import annotations

import threading

from termstack.runtime.task_sync import RuntimeTaskLifetimeSource


def test_invalidate_expires_older_tokens() -> None:
    source = RuntimeTaskLifetimeSource()
    first = source.current()

    second = source.invalidate()

    assert first.is_expired()
    assert not second.is_expired()
    assert second.generation == first.generation + 1
    assert source.current() == second


def test_current_is_stable_without_invalidate() -> None:
    source = RuntimeTaskLifetimeSource()

    assert source.current() == source.current()
    assert source.generation == 0


def test_generation_is_readable_from_worker_threads() -> None:
    source = RuntimeTaskLifetimeSource()
    token = source.current()
    seen: list[bool] = []
    source.invalidate()

    worker = threading.Thread(target=lambda: seen.append(token.is_expired()))
    worker.start()
    worker.join(timeout=2.0)

    assert seen == [True]
