"""Background work tagged with a task lifetime."""

from __future__ import annotations

import logging
from collections.abc import Callable
from concurrent.futures import Executor, Future, ThreadPoolExecutor, wait
from dataclasses import dataclass

from termstack.api.tasks import TaskLifetime

_LOG = logging.getLogger("termstack.tasks")


@dataclass(slots=True)
class _Pending:
    lifetime: TaskLifetime
    future: Future


class BackgroundWork[T]:
    """One outstanding computation for a state.

    Results are only handed back while the lifetime they were started with
    is still the current one; stale work is cancelled and dropped.
    """

    def __init__(self, executor: Executor | None = None) -> None:
        self._owns_executor = executor is None
        self._executor = executor if executor is not None else ThreadPoolExecutor(
            max_workers=1, thread_name_prefix="termstack-task"
        )
        self._pending: _Pending | None = None

    @property
    def pending(self) -> bool:
        return self._pending is not None

    @property
    def lifetime(self) -> TaskLifetime | None:
        return self._pending.lifetime if self._pending is not None else None

    def start(self, fn: Callable[[TaskLifetime], T], lifetime: TaskLifetime) -> None:
        """Submit `fn(lifetime)`, replacing any outstanding work."""
        self.drop()
        self._pending = _Pending(lifetime=lifetime, future=self._executor.submit(fn, lifetime))

    def collect(self, lifetime: TaskLifetime) -> T | None:
        """Return the finished result for `lifetime`, or None."""
        pending = self._pending
        if pending is None:
            return None
        if pending.lifetime != lifetime:
            _LOG.debug(
                "stale_task_dropped started=%d current=%d",
                pending.lifetime.generation,
                lifetime.generation,
            )
            self.drop()
            return None
        if not pending.future.done():
            return None
        self._pending = None
        return pending.future.result()

    def wait(self, timeout: float | None = None) -> bool:
        """Block until outstanding work finishes. Returns whether it did."""
        pending = self._pending
        if pending is None:
            return True
        done, _ = wait([pending.future], timeout=timeout)
        return bool(done)

    def drop(self) -> None:
        if self._pending is not None:
            self._pending.future.cancel()
            self._pending = None

    def shutdown(self) -> None:
        self.drop()
        if self._owns_executor:
            self._executor.shutdown(wait=False, cancel_futures=True)
