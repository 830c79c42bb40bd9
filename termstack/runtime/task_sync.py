"""Generation counter backing task-lifetime tokens."""

from __future__ import annotations

import threading

from termstack.api.tasks import TaskLifetime


class RuntimeTaskLifetimeSource:
    """Monotonic generation counter; bumping it makes older tokens stale.

    Written by the driver thread only, read by worker threads through
    `TaskLifetime.is_expired`.
    """

    def __init__(self) -> None:
        self._generation = 0
        self._lock = threading.Lock()

    @property
    def generation(self) -> int:
        with self._lock:
            return self._generation

    def current(self) -> TaskLifetime:
        return TaskLifetime(self.generation, self)

    def invalidate(self) -> TaskLifetime:
        with self._lock:
            self._generation += 1
            generation = self._generation
        return TaskLifetime(generation, self)


TaskLifetimeSource = RuntimeTaskLifetimeSource
