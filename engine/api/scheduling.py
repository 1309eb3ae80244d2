"""Public deferred-task scheduling API."""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol


class TaskScheduler(Protocol):
    """Logical-time deferred callback queue."""

    @property
    def now_ms(self) -> float:
        """Current logical time in milliseconds."""

    @property
    def queued_task_count(self) -> int:
        """Number of tasks still waiting to run."""

    def call_later(self, delay_ms: float, callback: Callable[[], None]) -> int:
        """Schedule a one-shot callback and return its task id."""

    def cancel(self, task_id: int) -> None:
        """Cancel a task if it is still queued."""

    def clear(self) -> None:
        """Cancel every queued task."""

    def advance(self, delta_ms: float) -> int:
        """Move time forward and return the number of callbacks run."""


def create_scheduler() -> TaskScheduler:
    """Create default scheduler implementation."""
    from engine.runtime.scheduler import Scheduler

    return Scheduler()
