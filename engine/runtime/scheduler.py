"""Engine runtime deferred task scheduler driven by logical time."""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from heapq import heappop, heappush

from engine.runtime.debug_config import load_debug_config

TaskCallback = Callable[[], None]

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class _Task:
    task_id: int
    due_ms: float
    callback: TaskCallback
    cancelled: bool = False


class Scheduler:
    """Deferred-callback queue advanced explicitly by the caller.

    Time only moves when `advance` or `run_due` is called, so hosts can pump it
    from a real frame clock while tests step it deterministically. Tasks that
    become due together run in due-time order, then in the order they were
    scheduled.
    """

    def __init__(self) -> None:
        self._now_ms = 0.0
        self._next_task_id = 1
        self._tasks: dict[int, _Task] = {}
        self._queue: list[tuple[float, int]] = []
        self._trace = load_debug_config().scheduler_trace_enabled

    @property
    def now_ms(self) -> float:
        return self._now_ms

    @property
    def queued_task_count(self) -> int:
        """Return count of active queued tasks."""
        return sum(1 for task in self._tasks.values() if not task.cancelled)

    def call_later(self, delay_ms: float, callback: TaskCallback) -> int:
        """Schedule a one-shot callback after delay."""
        if delay_ms < 0.0:
            raise ValueError("delay_ms must be >= 0")
        task_id = self._next_task_id
        self._next_task_id += 1
        due_ms = self._now_ms + delay_ms
        self._tasks[task_id] = _Task(task_id=task_id, due_ms=due_ms, callback=callback)
        heappush(self._queue, (due_ms, task_id))
        if self._trace:
            logger.debug("scheduler_task_queued task_id=%d due_ms=%.1f", task_id, due_ms)
        return task_id

    def cancel(self, task_id: int) -> None:
        """Cancel a scheduled task if it exists."""
        task = self._tasks.get(task_id)
        if task is not None:
            task.cancelled = True

    def clear(self) -> None:
        """Cancel every queued task."""
        for task in self._tasks.values():
            task.cancelled = True

    def advance(self, delta_ms: float) -> int:
        """Advance scheduler clock and run due callbacks."""
        if delta_ms < 0.0:
            raise ValueError("delta_ms must be >= 0")
        return self.run_due(self._now_ms + delta_ms)

    def run_due(self, now_ms: float) -> int:
        """Run callbacks due at or before `now_ms`."""
        if now_ms < self._now_ms:
            raise ValueError("now_ms cannot move backwards")
        self._now_ms = now_ms
        executed = 0
        while self._queue and self._queue[0][0] <= self._now_ms:
            _, task_id = heappop(self._queue)
            task = self._tasks.pop(task_id, None)
            if task is None or task.cancelled:
                continue
            if self._trace:
                logger.debug("scheduler_task_run task_id=%d now_ms=%.1f", task_id, self._now_ms)
            task.callback()
            executed += 1
        return executed
