from __future__ import annotations

import pytest

from engine.runtime.scheduler import Scheduler


def test_scheduler_call_later_runs_when_due() -> None:
    scheduler = Scheduler()
    calls: list[str] = []
    scheduler.call_later(540, lambda: calls.append("once"))

    assert scheduler.advance(539) == 0
    assert calls == []
    assert scheduler.advance(1) == 1
    assert calls == ["once"]
    assert scheduler.advance(1000) == 0


def test_scheduler_runs_due_tasks_in_due_then_scheduling_order() -> None:
    scheduler = Scheduler()
    calls: list[str] = []
    scheduler.call_later(100, lambda: calls.append("b"))
    scheduler.call_later(50, lambda: calls.append("a"))
    scheduler.call_later(100, lambda: calls.append("c"))
    scheduler.call_later(500, lambda: calls.append("late"))

    assert scheduler.advance(100) == 3
    assert calls == ["a", "b", "c"]
    assert scheduler.queued_task_count == 1


def test_scheduler_task_scheduled_from_callback_waits_for_its_own_delay() -> None:
    scheduler = Scheduler()
    calls: list[float] = []

    def _first() -> None:
        calls.append(scheduler.now_ms)
        scheduler.call_later(200, lambda: calls.append(scheduler.now_ms))

    scheduler.call_later(100, _first)
    assert scheduler.advance(150) == 1
    assert scheduler.advance(199) == 0
    assert scheduler.advance(1) == 1
    assert calls == [150, 350]


def test_scheduler_cancel_and_clear_prevent_execution() -> None:
    scheduler = Scheduler()
    calls: list[str] = []
    task_id = scheduler.call_later(100, lambda: calls.append("never"))
    scheduler.cancel(task_id)
    scheduler.cancel(9999)
    scheduler.call_later(100, lambda: calls.append("cleared"))
    scheduler.clear()

    assert scheduler.queued_task_count == 0
    assert scheduler.advance(200) == 0
    assert calls == []


def test_scheduler_validates_time_arguments() -> None:
    scheduler = Scheduler()
    with pytest.raises(ValueError):
        scheduler.call_later(-1, lambda: None)
    with pytest.raises(ValueError):
        scheduler.advance(-0.5)
    scheduler.advance(10)
    with pytest.raises(ValueError):
        scheduler.run_due(5)
