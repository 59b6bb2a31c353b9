"""Shared pytest fixtures used across the test suite."""

from __future__ import annotations

import os
import sys
from collections.abc import Callable, Iterator

import pytest

from blitzboard.game.interfaces import IScheduler, ScheduledTask

# Linux CI runners are often headless. Force an offscreen backend only there.
if (
    sys.platform.startswith("linux")
    and "QT_QPA_PLATFORM" not in os.environ
    and "DISPLAY" not in os.environ
    and "WAYLAND_DISPLAY" not in os.environ
):
    os.environ["QT_QPA_PLATFORM"] = "offscreen"


class _ManualTask(ScheduledTask):
    def __init__(
        self,
        due_ms: int,
        interval_ms: int | None,
        callback: Callable[[], None],
    ) -> None:
        self.due_ms = due_ms
        self.interval_ms = interval_ms
        self.callback = callback
        self.active = True

    def cancel(self) -> None:
        self.active = False

    @property
    def is_active(self) -> bool:
        return self.active


class ManualScheduler(IScheduler):
    """Deterministic scheduler: time only moves when a test calls ``advance``.

    ``monotonic`` doubles as the controller's time source so clock ticks and
    timers share one timeline.
    """

    def __init__(self) -> None:
        self.now_ms = 0
        self.tasks: list[_ManualTask] = []

    def monotonic(self) -> float:
        return self.now_ms / 1000.0

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> ScheduledTask:
        task = _ManualTask(self.now_ms + delay_ms, None, callback)
        self.tasks.append(task)
        return task

    def call_every(
        self, interval_ms: int, callback: Callable[[], None]
    ) -> ScheduledTask:
        task = _ManualTask(self.now_ms + interval_ms, interval_ms, callback)
        self.tasks.append(task)
        return task

    @property
    def active_tasks(self) -> list[_ManualTask]:
        return [t for t in self.tasks if t.active]

    def advance(self, ms: int) -> None:
        """Move time forward by *ms*, firing due callbacks in order."""
        target = self.now_ms + ms
        while True:
            due = [t for t in self.active_tasks if t.due_ms <= target]
            if not due:
                break
            task = min(due, key=lambda t: t.due_ms)
            self.now_ms = task.due_ms
            if task.interval_ms is None:
                task.active = False
            else:
                task.due_ms += task.interval_ms
            task.callback()
        self.now_ms = target


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture(scope="session")
def qapp() -> Iterator[object]:
    """Provide a singleton QCoreApplication for timer tests."""
    from PyQt6.QtCore import QCoreApplication

    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    yield app
