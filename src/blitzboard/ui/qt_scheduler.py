"""QTimer-backed scheduler for running a match inside a Qt event loop."""

from __future__ import annotations

from collections.abc import Callable

from PyQt6.QtCore import QTimer

from blitzboard.game.interfaces import IScheduler, ScheduledTask


class QtTask(ScheduledTask):
    """One ``QTimer``; cancelling stops it before its next timeout.

    The timer has no Qt parent, so it lives exactly as long as this task.
    """

    __slots__ = ("__weakref__", "_timer", "_callback")

    def __init__(
        self,
        callback: Callable[[], None],
        interval_ms: int,
        *,
        single_shot: bool,
    ) -> None:
        self._callback = callback
        self._timer = QTimer()
        self._timer.setSingleShot(single_shot)
        self._timer.setInterval(max(0, interval_ms))
        self._timer.timeout.connect(self._fire)

    def _fire(self) -> None:
        self._callback()

    def start(self) -> None:
        self._timer.start()

    def cancel(self) -> None:
        self._timer.stop()

    @property
    def is_active(self) -> bool:
        return self._timer.isActive()


class QtScheduler(IScheduler):
    """Schedules callbacks on the Qt event loop of the calling thread."""

    __slots__ = ()

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> QtTask:
        task = QtTask(callback, delay_ms, single_shot=True)
        task.start()
        return task

    def call_every(self, interval_ms: int, callback: Callable[[], None]) -> QtTask:
        task = QtTask(callback, interval_ms, single_shot=False)
        task.start()
        return task
