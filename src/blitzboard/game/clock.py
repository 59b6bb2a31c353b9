"""Dual countdown clock.

Every operation returns a new ``Clock``; the match state swaps the whole value
in one step.  Time is fed in explicitly (``now`` in seconds from a monotonic
source) so the clock itself never reads wall time.
"""

from __future__ import annotations

from dataclasses import dataclass, replace

from blitzboard.core.enums import Color
from blitzboard.game.interfaces import TimeControl


@dataclass(frozen=True, slots=True)
class Clock:
    """Remaining time for both sides plus at most one active side."""

    white_remaining: float
    black_remaining: float
    active_color: Color | None = None
    last_tick: float | None = None

    @classmethod
    def from_time_control(cls, time_control: TimeControl) -> Clock:
        return cls(time_control.initial_seconds, time_control.initial_seconds)

    # ── Transitions ──────────────────────────────────────────────────────

    def start(self, color: Color, now: float) -> Clock:
        """Make *color* the active side, counting from *now*."""
        return replace(self, active_color=color, last_tick=now)

    def tick(self, now: float) -> Clock:
        """Charge the time elapsed since the last tick to the active side."""
        if self.active_color is None or self.last_tick is None:
            return self
        elapsed = max(0.0, now - self.last_tick)
        left = max(0.0, self.remaining(self.active_color) - elapsed)
        if self.active_color == Color.WHITE:
            return replace(self, white_remaining=left, last_tick=now)
        return replace(self, black_remaining=left, last_tick=now)

    def stop(self) -> Clock:
        """Pause; the pending elapsed delta is discarded."""
        return replace(self, active_color=None, last_tick=None)

    # ── Queries ──────────────────────────────────────────────────────────

    @property
    def is_running(self) -> bool:
        return self.active_color is not None

    def remaining(self, color: Color) -> float:
        raw = self.white_remaining if color == Color.WHITE else self.black_remaining
        return max(0.0, raw)

    def is_flag_fallen(self, color: Color) -> bool:
        return self.remaining(color) <= 0.0

    def flagged_color(self) -> Color | None:
        """First side (white, then black) whose time is exhausted."""
        for color in (Color.WHITE, Color.BLACK):
            if self.is_flag_fallen(color):
                return color
        return None
