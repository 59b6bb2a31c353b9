"""Abstract interfaces and configuration for the match layer.

Follows Dependency Inversion: the high-level MatchController depends on
these ABCs, not on a concrete timer implementation.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Callable
from dataclasses import dataclass, field
from enum import IntEnum, auto

from blitzboard.core.enums import Color

# ── Match phase FSM states ───────────────────────────────────────────────────


class MatchPhase(IntEnum):
    """Finite-state-machine states of a match (derived, never stored)."""

    AWAITING_SELECTION = auto()
    AWAITING_DESTINATION = auto()
    BOT_THINKING = auto()
    ENDED = auto()


class GameMode(IntEnum):
    """Who sits on the black side."""

    PVP = auto()
    VS_BOT = auto()


# ── Time control presets ─────────────────────────────────────────────────────


@dataclass(frozen=True, slots=True)
class TimeControl:
    """Base time budget applied to both sides at reset. No increment."""

    initial_seconds: float

    @classmethod
    def bullet_1m(cls) -> TimeControl:
        return cls(60)

    @classmethod
    def blitz_3m(cls) -> TimeControl:
        return cls(180)

    @classmethod
    def blitz_5m(cls) -> TimeControl:
        return cls(300)

    @classmethod
    def rapid_10m(cls) -> TimeControl:
        return cls(600)

    @property
    def label(self) -> str:
        """Menu label, e.g. ``"5:00"``."""
        total = int(self.initial_seconds)
        return f"{total // 60}:{total % 60:02d}"

    def __repr__(self) -> str:
        return f"TimeControl({self.label})"


TIME_PRESETS: tuple[TimeControl, ...] = (
    TimeControl.bullet_1m(),
    TimeControl.blitz_3m(),
    TimeControl.blitz_5m(),
    TimeControl.rapid_10m(),
)


@dataclass(frozen=True, slots=True)
class MatchSettings:
    """Static match configuration.

    Args:
        default_time_control: Budget used when ``reset`` is called without one.
        default_mode: Mode of the very first match.
        bot_color: Side played by the bot in ``GameMode.VS_BOT``.
        bot_delay_ms: Pacing delay before the bot's chosen move is applied.
        tick_interval_ms: Period of the clock tick timer.
    """

    default_time_control: TimeControl = field(default_factory=TimeControl.blitz_5m)
    default_mode: GameMode = GameMode.VS_BOT
    bot_color: Color = Color.BLACK
    bot_delay_ms: int = 5000
    tick_interval_ms: int = 200


# ── Scheduling ───────────────────────────────────────────────────────────────


class ScheduledTask(ABC):
    """Handle to a pending timer callback."""

    __slots__ = ()

    @abstractmethod
    def cancel(self) -> None:
        """Stop the task; its callback must not fire afterwards."""

    @property
    @abstractmethod
    def is_active(self) -> bool: ...


class IScheduler(ABC):
    """Cooperative single-threaded timer source (an event loop)."""

    __slots__ = ()

    @abstractmethod
    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> ScheduledTask:
        """Run *callback* once after *delay_ms*."""

    @abstractmethod
    def call_every(
        self, interval_ms: int, callback: Callable[[], None]
    ) -> ScheduledTask:
        """Run *callback* every *interval_ms* until cancelled."""
