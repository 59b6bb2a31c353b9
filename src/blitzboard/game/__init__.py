"""Match layer — controller, clock, state, outcome.

Quick start::

    from blitzboard.game import MatchController, TimeControl
    from blitzboard.ui import QtScheduler

    ctrl = MatchController(QtScheduler())
    ctrl.reset(TimeControl.blitz_3m())
    ctrl.select_or_move(parse_square("e2"))
    ctrl.select_or_move(parse_square("e4"))
"""

from blitzboard.game.clock import Clock
from blitzboard.game.controller import MatchController, MatchEvents
from blitzboard.game.interfaces import (
    TIME_PRESETS,
    GameMode,
    IScheduler,
    MatchPhase,
    MatchSettings,
    ScheduledTask,
    TimeControl,
)
from blitzboard.game.outcome import (
    Outcome,
    OutcomeKind,
    describe_outcome,
    resolve_outcome,
)
from blitzboard.game.state import MatchState, Selection
from blitzboard.game.view import MatchView, build_view, format_clock

__all__ = [
    # Interfaces / config
    "GameMode",
    "IScheduler",
    "MatchPhase",
    "MatchSettings",
    "ScheduledTask",
    "TIME_PRESETS",
    "TimeControl",
    # Concrete
    "Clock",
    "MatchController",
    "MatchEvents",
    "MatchState",
    "MatchView",
    "Outcome",
    "OutcomeKind",
    "Selection",
    # Functions
    "build_view",
    "describe_outcome",
    "format_clock",
    "resolve_outcome",
]
