"""End-of-match resolution.

The outcome is a pure function of position and clock.  A fallen flag
is checked first and beats any simultaneous board result.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum, auto

from blitzboard.core.enums import Color
from blitzboard.game.clock import Clock
from blitzboard.rules.position import DrawReason, Position


class OutcomeKind(IntEnum):
    NONE = 0
    CHECKMATE = auto()
    DRAW = auto()
    TIMEOUT = auto()


@dataclass(frozen=True, slots=True)
class Outcome:
    """Terminal classification of a match plus its winner, if any."""

    kind: OutcomeKind = OutcomeKind.NONE
    winner: Color | None = None
    draw_reason: DrawReason | None = None

    @classmethod
    def none(cls) -> Outcome:
        return cls()

    @property
    def is_over(self) -> bool:
        return self.kind != OutcomeKind.NONE


def resolve_outcome(position: Position, clock: Clock) -> Outcome:
    flagged = clock.flagged_color()
    if flagged is not None:
        return Outcome(OutcomeKind.TIMEOUT, winner=flagged.opposite)

    if position.is_checkmate():
        return Outcome(OutcomeKind.CHECKMATE, winner=position.side_to_move().opposite)

    reason = position.draw_reason()
    if reason is not None:
        return Outcome(OutcomeKind.DRAW, draw_reason=reason)

    return Outcome.none()


def describe_outcome(outcome: Outcome) -> tuple[str, str]:
    """Overlay ``(title, subtitle)``; empty strings while the match runs."""
    if outcome.kind == OutcomeKind.NONE:
        return "", ""
    if outcome.kind == OutcomeKind.DRAW:
        return "Draw", "Game drawn"

    title = "Checkmate" if outcome.kind == OutcomeKind.CHECKMATE else "Time"
    winner = outcome.winner.display_name if outcome.winner is not None else ""
    return title, f"{winner} wins"
