"""Presentation-facing snapshot of a match.

Everything here is derived from :class:`MatchState` on demand; the
rendering layer reads a ``MatchView`` and never touches the state itself.
"""

from __future__ import annotations

from dataclasses import dataclass

from blitzboard.core.enums import Color
from blitzboard.core.piece import Piece
from blitzboard.core.types import Square, board_squares
from blitzboard.game.outcome import OutcomeKind, describe_outcome
from blitzboard.game.state import MatchState


def format_clock(seconds: float) -> str:
    """``MM:SS`` with the seconds floored and negative input shown as zero."""
    total = int(max(0.0, seconds))
    return f"{total // 60:02d}:{total % 60:02d}"


@dataclass(frozen=True, slots=True)
class MatchView:
    board: tuple[tuple[Square, Piece | None], ...]
    selected: Square | None
    targets: frozenset[Square]
    white_clock: str
    black_clock: str
    active_color: Color | None
    white_material: int
    black_material: int
    is_ended: bool
    outcome: OutcomeKind
    winner: Color | None
    in_check: bool
    bot_thinking: bool
    title: str
    subtitle: str

    def piece_at(self, square: Square) -> Piece | None:
        for sq, piece in self.board:
            if sq == square:
                return piece
        return None


def build_view(state: MatchState) -> MatchView:
    position = state.position
    pieces = position.pieces()
    outcome = state.outcome
    selection = state.selection
    title, subtitle = describe_outcome(outcome)
    return MatchView(
        board=tuple((sq, pieces.get(sq)) for sq in board_squares()),
        selected=selection.origin if selection is not None else None,
        targets=selection.legal_targets if selection is not None else frozenset(),
        white_clock=format_clock(state.clock.remaining(Color.WHITE)),
        black_clock=format_clock(state.clock.remaining(Color.BLACK)),
        active_color=state.clock.active_color,
        white_material=state.material_score(Color.WHITE),
        black_material=state.material_score(Color.BLACK),
        is_ended=outcome.is_over,
        outcome=outcome.kind,
        winner=outcome.winner,
        in_check=position.is_check() and not outcome.is_over,
        bot_thinking=state.bot_thinking,
        title=title,
        subtitle=subtitle,
    )
