"""One-ply material engine used by the scripted opponent."""

from __future__ import annotations

from collections.abc import Iterable

from blitzboard.core.enums import Color, PieceKind
from blitzboard.core.move import Move
from blitzboard.engine.search import IEngine, SearchResult
from blitzboard.rules.position import Position

PIECE_VALUES: dict[PieceKind, int] = {
    PieceKind.PAWN: 1,
    PieceKind.KNIGHT: 3,
    PieceKind.BISHOP: 3,
    PieceKind.ROOK: 5,
    PieceKind.QUEEN: 9,
    PieceKind.KING: 0,
}


def material_balance(position: Position) -> int:
    """White material minus black material."""
    score = 0
    for piece in position.pieces().values():
        value = PIECE_VALUES[piece.kind]
        score += value if piece.color == Color.WHITE else -value
    return score


def material_total(kinds: Iterable[PieceKind]) -> int:
    """Sum of piece values, e.g. for a list of captured pieces."""
    return sum(PIECE_VALUES[kind] for kind in kinds)


class GreedyMaterialEngine(IEngine):
    """Picks the move that leaves the best static material balance.

    No search beyond the candidate move itself: every legal move is played on
    a scratch copy restored from FEN, the resulting board is counted, and the
    first move reaching the best score wins.  The position handed in is never
    touched.
    """

    __slots__ = ("_color",)

    def __init__(self, color: Color = Color.BLACK) -> None:
        self._color = color

    @property
    def color(self) -> Color:
        return self._color

    def choose_move(self, position: Position) -> SearchResult:
        return self.choose_from(position, position.legal_moves())

    def choose_from(self, position: Position, moves: Iterable[Move]) -> SearchResult:
        """Evaluate *moves* in the given order against *position*."""
        fen = position.fen()
        sign = 1 if self._color == Color.WHITE else -1

        best_move: Move | None = None
        best_score = 0
        nodes = 0
        for move in moves:
            applied = Position.from_fen(fen).apply_move(
                move.origin, move.destination, move.promotion
            )
            if applied is None:
                continue
            nodes += 1
            score = sign * material_balance(applied[0])
            if best_move is None or score > best_score:
                best_move = move
                best_score = score

        return SearchResult(best_move=best_move, score=sign * best_score, nodes=nodes)
