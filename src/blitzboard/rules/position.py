"""Position — the rules-engine adapter over python-chess.

Everything past this module speaks in :mod:`blitzboard.core` types; the
``chess`` package never leaks into the match layer.  A ``Position`` is never
mutated after construction: :meth:`Position.apply_move` returns a new one.
"""

from __future__ import annotations

from enum import IntEnum, auto

import chess

from blitzboard.core.enums import Color, PieceKind
from blitzboard.core.move import Move, MoveResult
from blitzboard.core.piece import Piece
from blitzboard.core.types import Square, is_valid_square, rank_of

STARTING_FEN = chess.STARTING_FEN


class DrawReason(IntEnum):
    """Automatic draw conditions recognised by the rules engine."""

    STALEMATE = auto()
    INSUFFICIENT_MATERIAL = auto()
    FIFTY_MOVES = auto()
    THREEFOLD_REPETITION = auto()


def _to_color(turn: chess.Color) -> Color:
    return Color.WHITE if turn == chess.WHITE else Color.BLACK


def _to_piece(piece: chess.Piece) -> Piece:
    return Piece(_to_color(piece.color), PieceKind(piece.piece_type))


def _to_move(move: chess.Move) -> Move:
    promotion = PieceKind(move.promotion) if move.promotion else None
    return Move(move.from_square, move.to_square, promotion)


class Position:
    """Immutable chess position: board contents plus side to move."""

    __slots__ = ("_board",)

    def __init__(self, board: chess.Board) -> None:
        self._board = board

    # ── Construction / serialisation ─────────────────────────────────────

    @classmethod
    def initial(cls) -> Position:
        return cls(chess.Board())

    @classmethod
    def from_fen(cls, fen: str) -> Position:
        """Deserialize a FEN string; raises ``ValueError`` if malformed."""
        return cls(chess.Board(fen))

    def fen(self) -> str:
        return self._board.fen()

    def copy(self) -> Position:
        """Independent copy sharing no state with this position."""
        return Position(self._board.copy())

    # ── Queries ──────────────────────────────────────────────────────────

    def side_to_move(self) -> Color:
        return _to_color(self._board.turn)

    def piece_at(self, square: Square) -> Piece | None:
        if not is_valid_square(square):
            return None
        piece = self._board.piece_at(square)
        return _to_piece(piece) if piece is not None else None

    def pieces(self) -> dict[Square, Piece]:
        """Occupied squares mapped to their pieces."""
        return {sq: _to_piece(p) for sq, p in self._board.piece_map().items()}

    def legal_moves(self) -> list[Move]:
        """Legal moves in the rules library's (stable) generation order."""
        return [_to_move(m) for m in self._board.legal_moves]

    def legal_targets(self, square: Square) -> frozenset[Square]:
        """Destination squares for the piece on *square*.

        Empty when the square is empty or holds a piece of the side not to move.
        """
        if not is_valid_square(square):
            return frozenset()
        return frozenset(
            m.to_square for m in self._board.legal_moves if m.from_square == square
        )

    def is_check(self) -> bool:
        return self._board.is_check()

    def is_checkmate(self) -> bool:
        return self._board.is_checkmate()

    def is_draw(self) -> bool:
        return self.draw_reason() is not None

    def draw_reason(self) -> DrawReason | None:
        board = self._board
        if board.is_stalemate():
            return DrawReason.STALEMATE
        if board.is_insufficient_material():
            return DrawReason.INSUFFICIENT_MATERIAL
        if board.is_fifty_moves():
            return DrawReason.FIFTY_MOVES
        if board.is_repetition(3):
            return DrawReason.THREEFOLD_REPETITION
        return None

    # ── Transitions ──────────────────────────────────────────────────────

    def apply_move(
        self,
        origin: Square,
        destination: Square,
        promotion: PieceKind | None = PieceKind.QUEEN,
    ) -> tuple[Position, MoveResult] | None:
        """Return the position after the move, or ``None`` if it is illegal.

        *promotion* only matters for a pawn reaching the last rank and
        defaults to a queen there.
        """
        if not (is_valid_square(origin) and is_valid_square(destination)):
            return None

        board = self._board
        mover = board.piece_at(origin)
        if mover is None:
            return None

        promo: int | None = None
        if mover.piece_type == chess.PAWN and rank_of(destination) in (0, 7):
            promo = int(promotion or PieceKind.QUEEN)

        candidate = chess.Move(origin, destination, promotion=promo)
        if not board.is_legal(candidate):
            return None

        captured: PieceKind | None = None
        if board.is_en_passant(candidate):
            captured = PieceKind.PAWN
        else:
            victim = board.piece_at(destination)
            if victim is not None:
                captured = PieceKind(victim.piece_type)

        next_board = board.copy()
        next_board.push(candidate)
        return Position(next_board), MoveResult(_to_move(candidate), captured)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Position):
            return NotImplemented
        return self.fen() == other.fen()

    def __hash__(self) -> int:
        return hash(self.fen())

    def __repr__(self) -> str:
        return f"Position({self.fen()!r})"
