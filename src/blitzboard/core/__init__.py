"""Core domain types used at the boundary with the rules engine.

Quick start::

    from blitzboard.core import Color, Move, parse_square

    move = Move(parse_square("e2"), parse_square("e4"))
"""

from blitzboard.core.enums import Color, PieceKind
from blitzboard.core.move import Move, MoveResult
from blitzboard.core.piece import Piece
from blitzboard.core.types import (
    Square,
    board_squares,
    file_of,
    is_valid_square,
    make_square,
    parse_square,
    rank_of,
    square_name,
)

__all__ = [
    # Enums
    "Color",
    "PieceKind",
    # Types / helpers
    "Square",
    "board_squares",
    "file_of",
    "is_valid_square",
    "make_square",
    "parse_square",
    "rank_of",
    "square_name",
    # Value objects
    "Move",
    "MoveResult",
    "Piece",
]
