"""Board squares as plain integers.

Square 0 is a1 and square 63 is h8; files run fastest, so ``sq = 8 * rank + file``.
Names are the usual lowercase algebraic coordinates ("e4").
"""

from __future__ import annotations

from typing import TypeAlias

Square: TypeAlias = int

FILES = "abcdefgh"
RANKS = "12345678"
SQUARE_COUNT = 64


def rank_of(sq: Square) -> int:
    return divmod(sq, 8)[0]


def file_of(sq: Square) -> int:
    return divmod(sq, 8)[1]


def make_square(file: int, rank: int) -> Square:
    """Index of the square at *file* and *rank*, both counted from zero."""
    return 8 * rank + file


def square_name(sq: Square) -> str:
    rank, file = divmod(sq, 8)
    return FILES[file] + RANKS[rank]


def parse_square(name: str) -> Square:
    """Square index for an algebraic name; raises ValueError otherwise."""
    if len(name) == 2 and name[0] in FILES and name[1] in RANKS:
        return make_square(FILES.index(name[0]), RANKS.index(name[1]))
    raise ValueError(f"Invalid square name: {name!r}")


def is_valid_square(sq: object) -> bool:
    """True for an int in board range; bools and other types are rejected."""
    if isinstance(sq, bool) or not isinstance(sq, int):
        return False
    return 0 <= sq < SQUARE_COUNT


def board_squares() -> tuple[Square, ...]:
    """Every square in the order a board is drawn: rank 8 first, a-file first."""
    return tuple(
        make_square(file, rank)
        for rank in reversed(range(len(RANKS)))
        for file in range(len(FILES))
    )
