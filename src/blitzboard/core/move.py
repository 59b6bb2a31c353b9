"""Move and move-result value objects."""

from __future__ import annotations

from dataclasses import dataclass

from blitzboard.core.enums import PieceKind
from blitzboard.core.types import Square, square_name


@dataclass(frozen=True, slots=True)
class Move:
    """Immutable value object representing a single chess move."""

    origin: Square
    destination: Square
    promotion: PieceKind | None = None

    def __str__(self) -> str:
        base = f"{square_name(self.origin)}{square_name(self.destination)}"
        if self.promotion is not None:
            base += self.promotion.letter
        return base

    @property
    def uci(self) -> str:
        """UCI long-algebraic notation."""
        return str(self)


@dataclass(frozen=True, slots=True)
class MoveResult:
    """Outcome of applying a move: the move itself and what it captured."""

    move: Move
    captured: PieceKind | None = None

    @property
    def is_capture(self) -> bool:
        return self.captured is not None
