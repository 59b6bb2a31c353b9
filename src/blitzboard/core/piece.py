"""Piece value object."""

from __future__ import annotations

from dataclasses import dataclass

from blitzboard.core.enums import Color, PieceKind


@dataclass(frozen=True, slots=True)
class Piece:
    """Immutable value object representing a chess piece."""

    color: Color
    kind: PieceKind

    def __str__(self) -> str:
        """FEN character (uppercase = white, lowercase = black)."""
        letter = self.kind.letter
        return letter.upper() if self.color == Color.WHITE else letter
