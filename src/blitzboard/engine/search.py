"""Shared engine models and protocol."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Protocol

if TYPE_CHECKING:
    from blitzboard.core.move import Move
    from blitzboard.rules.position import Position


@dataclass(slots=True, frozen=True)
class SearchResult:
    """Result produced by a move choice."""

    best_move: Move | None
    score: int
    nodes: int


class IEngine(Protocol):
    """Protocol for the bot engines used by the match controller."""

    def choose_move(self, position: Position) -> SearchResult: ...
