"""Bot decision engine."""

from blitzboard.engine.greedy import (
    PIECE_VALUES,
    GreedyMaterialEngine,
    material_balance,
    material_total,
)
from blitzboard.engine.search import IEngine, SearchResult

__all__ = [
    "PIECE_VALUES",
    "GreedyMaterialEngine",
    "IEngine",
    "SearchResult",
    "material_balance",
    "material_total",
]
