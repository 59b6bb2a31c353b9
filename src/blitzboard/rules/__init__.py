"""Rules-engine adapter: legal moves, move application, terminal queries."""

from blitzboard.rules.position import STARTING_FEN, DrawReason, Position

__all__ = ["STARTING_FEN", "DrawReason", "Position"]
