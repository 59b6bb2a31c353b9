"""Tests for the python-chess backed Position adapter."""

import pytest

from blitzboard.core.enums import Color, PieceKind
from blitzboard.core.piece import Piece
from blitzboard.core.types import parse_square as sq
from blitzboard.rules.position import STARTING_FEN, DrawReason, Position


def _play(position: Position, *moves: str) -> Position:
    for text in moves:
        applied = position.apply_move(sq(text[:2]), sq(text[2:4]))
        assert applied is not None, text
        position = applied[0]
    return position


class TestConstruction:
    def test_initial_position(self) -> None:
        pos = Position.initial()
        assert pos.fen() == STARTING_FEN
        assert pos.side_to_move() == Color.WHITE
        assert len(pos.pieces()) == 32

    def test_from_fen_roundtrip(self) -> None:
        fen = "rnbqkbnr/pppppppp/8/8/4P3/8/PPPP1PPP/RNBQKBNR b KQkq - 0 1"
        assert Position.from_fen(fen).side_to_move() == Color.BLACK

    def test_from_fen_rejects_garbage(self) -> None:
        with pytest.raises(ValueError):
            Position.from_fen("not a fen")

    def test_piece_at(self) -> None:
        pos = Position.initial()
        assert pos.piece_at(sq("e1")) == Piece(Color.WHITE, PieceKind.KING)
        assert pos.piece_at(sq("d8")) == Piece(Color.BLACK, PieceKind.QUEEN)
        assert pos.piece_at(sq("e4")) is None
        assert pos.piece_at(99) is None


class TestLegalTargets:
    def test_pawn_targets(self) -> None:
        pos = Position.initial()
        assert pos.legal_targets(sq("e2")) == {sq("e3"), sq("e4")}

    def test_knight_targets(self) -> None:
        pos = Position.initial()
        assert pos.legal_targets(sq("g1")) == {sq("f3"), sq("h3")}

    def test_empty_and_opponent_squares_have_no_targets(self) -> None:
        pos = Position.initial()
        assert pos.legal_targets(sq("e4")) == frozenset()
        assert pos.legal_targets(sq("e7")) == frozenset()

    def test_legal_moves_count_and_order_is_stable(self) -> None:
        pos = Position.initial()
        first = pos.legal_moves()
        assert len(first) == 20
        assert pos.copy().legal_moves() == first


class TestApplyMove:
    def test_apply_returns_new_position(self) -> None:
        pos = Position.initial()
        applied = pos.apply_move(sq("e2"), sq("e4"))
        assert applied is not None
        after, result = applied
        assert pos.fen() == STARTING_FEN
        assert after.side_to_move() == Color.BLACK
        assert result.captured is None
        assert str(result.move) == "e2e4"

    def test_illegal_move_rejected(self) -> None:
        pos = Position.initial()
        assert pos.apply_move(sq("e2"), sq("e5")) is None
        assert pos.apply_move(sq("e4"), sq("e5")) is None
        assert pos.apply_move(sq("e7"), sq("e5")) is None
        assert pos.apply_move(-1, 70) is None

    def test_capture_reports_kind(self) -> None:
        pos = _play(Position.initial(), "e2e4", "d7d5")
        applied = pos.apply_move(sq("e4"), sq("d5"))
        assert applied is not None
        assert applied[1].captured == PieceKind.PAWN

    def test_en_passant_reports_pawn(self) -> None:
        pos = _play(Position.initial(), "e2e4", "a7a6", "e4e5", "d7d5")
        applied = pos.apply_move(sq("e5"), sq("d6"))
        assert applied is not None
        after, result = applied
        assert result.captured == PieceKind.PAWN
        assert after.piece_at(sq("d5")) is None

    def test_promotion_defaults_to_queen(self) -> None:
        pos = Position.from_fen("8/P7/8/8/8/8/8/k6K w - - 0 1")
        applied = pos.apply_move(sq("a7"), sq("a8"))
        assert applied is not None
        after, result = applied
        assert result.move.promotion == PieceKind.QUEEN
        assert after.piece_at(sq("a8")) == Piece(Color.WHITE, PieceKind.QUEEN)

    def test_promotion_choice_honoured(self) -> None:
        pos = Position.from_fen("8/P7/8/8/8/8/8/k6K w - - 0 1")
        applied = pos.apply_move(sq("a7"), sq("a8"), PieceKind.KNIGHT)
        assert applied is not None
        assert applied[0].piece_at(sq("a8")) == Piece(Color.WHITE, PieceKind.KNIGHT)

    def test_promotion_ignored_for_ordinary_moves(self) -> None:
        applied = Position.initial().apply_move(sq("g1"), sq("f3"), PieceKind.ROOK)
        assert applied is not None
        assert applied[1].move.promotion is None

    def test_castling(self) -> None:
        pos = _play(Position.initial(), "e2e4", "e7e5", "g1f3", "b8c6", "f1c4", "g8f6")
        assert sq("g1") in pos.legal_targets(sq("e1"))
        after = _play(pos, "e1g1")
        assert after.piece_at(sq("f1")) == Piece(Color.WHITE, PieceKind.ROOK)


class TestTerminalQueries:
    def test_fools_mate(self) -> None:
        pos = _play(Position.initial(), "f2f3", "e7e5", "g2g4", "d8h4")
        assert pos.is_check()
        assert pos.is_checkmate()
        assert not pos.is_draw()

    def test_stalemate(self) -> None:
        pos = Position.from_fen("7k/5Q2/6K1/8/8/8/8/8 b - - 0 1")
        assert not pos.is_checkmate()
        assert pos.draw_reason() == DrawReason.STALEMATE
        assert pos.is_draw()

    def test_insufficient_material(self) -> None:
        pos = Position.from_fen("8/8/8/4k3/8/8/8/4K3 w - - 0 1")
        assert pos.draw_reason() == DrawReason.INSUFFICIENT_MATERIAL

    def test_fifty_move_rule(self) -> None:
        pos = Position.from_fen("8/8/8/4k3/8/8/R7/4K3 w - - 100 80")
        assert pos.draw_reason() == DrawReason.FIFTY_MOVES

    def test_threefold_repetition_survives_position_replacement(self) -> None:
        shuffle = ("g1f3", "g8f6", "f3g1", "f6g8")
        pos = _play(Position.initial(), *shuffle, *shuffle)
        assert pos.draw_reason() == DrawReason.THREEFOLD_REPETITION

    def test_opening_is_not_terminal(self) -> None:
        pos = Position.initial()
        assert not pos.is_check()
        assert not pos.is_checkmate()
        assert pos.draw_reason() is None
