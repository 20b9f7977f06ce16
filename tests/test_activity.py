"""
Unit Tests for Piece Activity and King Safety

Tests for the per-piece activity scores, the activity flags and the king
safety heuristics. Black pieces are scored through mirrored tables, so the
starting position must come out symmetric.
"""

import chess
import pytest

from imbalance_engine.analysis.activity import (
    analyze_piece_activity,
    evaluate_bishop,
    evaluate_knight,
    evaluate_queen,
    evaluate_rook,
)
from imbalance_engine.analysis.king_safety import evaluate_king_safety, is_king_exposed


class TestPieceActivity:
    """Tests for piece activity scoring."""

    def test_starting_position_symmetric(self):
        board = chess.Board()

        white = analyze_piece_activity(board, chess.WHITE)
        black = analyze_piece_activity(board, chess.BLACK)

        assert white.total_activity == black.total_activity
        assert white.knight_activity == black.knight_activity
        assert white.rook_activity == black.rook_activity

    def test_central_knight(self):
        """Knight on d4: outpost table 10 + (7 - 0) * 3."""
        board = chess.Board("4k3/8/8/8/3N4/8/8/4K3 w - - 0 1")

        assert evaluate_knight(board, chess.WHITE, chess.D4) == 31
        assert analyze_piece_activity(board, chess.WHITE).has_outpost_knight

    def test_knight_on_the_rim(self):
        board = chess.Board("4k3/8/8/8/8/8/8/N3K3 w - - 0 1")

        assert evaluate_knight(board, chess.WHITE, chess.A1) == -2
        assert not analyze_piece_activity(board, chess.WHITE).has_outpost_knight

    def test_black_knight_mirrors_white(self):
        """A Black knight on d5 scores like a White knight on d4."""
        board = chess.Board("4k3/8/8/3n4/8/8/8/4K3 w - - 0 1")

        assert evaluate_knight(board, chess.BLACK, chess.D5) == 31

    def test_bishop_pair_bonus(self):
        single = chess.Board("4k3/8/8/8/8/8/8/2B1K3 w - - 0 1")
        pair = chess.Board("4k3/8/8/8/8/8/8/2B1KB2 w - - 0 1")

        assert evaluate_bishop(single, chess.WHITE, chess.C1) == 9
        assert evaluate_bishop(pair, chess.WHITE, chess.C1) == 39

    def test_rook_file_bonuses(self):
        """+20 on a fully open file, +10 on a half-open file, 0 otherwise."""
        open_file = chess.Board("4k3/8/8/8/8/8/8/R3K3 w - - 0 1")
        half_open = chess.Board("4k3/p7/8/8/8/8/8/R3K3 w - - 0 1")
        closed = chess.Board("4k3/p7/8/8/8/8/P7/R3K3 w - - 0 1")

        assert evaluate_rook(open_file, chess.WHITE, chess.A1) == 20
        assert evaluate_rook(half_open, chess.WHITE, chess.A1) == 10
        assert evaluate_rook(closed, chess.WHITE, chess.A1) == 0

    def test_rook_on_seventh_and_open_file(self):
        board = chess.Board("4k3/R7/8/8/8/8/8/4K3 w - - 0 1")

        assert evaluate_rook(board, chess.WHITE, chess.A7) == 30
        activity = analyze_piece_activity(board, chess.WHITE)
        assert activity.has_rook_7th_rank
        assert activity.has_rook_open_file

    def test_early_queen_penalty(self):
        """Queen on d5 with the b1 knight still at home loses 15."""
        early = chess.Board("4k3/8/8/3Q4/8/8/8/1N2K3 w - - 0 1")
        developed = chess.Board("4k3/8/8/3Q4/8/8/8/4K3 w - - 0 1")

        assert evaluate_queen(early, chess.WHITE, chess.D5) == 9
        assert evaluate_queen(developed, chess.WHITE, chess.D5) == 24

    def test_central_queen_flag(self):
        board = chess.Board("4k3/8/8/3Q4/8/8/8/4K3 w - - 0 1")

        assert analyze_piece_activity(board, chess.WHITE).has_queen_central
        assert not analyze_piece_activity(chess.Board(), chess.WHITE).has_queen_central

    def test_total_is_sum_of_pieces(self):
        board = chess.Board("r1bqk1nr/pppp1ppp/2n5/2b1p3/2B1P3/5N2/PPPP1PPP/RNBQK2R w KQkq - 4 4")
        pa = analyze_piece_activity(board, chess.WHITE)

        assert pa.total_activity == (
            pa.knight_activity + pa.bishop_activity + pa.rook_activity + pa.queen_activity
        )


class TestKingSafety:
    """Tests for king exposure and king safety."""

    def test_castling_rights_are_safe(self):
        board = chess.Board()

        assert evaluate_king_safety(board, chess.WHITE) == 20
        assert evaluate_king_safety(board, chess.BLACK) == 20
        assert not is_king_exposed(board, chess.WHITE)

    def test_wandering_king(self):
        """King on e2 without castling rights: -25 off the back rank, -10 on the e-file."""
        board = chess.Board("4k3/8/8/8/8/8/4K3/8 w - - 0 1")

        assert evaluate_king_safety(board, chess.WHITE) == -35
        assert is_king_exposed(board, chess.WHITE)
        assert not is_king_exposed(board, chess.BLACK)

    def test_castled_king_with_shield(self):
        board = chess.Board("4k3/8/8/8/8/8/5PPP/6K1 w - - 0 1")

        assert evaluate_king_safety(board, chess.WHITE) == 15
        assert not is_king_exposed(board, chess.WHITE)

    def test_black_king_shield(self):
        board = chess.Board("6k1/5ppp/8/8/8/8/8/4K3 w - - 0 1")

        assert evaluate_king_safety(board, chess.BLACK) == 15

    @pytest.mark.parametrize("fen", [
        chess.STARTING_FEN,
        "r1bqk1nr/pppp1ppp/2n5/2b1p3/2B1P3/5N2/PPPP1PPP/RNBQK2R w KQkq - 4 4",
        "6k1/1p3ppp/p7/8/8/8/PPP3PP/2K5 w - - 0 1",
    ])
    def test_mirror_symmetry(self, fen):
        board = chess.Board(fen)
        mirrored = board.mirror()

        assert evaluate_king_safety(board, chess.WHITE) == evaluate_king_safety(mirrored, chess.BLACK)
        assert (
            analyze_piece_activity(board, chess.WHITE).total_activity
            == analyze_piece_activity(mirrored, chess.BLACK).total_activity
        )
