"""
Unit Tests for Sacrifices, Typical Plans and Conversion

Tests for:
    - Exchange sacrifice detection and its discount
    - Pawn sacrifice justification
    - Minority attack, rooks on open files and the 7th rank
    - Opposite castling and pawn storms
    - Conversion mode
"""

import chess

from imbalance_engine.analysis.conversion import evaluate_conversion_mode
from imbalance_engine.analysis.models import ImbalanceAnalysis
from imbalance_engine.analysis.plans import (
    KINGSIDE,
    QUEENSIDE,
    count_pawn_storm,
    detect_minority_attack,
    detect_opposite_castling,
    detect_rook_on_7th,
    detect_rook_on_open_file,
    evaluate_pawn_storm,
    is_king_vulnerable_to_storm,
    king_wing,
)
from imbalance_engine.analysis.sacrifice import (
    detect_exchange_sacrifice,
    exchange_sacrifice_value,
    pawn_sacrifice_value,
)

# White: rook + two minors, Black: two rooks + one minor
EXCHANGE_SAC_FEN = "r2bk2r/8/8/8/8/8/8/R1N1KB2 w - - 0 1"

# White king on c1, Black king on g8; both sides have storm pawns
STORM_FEN = "6k1/1p3ppp/p7/8/8/8/PPP3PP/2K5 w - - 0 1"


class TestSacrifices:
    """Tests for sacrifice detection and valuation."""

    def test_exchange_sacrifice_detected(self):
        """One rook deficit (500) minus one minor surplus (330)."""
        board = chess.Board(EXCHANGE_SAC_FEN)

        detected, discount = detect_exchange_sacrifice(board, chess.WHITE)
        assert detected
        assert discount == 170

    def test_exchange_sacrifice_not_detected_for_other_side(self):
        board = chess.Board(EXCHANGE_SAC_FEN)

        assert detect_exchange_sacrifice(board, chess.BLACK) == (False, 0)

    def test_starting_position_no_sacrifice(self):
        board = chess.Board()

        assert detect_exchange_sacrifice(board, chess.WHITE) == (False, 0)
        assert detect_exchange_sacrifice(board, chess.BLACK) == (False, 0)

    def test_exchange_sacrifice_value(self):
        """Rook still on the back rank, enemy king safe at home."""
        board = chess.Board(EXCHANGE_SAC_FEN)

        assert exchange_sacrifice_value(board, chess.WHITE) == 30

    def test_exchange_sacrifice_value_exposed_king(self):
        board = chess.Board("r2b3r/4k3/8/8/8/8/8/R1N1KB2 w - - 0 1")

        assert exchange_sacrifice_value(board, chess.WHITE) == 80

    def test_pawn_sacrifice_value_white(self):
        analysis = ImbalanceAnalysis(development=60, initiative=5, space=25)

        assert pawn_sacrifice_value(analysis, chess.WHITE) == 70
        assert pawn_sacrifice_value(analysis, chess.BLACK) == 0

    def test_pawn_sacrifice_value_black(self):
        analysis = ImbalanceAnalysis(development=-40, initiative=-1, space=0)

        assert pawn_sacrifice_value(analysis, chess.BLACK) == 50


class TestPlans:
    """Tests for typical plan detection."""

    def test_minority_attack(self):
        board = chess.Board("4k3/ppp5/8/8/8/8/PP6/4K3 w - - 0 1")

        assert detect_minority_attack(board, chess.WHITE)
        assert not detect_minority_attack(board, chess.BLACK)

    def test_no_minority_attack_at_start(self):
        board = chess.Board()

        assert not detect_minority_attack(board, chess.WHITE)

    def test_rook_on_open_file(self):
        board = chess.Board("4k3/8/8/8/8/8/1P6/R3K3 w - - 0 1")

        assert detect_rook_on_open_file(board, chess.WHITE)
        assert not detect_rook_on_open_file(chess.Board(), chess.WHITE)

    def test_rook_on_7th(self):
        board = chess.Board("4k3/R7/8/8/8/8/8/4K3 w - - 0 1")

        assert detect_rook_on_7th(board, chess.WHITE)
        assert not detect_rook_on_7th(chess.Board(), chess.WHITE)

    def test_black_rook_on_2nd_rank(self):
        board = chess.Board("4k3/8/8/8/8/8/r7/4K3 w - - 0 1")

        assert detect_rook_on_7th(board, chess.BLACK)


class TestOppositeCastling:
    """Tests for opposite castling and pawn storms."""

    def test_king_wing(self):
        board = chess.Board(STORM_FEN)

        assert king_wing(board, chess.WHITE) == QUEENSIDE
        assert king_wing(board, chess.BLACK) == KINGSIDE

    def test_central_king_has_no_wing(self):
        board = chess.Board("4k3/8/8/8/8/8/8/4K3 w - - 0 1")

        assert king_wing(board, chess.WHITE) is None

    def test_opposite_castling_detected(self):
        assert detect_opposite_castling(chess.Board(STORM_FEN))

    def test_no_opposite_castling_with_castling_rights(self):
        assert not detect_opposite_castling(chess.Board())

    def test_same_wing_is_not_opposite(self):
        board = chess.Board("6k1/5ppp/8/8/8/8/5PPP/6K1 w - - 0 1")

        assert not detect_opposite_castling(board)

    def test_pawn_storm_counts(self):
        """
        White: g2 (home, middle file) 4 + h2 (home) 3.
        Black: b7 (home, middle file) 4 + a6 (one step up) 2.
        """
        board = chess.Board(STORM_FEN)

        assert count_pawn_storm(board, chess.WHITE) == 7
        assert count_pawn_storm(board, chess.BLACK) == 6
        assert evaluate_pawn_storm(board, chess.WHITE) == 35
        assert evaluate_pawn_storm(board, chess.BLACK) == 30

    def test_pawn_storm_needs_opposite_castling(self):
        board = chess.Board("6k1/5ppp/8/8/8/8/5PPP/6K1 w - - 0 1")

        assert evaluate_pawn_storm(board, chess.WHITE) == 0
        assert not is_king_vulnerable_to_storm(board, chess.WHITE)

    def test_kings_vulnerable_to_storm(self):
        board = chess.Board(STORM_FEN)

        assert is_king_vulnerable_to_storm(board, chess.WHITE)
        assert is_king_vulnerable_to_storm(board, chess.BLACK)


class TestConversionMode:
    """Tests for evaluate_conversion_mode."""

    def test_static_advantage_converts(self):
        """Up a rook with no initiative: trade down with the extra heavy piece."""
        board = chess.Board("4k3/pppppppp/8/8/8/8/PPPPPPPP/R3K3 b - - 0 1")

        assert evaluate_conversion_mode(board, chess.WHITE) == 20
        assert evaluate_conversion_mode(board, chess.BLACK) == 0

    def test_balanced_position(self):
        board = chess.Board()

        assert evaluate_conversion_mode(board, chess.WHITE) == 0
        assert evaluate_conversion_mode(board, chess.BLACK) == 0
