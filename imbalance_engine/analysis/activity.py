"""
Piece Activity Analysis

Scores knights, bishops, rooks and queens by where they stand:
    1. Central distance bonus: (7 - Manhattan distance to d4), scaled per piece
    2. Static tables: knight outposts, bishop diagonals, rook on the 7th
    3. Context: bishop pair, rook on (half-)open file, early queen sorties

Tables are written from White's point of view (row 0 = rank 8, row 7 = rank 1)
and looked up through the side-relative square, so Black's pieces score the
same as White's mirrored pieces.
"""

import chess
import numpy as np

from imbalance_engine.analysis.models import PieceActivity
from imbalance_engine.board.geometry import (
    MINOR_PIECES,
    back_rank_mask,
    file_mask,
    piece_mask,
    relative_center_distance,
    relative_rank,
    table_value,
)

#fmt: off
# Knight outposts: strongest on the central squares of ranks 4-5
KNIGHT_OUTPOST = np.array([
    [ -5,  -5,  -5,  -5,  -5,  -5,  -5,  -5],  # Rank 8
    [ -5,   0,   0,   0,   0,   0,   0,  -5],  # Rank 7
    [ -5,   0,   3,   5,   5,   3,   0,  -5],  # Rank 6
    [ -5,   0,   5,  10,  10,   5,   0,  -5],  # Rank 5
    [ -5,   0,   5,  10,  10,   5,   0,  -5],  # Rank 4
    [ -5,   0,   5,   5,   5,   5,   0,  -5],  # Rank 3
    [ -5,   0,   0,   0,   0,   0,   0,  -5],  # Rank 2
    [ -5,  -5,  -5,  -5,  -5,  -5,  -5,  -5],  # Rank 1
], dtype=np.int32)

# Bishops on the long diagonals through the centre
BISHOP_LONG_DIAGONAL = np.array([
    [  0,   0,   0,   0,   0,   0,   0,   0],
    [  0,   0,   5,   5,   5,   5,   0,   0],
    [  0,   0,   5,  10,  10,   5,   0,   0],
    [  0,   0,   5,  10,  15,   5,   0,   0],
    [  0,   0,   5,  10,  10,   5,   0,   0],
    [  0,   0,   5,   5,   5,   5,   0,   0],
    [  0,   0,   0,   0,   0,   0,   0,   0],
    [  0,   0,   0,   0,   0,   0,   0,   0],
], dtype=np.int32)

# Rook on the 7th rank
ROOK_7TH_RANK = np.array([
    [  0,   0,   0,   0,   0,   0,   0,   0],
    [ 10,  10,  10,  10,  10,  10,  10,  10],
    [  0,   0,   0,   0,   0,   0,   0,   0],
    [  0,   0,   0,   0,   0,   0,   0,   0],
    [  0,   0,   0,   0,   0,   0,   0,   0],
    [  0,   0,   0,   0,   0,   0,   0,   0],
    [  0,   0,   0,   0,   0,   0,   0,   0],
    [  0,   0,   0,   0,   0,   0,   0,   0],
], dtype=np.int32)
#fmt: on

BISHOP_PAIR_BONUS = 30
OPEN_FILE_BONUS = 20
HALF_OPEN_FILE_BONUS = 10
EARLY_QUEEN_PENALTY = 15

CENTRAL_SQUARES = chess.BB_D4 | chess.BB_E4 | chess.BB_D5 | chess.BB_E5


def _central_bonus(side: chess.Color, square: int, scale: int) -> int:
    return (7 - relative_center_distance(side, square)) * scale


def evaluate_knight(board: chess.Board, side: chess.Color, square: int) -> int:
    return table_value(KNIGHT_OUTPOST, side, square) + _central_bonus(side, square, 3)


def evaluate_bishop(board: chess.Board, side: chess.Color, square: int) -> int:
    score = table_value(BISHOP_LONG_DIAGONAL, side, square) + _central_bonus(side, square, 3)
    if len(board.pieces(chess.BISHOP, side)) >= 2:
        score += BISHOP_PAIR_BONUS
    return score


def evaluate_rook(board: chess.Board, side: chess.Color, square: int) -> int:
    """7th-rank bonus plus +20 on an open file / +10 on a half-open file."""
    score = table_value(ROOK_7TH_RANK, side, square)

    column = file_mask(chess.square_file(square))
    own_pawns = board.pieces_mask(chess.PAWN, side)
    opp_pawns = board.pieces_mask(chess.PAWN, not side)
    if not (own_pawns | opp_pawns) & column:
        score += OPEN_FILE_BONUS
    elif not own_pawns & column:
        score += HALF_OPEN_FILE_BONUS
    return score


def evaluate_queen(board: chess.Board, side: chess.Color, square: int) -> int:
    """Central queens are good, but not while the minors are still at home."""
    score = _central_bonus(side, square, 4)
    undeveloped = piece_mask(board, side, *MINOR_PIECES) & back_rank_mask(side)
    if relative_rank(side, square) > 3 and undeveloped:
        score -= EARLY_QUEEN_PENALTY
    return score


def analyze_piece_activity(board: chess.Board, side: chess.Color) -> PieceActivity:
    """
    Analyze piece activity for one side.

    Flags follow the per-piece scores: knight > 10 is an outpost, bishop > 10
    sits on a long diagonal, rook > 15 counts as on the 7th and rook >= 20 as
    on an open file.

    Args:
        board: Position to analyze
        side: chess.WHITE or chess.BLACK

    Returns:
        PieceActivity for the side (pawns and king are not scored)
    """
    pa = PieceActivity()

    for square in board.pieces(chess.KNIGHT, side):
        value = evaluate_knight(board, side, square)
        pa.knight_activity += value
        if value > 10:
            pa.has_outpost_knight = True

    for square in board.pieces(chess.BISHOP, side):
        value = evaluate_bishop(board, side, square)
        pa.bishop_activity += value
        if value > 10:
            pa.has_bishop_long_diagonal = True

    for square in board.pieces(chess.ROOK, side):
        value = evaluate_rook(board, side, square)
        pa.rook_activity += value
        if value > 15:
            pa.has_rook_7th_rank = True
        if value >= 20:
            pa.has_rook_open_file = True

    for square in board.pieces(chess.QUEEN, side):
        pa.queen_activity += evaluate_queen(board, side, square)
        if chess.BB_SQUARES[square] & CENTRAL_SQUARES:
            pa.has_queen_central = True

    pa.total_activity = (
        pa.knight_activity + pa.bishop_activity + pa.rook_activity + pa.queen_activity
    )
    return pa
