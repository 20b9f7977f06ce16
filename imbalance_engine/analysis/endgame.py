"""
Endgame Principles (Shereshevsky)

    1. King centrality: kings should head for the centre in the endgame
    2. The opposition: who has to give way in king-vs-king standoffs
    3. Rook placement: rook behind its pawn, on the opposite square colour
    4. "Do not hurry": patience pays in pure pawn endings

Sign convention for the opposition: the White query is positive when White
holds the opposition, the Black query returns the negation.
"""

import chess
import numpy as np

from imbalance_engine.analysis.models import OppositionType
from imbalance_engine.board.geometry import (
    NON_PAWN_PIECES,
    center_distance,
    forward,
    piece_mask,
    square_at,
    table_value,
)

#fmt: off
# Key squares for the king: d/e files, ranks 4-6 (White's point of view)
KEY_SQUARES = np.array([
    [  0,   0,   0,   0,   0,   0,   0,   0],  # Rank 8
    [  0,   0,   0,   0,   0,   0,   0,   0],  # Rank 7
    [  0,   0,   0,   5,   5,   0,   0,   0],  # Rank 6
    [  0,   0,   0,   5,   5,   0,   0,   0],  # Rank 5
    [  0,   0,   0,   5,   5,   0,   0,   0],  # Rank 4
    [  0,   0,   0,   0,   0,   0,   0,   0],  # Rank 3
    [  0,   0,   0,   0,   0,   0,   0,   0],  # Rank 2
    [  0,   0,   0,   0,   0,   0,   0,   0],  # Rank 1
], dtype=np.int32)
#fmt: on

OPPOSITION_VALUES = {
    OppositionType.DIRECT: 30,
    OppositionType.DISTANT: 15,
    OppositionType.DIAGONAL: 10,
}

CORRECT_ROOK_BONUS = 15
WRONG_ROOK_PENALTY = 25
PATIENCE_BONUS = 40


def evaluate_endgame_king(board: chess.Board, side: chess.Color) -> int:
    """
    King centrality: +10 per step the king is closer to d4 than the enemy
    king, plus the key-square bonus.
    """
    king, opp_king = board.king(side), board.king(not side)
    if king is None or opp_king is None:
        return 0

    distance = center_distance(king)
    opp_distance = center_distance(opp_king)

    bonus = 0
    if distance < opp_distance:
        bonus = (opp_distance - distance) * 10

    bonus += table_value(KEY_SQUARES, side, king)
    return bonus


def get_opposition_type(board: chess.Board) -> OppositionType:
    """
    Classify the kings' relationship by the number of squares between them
    (the gap is the file or rank difference minus one), not by the
    difference itself.

    Same rank or file with an odd gap is direct opposition (e1/e3), an even
    gap of two or more is distant opposition (e1/e4); a shared diagonal with
    an odd gap is diagonal opposition (e1/g3).
    """
    white_king, black_king = board.king(chess.WHITE), board.king(chess.BLACK)
    if white_king is None or black_king is None:
        return OppositionType.NONE

    file_diff = abs(chess.square_file(white_king) - chess.square_file(black_king))
    rank_diff = abs(chess.square_rank(white_king) - chess.square_rank(black_king))

    if file_diff == rank_diff and file_diff > 0:
        gap = file_diff - 1
        return OppositionType.DIAGONAL if gap % 2 == 1 else OppositionType.NONE

    if (file_diff == 0) != (rank_diff == 0):
        gap = file_diff + rank_diff - 1
        if gap % 2 == 1:
            return OppositionType.DIRECT
        if gap >= 2:
            return OppositionType.DISTANT

    return OppositionType.NONE


def evaluate_opposition(board: chess.Board, side: chess.Color) -> int:
    """
    Score the opposition for ``side``.

    The side that is NOT to move holds the opposition: direct 30, distant 15,
    diagonal 10.
    """
    value = OPPOSITION_VALUES.get(get_opposition_type(board), 0)
    holder = not board.turn
    white_view = value if holder == chess.WHITE else -value
    return white_view if side == chess.WHITE else -white_view


def evaluate_rook_placement(board: chess.Board, side: chess.Color) -> int:
    """
    Right rook's back: for each rook, the nearest friendly pawn ahead on its
    file should stand on the opposite square colour.

    Returns:
        +15 per correctly placed rook, -25 per "wrong rook"
    """
    score = 0
    pawns = board.pieces_mask(chess.PAWN, side)

    for rook in board.pieces(chess.ROOK, side):
        file, rank = chess.square_file(rook), chess.square_rank(rook)
        step = forward(side)
        r = rank + step
        while 0 <= r < 8:
            square = square_at(file, r)
            if pawns & chess.BB_SQUARES[square]:
                rook_color = (file + rank) % 2
                pawn_color = (file + r) % 2
                if rook_color != pawn_color:
                    score += CORRECT_ROOK_BONUS
                else:
                    score -= WRONG_ROOK_PENALTY
                break
            r += step

    return score


def evaluate_patience(board: chess.Board, side: chess.Color) -> int:
    """
    "Do not hurry": in a pure pawn ending, holding direct opposition while
    being the side to move is worth +40.
    """
    pieces = piece_mask(board, chess.WHITE, *NON_PAWN_PIECES) | piece_mask(board, chess.BLACK, *NON_PAWN_PIECES)
    if pieces:
        return 0

    if get_opposition_type(board) == OppositionType.DIRECT and board.turn == side:
        return PATIENCE_BONUS
    return 0


def evaluate_endgame(board: chess.Board, side: chess.Color) -> int:
    """
    Comprehensive endgame score for one side.

    Returns:
        King centrality + opposition + rook placement + patience
    """
    return (
        evaluate_endgame_king(board, side)
        + evaluate_opposition(board, side)
        + evaluate_rook_placement(board, side)
        + evaluate_patience(board, side)
    )
