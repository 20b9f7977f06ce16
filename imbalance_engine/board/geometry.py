"""
Square Geometry Helpers

This module provides the small square and mask helpers shared by every
imbalance analyzer. The board itself is a python-chess Board; the analyzers
only read its occupancy masks, king squares, castling rights and side to move.

Conventions:
    - Square index 0-63 where 0=A1, 63=H8 (python-chess numbering)
    - file = square % 8, rank = square // 8
    - "Relative" ranks/squares are mirrored for Black so that rank 0 is
      always the side's own back rank

Table Orientation:
    Static tables are numpy arrays laid out like the board diagram:
    - Row 0 = Rank 8
    - Row 7 = Rank 1
    - Column 0 = A-file
"""

import chess
import numpy as np
from typing import Optional, Tuple

MINOR_PIECES = (chess.KNIGHT, chess.BISHOP)
NON_PAWN_PIECES = (chess.KNIGHT, chess.BISHOP, chess.ROOK, chess.QUEEN)

# Ring of squares around the board
BB_EDGES = chess.BB_RANK_1 | chess.BB_RANK_8 | chess.BB_FILE_A | chess.BB_FILE_H
BB_CORNERS = chess.BB_A1 | chess.BB_H1 | chess.BB_A8 | chess.BB_H8

# c4-f4 / c5-f5 block, symmetric under colour mirroring
BB_EXTENDED_CENTER = (
    chess.BB_C4 | chess.BB_D4 | chess.BB_E4 | chess.BB_F4 |
    chess.BB_C5 | chess.BB_D5 | chess.BB_E5 | chess.BB_F5
)


def square_to_coordinates(square: int) -> Tuple[int, int]:
    """
    Convert python-chess square index to (row, column) table coordinates.

    Args:
        square: Square index (0-63) where 0=A1, 63=H8

    Returns:
        Tuple of (row, col) where row 0 = rank 8 and col 0 = A-file
    """
    return 7 - chess.square_rank(square), chess.square_file(square)


def relative_rank(side: chess.Color, square: int) -> int:
    """Rank counted from the side's own back rank (0-7)."""
    rank = chess.square_rank(square)
    return rank if side == chess.WHITE else 7 - rank


def relative_square(side: chess.Color, square: int) -> int:
    """Square seen from White's point of view (vertical mirror for Black)."""
    return square if side == chess.WHITE else chess.square_mirror(square)


def table_value(table: np.ndarray, side: chess.Color, square: int) -> int:
    """Look up a White-oriented table for either side."""
    row, col = square_to_coordinates(relative_square(side, square))
    return int(table[row, col])


def forward(side: chess.Color) -> int:
    """Rank step towards the enemy camp."""
    return 1 if side == chess.WHITE else -1


def square_at(file: int, rank: int) -> Optional[int]:
    """Square for (file, rank), or None when off the board."""
    if 0 <= file < 8 and 0 <= rank < 8:
        return chess.square(file, rank)
    return None


def back_rank_mask(side: chess.Color) -> int:
    return chess.BB_RANK_1 if side == chess.WHITE else chess.BB_RANK_8


def file_mask(file: int) -> int:
    return chess.BB_FILES[file]


def pawn_attack_mask(pawns: int, side: chess.Color) -> int:
    """Squares attacked by a set of pawns of the given side."""
    if side == chess.WHITE:
        return (
            ((pawns & ~chess.BB_FILE_A) << 7) | ((pawns & ~chess.BB_FILE_H) << 9)
        ) & chess.BB_ALL
    return (
        ((pawns & ~chess.BB_FILE_A) >> 9) | ((pawns & ~chess.BB_FILE_H) >> 7)
    )


def pawn_attackers_of(pawns: int, side: chess.Color, square: int) -> int:
    """Number of pawns of ``side`` (given as a mask) attacking ``square``."""
    file, rank = chess.square_file(square), chess.square_rank(square)
    count = 0
    for df in (-1, 1):
        origin = square_at(file + df, rank - forward(side))
        if origin is not None and pawns & chess.BB_SQUARES[origin]:
            count += 1
    return count


def center_distance(square: int) -> int:
    """Manhattan distance to d4."""
    return abs(chess.square_file(square) - 3) + abs(chess.square_rank(square) - 3)


def relative_center_distance(side: chess.Color, square: int) -> int:
    """Manhattan distance to the side's own d4 (d5 for Black)."""
    return center_distance(relative_square(side, square))


def piece_mask(board: chess.Board, side: chess.Color, *piece_types: int) -> int:
    """Union of occupancy masks for several piece types of one side."""
    mask = 0
    for piece_type in piece_types:
        mask |= board.pieces_mask(piece_type, side)
    return mask
