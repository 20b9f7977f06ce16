"""
Typical positional plans and attacking patterns.

    - Minority attack: a queenside pawn minority advancing against a majority
    - Rook on an open file / on the 7th rank
    - Opposite castling and the pawn storms it invites
"""

import chess
from typing import Optional

from imbalance_engine.board.geometry import (
    file_mask,
    forward,
    relative_rank,
    square_at,
)

QUEENSIDE = "queenside"
KINGSIDE = "kingside"

BB_QUEENSIDE_FILES = chess.BB_FILE_A | chess.BB_FILE_B | chess.BB_FILE_C

# Storm files per wing; the middle file (b or g) storms hardest
STORM_FILES = {
    KINGSIDE: (5, 6, 7),
    QUEENSIDE: (2, 1, 0),
}

STORM_PAWN_VALUE = 5


def detect_minority_attack(board: chess.Board, side: chess.Color) -> bool:
    """One or two a-c pawns facing a larger enemy pawn group on those files."""
    own = chess.popcount(board.pieces_mask(chess.PAWN, side) & BB_QUEENSIDE_FILES)
    opp = chess.popcount(board.pieces_mask(chess.PAWN, not side) & BB_QUEENSIDE_FILES)
    return 1 <= own <= 2 and own < opp


def detect_rook_on_open_file(board: chess.Board, side: chess.Color) -> bool:
    """A rook stands on a file free of its own pawns."""
    pawns = board.pieces_mask(chess.PAWN, side)
    for rook in board.pieces(chess.ROOK, side):
        if not pawns & file_mask(chess.square_file(rook)):
            return True
    return False


def detect_rook_on_7th(board: chess.Board, side: chess.Color) -> bool:
    return any(relative_rank(side, rook) == 6 for rook in board.pieces(chess.ROOK, side))


def king_wing(board: chess.Board, side: chess.Color) -> Optional[str]:
    """Wing the king has settled on (near its back rank), if any."""
    king = board.king(side)
    if king is None or relative_rank(side, king) > 1:
        return None
    file = chess.square_file(king)
    if file <= 2:
        return QUEENSIDE
    if file >= 5:
        return KINGSIDE
    return None


def detect_opposite_castling(board: chess.Board) -> bool:
    """Both sides have given up castling and their kings sit on opposite wings."""
    if board.has_castling_rights(chess.WHITE) or board.has_castling_rights(chess.BLACK):
        return False
    white_wing = king_wing(board, chess.WHITE)
    black_wing = king_wing(board, chess.BLACK)
    return white_wing is not None and black_wing is not None and white_wing != black_wing


def count_pawn_storm(board: chess.Board, side: chess.Color) -> int:
    """
    Count storm potential of ``side``'s pawns against the enemy king's wing.

    A pawn on its home square with a free square ahead scores 3, a pawn one
    step up scores 2; the middle storm file adds 1.
    """
    wing = king_wing(board, not side)
    if wing is None:
        return 0

    pawns = board.pieces_mask(chess.PAWN, side)
    storm = 0
    for index, file in enumerate(STORM_FILES[wing]):
        middle = 1 if index == 1 else 0
        for square in chess.SquareSet(pawns & file_mask(file)):
            rank = relative_rank(side, square)
            if rank == 1:
                ahead = square_at(file, chess.square_rank(square) + forward(side))
                if not pawns & chess.BB_SQUARES[ahead]:
                    storm += 3 + middle
            elif rank == 2:
                storm += 2 + middle
    return storm


def evaluate_pawn_storm(board: chess.Board, side: chess.Color) -> int:
    """Pawn storm bonus, only with opposite castling."""
    if not detect_opposite_castling(board):
        return 0
    return count_pawn_storm(board, side) * STORM_PAWN_VALUE


def is_king_vulnerable_to_storm(board: chess.Board, side: chess.Color) -> bool:
    """Opposite castling and the enemy has storm pawns on this king's wing."""
    if not detect_opposite_castling(board):
        return False
    return count_pawn_storm(board, not side) > 0
