"""
King Safety

A king that can still castle is considered safe. Once the castling rights
are gone, the king is judged by its shelter: pawns directly in front of it,
whether it has left the back rank, and whether it is stuck on the centre files.
"""

import chess

from imbalance_engine.board.geometry import forward, relative_rank, square_at

CASTLING_BONUS = 20
LEFT_BACK_RANK_PENALTY = 25
PAWN_SHIELD_BONUS = 5
CENTER_FILE_PENALTY = 10


def is_king_exposed(board: chess.Board, side: chess.Color) -> bool:
    """No castling rights left and the king has walked off its back rank."""
    king = board.king(side)
    if king is None or board.has_castling_rights(side):
        return False
    return relative_rank(side, king) > 0


def evaluate_king_safety(board: chess.Board, side: chess.Color) -> int:
    king = board.king(side)
    if king is None:
        return 0
    if board.has_castling_rights(side):
        return CASTLING_BONUS

    score = 0
    if relative_rank(side, king) > 0:
        score -= LEFT_BACK_RANK_PENALTY

    pawns = board.pieces_mask(chess.PAWN, side)
    file, rank = chess.square_file(king), chess.square_rank(king)
    for df in (-1, 0, 1):
        shield = square_at(file + df, rank + forward(side))
        if shield is not None and pawns & chess.BB_SQUARES[shield]:
            score += PAWN_SHIELD_BONUS

    if file in (3, 4):
        score -= CENTER_FILE_PENALTY
    return score
