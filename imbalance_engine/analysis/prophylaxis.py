"""
Prophylaxis (Russian School)

Prophylaxis = preventing the opponent's ideas before they exist. The score
rewards a side for restricting the enemy king, for enemy minor pieces stuck
on the rim, and for central outposts the opponent does not control.

King mobility is estimated from board geometry only (squares around the
king that exist on the board), without attack generation.
"""

import chess

from imbalance_engine.board.geometry import (
    BB_CORNERS,
    BB_EDGES,
    BB_EXTENDED_CENTER,
    MINOR_PIECES,
    pawn_attack_mask,
    piece_mask,
)

RESTRICTED_MINOR_BONUS = 5
OUTPOST_DENIAL_BONUS = 2


def evaluate_prophylaxis(board: chess.Board, side: chess.Color) -> int:
    """
    Evaluate how well ``side`` restricts its opponent.

    Returns:
        (64 - squares around the enemy king) // 2
        + 5 per enemy minor on a corner/edge square
        + 2 per central outpost square the enemy does not control
    """
    score = 0
    opp = not side

    opp_king = board.king(opp)
    if opp_king is not None:
        score += (64 - chess.popcount(chess.BB_KING_ATTACKS[opp_king])) // 2

    opp_minors = piece_mask(board, opp, *MINOR_PIECES)
    score += chess.popcount(opp_minors & (BB_CORNERS | BB_EDGES)) * RESTRICTED_MINOR_BONUS

    opp_pawns = board.pieces_mask(chess.PAWN, opp)
    opp_control = opp_pawns | opp_minors | pawn_attack_mask(opp_pawns, opp)
    score += chess.popcount(BB_EXTENDED_CENTER & ~opp_control) * OUTPOST_DENIAL_BONUS

    return score
