"""
Sacrifice valuation.

Estimates whether a material deficit is compensated:
    - Exchange sacrifice: a rook given for a minor piece
    - Pawn sacrifice: a pawn given for development, initiative or space
"""

import chess
from typing import Tuple

from imbalance_engine.analysis.king_safety import is_king_exposed
from imbalance_engine.analysis.models import ImbalanceAnalysis
from imbalance_engine.board.geometry import MINOR_PIECES, back_rank_mask, piece_mask

ROOK_VALUE = 500
MINOR_VALUE = 330


def detect_exchange_sacrifice(board: chess.Board, side: chess.Color) -> Tuple[bool, int]:
    """
    Detect an exchange sacrifice (fewer rooks, more minor pieces).

    Args:
        board: Position to analyze
        side: The side that may have sacrificed the exchange

    Returns:
        Tuple of (detected, discount) where discount is
        rook deficit * 500 - minor surplus * 330, from ``side``'s point of view
        (0 when nothing is detected)
    """
    rooks = len(board.pieces(chess.ROOK, side))
    opp_rooks = len(board.pieces(chess.ROOK, not side))
    minors = chess.popcount(piece_mask(board, side, *MINOR_PIECES))
    opp_minors = chess.popcount(piece_mask(board, not side, *MINOR_PIECES))

    if rooks < opp_rooks and minors > opp_minors:
        discount = (opp_rooks - rooks) * ROOK_VALUE - (minors - opp_minors) * MINOR_VALUE
        return True, discount
    return False, 0


def exchange_sacrifice_value(board: chess.Board, side: chess.Color) -> int:
    """Compensation for the exchange: +30 for a rook still guarding the back rank, +50 if the enemy king is exposed."""
    value = 0
    if board.pieces_mask(chess.ROOK, side) & back_rank_mask(side):
        value += 30
    if is_king_exposed(board, not side):
        value += 50
    return value


def pawn_sacrifice_value(analysis: ImbalanceAnalysis, side: chess.Color) -> int:
    """
    Justification for a pawn sacrifice, read from the imbalance differentials.

    +20 for a development edge over 30, +30 when the initiative favours the
    side, +20 for a space edge over 20.
    """
    sign = 1 if side == chess.WHITE else -1
    value = 0
    if sign * analysis.development > 30:
        value += 20
    if sign * analysis.initiative > 0:
        value += 30
    if sign * analysis.space > 20:
        value += 20
    return value
