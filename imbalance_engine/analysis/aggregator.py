"""
Imbalance Aggregation (Silman-style)

Composes every analyzer into one ImbalanceAnalysis per position:

    material -> pawn structure -> piece activity -> space -> development
    -> initiative -> king safety -> flags -> sacrifices -> typical plans
    -> endgame block -> opposite castling / pawn storm -> style weighting

Deterministic and side-effect free; the style is taken from the argument or
config, never written. Always returns a fully populated record.
"""

import logging
from typing import Optional, Union

import chess

from imbalance_engine.analysis.activity import analyze_piece_activity
from imbalance_engine.analysis.endgame import evaluate_endgame, evaluate_opposition
from imbalance_engine.analysis.initiative import initiative_potential
from imbalance_engine.analysis.king_safety import evaluate_king_safety, is_king_exposed
from imbalance_engine.analysis.material import material_balance, total_material
from imbalance_engine.analysis.models import ImbalanceAnalysis, PawnStructure
from imbalance_engine.analysis.pawns import analyze_pawn_structure
from imbalance_engine.analysis.plans import (
    detect_minority_attack,
    detect_opposite_castling,
    detect_rook_on_7th,
    detect_rook_on_open_file,
    evaluate_pawn_storm,
    is_king_vulnerable_to_storm,
)
from imbalance_engine.analysis.sacrifice import detect_exchange_sacrifice, pawn_sacrifice_value
from imbalance_engine.analysis.style import apply_style_weighting
from imbalance_engine.board.geometry import NON_PAWN_PIECES, back_rank_mask, piece_mask
from imbalance_engine.config import EvaluationConfig, PlayingStyle, get_style

logger = logging.getLogger(__name__)

BB_WHITE_HALF = chess.BB_RANK_1 | chess.BB_RANK_2 | chess.BB_RANK_3 | chess.BB_RANK_4
BB_BLACK_HALF = chess.BB_RANK_5 | chess.BB_RANK_6 | chess.BB_RANK_7 | chess.BB_RANK_8

TEMPO_BONUS = 10
STORM_DISCOUNT = 30


def pawn_structure_differential(white: PawnStructure, black: PawnStructure) -> int:
    """Passed x30, isolated x25, backward x20, doubled x15, islands x10 (White's view)."""
    score = (white.passed_count - black.passed_count) * 30
    score -= (white.isolated_count - black.isolated_count) * 25
    score -= (white.backward_count - black.backward_count) * 20
    score -= (white.doubled_count - black.doubled_count) * 15
    score += (black.island_count - white.island_count) * 10
    return score


def _space(board: chess.Board) -> int:
    white = chess.popcount(board.occupied_co[chess.WHITE] & BB_WHITE_HALF)
    black = chess.popcount(board.occupied_co[chess.BLACK] & BB_BLACK_HALF)
    return (white - black) * 5


def _developed(board: chess.Board, side: chess.Color) -> int:
    return chess.popcount(piece_mask(board, side, *NON_PAWN_PIECES) & ~back_rank_mask(side))


def analyze_imbalances(
    board: chess.Board,
    style: Optional[Union[str, PlayingStyle]] = None,
    config: Optional[EvaluationConfig] = None,
) -> ImbalanceAnalysis:
    """
    Analyze the imbalances of a position.

    Args:
        board: Position to analyze (read only)
        style: Playing style for the discounts; overrides ``config.style``
        config: Evaluation settings (default: built from the process-wide style)

    Returns:
        ImbalanceAnalysis with every field populated
    """
    if config is None:
        config = EvaluationConfig(style=style if style is not None else get_style())
    style = PlayingStyle.parse(style) if style is not None else config.style

    ia = ImbalanceAnalysis()

    ia.material = material_balance(board)

    ia.white_pawns = analyze_pawn_structure(board, chess.WHITE)
    ia.black_pawns = analyze_pawn_structure(board, chess.BLACK)
    ia.pawn_structure = pawn_structure_differential(ia.white_pawns, ia.black_pawns)

    ia.white_activity = analyze_piece_activity(board, chess.WHITE)
    ia.black_activity = analyze_piece_activity(board, chess.BLACK)
    ia.activity = ia.white_activity.total_activity - ia.black_activity.total_activity

    ia.space = _space(board)
    ia.development = (_developed(board, chess.WHITE) - _developed(board, chess.BLACK)) * 30

    ia.initiative = TEMPO_BONUS if board.turn == chess.WHITE else -TEMPO_BONUS
    ia.initiative += initiative_potential(board, chess.WHITE) - initiative_potential(board, chess.BLACK)

    ia.king_safety = evaluate_king_safety(board, chess.WHITE) - evaluate_king_safety(board, chess.BLACK)

    ia.white_king_exposed = is_king_exposed(board, chess.WHITE)
    ia.black_king_exposed = is_king_exposed(board, chess.BLACK)
    ia.white_has_passed_pawn = ia.white_pawns.passed_count > 0
    ia.black_has_passed_pawn = ia.black_pawns.passed_count > 0
    ia.white_has_isolated = ia.white_pawns.isolated_count > 0
    ia.black_has_isolated = ia.black_pawns.isolated_count > 0
    ia.white_has_doubled = ia.white_pawns.doubled_count > 0
    ia.black_has_doubled = ia.black_pawns.doubled_count > 0

    # Sacrifices: discounts are signed for White
    for side, sign in ((chess.WHITE, 1), (chess.BLACK, -1)):
        detected, discount = detect_exchange_sacrifice(board, side)
        if detected:
            ia.exchange_sacrifice = True
            ia.exchange_discount = sign * discount

        # A pawn sacrifice needs fewer pawns, not just less material
        deficit = -sign * ia.material
        fewer_pawns = len(board.pieces(chess.PAWN, side)) < len(board.pieces(chess.PAWN, not side))
        if fewer_pawns and 100 <= deficit <= 200:
            justification = pawn_sacrifice_value(ia, side)
            if justification > 0:
                ia.pawn_sacrifice = True
                ia.pawn_sacrifice_discount = sign * justification

    ia.minority_attack = detect_minority_attack(board, chess.WHITE)
    ia.open_file = detect_rook_on_open_file(board, chess.WHITE)
    ia.rook_on_7th = detect_rook_on_7th(board, chess.WHITE)

    # Total material of both sides, not the material differential
    ia.is_endgame = total_material(board) < config.endgame_material_limit
    if ia.is_endgame:
        white_eg = evaluate_endgame(board, chess.WHITE)
        black_eg = evaluate_endgame(board, chess.BLACK)
        ia.king_activity_white = white_eg
        ia.king_activity_black = black_eg
        ia.opposition_status = evaluate_opposition(board, chess.WHITE)
        # King activity matters in endings
        ia.pawn_structure += int((white_eg - black_eg) / 5)

    ia.opposite_castling = detect_opposite_castling(board)
    if ia.opposite_castling:
        ia.pawn_storm = True
        ia.pawn_storm_strength = evaluate_pawn_storm(board, chess.WHITE) - evaluate_pawn_storm(board, chess.BLACK)
        ia.king_safety_discount = 0
        if is_king_vulnerable_to_storm(board, chess.WHITE):
            ia.king_safety_discount -= STORM_DISCOUNT
        if is_king_vulnerable_to_storm(board, chess.BLACK):
            ia.king_safety_discount += STORM_DISCOUNT

    apply_style_weighting(ia, style)

    if config.log_analysis:
        logger.debug(f"{board.fen()} [{style.value}] {ia.summary()}")

    return ia
