"""
Move explanations.

Turns a finished ImbalanceAnalysis into short notes for a learner. Notes are
emitted in a fixed priority order from White's point of view and bucketed
into sacrifice notes, plan notes, move reasons and imbalance notes. The
rationale string joins the buckets in that order with " | ".
"""

import logging
from typing import List, Optional

import chess

from imbalance_engine.analysis.models import ImbalanceAnalysis, MoveExplanation

logger = logging.getLogger(__name__)

FALLBACK_RATIONALE = "Developing move"
SEPARATOR = " | "


def explain_move(
    board: chess.Board,
    move: Optional[chess.Move],
    analysis: ImbalanceAnalysis,
) -> MoveExplanation:
    """
    Generate a verbal explanation for a move.

    Args:
        board: Position the move is played from
        move: The move being explained (reserved, not used for filtering)
        analysis: Imbalance analysis of the position

    Returns:
        MoveExplanation with bucketed notes and the joined rationale
    """
    exp = MoveExplanation()
    ia = analysis

    if ia.material > 100 or ia.material < -100:
        exp.imbalance_notes.append(f"Material {ia.material / 100:+.1f}")
    if ia.white_pawns.passed_count > 0:
        exp.imbalance_notes.append("Passed pawn")
    if ia.black_pawns.passed_count > 0:
        exp.imbalance_notes.append("Opponent passed pawn")
    if ia.white_pawns.isolated_count > 0:
        exp.imbalance_notes.append("Isolated pawn")
    if ia.black_pawns.isolated_count > 0:
        exp.imbalance_notes.append("Opponent isolated pawn")

    if ia.exchange_sacrifice:
        exp.sacrifice_notes.append("Rook for minor piece")
    if ia.pawn_sacrifice:
        exp.sacrifice_notes.append("Pawn for compensation")

    if ia.initiative > 15:
        exp.imbalance_notes.append("Strong initiative")
        exp.move_reasons.append("Maintain the initiative")

    if ia.white_king_exposed:
        exp.imbalance_notes.append("King safety concern")
        exp.move_reasons.append("Defend the king")
    if ia.black_king_exposed:
        exp.imbalance_notes.append("Opponent king exposed")
        exp.move_reasons.append("Attack the king")

    if ia.minority_attack:
        exp.plan_notes.append("Minority attack")
    if ia.open_file:
        exp.plan_notes.append("Open file")
    if ia.rook_on_7th:
        exp.plan_notes.append("Rook on the 7th rank")

    if ia.development > 60:
        exp.move_reasons.append("Better development")

    if ia.is_endgame and ia.king_activity_white > ia.king_activity_black:
        exp.imbalance_notes.append("Active king")

    if ia.opposition_status > 0:
        exp.plan_notes.append("Have the opposition")
    elif ia.opposition_status < 0:
        exp.plan_notes.append("Opponent has the opposition")

    if ia.opposite_castling:
        exp.plan_notes.append("Opposite castling")
    if ia.pawn_storm:
        exp.plan_notes.append("Pawn storm")

    if ia.king_safety_discount < -10:
        exp.imbalance_notes.append("King exposed to storm")
    elif ia.king_safety_discount > 10:
        exp.imbalance_notes.append("Opponent king exposed to storm")

    exp.pv_explanation = build_rationale(
        exp.sacrifice_notes, exp.plan_notes, exp.move_reasons, exp.imbalance_notes
    )

    if move is not None:
        logger.debug(f"{move}: {exp.pv_explanation}")

    return exp


def build_rationale(*buckets: List[str]) -> str:
    """Join note buckets in order, falling back to "Developing move"."""
    notes = [note for bucket in buckets for note in bucket]
    return SEPARATOR.join(notes) if notes else FALLBACK_RATIONALE
