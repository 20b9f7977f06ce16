"""
Conversion Mode (Aagaard)

When to switch from dynamic to static play:
    - Static advantages: material, pawn structure
    - Dynamic advantages: initiative

With a clear static edge and no initiative, simplify and convert. With only
a dynamic edge, keep the pieces on.
"""

import chess

from imbalance_engine.analysis.initiative import evaluate_initiative
from imbalance_engine.analysis.material import material_balance
from imbalance_engine.analysis.pawns import analyze_pawn_structure
from imbalance_engine.board.geometry import piece_mask


def evaluate_conversion_mode(board: chess.Board, side: chess.Color) -> int:
    """
    Bonus for having the right kind of position to convert (or to keep
    playing dynamically).

    Returns:
        +20 if able to trade down with more heavy pieces and +15 per passed
        pawn when only statically better; -5 per own heavy piece when only
        dynamically better; 0 otherwise
    """
    sign = 1 if side == chess.WHITE else -1
    material = sign * material_balance(board)

    own_ps = analyze_pawn_structure(board, side)
    opp_ps = analyze_pawn_structure(board, not side)
    structure = (
        (own_ps.passed_count - opp_ps.passed_count) * 30
        - (own_ps.isolated_count - opp_ps.isolated_count) * 25
    )

    has_static = material > 150 or structure > 30
    has_dynamic = evaluate_initiative(board, side) > 20

    own_majors = chess.popcount(piece_mask(board, side, chess.ROOK, chess.QUEEN))
    opp_majors = chess.popcount(piece_mask(board, not side, chess.ROOK, chess.QUEEN))

    score = 0
    if has_static and not has_dynamic:
        if own_majors > opp_majors:
            score += 20
        score += own_ps.passed_count * 15

    if has_dynamic and not has_static:
        score -= own_majors * 5

    return score
