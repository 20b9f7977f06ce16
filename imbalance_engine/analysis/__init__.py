"""
Imbalance Analysis Module

Silman-style analysis of a chess position, from single-pawn classification
up to the aggregate snapshot and its verbal explanation.

Key Components:
    - pawns: isolated/doubled/backward/passed/candidate pawns, islands, chains
    - activity: knight outposts, bishop diagonals, rooks on open files / 7th
    - initiative: forcing-move potential, tempo, pawn break timing
    - endgame: king centrality, opposition, rook placement, patience
    - prophylaxis, sacrifice, plans, conversion
    - style: style-dependent discounts and the style-adjusted score
    - aggregator: analyze_imbalances()
    - explanation: explain_move()

Data Flow:
    chess.Board -> analyze_imbalances() -> ImbalanceAnalysis
                -> explain_move() -> MoveExplanation
"""

from imbalance_engine.analysis.models import (
    ImbalanceAnalysis,
    MoveExplanation,
    OppositionType,
    PawnStructure,
    PieceActivity,
)
from imbalance_engine.analysis.aggregator import analyze_imbalances
from imbalance_engine.analysis.conversion import evaluate_conversion_mode
from imbalance_engine.analysis.explanation import explain_move
from imbalance_engine.analysis.initiative import evaluate_initiative, evaluate_pawn_breaks
from imbalance_engine.analysis.prophylaxis import evaluate_prophylaxis
from imbalance_engine.analysis.sacrifice import exchange_sacrifice_value
from imbalance_engine.analysis.style import apply_style_weighting, style_adjusted_eval

__all__ = [
    'ImbalanceAnalysis',
    'MoveExplanation',
    'OppositionType',
    'PawnStructure',
    'PieceActivity',
    'analyze_imbalances',
    'explain_move',
    'apply_style_weighting',
    'style_adjusted_eval',
    # Standalone scorers not folded into the aggregate
    'evaluate_initiative',
    'evaluate_pawn_breaks',
    'evaluate_prophylaxis',
    'evaluate_conversion_mode',
    'exchange_sacrifice_value',
]
