"""
Evaluation Module

Evaluators are SWAPPABLE: the search works with any evaluator that
implements the base interface.

Key Components:
    - Evaluator (ABC): score + explanation interface
    - ImbalanceEvaluator: style-weighted imbalance overlay

Data Flow:
    chess.Board -> evaluator.evaluate() -> float (centipawns)
                                           Positive = White advantage
                                           Negative = Black advantage
    chess.Board, move -> evaluator.explain() -> MoveExplanation
"""

from imbalance_engine.evaluation.base import Evaluator
from imbalance_engine.evaluation.imbalance import ImbalanceEvaluator

__all__ = ['Evaluator', 'ImbalanceEvaluator']
