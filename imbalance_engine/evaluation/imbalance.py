"""
Imbalance Evaluator

The teaching overlay as seen by the search: a style-weighted score nudge and
a natural-language rationale, both computed from one ImbalanceAnalysis.

Each evaluator carries its own EvaluationConfig, so evaluators with different
styles can run side by side without touching the process-wide default.
"""

import logging
from typing import Optional

import chess

from imbalance_engine.analysis.aggregator import analyze_imbalances
from imbalance_engine.analysis.explanation import explain_move
from imbalance_engine.analysis.models import ImbalanceAnalysis, MoveExplanation
from imbalance_engine.analysis.style import style_adjusted_eval
from imbalance_engine.config import EvaluationConfig
from imbalance_engine.evaluation.base import Evaluator

logger = logging.getLogger(__name__)


class ImbalanceEvaluator(Evaluator):
    """
    Style-aware imbalance evaluator.

    Attributes:
        config: Evaluation settings (style, endgame threshold, logging)
    """

    def __init__(self, config: Optional[EvaluationConfig] = None):
        """Initialize with ``config`` or a snapshot of the process-wide style."""
        self.config = config if config is not None else EvaluationConfig.from_global_style()
        logger.debug(f"ImbalanceEvaluator initialized with style={self.config.style.value}")

    def analyze(self, board: chess.Board) -> ImbalanceAnalysis:
        return analyze_imbalances(board, config=self.config)

    def evaluate(self, board: chess.Board) -> float:
        """
        Style-adjusted imbalance score.

        Args:
            board: Chess board to evaluate

        Returns:
            float: Centipawns from White's perspective (0.0 when the game is over)
        """
        if self.is_game_over(board):
            return 0.0
        return style_adjusted_eval(self.analyze(board), self.config.style)

    def explain(self, board: chess.Board, move: Optional[chess.Move] = None) -> MoveExplanation:
        return explain_move(board, move, self.analyze(board))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(style={self.config.style.value})"
