"""
Abstract Evaluator Interface

The search component consumes evaluators through this interface, so the
imbalance overlay can be swapped in or out without touching the search.

Key Principles:
    1. Evaluators do not mutate the board
    2. evaluate() returns centipawns from White's perspective
    3. Positive = White advantage, Negative = Black advantage
    4. explain() returns a human-readable rationale for a move

Convention:
    - Material values in centipawns (pawn = 100, queen = 900)
    - Game-over positions get no positional nudge (0.0)
"""

from abc import ABC, abstractmethod
from typing import Optional

import chess

from imbalance_engine.analysis.models import MoveExplanation


class Evaluator(ABC):
    """
    Abstract base class for position evaluation overlays.

    Methods:
        evaluate(board): Score adjustment in centipawns
        explain(board, move): Verbal explanation of a move
    """

    @abstractmethod
    def evaluate(self, board: chess.Board) -> float:
        """
        Evaluate a chess position from White's perspective.

        Args:
            board: python-chess Board object to evaluate

        Returns:
            float: Evaluation in centipawns
        """
        pass

    @abstractmethod
    def explain(self, board: chess.Board, move: Optional[chess.Move] = None) -> MoveExplanation:
        """
        Explain why a move (or the position) is good.

        Args:
            board: Position the move is played from
            move: Move being explained, if any

        Returns:
            MoveExplanation with notes and the rationale string
        """
        pass

    def is_game_over(self, board: chess.Board) -> bool:
        """
        True for positions where a positional nudge is meaningless:
        checkmate, stalemate and insufficient material.
        """
        return (
            board.is_checkmate()
            or board.is_stalemate()
            or board.is_insufficient_material()
        )

    def __repr__(self) -> str:
        """String representation of evaluator."""
        return f"{self.__class__.__name__}()"
