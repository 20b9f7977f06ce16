"""
Imbalance Engine

A teaching overlay for a chess engine: it measures the strategic imbalances
of a position (Silman-style) and turns them into a style-weighted score
nudge and a human-readable rationale.

## Architecture

1. **board**: Square geometry helpers over python-chess boards
   - Side-relative ranks and squares, pawn attack masks

2. **analysis**: The imbalance analyzers
   - Pawn structure, piece activity, king safety
   - Initiative and tempo, endgame principles, prophylaxis
   - Sacrifice valuation, typical plans, conversion mode
   - Aggregation into ImbalanceAnalysis, explanation into MoveExplanation

3. **evaluation**: Evaluator interface for the search
   - ImbalanceEvaluator: evaluate() and explain()

4. **config**: Playing styles and evaluation settings

## Quick Start

```python
import chess
from imbalance_engine import ImbalanceEvaluator, EvaluationConfig, PlayingStyle

evaluator = ImbalanceEvaluator(EvaluationConfig(style=PlayingStyle.ATTACKING))
board = chess.Board()

print(evaluator.evaluate(board))
print(evaluator.explain(board).pv_explanation)  # "Developing move"
```

## Version

0.1.0
"""

__version__ = "0.1.0"
__license__ = "MIT"

from imbalance_engine.config import (
    EvaluationConfig,
    PlayingStyle,
    get_style,
    get_style_multipliers,
    set_style,
)
from imbalance_engine.analysis import analyze_imbalances, explain_move
from imbalance_engine.evaluation import Evaluator, ImbalanceEvaluator

__all__ = [
    'EvaluationConfig',
    'PlayingStyle',
    'get_style',
    'set_style',
    'get_style_multipliers',
    'analyze_imbalances',
    'explain_move',
    'Evaluator',
    'ImbalanceEvaluator',
]
