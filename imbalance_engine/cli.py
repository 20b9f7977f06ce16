"""
Command-line explanation of a position.

Prints the imbalance summary, the style-adjusted score and the rationale
for a FEN (and optionally a move in UCI or SAN notation).

Usage:
    python -m imbalance_engine [--fen FEN] [--move e2e4] [--style attacking] [--verbose]
"""

import argparse
import logging
import sys
from typing import List, Optional

import chess

from imbalance_engine.config import EvaluationConfig, PlayingStyle
from imbalance_engine.evaluation.imbalance import ImbalanceEvaluator

logger = logging.getLogger("imbalance_engine")


def parse_move(board: chess.Board, text: str) -> chess.Move:
    """Parse a move in UCI or SAN notation; raises ValueError if illegal."""
    try:
        move = chess.Move.from_uci(text)
        if move in board.legal_moves:
            return move
    except ValueError:
        pass
    return board.parse_san(text)


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Explain the strategic imbalances of a chess position"
    )
    parser.add_argument("--fen", default=chess.STARTING_FEN, help="Position in FEN notation")
    parser.add_argument("--move", default=None, help="Move to explain (UCI or SAN)")
    parser.add_argument(
        "--style",
        default=PlayingStyle.CLASSICAL.value,
        choices=[style.value for style in PlayingStyle],
        help="Playing style used for weighting",
    )
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )

    try:
        board = chess.Board(args.fen)
    except ValueError as e:
        print(f"Invalid FEN: {e}", file=sys.stderr)
        return 2

    move = None
    if args.move:
        try:
            move = parse_move(board, args.move)
        except ValueError as e:
            print(f"Invalid move {args.move!r}: {e}", file=sys.stderr)
            return 2

    logger.debug(f"Explaining {board.fen()} with style {args.style}")
    evaluator = ImbalanceEvaluator(EvaluationConfig(style=args.style, log_analysis=args.verbose))
    analysis = evaluator.analyze(board)
    explanation = evaluator.explain(board, move)

    print("=" * 60)
    print(f"Position: {board.fen()}")
    if move is not None:
        print(f"Move: {board.san(move)}")
    print(f"Style: {evaluator.config.style.value}")
    print("=" * 60)
    print(f"  Material:       {analysis.material:+d}")
    print(f"  Pawn structure: {analysis.pawn_structure:+d}")
    print(f"  Space:          {analysis.space:+d}")
    print(f"  Development:    {analysis.development:+d}")
    print(f"  Initiative:     {analysis.initiative:+d}")
    print(f"  King safety:    {analysis.king_safety:+d}")
    print(f"  Activity:       {analysis.activity:+d}")
    print(f"  Endgame:        {'yes' if analysis.is_endgame else 'no'}")
    print(f"  Score:          {evaluator.evaluate(board):+.1f}")
    print("-" * 60)
    print(explanation.pv_explanation)
    return 0
