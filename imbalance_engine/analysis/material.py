"""
Material counting (centipawns).

Standard values: P=100, N=320, B=330, R=500, Q=900, K=0
"""

import chess

PIECE_VALUES = {
    chess.PAWN: 100,
    chess.KNIGHT: 320,
    chess.BISHOP: 330,
    chess.ROOK: 500,
    chess.QUEEN: 900,
    chess.KING: 0,
}


def side_material(board: chess.Board, side: chess.Color) -> int:
    return sum(
        len(board.pieces(piece_type, side)) * value
        for piece_type, value in PIECE_VALUES.items()
    )


def material_balance(board: chess.Board) -> int:
    """Material difference from White's perspective."""
    return side_material(board, chess.WHITE) - side_material(board, chess.BLACK)


def total_material(board: chess.Board) -> int:
    """Non-king material of both sides together."""
    return side_material(board, chess.WHITE) + side_material(board, chess.BLACK)
