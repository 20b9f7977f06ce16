"""
Board Geometry Module

The board representation itself is python-chess's Board, used read-only.
This module adds the square helpers the imbalance analyzers share.

Key Components:
    - square_to_coordinates: square index to (row, col) for static tables
    - relative_rank / relative_square: side-relative views (mirrored for Black)
    - pawn_attack_mask / pawn_attackers_of: pawn attack geometry on masks
"""

from imbalance_engine.board.geometry import (
    square_to_coordinates,
    relative_rank,
    relative_square,
    table_value,
    pawn_attack_mask,
    pawn_attackers_of,
)

__all__ = [
    'square_to_coordinates',
    'relative_rank',
    'relative_square',
    'table_value',
    'pawn_attack_mask',
    'pawn_attackers_of',
]
