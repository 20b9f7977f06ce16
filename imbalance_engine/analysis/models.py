"""
Data records produced by the imbalance analyzers.

All differentials are in centipawns from White's perspective
(positive = White is better off).
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional

from imbalance_engine.config import PlayingStyle


class OppositionType(Enum):
    """King-vs-king opposition relationships."""

    NONE = 0
    DIRECT = 1      # Same rank/file, odd number of squares between
    DISTANT = 2     # Same rank/file, even number (>= 2) of squares between
    DIAGONAL = 3    # Same diagonal, odd number of squares between


@dataclass
class PawnStructure:
    """Pawn structure summary for one side."""

    isolated_count: int = 0
    doubled_count: int = 0
    backward_count: int = 0
    passed_count: int = 0
    candidate_count: int = 0
    island_count: int = 0
    avg_island_size: int = 0
    connected_count: int = 0
    phalanx_count: int = 0
    has_chain: bool = False
    chain_base: int = -1
    chain_direction: int = 0

    @property
    def total(self) -> int:
        """Total pawn count (isolated pawns + connected pawns)."""
        return self.isolated_count + self.connected_count


@dataclass
class PieceActivity:
    """Piece activity summary for one side."""

    knight_activity: int = 0
    bishop_activity: int = 0
    rook_activity: int = 0
    queen_activity: int = 0
    total_activity: int = 0

    has_outpost_knight: bool = False
    has_bishop_long_diagonal: bool = False
    has_rook_7th_rank: bool = False
    has_rook_open_file: bool = False
    has_queen_central: bool = False


@dataclass
class ImbalanceAnalysis:
    """
    Silman-style imbalance snapshot of one position.

    Built fresh by ``analyze_imbalances``; only the style pass touches the
    discount fields after construction.
    """

    # Core imbalances
    material: int = 0
    pawn_structure: int = 0
    space: int = 0
    development: int = 0
    initiative: int = 0
    king_safety: int = 0
    activity: int = 0

    # Detailed pawn structure
    white_pawns: PawnStructure = field(default_factory=PawnStructure)
    black_pawns: PawnStructure = field(default_factory=PawnStructure)

    # Piece activity
    white_activity: PieceActivity = field(default_factory=PieceActivity)
    black_activity: PieceActivity = field(default_factory=PieceActivity)

    white_has_passed_pawn: bool = False
    black_has_passed_pawn: bool = False
    white_has_isolated: bool = False
    black_has_isolated: bool = False
    white_has_doubled: bool = False
    black_has_doubled: bool = False
    white_king_exposed: bool = False
    black_king_exposed: bool = False

    # Sacrifices
    exchange_sacrifice: bool = False
    pawn_sacrifice: bool = False

    # Positional discounts
    exchange_discount: int = 0
    pawn_sacrifice_discount: int = 0
    initiative_discount: int = 0
    king_safety_discount: int = 0

    # Typical plans
    minority_attack: bool = False
    open_file: bool = False
    rook_on_7th: bool = False
    opposite_castling: bool = False
    pawn_storm: bool = False
    pawn_storm_strength: int = 0

    # Endgame
    is_endgame: bool = False
    king_activity_white: int = 0
    king_activity_black: int = 0
    opposition_status: int = 0

    style: Optional[PlayingStyle] = None

    def summary(self) -> str:
        """One-line summary of the differentials."""
        return (
            f"mat={self.material} pawns={self.pawn_structure} space={self.space} "
            f"dev={self.development} init={self.initiative} "
            f"king={self.king_safety} act={self.activity}"
        )


@dataclass
class MoveExplanation:
    """Verbal explanation of a move, bucketed by category."""

    move_reasons: List[str] = field(default_factory=list)
    imbalance_notes: List[str] = field(default_factory=list)
    sacrifice_notes: List[str] = field(default_factory=list)
    plan_notes: List[str] = field(default_factory=list)
    pv_explanation: str = ""
