"""
Pawn Structure Analysis

Classifies every pawn of a side and summarises the structure:
    - Isolated: no friendly pawn on either adjacent file
    - Doubled: a friendly pawn stands further back on the same file
    - Backward: not guarded from behind and its stop square is hit by an enemy pawn
    - Passed: no enemy pawn in front of it on its own or the adjacent files
    - Candidate: a pawn whose next step is better supported than attacked
    - Islands, phalanxes and chains

All functions are pure functions of (board, side, square). Squares that fall
off the board are simply skipped.

Reference:
    https://www.chessprogramming.org/Pawn_Structure
"""

import chess
from typing import Tuple

from imbalance_engine.analysis.models import PawnStructure
from imbalance_engine.board.geometry import (
    file_mask,
    forward,
    pawn_attackers_of,
    square_at,
)


def _adjacent_files_mask(file: int) -> int:
    mask = 0
    if file > 0:
        mask |= file_mask(file - 1)
    if file < 7:
        mask |= file_mask(file + 1)
    return mask


def _ranks_ahead_mask(side: chess.Color, rank: int, inclusive: bool) -> int:
    """Mask of every rank in front of ``rank`` (optionally including it)."""
    mask = 0
    for r in range(8):
        ahead = r > rank if side == chess.WHITE else r < rank
        if ahead or (inclusive and r == rank):
            mask |= chess.BB_RANKS[r]
    return mask


def is_isolated_pawn(board: chess.Board, side: chess.Color, square: int) -> bool:
    own = board.pieces_mask(chess.PAWN, side)
    return not own & _adjacent_files_mask(chess.square_file(square))


def is_doubled_pawn(board: chess.Board, side: chess.Color, square: int) -> bool:
    """True if another friendly pawn stands behind this one on its file."""
    own = board.pieces_mask(chess.PAWN, side)
    file, rank = chess.square_file(square), chess.square_rank(square)
    behind = ~_ranks_ahead_mask(side, rank, inclusive=True) & chess.BB_ALL
    return bool(own & file_mask(file) & behind)


def is_backward_pawn(board: chess.Board, side: chess.Color, square: int) -> bool:
    """
    A pawn is backward when no adjacent friendly pawn guards it from one rank
    behind and an enemy pawn already controls the square in front of it.
    """
    file, rank = chess.square_file(square), chess.square_rank(square)
    stop = square_at(file, rank + forward(side))
    if stop is None:
        return False

    own = board.pieces_mask(chess.PAWN, side)
    opp = board.pieces_mask(chess.PAWN, not side)

    for df in (-1, 1):
        guard = square_at(file + df, rank - forward(side))
        if guard is not None and own & chess.BB_SQUARES[guard]:
            return False

    return pawn_attackers_of(opp, not side, stop) > 0


def is_passed_pawn(board: chess.Board, side: chess.Color, square: int) -> bool:
    """
    No enemy pawn on the same or adjacent files at or ahead of the pawn's
    rank. This span includes the squares from which an enemy pawn could
    capture the pawn on its next step.
    """
    opp = board.pieces_mask(chess.PAWN, not side)
    file, rank = chess.square_file(square), chess.square_rank(square)
    files = file_mask(file) | _adjacent_files_mask(file)
    span = files & _ranks_ahead_mask(side, rank, inclusive=True)
    return not opp & span


def is_candidate_pawn(board: chess.Board, side: chess.Color, square: int) -> bool:
    """
    Candidate passed pawn: already passed, or its (empty) landing square is
    supported by more friendly pawns than enemy pawns attack it.
    """
    if is_passed_pawn(board, side, square):
        return True

    file, rank = chess.square_file(square), chess.square_rank(square)
    stop = square_at(file, rank + forward(side))
    if stop is None:
        return False

    own = board.pieces_mask(chess.PAWN, side)
    opp = board.pieces_mask(chess.PAWN, not side)
    if (own | opp) & chess.BB_SQUARES[stop]:
        return False

    defenders = pawn_attackers_of(own, side, stop)
    attackers = pawn_attackers_of(opp, not side, stop)
    return defenders > attackers


def count_pawn_islands(board: chess.Board, side: chess.Color) -> Tuple[int, int]:
    """
    Count pawn islands (groups of pawns on consecutive files).

    Returns:
        Tuple of (island count, average island size), both 0 without pawns
    """
    pawns = board.pieces(chess.PAWN, side)
    occupied = [bool(pawns.mask & file_mask(f)) for f in range(8)]

    islands = 0
    for f in range(8):
        if occupied[f] and (f == 0 or not occupied[f - 1]):
            islands += 1

    avg = len(pawns) // islands if islands > 0 else 0
    return islands, avg


def analyze_pawn_structure(board: chess.Board, side: chess.Color) -> PawnStructure:
    """
    Analyze the pawn structure of one side.

    Args:
        board: Position to analyze
        side: chess.WHITE or chess.BLACK

    Returns:
        PawnStructure with all counts filled in (all zero without pawns)
    """
    ps = PawnStructure()
    pawns = board.pieces(chess.PAWN, side)

    for square in pawns:
        if is_isolated_pawn(board, side, square):
            ps.isolated_count += 1
        if is_doubled_pawn(board, side, square):
            ps.doubled_count += 1
        if is_backward_pawn(board, side, square):
            ps.backward_count += 1
        if is_passed_pawn(board, side, square):
            ps.passed_count += 1
        if is_candidate_pawn(board, side, square):
            ps.candidate_count += 1

        # Phalanx: neighbour on the next file, same rank
        if chess.square_file(square) < 7 and square + 1 in pawns:
            ps.phalanx_count += 1

    ps.connected_count = len(pawns) - ps.isolated_count
    ps.island_count, ps.avg_island_size = count_pawn_islands(board, side)

    if pawns:
        ranks = [chess.square_rank(sq) for sq in pawns]
        if max(ranks) - min(ranks) >= 2:
            ps.has_chain = True
            ps.chain_base = max(ranks) if side == chess.WHITE else min(ranks)
            ps.chain_direction = 1 if side == chess.WHITE else -1

    return ps
