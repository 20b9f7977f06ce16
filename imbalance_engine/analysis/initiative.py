"""
Initiative and Tempo ("The Right to Move")

Initiative is not just having the move, it is the ability to keep making
forcing moves (Euwe/Kramer, Aagaard). This module approximates it without
generating moves:

    1. Forcing-move potential of each side (piece placement heuristics)
    2. Tempo: having the move is worth more with more forcing potential
    3. Active pieces, open files and central control
    4. Pawn break timing: who has the "last word" on e/d pawn breaks

The forcing-move count is a placement heuristic, not move generation.
"""

import chess

from imbalance_engine.board.geometry import (
    BB_EXTENDED_CENTER,
    MINOR_PIECES,
    NON_PAWN_PIECES,
    back_rank_mask,
    file_mask,
    forward,
    pawn_attack_mask,
    piece_mask,
    relative_rank,
    relative_square,
    square_at,
)

BB_CENTER = chess.BB_D4 | chess.BB_E4 | chess.BB_D5 | chess.BB_E5

# Files c-f, ranks 3-6
BB_CENTRAL_ZONE = (
    (chess.BB_FILE_C | chess.BB_FILE_D | chess.BB_FILE_E | chess.BB_FILE_F)
    & (chess.BB_RANK_3 | chess.BB_RANK_4 | chess.BB_RANK_5 | chess.BB_RANK_6)
)

BREAK_VALUE = 15


def count_forcing_moves(board: chess.Board, side: chess.Color) -> int:
    """
    Estimate how many forcing moves (checks, captures, threats) a side has.

    Returns:
        Heuristic count: +1 per knight, +1/+2 per bishop or queen (central
        ones count double), +1/+2 per rook or queen (open file counts double),
        +2 per pawn on the 7th rank
    """
    count = len(board.pieces(chess.KNIGHT, side))

    for square in board.pieces(chess.BISHOP, side) | board.pieces(chess.QUEEN, side):
        count += 2 if chess.BB_SQUARES[square] & BB_CENTRAL_ZONE else 1

    pawns = board.pieces_mask(chess.PAWN, side)
    for square in board.pieces(chess.ROOK, side) | board.pieces(chess.QUEEN, side):
        count += 2 if not pawns & file_mask(chess.square_file(square)) else 1

    for square in board.pieces(chess.PAWN, side):
        if relative_rank(side, square) == 6:
            count += 2

    return count


def _break_ready(board: chess.Board, side: chess.Color, white_square: int) -> bool:
    square = relative_square(side, white_square)
    return bool(board.pieces_mask(chess.PAWN, side) & chess.BB_SQUARES[square])


def assess_pawn_break_timing(board: chess.Board, side: chess.Color) -> int:
    """
    Who has the "last word" on the central pawn breaks?

    A central e/d pawn still on its home square can break; the break is
    unanswered when the mirrored enemy pawn is gone.

    Returns:
        +15 per unanswered own break, -15 per unanswered enemy break
    """
    score = 0
    for home in (chess.E2, chess.D2):
        own_ready = _break_ready(board, side, home)
        opp_ready = _break_ready(board, not side, home)
        if own_ready and not opp_ready:
            score += BREAK_VALUE
        if opp_ready and not own_ready:
            score -= BREAK_VALUE
    return score


def _controlled_center(board: chess.Board, side: chess.Color) -> int:
    pawns = board.pieces_mask(chess.PAWN, side)
    holders = pawns | piece_mask(board, side, *MINOR_PIECES)
    return chess.popcount(BB_EXTENDED_CENTER & (holders | pawn_attack_mask(pawns, side)))


def tempo_score(board: chess.Board, side: chess.Color) -> int:
    """Value of having (or not having) the move, given forcing potential."""
    own = count_forcing_moves(board, side)
    opp = count_forcing_moves(board, not side)

    if board.turn == side:
        if own > opp:
            return 20
        if own == opp:
            return 10
        return 5

    if opp > own + 2:
        return -10
    if opp > own:
        return -5
    return 0


def initiative_potential(board: chess.Board, side: chess.Color) -> int:
    """Initiative that does not depend on who is to move."""
    score = 0

    active = piece_mask(board, side, *NON_PAWN_PIECES) & ~back_rank_mask(side)
    score += chess.popcount(active) * 3

    all_pawns = board.pieces_mask(chess.PAWN, chess.WHITE) | board.pieces_mask(chess.PAWN, chess.BLACK)
    for f in range(8):
        if not all_pawns & file_mask(f):
            score += 3

    # Break timing is measured from White's side
    breaks = assess_pawn_break_timing(board, chess.WHITE)
    score += breaks if side == chess.WHITE else -breaks

    score += _controlled_center(board, side) * 2
    return score


def evaluate_initiative(board: chess.Board, side: chess.Color) -> int:
    """
    Evaluate initiative for one side.

    Args:
        board: Position to analyze
        side: chess.WHITE or chess.BLACK

    Returns:
        Initiative score for ``side`` (higher = more initiative)
    """
    return tempo_score(board, side) + initiative_potential(board, side)


def evaluate_pawn_breaks(board: chess.Board, side: chess.Color) -> int:
    """
    Assess pawn break opportunities and the "break or be broken" moment.

    Central squares held by pawns (x5), break timing, and -5 for each own pawn
    frozen by an enemy pawn directly in front of it.
    """
    own = board.pieces_mask(chess.PAWN, side)
    opp = board.pieces_mask(chess.PAWN, not side)

    center_score = (
        chess.popcount(BB_CENTER & pawn_attack_mask(own, side))
        - chess.popcount(BB_CENTER & pawn_attack_mask(opp, not side))
    )
    score = center_score * 5
    score += assess_pawn_break_timing(board, side)

    for square in chess.SquareSet(own):
        stop = square_at(chess.square_file(square), chess.square_rank(square) + forward(side))
        if stop is not None and opp & chess.BB_SQUARES[stop]:
            score -= 5

    return score
