"""
Style weighting of an imbalance analysis.

Each playing style:
    - fixes a (tactical, positional) multiplier pair, see config.STYLE_MULTIPLIERS
    - rescales the exchange-sacrifice discount (x2 attacking/tactical,
      /2 positional/technical)
    - grants attacking and tactical players a flat initiative discount of 50

The king-safety discount is overwritten rather than combined: +50 for an
exposed Black king, then -50 for an exposed White king. When both kings are
exposed the White check wins.
"""

import logging
from typing import Optional, Union

from imbalance_engine.analysis.models import ImbalanceAnalysis
from imbalance_engine.config import STYLE_MULTIPLIERS, PlayingStyle, get_style

logger = logging.getLogger(__name__)

INITIATIVE_DISCOUNT = 50
EXPOSED_KING_DISCOUNT = 50


def apply_style_weighting(analysis: ImbalanceAnalysis, style: Union[str, PlayingStyle]) -> ImbalanceAnalysis:
    """
    Apply the style-dependent discounts in place.

    Args:
        analysis: Freshly built analysis (modified in place)
        style: Playing style to weight for

    Returns:
        The same analysis object, for chaining
    """
    style = PlayingStyle.parse(style)

    if style in (PlayingStyle.ATTACKING, PlayingStyle.TACTICAL):
        analysis.exchange_discount *= 2
        analysis.initiative_discount = INITIATIVE_DISCOUNT
    elif style in (PlayingStyle.POSITIONAL, PlayingStyle.TECHNICAL):
        # Truncate towards zero for both signs
        analysis.exchange_discount = int(analysis.exchange_discount / 2)

    if analysis.black_king_exposed:
        analysis.king_safety_discount = EXPOSED_KING_DISCOUNT
    if analysis.white_king_exposed:
        analysis.king_safety_discount = -EXPOSED_KING_DISCOUNT

    analysis.style = style
    return analysis


def style_adjusted_eval(analysis: ImbalanceAnalysis, style: Optional[Union[str, PlayingStyle]] = None) -> float:
    """
    Collapse an analysis into one style-weighted score (White's perspective).

    Static imbalances (structure, space, development) are scaled by the
    positional multiplier, dynamic ones (initiative, activity, king safety,
    pawn storm) by the tactical multiplier. Discounts are added as-is; the
    initiative discount goes to whichever side holds the initiative.

    Args:
        analysis: Analysis to score
        style: Style for the multipliers (default: the style the analysis
            was weighted with, else the process-wide style)

    Returns:
        float: Score in centipawns
    """
    if style is None:
        style = analysis.style if analysis.style is not None else get_style()
    multipliers = STYLE_MULTIPLIERS[PlayingStyle.parse(style)]

    static = analysis.pawn_structure + analysis.space + analysis.development
    dynamic = (
        analysis.initiative + analysis.activity
        + analysis.king_safety + analysis.pawn_storm_strength
    )

    discounts = (
        analysis.exchange_discount
        + analysis.pawn_sacrifice_discount
        + analysis.king_safety_discount
    )
    if analysis.initiative > 0:
        discounts += analysis.initiative_discount
    elif analysis.initiative < 0:
        discounts -= analysis.initiative_discount

    score = (
        analysis.material
        + multipliers.positional * static
        + multipliers.tactical * dynamic
        + discounts
    )
    logger.debug(f"Style-adjusted eval ({PlayingStyle.parse(style).value}): {score:.1f}")
    return float(score)
