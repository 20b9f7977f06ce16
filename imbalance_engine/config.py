"""
Evaluation configuration and playing styles.

A playing style selects a (tactical, positional) multiplier pair and drives
the discount logic in ``imbalance_engine.analysis.style``. There is a
process-wide default style (``set_style`` / ``get_style``) for callers that
configure once at startup, but evaluators normally carry their own
``EvaluationConfig`` so that several styles can be evaluated side by side.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import NamedTuple, Union

logger = logging.getLogger(__name__)


class PlayingStyle(Enum):
    """Playing styles affect how the imbalances are weighted."""

    CLASSICAL = "classical"    # Balanced
    ATTACKING = "attacking"    # Exaggerate initiative, forgive exchanges
    TACTICAL = "tactical"      # Exaggerate tactics, threat based
    POSITIONAL = "positional"  # Emphasize structure, patient play
    TECHNICAL = "technical"    # Endgame focus, "do not hurry"

    @classmethod
    def parse(cls, value: Union[str, "PlayingStyle"]) -> "PlayingStyle":
        """Accept a PlayingStyle or its (case-insensitive) name."""
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).strip().lower())
        except ValueError:
            names = ", ".join(style.value for style in cls)
            raise ValueError(f"Unknown playing style {value!r}, expected one of: {names}")


class StyleMultipliers(NamedTuple):
    """Weights applied to the dynamic and the static parts of the analysis."""

    tactical: float
    positional: float


STYLE_MULTIPLIERS = {
    PlayingStyle.CLASSICAL: StyleMultipliers(1.0, 1.0),
    PlayingStyle.ATTACKING: StyleMultipliers(1.2, 0.8),
    PlayingStyle.TACTICAL: StyleMultipliers(1.3, 0.6),
    PlayingStyle.POSITIONAL: StyleMultipliers(0.7, 1.3),
    PlayingStyle.TECHNICAL: StyleMultipliers(0.6, 1.4),
}

_current_style = PlayingStyle.CLASSICAL


def set_style(style: Union[str, PlayingStyle]) -> None:
    """
    Change the process-wide default style.

    Only affects analyses started after the call. Not synchronised: change it
    during single-threaded setup, or give each evaluator its own config.
    """
    global _current_style
    style = PlayingStyle.parse(style)
    if style is not _current_style:
        logger.info(f"Playing style changed: {_current_style.value} -> {style.value}")
    _current_style = style


def get_style() -> PlayingStyle:
    return _current_style


def get_style_multipliers(style: Union[str, PlayingStyle, None] = None) -> StyleMultipliers:
    """Multiplier pair for ``style`` (default: the process-wide style)."""
    if style is None:
        return STYLE_MULTIPLIERS[_current_style]
    return STYLE_MULTIPLIERS[PlayingStyle.parse(style)]


@dataclass
class EvaluationConfig:
    """Configuration for an imbalance evaluator.

    Holding the style here (instead of reading the process-wide default)
    lets concurrent evaluators use different styles safely.
    """

    style: PlayingStyle = PlayingStyle.CLASSICAL
    """Playing style used for multipliers and discounts"""

    endgame_material_limit: int = 2500
    """Total non-king material of both sides (centipawns, not a differential) below which the endgame block runs"""

    log_analysis: bool = False
    """Log a one-line summary of every analysis at DEBUG level"""

    def __post_init__(self):
        """Validate configuration after initialization."""
        self.style = PlayingStyle.parse(self.style)

        if self.endgame_material_limit <= 0:
            raise ValueError(
                f"endgame_material_limit must be positive, got {self.endgame_material_limit}"
            )

    @property
    def multipliers(self) -> StyleMultipliers:
        return STYLE_MULTIPLIERS[self.style]

    @classmethod
    def from_global_style(cls, **kwargs) -> "EvaluationConfig":
        """Snapshot the current process-wide style into a private config."""
        return cls(style=get_style(), **kwargs)
