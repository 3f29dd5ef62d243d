"""
clientbook.domain.enums — All enumerations used across the engine.

Keep this module import-clean (stdlib + clientbook.core.constants only).
"""

from enum import Enum

from clientbook.core.constants import (
    SCORE_MAX, SCORE_MIN,
    TIER_COLOUR_HIGH, TIER_COLOUR_LOW, TIER_COLOUR_MEDIUM,
    TIER_HIGH_MIN_SCORE, TIER_MEDIUM_MIN_SCORE,
)


# ---------------------------------------------------------------------------
# Priority tier (computed per client)
# ---------------------------------------------------------------------------

class PriorityTier(str, Enum):
    """
    Coarse bucket derived from the final rounded priority score.

    The cutoffs do not line up with any single component's step
    boundaries: a £600k+ client with no fees or engagement is still Low.
    """
    HIGH   = "High"
    MEDIUM = "Medium"
    LOW    = "Low"

    @classmethod
    def for_score(cls, score: float) -> "PriorityTier":
        """Return the tier for a (rounded) score."""
        if score >= TIER_HIGH_MIN_SCORE:
            return cls.HIGH
        if score >= TIER_MEDIUM_MIN_SCORE:
            return cls.MEDIUM
        return cls.LOW

    @property
    def min_score(self) -> float:
        """Inclusive lower bound of the tier."""
        return {
            "High": TIER_HIGH_MIN_SCORE,
            "Medium": TIER_MEDIUM_MIN_SCORE,
            "Low": SCORE_MIN,
        }[self.value]

    @property
    def max_score(self) -> float:
        """Exclusive upper bound of the tier (inclusive for High)."""
        return {
            "High": SCORE_MAX,
            "Medium": TIER_HIGH_MIN_SCORE,
            "Low": TIER_MEDIUM_MIN_SCORE,
        }[self.value]

    @property
    def colour(self) -> str:
        """Hex colour the dashboard uses for this tier."""
        return {
            "High": TIER_COLOUR_HIGH,
            "Medium": TIER_COLOUR_MEDIUM,
            "Low": TIER_COLOUR_LOW,
        }[self.value]


# Display order for distributions (highest first)
TIER_ORDER = (PriorityTier.HIGH, PriorityTier.MEDIUM, PriorityTier.LOW)


# ---------------------------------------------------------------------------
# Ranked metrics
# ---------------------------------------------------------------------------

class RankedMetric(str, Enum):
    AUA        = "aua"
    FEES       = "fees"
    ENGAGEMENT = "engagement"
