"""
Client Book — deterministic client prioritisation engine.

Turns raw per-client account metrics into a bounded priority score, a tier,
a per-factor breakdown, peer rankings and cohort statistics.  Every entry
point is a pure function: no I/O, no caching, no mutation of inputs.
"""

from clientbook.analytics.cohort import filter_by_tier, prioritise_cohort
from clientbook.analytics.explanation import explain_priority
from clientbook.analytics.ranking import CohortRankIndex, rank_all, rank_client
from clientbook.analytics.scoring import score_client, tier_for_score
from clientbook.analytics.statistics import calculate_statistics
from clientbook.domain.enums import PriorityTier, RankedMetric
from clientbook.domain.errors import (
    ClientNotInCohortError, MissingPriorityError, PrioritisationError,
)
from clientbook.domain.models import (
    ClientRecord, Explanation, ExplanationFactor, PrioritisedClient,
    PriorityScore, Rankings, ScoreBreakdown, Statistics, TierCount,
)

__version__ = "0.1.0"

__all__ = [
    "CohortRankIndex",
    "ClientNotInCohortError",
    "ClientRecord",
    "Explanation",
    "ExplanationFactor",
    "MissingPriorityError",
    "PrioritisationError",
    "PrioritisedClient",
    "PriorityScore",
    "PriorityTier",
    "RankedMetric",
    "Rankings",
    "ScoreBreakdown",
    "Statistics",
    "TierCount",
    "calculate_statistics",
    "explain_priority",
    "filter_by_tier",
    "prioritise_cohort",
    "rank_all",
    "rank_client",
    "score_client",
    "tier_for_score",
]
