"""
clientbook.analytics.scoring — Rule-based client priority scorer.

Score breakdown (100 points max):
  - Assets under advice (50 pts) – coarse step function, linear tail < £75k
  - Fees paid           (30 pts) – coarse step function, linear tail < £1k
  - Engagement          (20 pts) – logins (10) + meetings (10), each linear-capped

The total is rounded half-up to 2 dp and the tier is read off the rounded
total.  The breakdown restates the same three components that produce the
total (each rounded to 2 dp), so it always sums to the score within rounding.

Usage::

    from clientbook.analytics.scoring import score_client

    priority = score_client({
        "Total Portfolio AUA": "650000", "TotalFees": 12000,
        "LoginsL12M": 180, "MeetingsL12M": 50,
    })
    priority.score, priority.tier   # (100.0, PriorityTier.HIGH)
"""

from __future__ import annotations

import logging
from typing import Any, Sequence, Tuple

from clientbook.core.constants import (
    AUA_STEPS, AUA_TAIL_CAP, AUA_TAIL_DIVISOR,
    FEES_STEPS, FEES_TAIL_CAP, FEES_TAIL_DIVISOR,
    LOGINS_MAX_POINTS, LOGINS_PER_POINT,
    MEETINGS_MAX_POINTS, MEETINGS_PER_POINT,
    SCORE_MAX, SCORE_MIN,
)
from clientbook.core.utils import clamp, round_half_up
from clientbook.domain.enums import PriorityTier
from clientbook.domain.models import ClientRecord, PriorityScore, ScoreBreakdown

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Component scores
# ---------------------------------------------------------------------------

def _step_score(
    value: float,
    steps: Sequence[Tuple[float, float]],
    tail_divisor: float,
    tail_cap: float,
) -> float:
    """Points for the first step whose lower bound ``value`` reaches, else the linear tail."""
    for lower_bound, points in steps:
        if value >= lower_bound:
            return points
    return min(value / tail_divisor, tail_cap)


def aua_component(aua: float) -> float:
    """AUA contribution in [0, 50]."""
    return _step_score(aua, AUA_STEPS, AUA_TAIL_DIVISOR, AUA_TAIL_CAP)


def fees_component(fees: float) -> float:
    """Fees contribution in [0, 30]."""
    return _step_score(fees, FEES_STEPS, FEES_TAIL_DIVISOR, FEES_TAIL_CAP)


def engagement_component(logins: float, meetings: float) -> float:
    """Engagement contribution in [0, 20].

    Logins and meetings are capped independently, so either one alone can
    contribute at most half of the engagement points.
    """
    return (
        min(logins / LOGINS_PER_POINT, LOGINS_MAX_POINTS)
        + min(meetings / MEETINGS_PER_POINT, MEETINGS_MAX_POINTS)
    )


def tier_for_score(score: float) -> PriorityTier:
    """Tier for a final rounded score (>=75 High, >=60 Medium, else Low)."""
    return PriorityTier.for_score(score)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def score_client(client: Any) -> PriorityScore:
    """
    Score a single client and return a ``PriorityScore``.

    Args:
        client: A ``ClientRecord`` or a raw row mapping with the
                ``Total Portfolio AUA`` / ``TotalFees`` / ``LoginsL12M`` /
                ``MeetingsL12M`` fields.  Missing or malformed values
                count as zero.

    Returns:
        PriorityScore with score, tier and per-component breakdown.
    """
    record = ClientRecord.coerce(client)

    aua_pts = aua_component(record.aua)
    fees_pts = fees_component(record.fees)
    engagement_pts = engagement_component(record.logins, record.meetings)

    raw_total = aua_pts + fees_pts + engagement_pts
    score = round_half_up(clamp(raw_total, SCORE_MIN, SCORE_MAX))
    tier = tier_for_score(score)

    breakdown = ScoreBreakdown(
        aua_score=round_half_up(aua_pts),
        fees_score=round_half_up(fees_pts),
        engagement_score=round_half_up(engagement_pts),
    )

    logger.debug(
        "Scored client %r: aua=%.2f fees=%.2f engagement=%.2f -> %.2f (%s)",
        record.client_id, aua_pts, fees_pts, engagement_pts, score, tier.value,
    )
    return PriorityScore(score=score, tier=tier, breakdown=breakdown)
