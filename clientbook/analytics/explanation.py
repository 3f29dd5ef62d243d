"""
clientbook.analytics.explanation — Human-readable priority explanation.

Pure reshape of already-computed data for the client detail view; no new
scoring happens here.
"""

from __future__ import annotations

from typing import Any, Optional

from clientbook import config
from clientbook.core.constants import (
    AUA_MAX_POINTS, ENGAGEMENT_MAX_POINTS, FEES_MAX_POINTS,
    LABEL_AUA, LABEL_ENGAGEMENT, LABEL_FEES,
)
from clientbook.core.utils import format_count, format_currency, format_score
from clientbook.domain.models import (
    ClientRecord, Explanation, ExplanationFactor, PriorityScore, Rankings,
)


def explain_priority(
    client: Any,
    priority: PriorityScore,
    rankings: Optional[Rankings] = None,
    currency_symbol: Optional[str] = None,
) -> Explanation:
    """
    Build the summary line and the three factor rows (AUA, fees, engagement).

    ``rankings`` is optional; without it every factor's ``rank`` is ``None``.
    ``currency_symbol`` defaults to ``config.CURRENCY_SYMBOL``.
    """
    record = ClientRecord.coerce(client)
    symbol = currency_symbol if currency_symbol is not None else config.CURRENCY_SYMBOL
    breakdown = priority.breakdown

    summary = (
        f"This client has a {priority.tier.value.lower()} priority score of "
        f"{format_score(priority.score)}/100"
    )

    factors = (
        ExplanationFactor(
            label=LABEL_AUA,
            value=format_currency(record.aua, symbol),
            contribution=breakdown.aua_score,
            max_points=AUA_MAX_POINTS,
            rank=rankings.aua_rank if rankings else None,
        ),
        ExplanationFactor(
            label=LABEL_FEES,
            value=format_currency(record.fees, symbol),
            contribution=breakdown.fees_score,
            max_points=FEES_MAX_POINTS,
            rank=rankings.fees_rank if rankings else None,
        ),
        ExplanationFactor(
            label=LABEL_ENGAGEMENT,
            value=f"{format_count(record.logins)} logins, {format_count(record.meetings)} meetings",
            contribution=breakdown.engagement_score,
            max_points=ENGAGEMENT_MAX_POINTS,
            rank=rankings.engagement_rank if rankings else None,
        ),
    )
    return Explanation(summary=summary, factors=factors)
