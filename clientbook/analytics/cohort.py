"""
clientbook.analytics.cohort — Score a whole cohort snapshot.

Mirrors the dashboard's global ranking: every client gets a priority and the
list is ordered by score, highest first.
"""

from __future__ import annotations

import logging
from typing import Any, Iterable, List, Optional

from clientbook.analytics.scoring import score_client
from clientbook.domain.enums import PriorityTier
from clientbook.domain.models import ClientRecord, PrioritisedClient

logger = logging.getLogger(__name__)


def prioritise_cohort(rows: Iterable[Any]) -> List[PrioritisedClient]:
    """
    Score every row and return them sorted by score descending.

    Equal scores keep their input order.  The input rows are not mutated.
    """
    scored = []
    for row in rows:
        record = ClientRecord.coerce(row)
        scored.append(PrioritisedClient(client=record, priority=score_client(record)))

    scored.sort(key=lambda pc: pc.score, reverse=True)
    logger.debug("Prioritised cohort of %d clients", len(scored))
    return scored


def filter_by_tier(
    cohort: Iterable[PrioritisedClient],
    tier: Optional[PriorityTier] = None,
) -> List[PrioritisedClient]:
    """Members in ``tier``, preserving order; ``None`` returns everyone."""
    if tier is None:
        return list(cohort)
    return [pc for pc in cohort if pc.tier == tier]
