"""
clientbook.analytics.statistics — Cohort-level tier distribution and mean score.

Every member must already carry a computed priority (see
``clientbook.analytics.cohort.prioritise_cohort``).  A member without one is
a caller error and raises ``MissingPriorityError``; it is never skipped.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, Mapping

from clientbook.core.utils import mean_safe, round_half_up
from clientbook.domain.enums import TIER_ORDER, PriorityTier
from clientbook.domain.errors import MissingPriorityError
from clientbook.domain.models import ClientRecord, PriorityScore, Statistics

logger = logging.getLogger(__name__)


def _client_id_of(member: Any) -> Any:
    if isinstance(member, Mapping):
        return ClientRecord.from_row(member).client_id
    return getattr(member, "client_id", None)


def _priority_of(member: Any, index: int) -> PriorityScore:
    """Read the precomputed priority off a cohort member."""
    if isinstance(member, Mapping):
        priority = member.get("priority")
    else:
        priority = getattr(member, "priority", None)

    if isinstance(priority, PriorityScore):
        return priority
    if isinstance(priority, Mapping):
        # serialized form, as produced by PriorityScore.to_dict()
        try:
            return PriorityScore.from_dict(priority)
        except (KeyError, TypeError, ValueError):
            raise MissingPriorityError(
                index, _client_id_of(member), reason="has a malformed priority",
            ) from None
    if priority is not None:
        raise MissingPriorityError(
            index,
            _client_id_of(member),
            reason=f"has a priority of unsupported type {type(priority).__name__}",
        )
    raise MissingPriorityError(index, _client_id_of(member))


def calculate_statistics(cohort: Iterable[Any]) -> Statistics:
    """
    Tier counts and average score for a scored cohort.

    Args:
        cohort: ``PrioritisedClient`` objects, or any mappings / objects with
                a ``priority`` holding a ``PriorityScore`` or its
                ``to_dict()`` form.

    Returns:
        Statistics whose tier counts sum to the cohort size.  An empty
        cohort gives all-zero counts and an average of 0.

    Raises:
        MissingPriorityError: a member has no computed priority, or one that
            cannot be read.
    """
    tier_counts: Dict[PriorityTier, int] = {tier: 0 for tier in TIER_ORDER}
    scores = []

    for index, member in enumerate(cohort):
        priority = _priority_of(member, index)
        tier_counts[priority.tier] += 1
        scores.append(priority.score)

    average = round_half_up(mean_safe(scores)) if scores else 0.0

    logger.debug(
        "Cohort statistics: %d clients, %s, average %.2f",
        len(scores),
        {tier.value: count for tier, count in tier_counts.items()},
        average,
    )
    return Statistics.from_counts(
        tier_counts,
        total_clients=len(scores),
        average_score=average,
    )
