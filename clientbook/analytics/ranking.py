"""
clientbook.analytics.ranking — Peer rankings within a cohort snapshot.

Each client is ranked on three raw metrics (AUA, fees, logins + meetings),
highest first.  Ties keep the cohort's original relative order (Python's
sort is stable, including with ``reverse=True``), so repeated calls on an
unchanged cohort always return the same ranks.

Rankings are only meaningful against the exact cohort they were computed
from; nothing here is cached between calls.
"""

from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Tuple

from clientbook.domain.enums import RankedMetric
from clientbook.domain.errors import ClientNotInCohortError
from clientbook.domain.models import ClientRecord, Rankings

logger = logging.getLogger(__name__)


class CohortRankIndex:
    """
    The three descending orderings of one cohort snapshot, computed once.

    Build one of these when ranking many members of the same cohort; each
    lookup is then O(n) for the membership scan instead of three sorts.
    """

    def __init__(self, cohort: Iterable[Any]):
        self._members: Tuple[ClientRecord, ...] = tuple(
            ClientRecord.coerce(c) for c in cohort
        )
        self._ranks: Dict[RankedMetric, List[int]] = {
            metric: self._rank_positions(metric) for metric in RankedMetric
        }
        logger.debug("Built rank index for cohort of %d clients", len(self._members))

    def __len__(self) -> int:
        return len(self._members)

    @property
    def members(self) -> Tuple[ClientRecord, ...]:
        return self._members

    def _rank_positions(self, metric: RankedMetric) -> List[int]:
        """rank_by_member[i] is the 1-based rank of the i-th cohort member."""
        order = sorted(
            range(len(self._members)),
            key=lambda i: self._members[i].metric(metric),
            reverse=True,
        )
        rank_by_member = [0] * len(self._members)
        for position, member_index in enumerate(order, start=1):
            rank_by_member[member_index] = position
        return rank_by_member

    def position_of(self, client: Any) -> int:
        """0-based cohort index of ``client``; raises if it is not a member."""
        record = ClientRecord.coerce(client)
        for index, member in enumerate(self._members):
            if member.same_client(record):
                return index
        raise ClientNotInCohortError(record.client_id, len(self._members))

    def rankings_at(self, index: int) -> Rankings:
        return Rankings(
            aua_rank=self._ranks[RankedMetric.AUA][index],
            fees_rank=self._ranks[RankedMetric.FEES][index],
            engagement_rank=self._ranks[RankedMetric.ENGAGEMENT][index],
            total_clients=len(self._members),
        )

    def rank(self, client: Any) -> Rankings:
        """Rankings of ``client`` within this cohort."""
        return self.rankings_at(self.position_of(client))

    def all_rankings(self) -> List[Rankings]:
        """Rankings of every member, in cohort order."""
        return [self.rankings_at(i) for i in range(len(self._members))]


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def rank_client(client: Any, cohort: Iterable[Any]) -> Rankings:
    """
    Rank one client against the full cohort it belongs to.

    Args:
        client: The client to rank (``ClientRecord`` or row mapping).
        cohort: Every client in the snapshot, including ``client`` itself.

    Returns:
        Rankings with 1-based AUA / fees / engagement ranks and cohort size.

    Raises:
        ClientNotInCohortError: ``client`` is not a member of ``cohort``.
    """
    return CohortRankIndex(cohort).rank(client)


def rank_all(cohort: Iterable[Any]) -> List[Rankings]:
    """Rankings for every cohort member, in cohort order, from a single index build."""
    return CohortRankIndex(cohort).all_rankings()
