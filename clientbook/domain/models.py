"""
clientbook.domain.models — Canonical Pydantic / dataclass models.

These are the single source of truth for data structures flowing through
the prioritisation engine.  ``ClientRecord`` is the one place where loosely
typed row data is coerced; everything downstream works on clean floats.

Import pattern::

    from clientbook.domain.models import ClientRecord, PriorityScore, Rankings
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Mapping, Optional, Tuple

from pydantic import AliasChoices, BaseModel, ConfigDict, Field, field_validator

from clientbook.core.constants import (
    FIELD_AUA, FIELD_CLIENT_ID, FIELD_FEES, FIELD_LOGINS, FIELD_MEETINGS,
)
from clientbook.core.utils import format_score, is_blank, parse_amount, to_number
from clientbook.domain.enums import TIER_ORDER, PriorityTier, RankedMetric

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Client record (one row from the client table)
# ---------------------------------------------------------------------------

class ClientRecord(BaseModel):
    """
    One client row, coerced once at the boundary.

    Metric fields never fail validation: absent, null, non-numeric and
    negative values all become ``0.0``.  Unknown row keys (``priority``,
    ``completed``, …) are ignored.
    """

    model_config = ConfigDict(frozen=True, extra="ignore")

    # Opaque identity, compared for equality only
    client_id: Any = Field(
        default=None,
        validation_alias=AliasChoices(FIELD_CLIENT_ID, "id", "client_id"),
    )

    # Scored metrics
    aua:      float = Field(default=0.0, validation_alias=AliasChoices(FIELD_AUA, "aua"))
    fees:     float = Field(default=0.0, validation_alias=AliasChoices(FIELD_FEES, "fees"))
    logins:   float = Field(default=0.0, validation_alias=AliasChoices(FIELD_LOGINS, "logins"))
    meetings: float = Field(default=0.0, validation_alias=AliasChoices(FIELD_MEETINGS, "meetings"))

    # Display-only fields (never used in scoring)
    name:     Optional[str] = Field(default=None, validation_alias=AliasChoices("name", "ClientName"))
    email:    Optional[str] = None
    phone:    Optional[str] = None
    number:   Optional[str] = None
    age:      Optional[str] = Field(default=None, validation_alias=AliasChoices("Age", "age"))
    gender:   Optional[str] = Field(default=None, validation_alias=AliasChoices("Gender", "gender"))
    category: Optional[str] = Field(default=None, validation_alias=AliasChoices("Category", "category"))

    @field_validator("aua", "fees", "logins", "meetings", mode="before")
    @classmethod
    def _coerce_metric(cls, value: Any, info) -> float:
        amount = parse_amount(value)
        if amount == 0.0 and not is_blank(value) and to_number(value) != 0.0:
            logger.debug("Coerced %s=%r to 0", info.field_name, value)
        return amount

    @field_validator("name", "email", "phone", "number", "age", "gender", "category", mode="before")
    @classmethod
    def _display_text(cls, value: Any) -> Optional[str]:
        if value is None:
            return None
        return str(value)

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "ClientRecord":
        """Build a record from a raw row mapping."""
        return cls.model_validate(dict(row))

    @classmethod
    def coerce(cls, obj: Any) -> "ClientRecord":
        """Accept a ``ClientRecord``, a ``PrioritisedClient`` or a raw row mapping."""
        if isinstance(obj, ClientRecord):
            return obj
        if isinstance(obj, PrioritisedClient):
            return obj.client
        if isinstance(obj, Mapping):
            return cls.from_row(obj)
        raise TypeError(
            f"expected a ClientRecord or a row mapping, got {type(obj).__name__}"
        )

    @property
    def engagement_total(self) -> float:
        """Logins plus meetings, the raw metric used for engagement ranking."""
        return self.logins + self.meetings

    def metric(self, metric: RankedMetric) -> float:
        """Raw value of a ranked metric."""
        if metric is RankedMetric.AUA:
            return self.aua
        if metric is RankedMetric.FEES:
            return self.fees
        return self.engagement_total

    def same_client(self, other: "ClientRecord") -> bool:
        """Identity check: by ``client_id``, or whole-record equality when either lacks one."""
        if self.client_id is None or other.client_id is None:
            return self == other
        return self.client_id == other.client_id


# ---------------------------------------------------------------------------
# Scorer output
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ScoreBreakdown:
    """Per-component contributions, each rounded to 2 dp."""
    aua_score:        float = 0.0    # [0, 50]
    fees_score:       float = 0.0    # [0, 30]
    engagement_score: float = 0.0    # [0, 20]

    @property
    def total(self) -> float:
        return self.aua_score + self.fees_score + self.engagement_score

    def to_dict(self) -> Dict[str, float]:
        return {
            "aua_score":        self.aua_score,
            "fees_score":       self.fees_score,
            "engagement_score": self.engagement_score,
        }


@dataclass(frozen=True)
class PriorityScore:
    """
    Scored assessment of one client.

    ``score`` is in [0, 100] rounded half-up to 2 dp; ``tier`` is a pure
    function of ``score``.
    """
    score:     float
    tier:      PriorityTier
    breakdown: ScoreBreakdown = field(default_factory=ScoreBreakdown)

    @property
    def score_display(self) -> str:
        return format_score(self.score)

    def to_dict(self) -> Dict[str, Any]:
        """Serialize to plain dict for JSON responses."""
        return {
            "score":     self.score,
            "tier":      self.tier.value,
            "breakdown": self.breakdown.to_dict(),
        }

    @classmethod
    def from_dict(cls, d: Mapping[str, Any]) -> "PriorityScore":
        """Rebuild from ``to_dict()`` output.

        Raises ``KeyError``, ``TypeError`` or ``ValueError`` when ``d`` is not
        that shape, or when its tier disagrees with its score.
        """
        score = to_number(d["score"])
        if score is None:
            raise ValueError(f"score {d['score']!r} is not a finite number")
        tier = PriorityTier(d["tier"])
        if tier is not PriorityTier.for_score(score):
            raise ValueError(f"tier {tier.value!r} does not match score {score}")
        return cls(
            score=score,
            tier=tier,
            breakdown=ScoreBreakdown(**(d.get("breakdown") or {})),
        )


# ---------------------------------------------------------------------------
# RankingEngine output
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class Rankings:
    """1-based positions of one client within one cohort snapshot."""
    aua_rank:        int
    fees_rank:       int
    engagement_rank: int
    total_clients:   int

    def rank_for(self, metric: RankedMetric) -> int:
        return {
            RankedMetric.AUA: self.aua_rank,
            RankedMetric.FEES: self.fees_rank,
            RankedMetric.ENGAGEMENT: self.engagement_rank,
        }[metric]

    def to_dict(self) -> Dict[str, int]:
        return {
            "aua_rank":        self.aua_rank,
            "fees_rank":       self.fees_rank,
            "engagement_rank": self.engagement_rank,
            "total_clients":   self.total_clients,
        }


# ---------------------------------------------------------------------------
# ExplanationBuilder output
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class ExplanationFactor:
    label:        str
    value:        str             # formatted raw value, e.g. "£650,000"
    contribution: float
    max_points:   float
    rank:         Optional[int] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "label":        self.label,
            "value":        self.value,
            "contribution": self.contribution,
            "max_points":   self.max_points,
            "rank":         self.rank,
        }


@dataclass(frozen=True)
class Explanation:
    summary: str
    factors: Tuple[ExplanationFactor, ...] = ()

    def to_dict(self) -> Dict[str, Any]:
        return {
            "summary": self.summary,
            "factors": [f.to_dict() for f in self.factors],
        }


# ---------------------------------------------------------------------------
# StatisticsAggregator output
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class TierCount:
    tier:  PriorityTier
    count: int

    @property
    def colour(self) -> str:
        return self.tier.colour

    def to_dict(self) -> Dict[str, Any]:
        return {"tier": self.tier.value, "count": self.count, "colour": self.colour}


@dataclass(frozen=True)
class Statistics:
    """Tier distribution and mean score of a scored cohort."""
    tier_distribution: Tuple[TierCount, ...] = ()    # High, Medium, Low
    total_clients:     int = 0
    average_score:     float = 0.0

    @classmethod
    def from_counts(
        cls,
        counts: Mapping[PriorityTier, int],
        total_clients: int = 0,
        average_score: float = 0.0,
    ) -> "Statistics":
        """Build from a tier → count mapping; missing tiers count as 0."""
        return cls(
            tier_distribution=tuple(TierCount(tier, counts.get(tier, 0)) for tier in TIER_ORDER),
            total_clients=total_clients,
            average_score=average_score,
        )

    @property
    def tier_counts(self) -> Mapping[PriorityTier, int]:
        """Read-only tier → count view."""
        return MappingProxyType({tc.tier: tc.count for tc in self.tier_distribution})

    def count(self, tier: PriorityTier) -> int:
        return self.tier_counts.get(tier, 0)

    @property
    def average_score_display(self) -> str:
        return format_score(self.average_score)

    def to_dict(self) -> Dict[str, Any]:
        return {
            "tier_distribution": [t.to_dict() for t in self.tier_distribution],
            "total_clients":     self.total_clients,
            "average_score":     self.average_score,
        }


# ---------------------------------------------------------------------------
# Cohort member with its computed priority
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class PrioritisedClient:
    client:   ClientRecord
    priority: PriorityScore

    @property
    def client_id(self) -> Any:
        return self.client.client_id

    @property
    def score(self) -> float:
        return self.priority.score

    @property
    def tier(self) -> PriorityTier:
        return self.priority.tier

    def to_dict(self) -> Dict[str, Any]:
        d = self.client.model_dump()
        d["priority"] = self.priority.to_dict()
        return d
