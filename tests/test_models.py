"""
Unit tests for clientbook.domain (models, enums, errors).

Tests cover:
  • ClientRecord field aliases and parse-or-zero coercion
  • Immutability
  • PriorityTier thresholds / colours
  • Result-type serialisation
"""

from __future__ import annotations

import logging
from decimal import Decimal

import pytest
from pydantic import ValidationError

from clientbook.domain.enums import PriorityTier, RankedMetric
from clientbook.domain.errors import (
    ClientNotInCohortError, MissingPriorityError, PrioritisationError,
)
from clientbook.domain.models import (
    ClientRecord, Explanation, ExplanationFactor, PriorityScore, Rankings,
    ScoreBreakdown,
)


# ---------------------------------------------------------------------------
# ClientRecord
# ---------------------------------------------------------------------------

class TestClientRecordAliases:
    def test_source_field_names(self, make_row):
        r = ClientRecord.from_row(make_row(client_id="C-1", aua=1, fees=2, logins=3, meetings=4))
        assert (r.client_id, r.aua, r.fees, r.logins, r.meetings) == ("C-1", 1.0, 2.0, 3.0, 4.0)

    def test_id_aliases(self):
        assert ClientRecord.from_row({"id": 5}).client_id == 5
        assert ClientRecord.from_row({"client_id": "x"}).client_id == "x"

    def test_client_id_preferred_over_id(self):
        assert ClientRecord.from_row({"ClientID": "A", "id": "B"}).client_id == "A"

    def test_field_names_accepted(self):
        r = ClientRecord(client_id=1, aua=10, fees=20, logins=30, meetings=40)
        assert r.engagement_total == 70.0

    def test_display_fields(self, make_row):
        r = ClientRecord.from_row(make_row(name="Ada", phone=7700900123, Age=42, Gender="F",
                                           Category="Retired"))
        assert r.name == "Ada"
        assert r.phone == "7700900123"
        assert r.age == "42"
        assert r.category == "Retired"

    def test_unknown_keys_ignored(self, make_row):
        r = ClientRecord.from_row(make_row(completed=True, priority={"score": 1}))
        assert not hasattr(r, "completed")

    def test_id_is_never_parsed(self):
        assert ClientRecord.from_row({"ClientID": "007"}).client_id == "007"


class TestClientRecordCoercion:
    @pytest.mark.parametrize("value", [None, "", "abc", "NaN", "inf", True, -1, "-250.5", [1], {}])
    def test_bad_values_become_zero(self, value):
        r = ClientRecord.from_row({"Total Portfolio AUA": value, "LoginsL12M": value})
        assert r.aua == 0.0
        assert r.logins == 0.0

    def test_missing_fields_are_zero(self):
        r = ClientRecord.from_row({})
        assert (r.aua, r.fees, r.logins, r.meetings) == (0.0, 0.0, 0.0, 0.0)
        assert r.client_id is None

    def test_string_numbers(self):
        r = ClientRecord.from_row({"Total Portfolio AUA": "£1,250,000.75", "MeetingsL12M": "2.5"})
        assert r.aua == 1_250_000.75
        assert r.meetings == 2.5

    def test_fractional_counts_kept(self):
        assert ClientRecord.from_row({"LoginsL12M": 9.7}).logins == 9.7

    def test_coercion_logged(self, caplog):
        caplog.set_level(logging.DEBUG, logger="clientbook.domain.models")
        ClientRecord.from_row({"TotalFees": "lots"})
        assert "Coerced fees='lots' to 0" in caplog.text

    def test_blank_not_logged(self, caplog):
        caplog.set_level(logging.DEBUG, logger="clientbook.domain.models")
        ClientRecord.from_row({"TotalFees": None, "LoginsL12M": ""})
        assert "Coerced" not in caplog.text

    def test_zero_not_logged(self, caplog):
        caplog.set_level(logging.DEBUG, logger="clientbook.domain.models")
        ClientRecord.from_row({"TotalFees": 0, "LoginsL12M": "0"})
        assert "Coerced" not in caplog.text

    def test_unconvertible_numbers_become_zero(self):
        r = ClientRecord.from_row({"Total Portfolio AUA": 10**400, "TotalFees": Decimal("sNaN")})
        assert r.aua == 0.0
        assert r.fees == 0.0


class TestClientRecordBehaviour:
    def test_frozen(self):
        r = ClientRecord(client_id=1)
        with pytest.raises(ValidationError):
            r.aua = 5.0

    def test_coerce_passthrough(self):
        r = ClientRecord(client_id=1)
        assert ClientRecord.coerce(r) is r

    def test_coerce_mapping(self):
        assert ClientRecord.coerce({"ClientID": 2}).client_id == 2

    def test_coerce_rejects_non_mappings(self):
        with pytest.raises(TypeError):
            ClientRecord.coerce(["not", "a", "row"])

    def test_metric(self):
        r = ClientRecord(aua=1, fees=2, logins=3, meetings=4)
        assert r.metric(RankedMetric.AUA) == 1.0
        assert r.metric(RankedMetric.FEES) == 2.0
        assert r.metric(RankedMetric.ENGAGEMENT) == 7.0

    def test_same_client_by_id(self):
        assert ClientRecord(client_id=1, aua=5).same_client(ClientRecord(client_id=1, aua=9))
        assert not ClientRecord(client_id=1).same_client(ClientRecord(client_id=2))

    def test_same_client_without_id(self):
        assert ClientRecord(aua=5).same_client(ClientRecord(aua=5))
        assert not ClientRecord(aua=5).same_client(ClientRecord(aua=6))


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class TestPriorityTier:
    def test_values(self):
        assert [t.value for t in PriorityTier] == ["High", "Medium", "Low"]

    def test_is_str(self):
        assert PriorityTier.HIGH == "High"

    def test_bounds(self):
        assert PriorityTier.HIGH.min_score == 75.0
        assert PriorityTier.MEDIUM.min_score == 60.0
        assert PriorityTier.MEDIUM.max_score == 75.0
        assert PriorityTier.LOW.max_score == 60.0

    def test_colours(self):
        assert PriorityTier.HIGH.colour == "#10b981"
        assert PriorityTier.LOW.colour == "#ef4444"


# ---------------------------------------------------------------------------
# Result types
# ---------------------------------------------------------------------------

class TestResultTypes:
    def test_priority_score_frozen(self):
        p = PriorityScore(score=1.0, tier=PriorityTier.LOW)
        with pytest.raises(AttributeError):
            p.score = 2.0

    def test_breakdown_total(self):
        assert ScoreBreakdown(10.0, 6.0, 1.0).total == 17.0

    def test_rankings_to_dict(self):
        r = Rankings(aua_rank=1, fees_rank=2, engagement_rank=3, total_clients=3)
        assert r.to_dict() == {"aua_rank": 1, "fees_rank": 2, "engagement_rank": 3, "total_clients": 3}
        assert r.rank_for(RankedMetric.FEES) == 2

    def test_priority_score_from_dict(self):
        p = PriorityScore(score=82.31, tier=PriorityTier.HIGH, breakdown=ScoreBreakdown(50.0, 30.0, 2.31))
        assert PriorityScore.from_dict(p.to_dict()) == p

    @pytest.mark.parametrize("bad", [
        {"tier": "High"},
        {"score": 80.0, "tier": "Urgent"},
        {"score": "n/a", "tier": "Low"},
        {"score": 80.0, "tier": "Low"},
        {"score": 80.0, "tier": "High", "breakdown": {"bonus": 1.0}},
    ])
    def test_priority_score_from_bad_dict(self, bad):
        with pytest.raises((KeyError, TypeError, ValueError)):
            PriorityScore.from_dict(bad)

    def test_explanation_to_dict(self):
        exp = Explanation(
            summary="s",
            factors=(ExplanationFactor(label="l", value="v", contribution=1.0, max_points=50),),
        )
        assert exp.to_dict() == {
            "summary": "s",
            "factors": [{"label": "l", "value": "v", "contribution": 1.0, "max_points": 50, "rank": None}],
        }


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class TestErrors:
    def test_hierarchy(self):
        assert issubclass(ClientNotInCohortError, PrioritisationError)
        assert issubclass(ClientNotInCohortError, LookupError)
        assert issubclass(MissingPriorityError, PrioritisationError)
        assert issubclass(MissingPriorityError, ValueError)

    def test_messages(self):
        assert "'C-1'" in str(ClientNotInCohortError("C-1", 4))
        assert "position 2" in str(MissingPriorityError(2))
        assert "has no computed priority" in str(MissingPriorityError(2))
        err = MissingPriorityError(0, "C-1", reason="has a malformed priority")
        assert err.reason == "has a malformed priority"
        assert "client 'C-1' at position 0 has a malformed priority" in str(err)
