"""Tests for clientbook.analytics.explanation."""

from __future__ import annotations

from clientbook import config
from clientbook.analytics.explanation import explain_priority
from clientbook.analytics.ranking import rank_client
from clientbook.analytics.scoring import score_client
from clientbook.domain.models import Explanation, Rankings


def test_summary_and_factor_order(make_row):
    row = make_row(aua=650_000, fees=12_000, logins=20, meetings=6)
    priority = score_client(row)
    exp = explain_priority(row, priority)

    assert isinstance(exp, Explanation)
    assert exp.summary == "This client has a high priority score of 82.31/100"
    assert [f.label for f in exp.factors] == [
        "Assets Under Advice", "Total Fees Paid", "Engagement (12 months)",
    ]
    assert [f.max_points for f in exp.factors] == [50, 30, 20]


def test_values_are_formatted(make_row):
    row = make_row(aua="650000", fees=12_000.5, logins=20, meetings=6)
    exp = explain_priority(row, score_client(row), currency_symbol="£")
    assert exp.factors[0].value == "£650,000"
    assert exp.factors[1].value == "£12,000.50"
    assert exp.factors[2].value == "20 logins, 6 meetings"


def test_contributions_come_from_breakdown(make_row):
    row = make_row(aua=100_000, fees=1_500, logins=9, meetings=2.5)
    priority = score_client(row)
    exp = explain_priority(row, priority)
    assert [f.contribution for f in exp.factors] == [
        priority.breakdown.aua_score,
        priority.breakdown.fees_score,
        priority.breakdown.engagement_score,
    ]
    assert exp.summary.endswith("low priority score of 17.00/100")


def test_ranks_absent_without_rankings(make_row):
    row = make_row()
    exp = explain_priority(row, score_client(row))
    assert all(f.rank is None for f in exp.factors)
    assert exp.to_dict()["factors"][0]["rank"] is None


def test_ranks_included_with_rankings(sample_cohort):
    row = sample_cohort[0]
    rankings = rank_client(row, sample_cohort)
    exp = explain_priority(row, score_client(row), rankings)
    assert [f.rank for f in exp.factors] == [3, 3, 2]


def test_explicit_rankings_passed_through(make_row):
    row = make_row()
    rankings = Rankings(aua_rank=4, fees_rank=5, engagement_rank=6, total_clients=9)
    exp = explain_priority(row, score_client(row), rankings)
    assert [f.rank for f in exp.factors] == [4, 5, 6]


def test_currency_defaults_to_config(make_row, monkeypatch):
    monkeypatch.setattr(config, "CURRENCY_SYMBOL", "$")
    row = make_row(aua=1_000)
    exp = explain_priority(row, score_client(row))
    assert exp.factors[0].value == "$1,000"


def test_malformed_values_display_as_zero(make_row):
    row = make_row(aua="n/a", fees=None, logins="", meetings="x")
    exp = explain_priority(row, score_client(row), currency_symbol="£")
    assert exp.factors[0].value == "£0"
    assert exp.factors[2].value == "0 logins, 0 meetings"
