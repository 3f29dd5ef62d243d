"""
Pytest configuration and shared fixtures.

Fixtures available to all tests:
  • make_row(...)     — build a raw client row dict (source-table field names)
  • sample_cohort     — five rows spanning all three tiers
  • scored_cohort     — sample_cohort run through prioritise_cohort
"""

from __future__ import annotations

import os
import sys
from typing import Any, Dict, List

import pytest

# Ensure the project root is on the path so all clientbook imports resolve.
PROJECT_ROOT = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from clientbook.analytics.cohort import prioritise_cohort  # noqa: E402


# ---------------------------------------------------------------------------
# Row factory
# ---------------------------------------------------------------------------

def _row(
    client_id: Any = 1,
    aua: Any = 0,
    fees: Any = 0,
    logins: Any = 0,
    meetings: Any = 0,
    **extra: Any,
) -> Dict[str, Any]:
    row = {
        "ClientID": client_id,
        "Total Portfolio AUA": aua,
        "TotalFees": fees,
        "LoginsL12M": logins,
        "MeetingsL12M": meetings,
    }
    row.update(extra)
    return row


@pytest.fixture
def make_row():
    return _row


@pytest.fixture
def sample_cohort() -> List[Dict[str, Any]]:
    return [
        # 40 + 12 + 5 + 4 = 61.00 → Medium
        _row(client_id="C-001", aua=450_000, fees=3_000, logins=90, meetings=20,
             name="Ada Lovelace"),
        # 50 + 30 + 10 + 10 = 100.00 → High
        _row(client_id="C-002", aua=800_000, fees=15_000, logins=180, meetings=50,
             name="Grace Hopper"),
        # 10 + 6 + 0.5 + 0.4 = 16.90 → Low
        _row(client_id="C-003", aua=100_000, fees=1_500, logins=9, meetings=2,
             name="Alan Turing"),
        # 0 → Low (all metrics missing / malformed)
        _row(client_id="C-004", aua=None, fees="n/a", logins="", meetings=None,
             name="Unknown"),
        # 50 + 24 + 1 + 2 = 77.00 → High
        _row(client_id="C-005", aua=650_000, fees=8_000, logins=18, meetings=10,
             name="Edsger Dijkstra"),
    ]


@pytest.fixture
def scored_cohort(sample_cohort):
    return prioritise_cohort(sample_cohort)
