"""
Client Book — Shared utilities.

Pure functions used across the whole engine. No imports from other clientbook
modules; only the standard library and clientbook.core.constants are allowed.
"""

from __future__ import annotations

import math
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Optional, Sequence

from clientbook.core.constants import DEFAULT_CURRENCY_SYMBOL, SCORE_DECIMALS


_CURRENCY_PREFIXES = ("£", "$", "€")


# ---------------------------------------------------------------------------
# Parse-or-zero coercion
# ---------------------------------------------------------------------------

def to_number(value: Any) -> Optional[float]:
    """Parse ``value`` as a finite float, or return ``None`` if it is not one.

    Accepts ints, floats, Decimals and numeric strings (thousands separators
    and a leading currency symbol are tolerated).  Booleans are rejected even
    though ``bool`` subclasses ``int``.
    """
    if value is None or isinstance(value, bool):
        return None

    if isinstance(value, (int, float, Decimal)):
        try:
            number = float(value)
        except (OverflowError, ValueError):
            # ints beyond float range, Decimal("sNaN")
            return None
    elif isinstance(value, str):
        text = value.strip().replace(",", "")
        if text[:1] in _CURRENCY_PREFIXES:
            text = text[1:].strip()
        if not text:
            return None
        try:
            number = float(text)
        except ValueError:
            return None
    else:
        return None

    if not math.isfinite(number):
        return None
    return number


def parse_amount(value: Any) -> float:
    """Coerce a loosely typed row value to a non-negative finite float.

    Anything ``to_number`` cannot parse, and any negative number, becomes
    ``0.0``.
    """
    number = to_number(value)
    if number is None or number < 0:
        return 0.0
    return number


def is_blank(value: Any) -> bool:
    """True for values that are legitimately "absent" (None or empty string)."""
    return value is None or (isinstance(value, str) and not value.strip())


# ---------------------------------------------------------------------------
# Rounding
# ---------------------------------------------------------------------------

def round_half_up(value: float, decimals: int = SCORE_DECIMALS) -> float:
    """Round ``value`` half-up at ``decimals`` places.

    Python's built-in ``round`` uses banker's rounding on a binary float, so
    ``round(0.125, 2)`` gives ``0.12``.  Going through ``Decimal(str(x))``
    rounds the shortest decimal repr of the value instead.
    """
    quantum = Decimal(1).scaleb(-decimals)
    return float(Decimal(str(value)).quantize(quantum, rounding=ROUND_HALF_UP))


# ---------------------------------------------------------------------------
# Math helpers
# ---------------------------------------------------------------------------

def clamp(value: float, lo: float, hi: float) -> float:
    """Clamp ``value`` to the range [lo, hi]."""
    return max(lo, min(hi, value))


def mean_safe(values: Sequence[float], default: float = 0.0) -> float:
    """Return mean of ``values``, or ``default`` when the sequence is empty."""
    if not values:
        return default
    return math.fsum(values) / len(values)


# ---------------------------------------------------------------------------
# Formatting
# ---------------------------------------------------------------------------

def format_currency(amount: float, symbol: Optional[str] = None) -> str:
    """Money with thousands separators, e.g. ``650000 → '£650,000'``."""
    if symbol is None:
        symbol = DEFAULT_CURRENCY_SYMBOL
    if float(amount).is_integer():
        return f"{symbol}{amount:,.0f}"
    return f"{symbol}{amount:,.2f}"


def format_count(value: float) -> str:
    """Render a count without a trailing ``.0`` (``9.0 → '9'``, ``2.5 → '2.5'``)."""
    if float(value).is_integer():
        return str(int(value))
    return f"{value:.2f}".rstrip("0").rstrip(".")


def format_score(score: float) -> str:
    """Two-decimal score string, e.g. ``17 → '17.00'``."""
    return f"{score:.{SCORE_DECIMALS}f}"
