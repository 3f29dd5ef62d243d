"""
Centralized configuration for Client Book.
All settings come from environment variables for 12-factor deployment.

Nothing here changes how a client is scored; the scoring thresholds are
fixed in ``clientbook.core.constants``.  These knobs only affect presentation
and logging.
"""

import os

from clientbook.core.constants import DEFAULT_CURRENCY_SYMBOL


def _env_str(name: str, default: str) -> str:
    val = os.environ.get(name)
    if val is None or not val.strip():
        return default
    return val.strip()


# ---------------------------------------------------------------------------
# Presentation
# ---------------------------------------------------------------------------
# Symbol prefixed to AUA / fee values in explanations.
CURRENCY_SYMBOL = _env_str("CLIENTBOOK_CURRENCY_SYMBOL", DEFAULT_CURRENCY_SYMBOL)

# ---------------------------------------------------------------------------
# Logging
# ---------------------------------------------------------------------------
LOG_LEVEL = _env_str("LOG_LEVEL", "INFO").upper()
