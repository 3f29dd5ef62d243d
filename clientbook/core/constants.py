"""
Client Book — System-wide constants.

Every threshold used by the prioritisation engine lives here. If you find a
literal in the scoring code that is not a local variable, it belongs here
instead.
"""

# ---------------------------------------------------------------------------
# Source row field names (as stored in the client table)
# ---------------------------------------------------------------------------

FIELD_CLIENT_ID: str = "ClientID"
FIELD_AUA: str = "Total Portfolio AUA"
FIELD_FEES: str = "TotalFees"
FIELD_LOGINS: str = "LoginsL12M"
FIELD_MEETINGS: str = "MeetingsL12M"

# ---------------------------------------------------------------------------
# Component caps (must sum to SCORE_MAX)
# ---------------------------------------------------------------------------

AUA_MAX_POINTS: float = 50.0
FEES_MAX_POINTS: float = 30.0
ENGAGEMENT_MAX_POINTS: float = 20.0

SCORE_MIN: float = 0.0
SCORE_MAX: float = 100.0

# Decimal places kept on scores, breakdowns and averages
SCORE_DECIMALS: int = 2

# ---------------------------------------------------------------------------
# AUA step function: (lower bound, points), highest bound first
# Calibrated for books ranging roughly £30k – £800k
# ---------------------------------------------------------------------------

AUA_STEPS: tuple = (
    (600_000, 50.0),   # £600k+
    (400_000, 40.0),   # £400k – £599k
    (250_000, 30.0),   # £250k – £399k
    (150_000, 20.0),   # £150k – £249k
    (75_000, 10.0),    # £75k – £149k
)
AUA_TAIL_DIVISOR: float = 7_500.0   # linear ramp below the lowest step
AUA_TAIL_CAP: float = 5.0

# ---------------------------------------------------------------------------
# Fees step function: (lower bound, points)
# ---------------------------------------------------------------------------

FEES_STEPS: tuple = (
    (10_000, 30.0),
    (7_500, 24.0),
    (5_000, 18.0),
    (2_500, 12.0),
    (1_000, 6.0),
)
FEES_TAIL_DIVISOR: float = 200.0
FEES_TAIL_CAP: float = 3.0

# ---------------------------------------------------------------------------
# Engagement: logins and meetings are capped independently then summed
# ---------------------------------------------------------------------------

LOGINS_PER_POINT: float = 18.0      # 180 logins in 12 months = 10 points
LOGINS_MAX_POINTS: float = 10.0
MEETINGS_PER_POINT: float = 5.0     # 50 meetings in 12 months = 10 points
MEETINGS_MAX_POINTS: float = 10.0

# ---------------------------------------------------------------------------
# Tier cutoffs (applied to the final rounded score)
# ---------------------------------------------------------------------------

TIER_HIGH_MIN_SCORE: float = 75.0
TIER_MEDIUM_MIN_SCORE: float = 60.0

TIER_COLOUR_HIGH: str = "#10b981"
TIER_COLOUR_MEDIUM: str = "#f97316"
TIER_COLOUR_LOW: str = "#ef4444"

# ---------------------------------------------------------------------------
# Explanation labels
# ---------------------------------------------------------------------------

LABEL_AUA: str = "Assets Under Advice"
LABEL_FEES: str = "Total Fees Paid"
LABEL_ENGAGEMENT: str = "Engagement (12 months)"

DEFAULT_CURRENCY_SYMBOL: str = "£"
