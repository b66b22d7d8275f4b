# ------------------------------------------------------------------
# Economy
# ------------------------------------------------------------------

# Ordered worst to best
ECONOMY_PHASES = ("Crash", "Recession", "Stable", "Expansion", "Boom")

# Scales expected metric improvement; a booming economy raises the bar
ECONOMY_EXPECTATION_MULTIPLIERS = {
    "Crash": 0.6,
    "Recession": 0.8,
    "Stable": 1.0,
    "Expansion": 1.2,
    "Boom": 1.5,
}

# Scales loan interest; money is dear in a downturn
ECONOMY_INTEREST_MULTIPLIERS = {
    "Crash": 1.5,
    "Recession": 1.2,
    "Stable": 1.0,
    "Expansion": 0.9,
    "Boom": 0.8,
}

# ------------------------------------------------------------------
# Share valuation
# ------------------------------------------------------------------

TRACKED_METRICS = (
    "earnings_per_share",
    "revenue_per_share",
    "dividend_per_share",
    "revenue_growth",
    "profit_margin",
    "credit_rating",
    "fixed_asset_ratio",
    "prestige",
)

# Profitability metrics are not scored in the company's first year
PROFITABILITY_METRICS = ("earnings_per_share", "revenue_per_share", "revenue_growth", "profit_margin")

# Compared against a year-old snapshot; not scored until that history exists
TREND_METRICS = ("credit_rating", "fixed_asset_ratio", "prestige")

# Trend metrics that earn nothing when rising from a zero base
ZERO_BASE_TREND_METRICS = ("credit_rating", "fixed_asset_ratio")

# Price change (currency units) per 100% beat, and the beat cap in ratio terms
INCREMENTAL_METRIC_CONFIG = {
    "earnings_per_share": {"base_adjustment": 0.04, "max_ratio": 3.0},
    "revenue_per_share": {"base_adjustment": 0.03, "max_ratio": 3.0},
    "dividend_per_share": {"base_adjustment": 0.03, "max_ratio": 3.0},
    "revenue_growth": {"base_adjustment": 0.03, "max_ratio": 2.0},
    "profit_margin": {"base_adjustment": 0.03, "max_ratio": 2.0},
    "credit_rating": {"base_adjustment": 0.03, "max_ratio": 2.0},
    "fixed_asset_ratio": {"base_adjustment": 0.02, "max_ratio": 2.0},
    "prestige": {"base_adjustment": 0.02, "max_ratio": 2.0},
}

INCREMENTAL_ANCHOR_CONFIG = {
    "strength": 2.0,
    "exponent": 1.25,
    "min_price_ratio_to_anchor": 0.1,  # Price floor as a fraction of anchor
}
MIN_SHARE_PRICE = 0.01

# Clamp negative surprises at -max_ratio as well as positive ones
SYMMETRIC_DOWNSIDE = True

# Expected per-period improvement (fraction) for each metric at baseline
EXPECTED_IMPROVEMENT_RATES = {
    "earnings_per_share": 0.012,
    "revenue_per_share": 0.012,
    "dividend_per_share": 0.005,
    "revenue_growth": 0.012,
    "profit_margin": 0.01,
    "credit_rating": 0.005,
    "fixed_asset_ratio": 0.002,
    "prestige": 0.005,
}

# Long-run reference levels used when no history exists
EXPECTED_VALUE_BASELINES = {
    "revenue_growth": 0.10,
    "profit_margin": 0.15,
}

PRESTIGE_SCALING = {
    "base": 1.0,
    "max_multiplier": 2.0,
}

# Bigger companies are expected to keep growing; requirement in fraction/period
MARKET_CAP_MODIFIER_CONFIG = {
    "enabled": True,
    "base_market_cap": 1_000_000,
    "base_rate": 0.003,
    "max_rate": 0.01,
}

# Denominator guard for revenue growth improvement (growth can be negative)
REVENUE_GROWTH_DENOMINATOR_OFFSET = 0.01
# Previous revenue growth at or below this is treated as having no baseline
REVENUE_GROWTH_FLOOR = -1.0

# ------------------------------------------------------------------
# Growth trend ratchet
# ------------------------------------------------------------------

GROWTH_TREND_CONFIG = {
    "adjustment_increment": 0.02,
    "max_adjustment": 0.5,  # multiplier ceiling = 1 + max_adjustment
    "min_adjustment": 0.5,  # multiplier floor = 1 - min_adjustment
    "periods_to_track": 4,
    "outperform_threshold": 1.0,
    "underperform_threshold": 0.8,
}

# Metrics compared against expectations when ratcheting the trend
GROWTH_TREND_METRICS = ("revenue_growth", "profit_margin", "earnings_per_share", "dividend_per_share")

WEEKS_PER_SEASON = 12
SEASONS_PER_YEAR = 4
WEEKS_PER_YEAR = WEEKS_PER_SEASON * SEASONS_PER_YEAR
FIRST_YEAR_GRACE_WEEKS = WEEKS_PER_YEAR
DIVIDEND_GRACE_WEEKS = 3 * WEEKS_PER_SEASON
TREND_HISTORY_WEEKS = WEEKS_PER_YEAR  # Trend metrics compare against a snapshot this old

# ------------------------------------------------------------------
# Wages
# ------------------------------------------------------------------

BASE_WEEKLY_WAGE = 500
SKILL_WAGE_MULTIPLIER = 1000
SPECIALIZATION_WAGE_BONUS = 1.3  # Multiplicative, per specialization
MAX_SPECIALIZATIONS = 5
WAGE_NORMALIZATION_EXPONENT = 0.7
STAFF_SKILLS = ("field", "winery", "administration", "sales", "maintenance")

# ------------------------------------------------------------------
# Loans
# ------------------------------------------------------------------

LENDER_TYPES = ("Bank", "Investment Fund", "Private Lender", "QuickLoan")

LENDER_TYPE_MULTIPLIERS = {
    "Bank": 0.9,
    "Investment Fund": 1.1,
    "Private Lender": 1.4,
    "QuickLoan": 1.6,
}

# Interest multiplier = BEST + SPREAD * (1 - credit_rating), 0.8 at AAA to 1.5 at C
CREDIT_RATING_BEST_MULTIPLIER = 0.8
CREDIT_RATING_MULTIPLIER_SPREAD = 0.7
DEFAULT_CREDIT_RATING = 0.5

# (max seasons, interest modifier); longer loans get slightly lower rates
DURATION_INTEREST_MODIFIERS = [
    (16, 1.0),    # up to 4 years
    (40, 0.95),   # up to 10 years
    (80, 0.90),   # up to 20 years
]
VERY_LONG_TERM_INTEREST_MODIFIER = 0.85

# Origination fee credit tiers (minimum credit rating for each tier)
ORIGINATION_EXCELLENT_CREDIT = 0.8
ORIGINATION_GOOD_CREDIT = 0.6
ORIGINATION_AVERAGE_CREDIT = 0.4
ORIGINATION_POOR_CREDIT = 0.2
ORIGINATION_PENALTY_REFERENCE = 1.5
