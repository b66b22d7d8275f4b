from src.finance.growth_trend import (
    apply_growth_trend,
    average_performance,
    performance_score,
    update_growth_trend,
)
from src.finance.loans import (
    calculate_credit_rating_modifier,
    calculate_effective_interest_rate,
    calculate_loan_terms,
    calculate_origination_fee,
    calculate_seasonal_payment,
    duration_interest_modifier,
)
from src.finance.models import (
    GrowthTrendResult,
    Lender,
    LoanTerms,
    MetricContribution,
    OriginationFeeTerms,
    SharePriceAdjustment,
    ShareValuationState,
    StaffMember,
    WageStatistics,
)
from src.finance.share_valuation import (
    anchor_factor,
    delta_ratio,
    economy_multiplier,
    expected_improvements,
    improvement_percent,
    in_grace_period,
    market_cap_requirement,
    next_share_price,
    prestige_multiplier,
)
from src.finance.wage import (
    calculate_wage,
    max_wage,
    normalize_wage,
    seasonal_wage_total,
    wage_statistics,
    weekly_wage_total,
    yearly_wage_total,
)

__all__ = [
    "GrowthTrendResult",
    "Lender",
    "LoanTerms",
    "MetricContribution",
    "OriginationFeeTerms",
    "SharePriceAdjustment",
    "ShareValuationState",
    "StaffMember",
    "WageStatistics",
    "anchor_factor",
    "apply_growth_trend",
    "average_performance",
    "calculate_credit_rating_modifier",
    "calculate_effective_interest_rate",
    "calculate_loan_terms",
    "calculate_origination_fee",
    "calculate_seasonal_payment",
    "calculate_wage",
    "delta_ratio",
    "duration_interest_modifier",
    "economy_multiplier",
    "expected_improvements",
    "improvement_percent",
    "in_grace_period",
    "market_cap_requirement",
    "max_wage",
    "next_share_price",
    "normalize_wage",
    "performance_score",
    "prestige_multiplier",
    "seasonal_wage_total",
    "update_growth_trend",
    "wage_statistics",
    "weekly_wage_total",
    "yearly_wage_total",
]
