"""Data models for share valuation, wages and loans."""

from dataclasses import dataclass, field
from typing import Dict, List, Optional


@dataclass
class ShareValuationState:
    """Per-company share price state carried between valuation periods."""

    current_price: float
    anchor_price: float
    growth_trend_multiplier: float = 1.0


@dataclass
class MetricContribution:
    metric: str
    actual_percent: float
    expected_percent: float
    delta_percent: float
    delta_ratio: float
    contribution: float
    in_grace_period: bool = False


@dataclass
class SharePriceAdjustment:
    new_price: float
    anchor_factor: float
    total_contribution: float
    adjustment: float
    improvement_multiplier: float
    market_cap_requirement: float
    metric_contributions: List[MetricContribution] = field(default_factory=list)


@dataclass
class GrowthTrendResult:
    multiplier: float
    average_performance: Optional[float]
    adjusted: bool
    reason: str


@dataclass
class StaffMember:
    name: str
    skills: Dict[str, float]
    specializations: List[str] = field(default_factory=list)
    wage: Optional[int] = None


@dataclass
class WageStatistics:
    staff_count: int
    weekly_total: float
    seasonal_total: float
    yearly_total: float
    average_weekly: float
    min_weekly: float
    max_weekly: float


@dataclass
class OriginationFeeTerms:
    """Lender-specific origination fee parameters."""

    base_percent: float
    min_fee: float
    max_fee: float
    credit_rating_modifier: float
    duration_modifier: float


@dataclass
class Lender:
    name: str
    type: str  # one of config.LENDER_TYPES
    base_interest_rate: float
    origination_fee: OriginationFeeTerms


@dataclass
class LoanTerms:
    effective_interest_rate: float
    seasonal_payment: float
    total_repayment: float
    total_interest: float
    origination_fee: int
    total_expenses: float
