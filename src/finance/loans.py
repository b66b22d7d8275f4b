"""Loan pricing: effective interest, seasonal annuity payments and fees."""

import logging
from typing import Optional

from src.finance.config import (
    CREDIT_RATING_BEST_MULTIPLIER,
    CREDIT_RATING_MULTIPLIER_SPREAD,
    DEFAULT_CREDIT_RATING,
    DURATION_INTEREST_MODIFIERS,
    ECONOMY_INTEREST_MULTIPLIERS,
    LENDER_TYPE_MULTIPLIERS,
    ORIGINATION_AVERAGE_CREDIT,
    ORIGINATION_EXCELLENT_CREDIT,
    ORIGINATION_GOOD_CREDIT,
    ORIGINATION_PENALTY_REFERENCE,
    ORIGINATION_POOR_CREDIT,
    VERY_LONG_TERM_INTEREST_MODIFIER,
)
from src.finance.models import Lender, LoanTerms, OriginationFeeTerms
from src.rating.rating import clamp01

logger = logging.getLogger(__name__)


# ------------------------------------------------------------------
# Interest
# ------------------------------------------------------------------

def calculate_credit_rating_modifier(credit_rating: float) -> float:
    """Interest multiplier from 0.8 (rating 1.0) to 1.5 (rating 0.0)."""
    return CREDIT_RATING_BEST_MULTIPLIER + CREDIT_RATING_MULTIPLIER_SPREAD * (1.0 - clamp01(credit_rating))


def duration_interest_modifier(duration_seasons: int) -> float:
    for max_seasons, modifier in DURATION_INTEREST_MODIFIERS:
        if duration_seasons <= max_seasons:
            return modifier
    return VERY_LONG_TERM_INTEREST_MODIFIER


def calculate_effective_interest_rate(
    base_rate: float,
    economy_phase: str,
    lender_type: str,
    credit_rating: Optional[float] = None,
    duration_seasons: Optional[int] = None,
) -> float:
    """Seasonal interest rate a lender offers this company.

    Formula::

        rate = base * economy[phase] * lender[type] * credit_modifier * duration_modifier

    Args:
        base_rate: Lender's base rate per season.
        economy_phase: One of ``ECONOMY_PHASES``.
        lender_type: One of ``LENDER_TYPES``.
        credit_rating: 0-1 credit rating; ``DEFAULT_CREDIT_RATING`` when None.
        duration_seasons: Loan length; no duration modifier when None.

    Raises:
        ValueError: If the economy phase or lender type is unknown.
    """
    if economy_phase not in ECONOMY_INTEREST_MULTIPLIERS:
        raise ValueError(f"Unknown economy phase: {economy_phase!r}")
    if lender_type not in LENDER_TYPE_MULTIPLIERS:
        raise ValueError(f"Unknown lender type: {lender_type!r}")

    rating = DEFAULT_CREDIT_RATING if credit_rating is None else credit_rating
    rate = (
        base_rate
        * ECONOMY_INTEREST_MULTIPLIERS[economy_phase]
        * LENDER_TYPE_MULTIPLIERS[lender_type]
        * calculate_credit_rating_modifier(rating)
    )
    if duration_seasons:
        rate *= duration_interest_modifier(duration_seasons)
    return rate


def calculate_seasonal_payment(principal: float, rate: float, seasons: int) -> float:
    """Fixed seasonal annuity payment.

    Formula::

        payment = P * r * (1 + r) ** n / ((1 + r) ** n - 1)

    Falls back to ``P / n`` for an interest-free loan.

    Raises:
        ValueError: If ``seasons`` is not positive.
    """
    if seasons <= 0:
        raise ValueError(f"Loan duration must be positive, got {seasons!r}")
    if rate == 0:
        return principal / seasons
    growth = (1.0 + rate) ** seasons
    return principal * rate * growth / (growth - 1.0)


# ------------------------------------------------------------------
# Origination fee
# ------------------------------------------------------------------

def _credit_fee_modifier(credit_rating: float, lender_modifier: float) -> float:
    if credit_rating >= ORIGINATION_EXCELLENT_CREDIT:
        return lender_modifier
    if credit_rating >= ORIGINATION_GOOD_CREDIT:
        return 0.9 + (lender_modifier - 0.9) * 0.5
    if credit_rating >= ORIGINATION_AVERAGE_CREDIT:
        return 1.0
    if credit_rating >= ORIGINATION_POOR_CREDIT:
        return 1.0 + (ORIGINATION_PENALTY_REFERENCE - lender_modifier) * 0.3
    return 1.0 + (ORIGINATION_PENALTY_REFERENCE - lender_modifier) * 0.6


def _duration_fee_modifier(duration_seasons: int, lender_modifier: float) -> float:
    if duration_seasons <= 16:
        return 0.9 + (lender_modifier - 1.0) * 0.1
    if duration_seasons <= 40:
        return 1.0
    if duration_seasons <= 80:
        return 1.0 + (lender_modifier - 1.0) * 0.5
    return lender_modifier


def calculate_origination_fee(
    principal: float,
    fee_terms: OriginationFeeTerms,
    credit_rating: float,
    duration_seasons: int,
) -> int:
    """One-off fee charged when the loan is taken, rounded to whole units.

    Good credit earns the lender's discount; poor credit pays a surcharge
    that grows the further the lender's own modifier is below 1.5.
    """
    base_fee = principal * fee_terms.base_percent
    fee = (
        base_fee
        * _credit_fee_modifier(credit_rating, fee_terms.credit_rating_modifier)
        * _duration_fee_modifier(duration_seasons, fee_terms.duration_modifier)
    )
    return round(min(max(fee, fee_terms.min_fee), fee_terms.max_fee))


# ------------------------------------------------------------------
# Loan terms
# ------------------------------------------------------------------

def calculate_loan_terms(
    lender: Lender,
    principal: float,
    duration_seasons: int,
    credit_rating: float,
    economy_phase: str,
) -> LoanTerms:
    """Full cost breakdown of a loan offer.

    Raises:
        ValueError: For an unknown phase or lender type, or a non-positive
            duration.
    """
    rate = calculate_effective_interest_rate(
        lender.base_interest_rate, economy_phase, lender.type, credit_rating, duration_seasons
    )
    payment = calculate_seasonal_payment(principal, rate, duration_seasons)
    total_repayment = payment * duration_seasons
    total_interest = total_repayment - principal
    fee = calculate_origination_fee(principal, lender.origination_fee, credit_rating, duration_seasons)

    logger.debug(
        "Loan from %s: %.0f over %d seasons at %.4f (fee %d)",
        lender.name, principal, duration_seasons, rate, fee,
    )
    return LoanTerms(
        effective_interest_rate=rate,
        seasonal_payment=payment,
        total_repayment=total_repayment,
        total_interest=total_interest,
        origination_fee=fee,
        total_expenses=fee + total_interest,
    )
