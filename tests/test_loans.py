"""Tests for src.finance.loans."""

from dataclasses import replace

import pytest

from src.finance.config import ECONOMY_INTEREST_MULTIPLIERS, ECONOMY_PHASES
from src.finance.loans import (
    calculate_credit_rating_modifier,
    calculate_effective_interest_rate,
    calculate_loan_terms,
    calculate_origination_fee,
    calculate_seasonal_payment,
    duration_interest_modifier,
)


# ── Interest ──────────────────────────────────────────────────────────


class TestInterestRate:
    def test_credit_rating_modifier(self):
        assert calculate_credit_rating_modifier(1.0) == pytest.approx(0.8)
        assert calculate_credit_rating_modifier(0.0) == pytest.approx(1.5)
        assert calculate_credit_rating_modifier(0.5) == pytest.approx(1.15)

    @pytest.mark.parametrize("seasons,modifier", [
        (1, 1.0), (16, 1.0), (17, 0.95), (40, 0.95), (41, 0.90), (80, 0.90), (81, 0.85),
    ])
    def test_duration_modifier(self, seasons, modifier):
        assert duration_interest_modifier(seasons) == modifier

    def test_effective_rate_product(self):
        rate = calculate_effective_interest_rate(0.02, "Stable", "Bank", 1.0)
        assert rate == pytest.approx(0.02 * 1.0 * 0.9 * 0.8)

    def test_duration_applied_when_given(self):
        short = calculate_effective_interest_rate(0.02, "Stable", "Bank", 1.0, duration_seasons=8)
        long = calculate_effective_interest_rate(0.02, "Stable", "Bank", 1.0, duration_seasons=100)
        assert long == pytest.approx(short * 0.85)

    def test_recession_dearer_than_expansion(self):
        recession = calculate_effective_interest_rate(0.05, "Recession", "Bank", 0.6, 20)
        expansion = calculate_effective_interest_rate(0.05, "Expansion", "Bank", 0.6, 20)
        assert recession > expansion

    def test_recession_dearer_than_expansion_short_loan(self):
        recession = calculate_effective_interest_rate(0.05, "Recession", "Bank", 0.7, 4)
        expansion = calculate_effective_interest_rate(0.05, "Expansion", "Bank", 0.7, 4)
        assert recession > expansion
        assert recession == pytest.approx(0.05 * 1.2 * 0.9 * (0.8 + 0.7 * 0.3))

    def test_economy_interest_ordering(self):
        values = [ECONOMY_INTEREST_MULTIPLIERS[phase] for phase in ECONOMY_PHASES]
        assert values == sorted(values, reverse=True)

    def test_lender_ordering(self):
        rates = [
            calculate_effective_interest_rate(0.05, "Stable", lender, 0.5)
            for lender in ("Bank", "Investment Fund", "Private Lender", "QuickLoan")
        ]
        assert rates == sorted(rates)

    def test_better_credit_cheaper(self):
        good = calculate_effective_interest_rate(0.05, "Stable", "Bank", 0.9)
        bad = calculate_effective_interest_rate(0.05, "Stable", "Bank", 0.1)
        assert good < bad

    def test_default_credit_rating(self):
        assert calculate_effective_interest_rate(0.05, "Stable", "Bank") == pytest.approx(
            calculate_effective_interest_rate(0.05, "Stable", "Bank", 0.5)
        )

    def test_unknown_phase_or_lender(self):
        with pytest.raises(ValueError, match="Unknown economy phase"):
            calculate_effective_interest_rate(0.05, "Depression", "Bank", 0.5)
        with pytest.raises(ValueError, match="Unknown lender type"):
            calculate_effective_interest_rate(0.05, "Stable", "Pawnshop", 0.5)


# ── Payments and fees ─────────────────────────────────────────────────


class TestSeasonalPayment:
    def test_annuity(self):
        payment = calculate_seasonal_payment(1000, 0.05, 10)
        assert payment == pytest.approx(1000 * 0.05 * 1.05 ** 10 / (1.05 ** 10 - 1))
        assert payment * 10 > 1000

    def test_interest_free(self):
        assert calculate_seasonal_payment(1200, 0.0, 12) == pytest.approx(100.0)

    @pytest.mark.parametrize("seasons", [0, -4])
    def test_non_positive_duration(self, seasons):
        with pytest.raises(ValueError, match="must be positive"):
            calculate_seasonal_payment(1000, 0.05, seasons)


class TestOriginationFee:
    @pytest.mark.parametrize("credit,seasons,expected", [
        (0.9, 20, 800),    # excellent credit: lender discount 0.8
        (0.7, 60, 935),    # good credit 0.85, long loan 1.1
        (0.5, 10, 920),    # average credit, short loan 0.92
        (0.3, 40, 1210),   # poor credit 1 + 0.7 * 0.3
        (0.1, 100, 1704),  # very poor credit 1.42, very long loan 1.2
    ])
    def test_tiers(self, bank_lender, credit, seasons, expected):
        fee = calculate_origination_fee(100_000, bank_lender.origination_fee, credit, seasons)
        assert fee == expected

    def test_min_and_max_fee(self, bank_lender):
        terms = bank_lender.origination_fee
        assert calculate_origination_fee(1_000, terms, 0.5, 20) == 500
        assert calculate_origination_fee(100_000_000, terms, 0.5, 20) == 50_000


class TestLoanTerms:
    def test_terms_are_consistent(self, bank_lender):
        terms = calculate_loan_terms(bank_lender, 100_000, 20, 0.9, "Stable")

        rate = 0.02 * 1.0 * 0.9 * (0.8 + 0.7 * 0.1) * 0.95
        assert terms.effective_interest_rate == pytest.approx(rate)
        assert terms.seasonal_payment == pytest.approx(calculate_seasonal_payment(100_000, rate, 20))
        assert terms.total_repayment == pytest.approx(terms.seasonal_payment * 20)
        assert terms.total_interest == pytest.approx(terms.total_repayment - 100_000)
        assert terms.origination_fee == 800
        assert terms.total_expenses == pytest.approx(800 + terms.total_interest)

    def test_interest_free_lender(self, bank_lender):
        lender = replace(bank_lender, base_interest_rate=0.0)
        terms = calculate_loan_terms(lender, 12_000, 12, 0.5, "Boom")
        assert terms.total_interest == pytest.approx(0.0)
        assert terms.seasonal_payment == pytest.approx(1000.0)

    def test_zero_duration(self, bank_lender):
        with pytest.raises(ValueError, match="must be positive"):
            calculate_loan_terms(bank_lender, 10_000, 0, 0.5, "Stable")
