"""Shared fixtures for the wine scoring test suite."""

import pytest

from src.balance.balance_calculator import WineBalanceCalculator
from src.balance.characteristics import WineCharacteristics
from src.finance.models import Lender, OriginationFeeTerms, ShareValuationState, StaffMember
from src.vineyard.models import Vineyard
from src.vineyard.quality import VineyardQualityCalculator


# ------------------------------------------------------------------
# Lightweight factories – cheap to construct, no I/O
# ------------------------------------------------------------------

@pytest.fixture(scope="module")
def balance_calculator():
    return WineBalanceCalculator()


@pytest.fixture(scope="module")
def quality_calculator():
    return VineyardQualityCalculator()


# ------------------------------------------------------------------
# Wines
# ------------------------------------------------------------------

@pytest.fixture
def centered_wine():
    """Every characteristic on the midpoint of its base range."""
    return WineCharacteristics(
        acidity=0.5, aroma=0.5, body=0.6, spice=0.5, sweetness=0.5, tannins=0.5
    )


@pytest.fixture
def extreme_wine():
    """Every characteristic pinned to an edge of the scale."""
    return WineCharacteristics(
        acidity=1.0, aroma=0.0, body=1.0, spice=1.0, sweetness=1.0, tannins=1.0
    )


# ------------------------------------------------------------------
# Vineyards
# ------------------------------------------------------------------

@pytest.fixture
def napa_vineyard():
    """Planted, mature vineyard in a well-known region."""
    return Vineyard(
        id="vy-1",
        name="Oakville Bench",
        country="United States",
        region="Napa Valley",
        altitude=250,
        aspect="Southeast",
        hectares=4.0,
        density=5000,
        land_value=600_000,
        grape="Chardonnay",
        vine_age=20,
        vineyard_prestige=0.6,
        soil=("Clay", "Loam"),
    )


@pytest.fixture
def bare_vineyard():
    """Unplanted plot with no prestige."""
    return Vineyard(
        id="vy-2",
        name="Empty Field",
        country="Spain",
        region="La Mancha",
        altitude=650,
        aspect="North",
        hectares=1.0,
    )


# ------------------------------------------------------------------
# Finance
# ------------------------------------------------------------------

@pytest.fixture
def share_state():
    return ShareValuationState(current_price=10.0, anchor_price=10.0)


@pytest.fixture
def bank_lender():
    return Lender(
        name="First Vintners Bank",
        type="Bank",
        base_interest_rate=0.02,
        origination_fee=OriginationFeeTerms(
            base_percent=0.01,
            min_fee=500,
            max_fee=50_000,
            credit_rating_modifier=0.8,
            duration_modifier=1.2,
        ),
    )


@pytest.fixture
def average_skills():
    return {
        "field": 0.5,
        "winery": 0.5,
        "administration": 0.5,
        "sales": 0.5,
        "maintenance": 0.5,
    }


@pytest.fixture
def staff(average_skills):
    return [
        StaffMember(name="Ana", skills=average_skills),
        StaffMember(name="Bo", skills=average_skills, specializations=["field"]),
    ]
