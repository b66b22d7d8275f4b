from src.balance.balance_calculator import (
    WineBalanceCalculator,
    calculate_characteristic_breakdown,
    calculate_wine_balance,
)
from src.balance.batch import score_balance_frame
from src.balance.characteristics import CHARACTERISTICS, Characteristic, WineCharacteristics
from src.balance.models import (
    BalanceResult,
    BalanceRule,
    CharacteristicBreakdown,
    InvalidRangeError,
    InvalidRuleError,
    RangeShift,
    RuleBreakdown,
    RuleKind,
)
from src.balance.range_adjuster import adjust_ranges
from src.balance.rule_engine import calculate_rules, rule_effect
from src.balance.rules import ALL_RULES, PENALTY_RULES, RANGE_SHIFTS, SYNERGY_RULES

__all__ = [
    "ALL_RULES",
    "BalanceResult",
    "BalanceRule",
    "CHARACTERISTICS",
    "Characteristic",
    "CharacteristicBreakdown",
    "InvalidRangeError",
    "InvalidRuleError",
    "PENALTY_RULES",
    "RANGE_SHIFTS",
    "RangeShift",
    "RuleBreakdown",
    "RuleKind",
    "SYNERGY_RULES",
    "WineBalanceCalculator",
    "WineCharacteristics",
    "adjust_ranges",
    "calculate_characteristic_breakdown",
    "calculate_rules",
    "calculate_wine_balance",
    "rule_effect",
    "score_balance_frame",
]
