"""Data models for the balance engine."""

from dataclasses import dataclass, field
from enum import Enum
from typing import Callable, Dict, List, Mapping, Optional, Sequence, Tuple

from src.balance.characteristics import CHARACTERISTICS, Characteristic, WineCharacteristics

BalanceRange = Tuple[float, float]
RangeTable = Mapping[str, BalanceRange]


class InvalidRangeError(ValueError):
    """Raised when a balance range table is malformed."""

    pass


def validate_ranges(ranges: RangeTable) -> None:
    """Check that *ranges* covers every characteristic with 0 <= min <= max <= 1."""
    for characteristic in CHARACTERISTICS:
        if characteristic.value not in ranges:
            raise InvalidRangeError(f"No range for {characteristic.value!r}")
        range_min, range_max = ranges[characteristic.value]
        if not 0.0 <= range_min <= range_max <= 1.0:
            raise InvalidRangeError(
                f"Invalid range for {characteristic.value!r}: "
                f"({range_min!r}, {range_max!r})"
            )


class RuleKind(str, Enum):
    PENALTY = "penalty"
    SYNERGY = "synergy"


class InvalidRuleError(ValueError):
    """Raised when a rule's effect parameters are out of bounds."""

    pass


@dataclass(frozen=True)
class BalanceRule:
    """A cross-characteristic penalty or synergy rule.

    ``condition`` is evaluated against the clamped characteristics; when it
    holds, the rule's effect ``min(cap, k * avg_deviation ** p)`` lands on
    every characteristic in ``targets``.
    """

    name: str
    kind: RuleKind
    sources: Tuple[Characteristic, ...]
    targets: Tuple[Characteristic, ...]
    condition: Callable[[WineCharacteristics], bool]
    k: float
    p: float
    cap: float
    description: str = ""
    requirement: str = ""

    @property
    def key(self) -> str:
        return "+".join(c.value for c in self.sources)


def validate_rules(rules: Sequence[BalanceRule]) -> None:
    """Check every rule cap; synergy caps must stay below 1 so distances stay positive."""
    for rule in rules:
        if rule.kind == RuleKind.SYNERGY and not 0.0 <= rule.cap < 1.0:
            raise InvalidRuleError(f"Synergy cap must be in [0, 1) for {rule.name!r}, got {rule.cap!r}")
        if rule.kind == RuleKind.PENALTY and rule.cap < 0.0:
            raise InvalidRuleError(f"Penalty cap must be non-negative for {rule.name!r}, got {rule.cap!r}")


@dataclass(frozen=True)
class RangeShift:
    """Moves the target's ideal range when the source leaves its midpoint."""

    source: Characteristic
    target: Characteristic
    shift_per_unit: float
    name: str
    description: str = ""
    clamp: Optional[BalanceRange] = None


@dataclass
class AppliedRangeShift:
    name: str
    source: Characteristic
    target: Characteristic
    direction: str  # "above" or "below" the source midpoint
    deviation: float
    delta: float


@dataclass
class RuleBreakdown:
    """Diagnostic record for one evaluated rule."""

    rule_name: str
    kind: RuleKind
    key: str
    sources: Tuple[Characteristic, ...]
    targets: Tuple[Characteristic, ...]
    active: bool
    avg_deviation: float
    k: float
    p: float
    cap: float
    raw_effect: float
    capped_effect: float
    hits_cap: bool
    percentage: float


@dataclass
class RuleEvaluation:
    penalty_multipliers: Dict[Characteristic, float]
    synergy_reductions: Dict[Characteristic, float]
    effective_ranges: Dict[Characteristic, BalanceRange]
    rule_breakdowns: List[RuleBreakdown] = field(default_factory=list)


@dataclass
class CharacteristicBreakdown:
    """Per-characteristic distance diagnostics behind a balance score."""

    value: float
    range: BalanceRange
    distance_inside: float
    distance_outside: float
    penalty: float
    base_total_distance: float
    total_scaling_multiplier: float
    synergy_reduction: float
    final_total_distance: float


@dataclass
class BalanceResult:
    score: float
    adjusted_ranges: Dict[Characteristic, BalanceRange]
    breakdown: Dict[Characteristic, CharacteristicBreakdown] = field(default_factory=dict)
    applied_shifts: List[AppliedRangeShift] = field(default_factory=list)
    rule_breakdowns: List[RuleBreakdown] = field(default_factory=list)
