"""Static penalty, synergy and range-shift tables.

Rules are plain data: each carries its typed source and target lists plus a
predicate over :class:`WineCharacteristics`. The rule engine interprets them
generically, so adding a rule never means touching the engine.
"""

from typing import Callable, Optional, Sequence

from src.balance.characteristics import Characteristic, WineCharacteristics
from src.balance.config import (
    DEFAULT_PENALTY_CAP,
    DEFAULT_RULE_K,
    DEFAULT_RULE_P,
    DEFAULT_SYNERGY_CAP,
)
from src.balance.models import BalanceRule, RangeShift, RuleKind

ACIDITY = Characteristic.ACIDITY
AROMA = Characteristic.AROMA
BODY = Characteristic.BODY
SPICE = Characteristic.SPICE
SWEETNESS = Characteristic.SWEETNESS
TANNINS = Characteristic.TANNINS


def _rule(
    kind: RuleKind,
    name: str,
    sources: Sequence[Characteristic],
    targets: Sequence[Characteristic],
    condition: Callable[[WineCharacteristics], bool],
    requirement: str,
    description: str,
    k: float = DEFAULT_RULE_K,
    p: float = DEFAULT_RULE_P,
    cap: Optional[float] = None,
) -> BalanceRule:
    if cap is None:
        cap = DEFAULT_PENALTY_CAP if kind == RuleKind.PENALTY else DEFAULT_SYNERGY_CAP
    return BalanceRule(
        name=name,
        kind=kind,
        sources=tuple(sources),
        targets=tuple(targets),
        condition=condition,
        k=k,
        p=p,
        cap=cap,
        description=description,
        requirement=requirement,
    )


def penalty(name, sources, targets, condition, requirement, description, **effect):
    return _rule(RuleKind.PENALTY, name, sources, targets, condition,
                 requirement, description, **effect)


def synergy(name, sources, targets, condition, requirement, description, **effect):
    return _rule(RuleKind.SYNERGY, name, sources, targets, condition,
                 requirement, description, **effect)


def _between(value: float, low: float, high: float) -> bool:
    return low <= value <= high


# ------------------------------------------------------------------
# Penalty rules
# ------------------------------------------------------------------

PENALTY_RULES = (
    penalty(
        "Clashing Sweetness", [ACIDITY], [SWEETNESS],
        lambda c: c.acidity > 0.7 and c.sweetness > 0.6,
        "Acidity > 0.7 and Sweetness > 0.6",
        "High acidity fights against high sweetness",
        k=0.4, p=1.5, cap=2.0,
    ),
    penalty(
        "Low Acidity Overpower", [ACIDITY], [AROMA],
        lambda c: c.acidity < 0.5 and c.body > 0.7,
        "Acidity < 0.5 and Body > 0.7",
        "Flat acidity lets a heavy body bury the aromatics",
        k=0.3, p=1.3, cap=2.0,
    ),
    penalty(
        "Fixed Sweetness Penalty", [ACIDITY], [SWEETNESS],
        lambda c: c.acidity < 0.3,
        "Acidity < 0.3",
        "Very low acidity leaves sweetness cloying",
        k=0.15, p=1.0, cap=0.15,
    ),
    penalty(
        "Heavy Body Overpower", [BODY], [AROMA],
        lambda c: c.body > 0.7 and c.aroma < 0.5,
        "Body > 0.7 and Aroma < 0.5",
        "A heavy body smothers a weak aroma",
        k=0.25, p=1.4, cap=0.36,
    ),
    penalty(
        "Astringent Tannins", [BODY], [TANNINS],
        lambda c: c.body < 0.5 and c.tannins > 0.7,
        "Body < 0.5 and Tannins > 0.7",
        "Strong tannins feel harsh without body to carry them",
        k=0.35, p=1.6, cap=0.36,
    ),
    penalty(
        "Sweet-Spice Clash", [SWEETNESS], [SPICE],
        lambda c: c.sweetness > 0.7 and c.spice > 0.6,
        "Sweetness > 0.7 and Spice > 0.6",
        "Sweetness and pronounced spice pull in opposite directions",
        k=0.45, p=1.7, cap=0.2,
    ),
    penalty(
        "Acid-Sweet Imbalance", [SWEETNESS], [ACIDITY],
        lambda c: c.sweetness < 0.4 and c.acidity > 0.6,
        "Sweetness < 0.4 and Acidity > 0.6",
        "Sharp acidity is left unbuffered in a dry wine",
        k=0.3, p=1.3, cap=0.24,
    ),
    penalty(
        "Tannin-Sweet Clash", [TANNINS], [SWEETNESS],
        lambda c: c.tannins > 0.7 and c.sweetness > 0.5,
        "Tannins > 0.7 and Sweetness > 0.5",
        "Grippy tannins clash with residual sugar",
        k=0.4, p=1.5, cap=0.5,
    ),
    penalty(
        "Tannin-Aroma Overpower", [TANNINS], [AROMA],
        lambda c: c.tannins > 0.7 and c.aroma < 0.6,
        "Tannins > 0.7 and Aroma < 0.6",
        "Heavy tannins mask a modest aroma",
        k=0.25, p=1.4, cap=0.3,
    ),
    penalty(
        "Weak Tannin Structure", [TANNINS], [BODY],
        lambda c: c.tannins < 0.4 and c.body > 0.6,
        "Tannins < 0.4 and Body > 0.6",
        "A full body without tannic backbone feels flabby",
        k=0.3, p=1.3, cap=2.0,
    ),
    penalty(
        "Aroma-Body Mismatch", [AROMA], [BODY],
        lambda c: c.aroma > 0.7 and c.body < 0.6,
        "Aroma > 0.7 and Body < 0.6",
        "An intense nose promises more than a light body delivers",
        k=0.2, p=1.2, cap=0.3,
    ),
    penalty(
        "Aroma-Spice Imbalance", [AROMA], [SPICE],
        lambda c: c.aroma < 0.4 and c.spice > 0.6,
        "Aroma < 0.4 and Spice > 0.6",
        "Spice dominates a muted aroma",
        k=0.25, p=1.4, cap=0.24,
    ),
    penalty(
        "Spice-Acid Clash", [SPICE], [ACIDITY],
        lambda c: c.spice > 0.7 and c.acidity > 0.6,
        "Spice > 0.7 and Acidity > 0.6",
        "Hot spice and sharp acidity amplify each other",
        k=0.4, p=1.6, cap=0.5,
    ),
    penalty(
        "Spice-Body Overwhelm", [SPICE], [BODY],
        lambda c: c.spice > 0.8 and c.body < 0.4,
        "Spice > 0.8 and Body < 0.4",
        "Intense spice overwhelms a thin body",
        k=0.5, p=1.8, cap=2.0,
    ),
    penalty(
        "Flat Heavy Body", [SPICE], [BODY],
        lambda c: c.spice < 0.3 and c.body > 0.7,
        "Spice < 0.3 and Body > 0.7",
        "A heavy body without spice tastes flat",
        k=0.25, p=1.3, cap=0.3,
    ),
)


# ------------------------------------------------------------------
# Synergy rules
# ------------------------------------------------------------------

SYNERGY_RULES = (
    synergy(
        "Bold Red Structure", [ACIDITY], [TANNINS],
        lambda c: c.acidity > 0.7 and c.tannins > 0.7,
        "Acidity > 0.7 and Tannins > 0.7",
        "Firm acidity and tannins build a structured red",
        k=0.3, p=1.3, cap=0.75,
    ),
    synergy(
        "Bright & Aromatic", [ACIDITY], [AROMA],
        lambda c: c.acidity > 0.6 and c.aroma > 0.7,
        "Acidity > 0.6 and Aroma > 0.7",
        "Fresh acidity lifts an expressive aroma",
        k=0.25, p=1.2, cap=0.5,
    ),
    synergy(
        "Balanced Body & Spice", [BODY, SPICE], [BODY, SPICE],
        lambda c: _between(c.body, 0.6, 0.8) and _between(c.spice, 0.6, 0.8),
        "Body 0.6-0.8 and Spice 0.6-0.8",
        "Medium-full body carries moderate spice",
        k=0.25, p=1.1, cap=0.75,
    ),
    synergy(
        "Powerful Red Blend", [TANNINS, BODY, SPICE], [TANNINS, BODY, SPICE],
        lambda c: c.tannins > 0.7 and c.body > 0.6 and c.spice > 0.5,
        "Tannins > 0.7, Body > 0.6 and Spice > 0.5",
        "Tannin, body and spice combine into a powerful blend",
        k=0.35, p=1.4, cap=0.65,
    ),
    synergy(
        "Dessert Wine Body", [AROMA, SWEETNESS, BODY], [AROMA, SWEETNESS, BODY],
        lambda c: c.aroma > 0.6 and c.sweetness > 0.6 and c.body > 0.7,
        "Aroma > 0.6, Sweetness > 0.6 and Body > 0.7",
        "Rich body and aroma support a sweet style",
        k=0.3, p=1.3, cap=0.7,
    ),
    synergy(
        "Classic Balance", [ACIDITY, SWEETNESS], [ACIDITY, SWEETNESS],
        lambda c: _between(c.acidity, 0.4, 0.6) and _between(c.sweetness, 0.4, 0.6),
        "Acidity 0.4-0.6 and Sweetness 0.4-0.6",
        "Acidity and sweetness in classic equilibrium",
        k=0.4, p=1.1, cap=0.6,
    ),
    synergy(
        "Elegant Complexity", [AROMA, BODY], [AROMA, BODY],
        lambda c: c.aroma > c.body and _between(c.sweetness, 0.4, 0.6),
        "Aroma > Body and Sweetness 0.4-0.6",
        "Aromatic lift over a restrained body",
        k=0.25, p=1.2, cap=0.6,
    ),
)

ALL_RULES = PENALTY_RULES + SYNERGY_RULES


# ------------------------------------------------------------------
# Dynamic range shifts
# ------------------------------------------------------------------

RANGE_SHIFTS = (
    RangeShift(ACIDITY, SWEETNESS, -0.15, "Acidity vs Sweetness",
               "More acidity lowers the sweetness that still tastes balanced"),
    RangeShift(BODY, SPICE, 0.08, "Body carries Spice",
               "A fuller body can carry more spice"),
    RangeShift(BODY, TANNINS, 0.08, "Body carries Tannins",
               "A fuller body tolerates firmer tannins"),
    RangeShift(SWEETNESS, ACIDITY, -0.10, "Sweetness vs Acidity",
               "Sweeter wines want less acidity"),
    RangeShift(TANNINS, BODY, 0.10, "Tannins need Body",
               "Firm tannins call for a fuller body"),
    RangeShift(TANNINS, AROMA, 0.08, "Tannins need Aroma",
               "Firm tannins call for a stronger aroma"),
    RangeShift(TANNINS, SWEETNESS, -0.05, "Tannins vs Sweetness",
               "Tannic wines tolerate less sweetness"),
    RangeShift(AROMA, BODY, 0.06, "Aroma needs Body",
               "An intense aroma wants a fuller body behind it"),
)
