"""The six sensory characteristics scored by the balance engine."""

import math
from dataclasses import asdict, dataclass, replace
from enum import Enum
from typing import Dict, Mapping

from src.rating.rating import clamp01


class Characteristic(str, Enum):
    ACIDITY = "acidity"
    AROMA = "aroma"
    BODY = "body"
    SPICE = "spice"
    SWEETNESS = "sweetness"
    TANNINS = "tannins"


CHARACTERISTICS = tuple(Characteristic)


@dataclass(frozen=True)
class WineCharacteristics:
    """Sensory profile of a grape batch or finished wine, each value in [0, 1]."""

    acidity: float
    aroma: float
    body: float
    spice: float
    sweetness: float
    tannins: float

    def get(self, characteristic: Characteristic) -> float:
        return getattr(self, Characteristic(characteristic).value)

    def clamped(self) -> "WineCharacteristics":
        """Return a copy with every value clamped to [0, 1].

        Raises:
            ValueError: If a value is NaN or infinite.
        """
        values = {c.value: float(self.get(c)) for c in CHARACTERISTICS}
        _check_finite(values)
        return replace(self, **{name: clamp01(value) for name, value in values.items()})

    def with_value(self, characteristic: Characteristic, value: float) -> "WineCharacteristics":
        return replace(self, **{Characteristic(characteristic).value: value})

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Mapping[str, float]) -> "WineCharacteristics":
        missing = [c.value for c in CHARACTERISTICS if c.value not in data]
        if missing:
            raise ValueError(f"Missing characteristics: {missing!r}")
        values = {c.value: float(data[c.value]) for c in CHARACTERISTICS}
        _check_finite(values)
        return cls(**values)


def _check_finite(values: Mapping[str, float]) -> None:
    bad = {name: value for name, value in values.items() if not math.isfinite(value)}
    if bad:
        raise ValueError(f"Non-finite characteristic values: {bad!r}")
