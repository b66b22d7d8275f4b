"""Non-linear curves used to turn 0-1 inputs into prestige contributions."""

import math

from src.vineyard.config import (
    SQUASH_TAIL_ALPHA,
    SQUASH_TAIL_MAX_TARGET,
    SQUASH_TAIL_THRESHOLD,
)

_GEOMETRIC_TOP = 5000.0
_CEILING = 50_000_000.0


def asymmetric_multiplier(x: float) -> float:
    """Map a 0-1 value onto a multiplier that starts at 1 and explodes near 1.

    The curve is gentle across the low and middle range and becomes steeply
    super-linear in the top few percent, so only values very close to 1
    produce large multipliers:

    ============  =====================================================
    range         segment
    ============  =====================================================
    0.00 - 0.30   ``1 + 2x^2``                      (1.00 -> 1.18)
    0.30 - 0.60   logarithmic                       (1.18 -> 1.78)
    0.60 - 0.80   linear                            (1.78 -> 2.78)
    0.80 - 0.90   doubling                          (2.78 -> 5.28)
    0.90 - 0.95   doubling                          (5.28 -> 15.28)
    0.95 - 0.98   doubling                          (15.28 -> 55.28)
    0.98 - 0.99   geometric                         (55.28 -> 5000)
    0.99 - 1.00   geometric, capped                 (5000 -> 5e7)
    ============  =====================================================
    """
    x = max(0.0, min(1.0, x))

    if x < 0.3:
        return 1.0 + 2.0 * x * x
    if x < 0.6:
        return 1.18 + 0.6 * math.log(1.0 + (x - 0.3) / 0.3 * (math.e - 1.0))
    if x < 0.8:
        return 1.78 + 5.0 * (x - 0.6)
    if x < 0.9:
        return 2.78 + 2.5 * (2.0 ** ((x - 0.8) / 0.1) - 1.0)
    if x < 0.95:
        return 5.28 + 10.0 * (2.0 ** ((x - 0.9) / 0.05) - 1.0)
    if x < 0.98:
        return 15.28 + 40.0 * (2.0 ** ((x - 0.95) / 0.03) - 1.0)
    if x < 0.99:
        return 55.28 * (_GEOMETRIC_TOP / 55.28) ** ((x - 0.98) / 0.01)
    return min(_CEILING, _GEOMETRIC_TOP * (_CEILING / _GEOMETRIC_TOP) ** ((x - 0.99) / 0.01))


def squash_tail(
    x: float,
    threshold: float = SQUASH_TAIL_THRESHOLD,
    max_target: float = SQUASH_TAIL_MAX_TARGET,
    alpha: float = SQUASH_TAIL_ALPHA,
) -> float:
    """Compress values above *threshold* into ``[threshold, max_target]``.

    Formula::

        t = (x - threshold) / (1 - threshold)
        y = threshold + (max_target - threshold) * (e^(alpha t) - 1) / (e^alpha - 1)

    Identity below the threshold; monotone and continuous everywhere, and
    ``squash_tail(1.0) == max_target`` so the result never reaches 1.
    """
    x = max(0.0, min(1.0, x))
    if x <= threshold:
        return x
    t = (x - threshold) / (1.0 - threshold)
    return threshold + (max_target - threshold) * math.expm1(alpha * t) / math.expm1(alpha)
