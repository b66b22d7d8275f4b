# Ideal [min, max] range per characteristic before any dynamic shift
BASE_BALANCED_RANGES = {
    "acidity": (0.4, 0.6),
    "aroma": (0.3, 0.7),
    "body": (0.4, 0.8),
    "spice": (0.35, 0.65),
    "sweetness": (0.4, 0.6),
    "tannins": (0.35, 0.65),
}

# Rule effect defaults: raw_effect = k * avg_deviation ** p
DEFAULT_RULE_K = 0.2
DEFAULT_RULE_P = 1.2
DEFAULT_PENALTY_CAP = 2.0   # Penalty may at most triple a target's distance
DEFAULT_SYNERGY_CAP = 0.75  # Synergy may at most remove 75% of a distance

# Guards against zero-width ranges
MIN_HALF_WIDTH = 0.0001
MIN_RANGE_SPAN = 0.0001
DEVIATION_EPSILON = 1e-6

# Adjusted ranges narrower than this are re-centred to +/- half of it
MIN_ADJUSTED_WIDTH = 0.02

# score = 1 - BALANCE_SCORE_MULTIPLIER * mean(final_total_distance)
BALANCE_SCORE_MULTIPLIER = 2.0
