# Rating strategies understood by rating_for_range()
RATING_STRATEGIES = ("higher_better", "lower_better", "balanced")

# Smallest ideal-range width used when scaling the outside-range decay
MIN_BALANCED_WIDTH = 0.01

# Outside-range excursions are weighted twice as harshly as centering
OUTSIDE_PENALTY_WEIGHT = 2.0

# Display domains for characteristic breakdown fields (all lower_better)
BREAKDOWN_DISPLAY_DOMAINS = {
    "distance_inside": (0.0, 0.2),
    "distance_outside": (0.0, 0.2),
    "penalty": (0.0, 0.4),
    "total_distance": (0.0, 0.6),
    "avg_deviation": (0.0, 0.5),
}

# Ten equal-width tiers over 0-1, lowest first
COLOR_CATEGORIES = [
    "Awful",
    "Terrible",
    "Poor",
    "Below Average",
    "Average",
    "Above Average",
    "Good",
    "Very Good",
    "Excellent",
    "Perfect",
]

WINE_BALANCE_CATEGORIES = [
    "Train Wreck",
    "Crashed",
    "Chaotic",
    "Confused Identity",
    "Finding Harmony",
    "Well-Composed",
    "Elegantly Balanced",
    "B-E-Autiful!",
    "Symphony in a Glass",
    "Perfection Achieved",
]

GRAPE_QUALITY_CATEGORIES = [
    "Undrinkable",
    "Vinegar Surprise",
    "House Pour",
    "Everyday Sipper",
    "Solid Bottle",
    "Well-Balanced",
    "Sommelier's Choice",
    "Cellar Reserve",
    "Connoisseur's Pick",
    "Vintage Perfection",
]

# Credit grades with their lower thresholds, best first
CREDIT_RATING_GRADES = [
    (0.95, "AAA"),
    (0.90, "AA+"),
    (0.85, "AA"),
    (0.80, "AA-"),
    (0.75, "A+"),
    (0.70, "A"),
    (0.65, "A-"),
    (0.60, "BBB+"),
    (0.55, "BBB"),
    (0.50, "BBB-"),
    (0.45, "BB+"),
    (0.40, "BB"),
    (0.35, "BB-"),
    (0.30, "B+"),
    (0.25, "B"),
    (0.20, "B-"),
    (0.15, "CCC+"),
    (0.10, "CCC"),
    (0.05, "CC"),
]
LOWEST_CREDIT_GRADE = "C"
