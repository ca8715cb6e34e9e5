"""Derived-state rules: points tariff, member tiers and rating aggregation."""

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable

# Points tariff
LOT_REGISTRATION_POINTS = 50
COMMUNITY_UPDATE_POINTS = 10
REVIEW_POINTS = 5

# Minimum balance for each tier, highest first
TIER_THRESHOLDS = (
    ("gold", 1500),
    ("silver", 500),
    ("bronze", 0),
)


def tier_for_points(points: int) -> str:
    """Return the member tier for a points balance."""
    for tier, minimum in TIER_THRESHOLDS:
        if points >= minimum:
            return tier
    return "bronze"


def average_rating(ratings: Iterable[int]) -> str:
    """Mean of review ratings as a two-decimal string, rounding halves up.

    An empty input gives "0", the rating of a lot nobody has reviewed.
    """
    ratings = list(ratings)
    if not ratings:
        return "0"
    mean = Decimal(sum(ratings)) / Decimal(len(ratings))
    return str(mean.quantize(Decimal("0.01"), rounding=ROUND_HALF_UP))


def rating_value(rating: str) -> float:
    """Numeric value of a stored rating string; malformed values count as 0."""
    try:
        return float(rating or "0")
    except ValueError:
        return 0.0
