"""Reviewers that rate scored entities.

Each reviewer encodes a fixed weighted-sum formula for one entity shape:
- RestaurantReviewer (food quality, environment, location)
- DishReviewer (sweetness, saltiness, bitterness, sourness, umami)

All reviewers are stateless and satisfy the Reviewer protocol.
"""

from reviewkit.reviewers.base import Reviewer, round_half_up
from reviewkit.reviewers.dish import DishReviewer
from reviewkit.reviewers.restaurant import RestaurantReviewer

__all__ = [
    # Protocol
    "Reviewer",
    # Individual reviewers
    "DishReviewer",
    "RestaurantReviewer",
    # Utilities
    "round_half_up",
]
