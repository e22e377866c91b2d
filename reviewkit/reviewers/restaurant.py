"""Restaurant reviewer: weighted sum of food, environment and location."""

import logging

from reviewkit.models.model_entity import Restaurant
from reviewkit.models.model_eval import RestaurantWeights
from reviewkit.reviewers.base import round_half_up

logger = logging.getLogger(__name__)


class RestaurantReviewer:
    """Rates restaurants, food quality first.

    Default weights:
    - Food quality: 0.6
    - Environment: 0.3
    - Location: 0.1
    """

    def __init__(self, weights: RestaurantWeights | None = None) -> None:
        self.weights = weights or RestaurantWeights()

    def rate(self, obj: Restaurant) -> int:
        """Calculate the restaurant rating.

        Args:
            obj: The restaurant to rate

        Returns:
            Rounded weighted sum of the three attributes
        """
        total = (
            self.weights.food_quality * obj.food_quality
            + self.weights.environment * obj.environment
            + self.weights.location * obj.location
        )
        rating = round_half_up(total)
        logger.debug(f"Restaurant {obj.name}: weighted sum {total:.3f} -> {rating}")
        return rating
