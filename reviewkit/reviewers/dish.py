"""Dish reviewer: weighted sum of the five taste dimensions."""

import logging

from reviewkit.models.model_entity import Dish
from reviewkit.models.model_eval import DishWeights
from reviewkit.reviewers.base import round_half_up

logger = logging.getLogger(__name__)


class DishReviewer:
    """Rates dishes, with umami carrying half the weight."""

    def __init__(self, weights: DishWeights | None = None) -> None:
        self.weights = weights or DishWeights()

    def rate(self, obj: Dish) -> int:
        """Calculate the dish rating.

        Args:
            obj: The dish to rate

        Returns:
            Rounded weighted sum of the five taste dimensions
        """
        w = self.weights
        total = (
            w.sweetness * obj.sweetness
            + w.saltiness * obj.saltiness
            + w.bitterness * obj.bitterness
            + w.sourness * obj.sourness
            + w.umami * obj.umami
        )
        rating = round_half_up(total)
        logger.debug(f"Dish {obj.name}: weighted sum {total:.3f} -> {rating}")
        return rating
