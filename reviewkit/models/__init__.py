"""Pydantic models for reviewkit."""

from reviewkit.models.model_entity import Dish, Restaurant
from reviewkit.models.model_eval import DishWeights, RestaurantWeights

__all__ = [
    # Scored entities
    "Dish",
    "Restaurant",
    # Weight sets
    "DishWeights",
    "RestaurantWeights",
]
