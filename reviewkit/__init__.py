"""reviewkit - rate unrelated data shapes through one generic evaluator."""

from reviewkit.evaluator import Evaluator
from reviewkit.models import Dish, DishWeights, Restaurant, RestaurantWeights
from reviewkit.reviewers import DishReviewer, RestaurantReviewer, Reviewer

__all__ = [
    "Dish",
    "DishReviewer",
    "DishWeights",
    "Evaluator",
    "Restaurant",
    "RestaurantReviewer",
    "RestaurantWeights",
    "Reviewer",
]
