"""Pytest configuration and fixtures."""

import pytest

from reviewkit.models.model_entity import Dish, Restaurant
from reviewkit.reviewers.dish import DishReviewer
from reviewkit.reviewers.restaurant import RestaurantReviewer


@pytest.fixture
def sample_restaurant() -> Restaurant:
    """The seeded demo restaurant."""
    return Restaurant(name="Cheesegaddon", food_quality=5, environment=3, location=2)


@pytest.fixture
def sample_dish() -> Dish:
    """A dish whose weighted sum lands exactly on a .5 boundary."""
    return Dish(name="Soup", sweetness=2, saltiness=4, bitterness=0, sourness=0, umami=5)


@pytest.fixture
def restaurant_reviewer() -> RestaurantReviewer:
    return RestaurantReviewer()


@pytest.fixture
def dish_reviewer() -> DishReviewer:
    return DishReviewer()
