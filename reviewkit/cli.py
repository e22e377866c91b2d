"""CLI interface for reviewkit."""

import logging

import typer
from rich.console import Console

from reviewkit.consts import (
    DEMO_ENVIRONMENT,
    DEMO_FOOD_QUALITY,
    DEMO_LOCATION,
    DEMO_RESTAURANT_NAME,
    DISH_RATING_TEMPLATE,
    LOG_FORMAT,
    RESTAURANT_RATING_TEMPLATE,
)
from reviewkit.evaluator import Evaluator
from reviewkit.models.model_entity import Dish, Restaurant
from reviewkit.reviewers.dish import DishReviewer
from reviewkit.reviewers.restaurant import RestaurantReviewer

app = typer.Typer(
    name="reviewkit",
    help="reviewkit - Rate restaurants and dishes through one generic evaluator",
)

console = Console()


def _emit(line: str) -> None:
    """Print a result line verbatim (no markup, highlighting or wrapping)."""
    console.print(line, markup=False, highlight=False, soft_wrap=True)


def _rate_restaurant(restaurant: Restaurant) -> str:
    evaluator: Evaluator[Restaurant] = Evaluator()
    rating = evaluator.rate(restaurant, RestaurantReviewer())
    return RESTAURANT_RATING_TEMPLATE.format(name=restaurant.name, rating=rating)


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging"),
) -> None:
    """Rate the demo restaurant when no command is given."""
    # Configure logging
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format=LOG_FORMAT,
    )

    if ctx.invoked_subcommand is not None:
        return

    demo = Restaurant(
        name=DEMO_RESTAURANT_NAME,
        food_quality=DEMO_FOOD_QUALITY,
        environment=DEMO_ENVIRONMENT,
        location=DEMO_LOCATION,
    )
    _emit(_rate_restaurant(demo))


@app.command()
def restaurant(
    name: str = typer.Argument(..., help="Restaurant name"),
    food_quality: int = typer.Argument(..., help="Food quality score"),
    environment: int = typer.Argument(..., help="Environment score"),
    location: int = typer.Argument(..., help="Location score"),
) -> None:
    """Rate a restaurant."""
    entity = Restaurant(
        name=name,
        food_quality=food_quality,
        environment=environment,
        location=location,
    )
    _emit(_rate_restaurant(entity))


@app.command()
def dish(
    name: str = typer.Argument(..., help="Dish name"),
    sweetness: int = typer.Argument(..., help="Sweetness score"),
    saltiness: int = typer.Argument(..., help="Saltiness score"),
    bitterness: int = typer.Argument(..., help="Bitterness score"),
    sourness: int = typer.Argument(..., help="Sourness score"),
    umami: int = typer.Argument(..., help="Umami score"),
) -> None:
    """Rate a dish."""
    entity = Dish(
        name=name,
        sweetness=sweetness,
        saltiness=saltiness,
        bitterness=bitterness,
        sourness=sourness,
        umami=umami,
    )
    evaluator: Evaluator[Dish] = Evaluator()
    rating = evaluator.rate(entity, DishReviewer())
    _emit(DISH_RATING_TEMPLATE.format(name=entity.name, rating=rating))


if __name__ == "__main__":
    app()
