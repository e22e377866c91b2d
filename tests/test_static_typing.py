"""Static checks: mismatched reviewer/entity pairs fail type checking."""

import textwrap
from pathlib import Path

import pytest

mypy_api = pytest.importorskip("mypy.api")

REPO_ROOT = Path(__file__).resolve().parent.parent

HEADER = """
from reviewkit.evaluator import Evaluator
from reviewkit.models.model_entity import Dish, Restaurant
from reviewkit.reviewers.dish import DishReviewer
from reviewkit.reviewers.restaurant import RestaurantReviewer
"""


def _check(tmp_path: Path, monkeypatch: pytest.MonkeyPatch, body: str) -> tuple[str, int]:
    snippet = tmp_path / "snippet.py"
    snippet.write_text(HEADER + textwrap.dedent(body))
    monkeypatch.setenv("MYPYPATH", str(REPO_ROOT))
    stdout, _stderr, status = mypy_api.run(
        [
            str(snippet),
            "--follow-imports=silent",
            "--no-incremental",
            "--cache-dir=" + str(tmp_path / ".mypy_cache"),
        ]
    )
    return stdout, status


def test_matching_pairs_type_check(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    stdout, status = _check(
        tmp_path,
        monkeypatch,
        """
        restaurant = Restaurant(name="Cheesegaddon", food_quality=5, environment=3, location=2)
        dish = Dish(name="Soup", sweetness=2, saltiness=4, bitterness=0, sourness=0, umami=5)
        r: int = Evaluator[Restaurant]().rate(restaurant, RestaurantReviewer())
        d: int = Evaluator[Dish]().rate(dish, DishReviewer())
        """,
    )
    assert status == 0, stdout


def test_dish_with_restaurant_reviewer_rejected(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    stdout, status = _check(
        tmp_path,
        monkeypatch,
        """
        dish = Dish(name="Soup", sweetness=2, saltiness=4, bitterness=0, sourness=0, umami=5)
        Evaluator[Restaurant]().rate(dish, RestaurantReviewer())
        """,
    )
    assert status == 1
    assert "arg-type" in stdout


def test_wrong_reviewer_for_evaluator_rejected(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    stdout, status = _check(
        tmp_path,
        monkeypatch,
        """
        restaurant = Restaurant(name="X", food_quality=0, environment=0, location=0)
        Evaluator[Restaurant]().rate(restaurant, DishReviewer())
        """,
    )
    assert status == 1
    assert "arg-type" in stdout
