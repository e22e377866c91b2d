"""Weight sets used by the reviewer formulas."""

from pydantic import BaseModel, Field, model_validator

from reviewkit.consts import WEIGHT_SUM_TOLERANCE


def _check_total(total: float) -> None:
    if abs(total - 1.0) > WEIGHT_SUM_TOLERANCE:
        msg = f"Weights must sum to 1.0, got {total}"
        raise ValueError(msg)


class RestaurantWeights(BaseModel):
    """Dimension weights for rating a restaurant.

    All weights must sum to 1.0 so the rating stays on the input scale.
    """

    food_quality: float = Field(default=0.6, ge=0.0, le=1.0)
    environment: float = Field(default=0.3, ge=0.0, le=1.0)
    location: float = Field(default=0.1, ge=0.0, le=1.0)

    @model_validator(mode="after")
    def weights_sum_to_one(self) -> "RestaurantWeights":
        """Validate that weights sum to 1.0."""
        _check_total(self.food_quality + self.environment + self.location)
        return self


class DishWeights(BaseModel):
    """Taste dimension weights for rating a dish.

    All weights must sum to 1.0 so the rating stays on the input scale.
    """

    sweetness: float = Field(default=0.1, ge=0.0, le=1.0)
    saltiness: float = Field(default=0.2, ge=0.0, le=1.0)
    bitterness: float = Field(default=0.1, ge=0.0, le=1.0)
    sourness: float = Field(default=0.1, ge=0.0, le=1.0)
    umami: float = Field(default=0.5, ge=0.0, le=1.0)

    @model_validator(mode="after")
    def weights_sum_to_one(self) -> "DishWeights":
        """Validate that weights sum to 1.0."""
        _check_total(
            self.sweetness + self.saltiness + self.bitterness + self.sourness + self.umami
        )
        return self
