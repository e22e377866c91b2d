"""Scored entities: immutable records of named integer attributes."""

from pydantic import BaseModel, ConfigDict, Field


class Restaurant(BaseModel):
    """A restaurant rated on food, environment and location.

    Attribute values live on an implicit 0-5 scale that is not enforced.
    """

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Display name, not used in scoring")
    food_quality: int = Field(description="Quality of the food")
    environment: int = Field(description="Ambience and comfort")
    location: int = Field(description="Convenience of the location")


class Dish(BaseModel):
    """A dish rated on its five taste dimensions."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Display name, not used in scoring")
    sweetness: int = Field(description="Sugary taste intensity")
    saltiness: int = Field(description="Salty taste intensity")
    bitterness: int = Field(description="Bitter taste intensity")
    sourness: int = Field(description="Sour taste intensity")
    umami: int = Field(description="Savory taste intensity")
