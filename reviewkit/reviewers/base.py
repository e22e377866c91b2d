"""Reviewer protocol defining the rating contract for scored entities."""

from decimal import ROUND_HALF_CEILING, Decimal
from typing import Protocol, TypeVar, runtime_checkable

from reviewkit.consts import ROUNDING_PRECISION_DIGITS

T_contra = TypeVar("T_contra", contravariant=True)


@runtime_checkable
class Reviewer(Protocol[T_contra]):
    """Protocol defining the reviewer contract.

    A reviewer is a stateless strategy authored against one entity shape.
    It takes an entity and returns an integer rating on the same scale as
    the entity's attributes.

    The entity type parameter lets a static type checker reject a reviewer
    paired with the wrong shape before the program runs:
    - Reviewer[Restaurant] accepts Restaurant only
    - Reviewer[Dish] accepts Dish only
    """

    def rate(self, obj: T_contra) -> int:
        """Rate an entity.

        Args:
            obj: The entity to rate

        Returns:
            Integer rating
        """
        ...


def round_half_up(value: float) -> int:
    """Round a weighted sum to the nearest integer, halves toward +infinity.

    Float noise past ROUNDING_PRECISION_DIGITS is dropped first, so
    3.4999999999999996 rounds like 3.5.
    """
    cleaned = Decimal(str(round(value, ROUNDING_PRECISION_DIGITS)))
    return int(cleaned.quantize(Decimal("1"), rounding=ROUND_HALF_CEILING))
