"""Generic evaluator dispatching rating to a supplied reviewer."""

import logging
from collections.abc import Sequence
from typing import Generic, TypeVar

from reviewkit.reviewers.base import Reviewer

logger = logging.getLogger(__name__)

T = TypeVar("T")


class Evaluator(Generic[T]):
    """Rates any entity shape through a reviewer authored for that shape.

    The evaluator knows nothing about concrete shapes. It delegates to the
    reviewer and returns its rating unchanged, so one evaluator type serves
    every (entity, reviewer) pair. A reviewer for the wrong shape is a type
    error, caught before the program runs.
    """

    def rate(self, obj: T, reviewer: Reviewer[T]) -> int:
        """Rate an entity with the given reviewer.

        Args:
            obj: The entity to rate
            reviewer: Reviewer authored for the entity's shape

        Returns:
            The reviewer's rating, unchanged
        """
        logger.debug(f"Delegating {type(obj).__name__} to {type(reviewer).__name__}")
        return reviewer.rate(obj)

    def rate_batch(self, objs: Sequence[T], reviewer: Reviewer[T]) -> list[int]:
        """Rate multiple entities with the same reviewer.

        Args:
            objs: Entities of one shape
            reviewer: Reviewer authored for that shape

        Returns:
            Ratings in the same order as the entities
        """
        return [self.rate(obj, reviewer) for obj in objs]
