"""
Filter Engine.

Applies any criterion to a collection of items. The engine knows nothing
about concrete criteria, so new criteria and combinations never require
changes here.

Design Notes:
    - Stateless: one engine instance can serve any number of callers
    - Lazy: ``filter`` returns a view that evaluates on iteration
    - Restartable: every iteration of the view re-runs the evaluation
      over the source collection
    - Input collection and items are never mutated
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Generic, Iterable, Iterator, List, Tuple, TypeVar

from product_filter.criteria.base import describe, ensure_criterion
from product_filter.domain.exceptions import InvalidArgumentError
from product_filter.interfaces.criterion import Criterion

logger = logging.getLogger(__name__)

T = TypeVar("T")


class FilteredItems(Generic[T]):
    """
    Lazy, restartable view over the items matching a criterion.

    Iterating twice over a re-iterable source (list, tuple) yields the same
    items both times. A one-shot iterator source can only be consumed once.
    """

    def __init__(self, items: Iterable[T], criterion: Criterion[T]) -> None:
        self._items = items
        self._criterion = criterion

    @property
    def criterion(self) -> Criterion[T]:
        return self._criterion

    def __iter__(self) -> Iterator[T]:
        for item in self._items:
            if self._criterion.is_satisfied_by(item):
                yield item

    def __repr__(self) -> str:
        return f"FilteredItems(criterion={describe(self._criterion)})"


@dataclass(frozen=True)
class FilterResult(Generic[T]):
    """Items split by a criterion, both sides in original order."""

    passed: Tuple[T, ...] = ()
    rejected: Tuple[T, ...] = ()

    @property
    def passed_count(self) -> int:
        return len(self.passed)

    @property
    def rejected_count(self) -> int:
        return len(self.rejected)

    @property
    def match_ratio(self) -> float:
        """Fraction of items that passed (0.0 for empty input)."""
        total = self.passed_count + self.rejected_count
        if total == 0:
            return 0.0
        return self.passed_count / total


class ProductFilter(Generic[T]):
    """Filters items of any type by a criterion."""

    def filter(self, items: Iterable[T], criterion: Criterion[T]) -> FilteredItems[T]:
        """
        Select the items satisfying the criterion.

        Args:
            items: Items to filter (not mutated)
            criterion: Criterion to apply

        Returns:
            Lazy view over matching items, original order, duplicates kept

        Raises:
            InvalidArgumentError: If items is None or criterion is not a criterion
        """
        if items is None:
            raise InvalidArgumentError("items", "must not be None")
        return FilteredItems(items, ensure_criterion(criterion))

    def partition(self, items: Iterable[T], criterion: Criterion[T]) -> FilterResult[T]:
        """
        Split items into those that pass and those that do not.

        Args:
            items: Items to split (consumed once)
            criterion: Criterion to apply

        Returns:
            FilterResult with passed and rejected items
        """
        if items is None:
            raise InvalidArgumentError("items", "must not be None")
        criterion = ensure_criterion(criterion)

        passed: List[T] = []
        rejected: List[T] = []
        for item in items:
            if criterion.is_satisfied_by(item):
                passed.append(item)
            else:
                rejected.append(item)

        result = FilterResult(passed=tuple(passed), rejected=tuple(rejected))
        logger.debug(
            f"Filtered by {describe(criterion)}: "
            f"{result.passed_count} passed, {result.rejected_count} rejected"
        )
        return result


def filter_items(items: Iterable[T], criterion: Criterion[T]) -> Iterator[T]:
    """
    Return an iterator over the items satisfying the criterion.

    Single-pass convenience over ``ProductFilter().filter``.
    """
    return iter(ProductFilter().filter(items, criterion))
