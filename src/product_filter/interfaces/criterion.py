"""
Criterion and Filter Protocols.

Defines the abstract interfaces of the filtering mechanism. A criterion
decides whether a single item satisfies a condition; a filter applies a
criterion across a collection.

Design Notes:
    - Uses typing.Protocol for structural subtyping
    - Any object with an ``is_satisfied_by`` method is a criterion, so new
      criteria plug in without touching the filter
    - Criteria are stateless with respect to the items they evaluate
"""

from __future__ import annotations

from typing import Iterable, Protocol, TypeVar, runtime_checkable

T = TypeVar("T")
T_contra = TypeVar("T_contra", contravariant=True)


@runtime_checkable
class Criterion(Protocol[T_contra]):
    """Predicate over a single item."""

    def is_satisfied_by(self, item: T_contra) -> bool:
        """
        Check whether the item satisfies this criterion.

        Must be total for well-formed items and must not mutate the item
        or any shared state.

        Args:
            item: Item to evaluate

        Returns:
            True if the item matches
        """
        ...


class ItemFilter(Protocol[T]):
    """Applies a criterion to a collection of items."""

    def filter(self, items: Iterable[T], criterion: Criterion[T]) -> Iterable[T]:
        """
        Select the items satisfying the criterion.

        Args:
            items: Items to filter (not mutated)
            criterion: Criterion to apply

        Returns:
            Matching items in their original order
        """
        ...
