"""
Specification Base Class.

Concrete and composite criteria derive from ``Specification``, which adds
operator sugar on top of the ``Criterion`` protocol:

    green_and_large = ColorCriterion(Color.GREEN) & SizeCriterion(Size.LARGE)
    not_blue = ~ColorCriterion(Color.BLUE)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any, Generic, TypeVar

from product_filter.domain.exceptions import InvalidArgumentError
from product_filter.interfaces.criterion import Criterion

if TYPE_CHECKING:
    from product_filter.criteria.composite import (
        AndCriterion,
        NotCriterion,
        OrCriterion,
    )

T = TypeVar("T")


class Specification(ABC, Generic[T]):
    """Abstract base class for all criteria."""

    @abstractmethod
    def is_satisfied_by(self, item: T) -> bool:
        """Return True if the item satisfies the criterion."""

    def describe(self) -> str:
        """Human readable rendering, used in logs."""
        return type(self).__name__

    def __and__(self, other: Criterion[T]) -> "AndCriterion[T]":
        from product_filter.criteria.composite import AndCriterion

        return AndCriterion(self, other)

    def __or__(self, other: Criterion[T]) -> "OrCriterion[T]":
        from product_filter.criteria.composite import OrCriterion

        return OrCriterion(self, other)

    def __invert__(self) -> "NotCriterion[T]":
        from product_filter.criteria.composite import NotCriterion

        return NotCriterion(self)

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.describe()}>"


def ensure_criterion(value: Any, argument: str = "criterion") -> Criterion[Any]:
    """
    Validate that a value implements the Criterion protocol.

    Args:
        value: Object to check
        argument: Argument name used in the error message

    Returns:
        The value, unchanged

    Raises:
        InvalidArgumentError: If value has no callable ``is_satisfied_by``
    """
    if value is None:
        raise InvalidArgumentError(argument, "must not be None")
    if not isinstance(value, Criterion) or not callable(value.is_satisfied_by):
        raise InvalidArgumentError(
            argument, f"{type(value).__name__} does not implement is_satisfied_by"
        )
    return value


def describe(criterion: Criterion[Any]) -> str:
    """Describe any criterion, including ones not derived from Specification."""
    if isinstance(criterion, Specification):
        return criterion.describe()
    return type(criterion).__name__
