"""
Composite Criteria: AND, OR, NOT composition.

Composites own their children and are criteria themselves, so they nest
to any depth. Children are evaluated in declaration order:
    - AndCriterion stops at the first child that is not satisfied
    - OrCriterion stops at the first child that is satisfied
"""

from __future__ import annotations

from typing import Any, Tuple, TypeVar

from product_filter.criteria.base import Specification, describe, ensure_criterion
from product_filter.domain.exceptions import InvalidArgumentError
from product_filter.interfaces.criterion import Criterion

T = TypeVar("T")

MIN_CHILDREN = 2


class CompositeCriterion(Specification[T]):
    """Base for criteria combining two or more children."""

    operator = "?"

    def __init__(self, *children: Criterion[T]) -> None:
        """
        Initialize with child criteria.

        Args:
            *children: At least two criteria, evaluated in the given order

        Raises:
            InvalidArgumentError: If fewer than two children are given or
                a child is not a criterion
        """
        if len(children) < MIN_CHILDREN:
            raise InvalidArgumentError(
                "children",
                f"{type(self).__name__} needs at least {MIN_CHILDREN} criteria, "
                f"got {len(children)}",
            )
        self._children: Tuple[Criterion[T], ...] = tuple(
            ensure_criterion(c, f"children[{i}]") for i, c in enumerate(children)
        )

    @property
    def children(self) -> Tuple[Criterion[T], ...]:
        return self._children

    def describe(self) -> str:
        joined = f" {self.operator} ".join(describe(c) for c in self._children)
        return f"({joined})"


class AndCriterion(CompositeCriterion[T]):
    """Satisfied only if all children are satisfied."""

    operator = "AND"

    def is_satisfied_by(self, item: T) -> bool:
        return all(c.is_satisfied_by(item) for c in self._children)


class OrCriterion(CompositeCriterion[T]):
    """Satisfied if any child is satisfied."""

    operator = "OR"

    def is_satisfied_by(self, item: T) -> bool:
        return any(c.is_satisfied_by(item) for c in self._children)


class NotCriterion(Specification[T]):
    """Negates a single child."""

    def __init__(self, child: Criterion[T]) -> None:
        self._child = ensure_criterion(child, "child")

    @property
    def child(self) -> Criterion[T]:
        return self._child

    def is_satisfied_by(self, item: T) -> bool:
        return not self._child.is_satisfied_by(item)

    def describe(self) -> str:
        return f"NOT {describe(self._child)}"


def all_of(*criteria: Criterion[Any]) -> AndCriterion[Any]:
    """
    Create criterion that requires ALL criteria to pass (AND).

    Args:
        *criteria: Two or more criteria

    Returns:
        AndCriterion over the given criteria
    """
    return AndCriterion(*criteria)


def any_of(*criteria: Criterion[Any]) -> OrCriterion[Any]:
    """
    Create criterion that requires ANY criterion to pass (OR).

    Args:
        *criteria: Two or more criteria

    Returns:
        OrCriterion over the given criteria
    """
    return OrCriterion(*criteria)


def negate(criterion: Criterion[Any]) -> NotCriterion[Any]:
    """Create criterion that negates another criterion (NOT)."""
    return NotCriterion(criterion)
