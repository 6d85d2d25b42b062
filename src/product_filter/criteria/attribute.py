"""
Attribute Criteria.

Each criterion captures one configuration value at construction and
compares it for equality against the corresponding item attribute:
    - AttributeCriterion: Generic equality on a named attribute
    - ColorCriterion: Product color
    - SizeCriterion: Product size
    - NameCriterion: Product name
    - PredicateCriterion: Wraps a plain callable
"""

from __future__ import annotations

from enum import Enum
from typing import Any, Callable, Optional, Type, TypeVar

from product_filter.criteria.base import Specification
from product_filter.domain.entities import Color, Product, Size
from product_filter.domain.exceptions import InvalidArgumentError

T = TypeVar("T")
E = TypeVar("E", bound=Enum)


def _coerce_enum(enum_type: Type[E], value: Any, argument: str) -> E:
    """Accept an enum member or its value, reject anything else."""
    if value is None:
        raise InvalidArgumentError(argument, "must not be None")
    if isinstance(value, enum_type):
        return value
    try:
        return enum_type(value)
    except ValueError:
        allowed = ", ".join(m.value for m in enum_type)
        raise InvalidArgumentError(
            argument, f"{value!r} is not one of: {allowed}"
        ) from None


def _declares_attribute(item_type: type, attribute: str) -> bool:
    """Check pydantic fields, class annotations and plain class attributes."""
    fields = getattr(item_type, "model_fields", None)
    if isinstance(fields, dict) and attribute in fields:
        return True
    for klass in getattr(item_type, "__mro__", ()):
        if attribute in getattr(klass, "__annotations__", {}):
            return True
    return hasattr(item_type, attribute)


class AttributeCriterion(Specification[T]):
    """
    Matches items whose attribute equals a configured value.

    Without ``item_type`` the attribute name is not checked until
    evaluation, where an item lacking it raises AttributeError. Pass
    ``item_type`` to reject unknown attributes at construction.
    """

    def __init__(
        self,
        attribute: str,
        value: Any,
        item_type: Optional[type] = None,
    ) -> None:
        """
        Initialize with attribute name and expected value.

        Args:
            attribute: Name of the item attribute to compare
            value: Expected value
            item_type: Optional item class that must declare the attribute

        Raises:
            InvalidArgumentError: If attribute is blank, value is None, or
                item_type does not declare the attribute
        """
        if not isinstance(attribute, str) or not attribute.strip():
            raise InvalidArgumentError("attribute", "must be a non-empty string")
        if value is None:
            raise InvalidArgumentError("value", "must not be None")
        if item_type is not None and not _declares_attribute(item_type, attribute):
            raise InvalidArgumentError(
                "attribute", f"{item_type.__name__} has no attribute {attribute!r}"
            )
        self._attribute = attribute
        self._value = value

    @property
    def attribute(self) -> str:
        return self._attribute

    @property
    def value(self) -> Any:
        return self._value

    def is_satisfied_by(self, item: T) -> bool:
        return getattr(item, self._attribute) == self._value

    def describe(self) -> str:
        value = self._value.value if isinstance(self._value, Enum) else self._value
        return f"{self._attribute}={value}"


class ColorCriterion(AttributeCriterion[Product]):
    """Matches products of one color."""

    def __init__(self, color: Color) -> None:
        super().__init__("color", _coerce_enum(Color, color, "color"), Product)


class SizeCriterion(AttributeCriterion[Product]):
    """Matches products of one size."""

    def __init__(self, size: Size) -> None:
        super().__init__("size", _coerce_enum(Size, size, "size"), Product)


class NameCriterion(AttributeCriterion[Product]):
    """Matches products by exact name."""

    def __init__(self, name: str) -> None:
        if not isinstance(name, str) or not name.strip():
            raise InvalidArgumentError("name", "must be a non-empty string")
        super().__init__("name", name, Product)


class PredicateCriterion(Specification[T]):
    """
    Adapts a plain callable to the criterion interface.

    The callable must be pure: same item in, same answer out.
    """

    def __init__(
        self,
        func: Callable[[T], bool],
        description: Optional[str] = None,
    ) -> None:
        if func is None or not callable(func):
            raise InvalidArgumentError("func", "must be callable")
        self._func = func
        self._description = description or getattr(func, "__name__", "predicate")

    def is_satisfied_by(self, item: T) -> bool:
        return bool(self._func(item))

    def describe(self) -> str:
        return self._description
