"""
Screen Builder - Turns a ScreenConfig into a composite criterion.

A screen with allowed colors [GREEN, BLUE], allowed sizes [LARGE] and
excluded name "House" becomes:

    ((color=GREEN OR color=BLUE) AND size=LARGE AND NOT name=House)
"""

from __future__ import annotations

from typing import Any, List, Type

from product_filter.config.models import ScreenConfig
from product_filter.criteria.attribute import (
    ColorCriterion,
    NameCriterion,
    PredicateCriterion,
    SizeCriterion,
)
from product_filter.criteria.composite import (
    AndCriterion,
    CompositeCriterion,
    NotCriterion,
    OrCriterion,
)
from product_filter.domain.entities import Product
from product_filter.interfaces.criterion import Criterion


def _accept_all(product: Product) -> bool:
    return True


def _combine(
    parts: List[Criterion[Any]],
    composite: Type[CompositeCriterion[Any]],
) -> Criterion[Any]:
    """Single part stands alone, several are joined by the composite."""
    if len(parts) == 1:
        return parts[0]
    return composite(*parts)


def build_criterion(screen: ScreenConfig) -> Criterion[Product]:
    """
    Compile a screen into a criterion.

    Args:
        screen: Screen configuration

    Returns:
        Criterion matching products allowed by every configured constraint.
        A screen without constraints matches every product.
    """
    parts: List[Criterion[Any]] = []

    if screen.allowed_colors:
        parts.append(_combine([ColorCriterion(c) for c in screen.allowed_colors], OrCriterion))
    if screen.allowed_sizes:
        parts.append(_combine([SizeCriterion(s) for s in screen.allowed_sizes], OrCriterion))
    if screen.exclude_names:
        excluded = _combine([NameCriterion(n) for n in screen.exclude_names], OrCriterion)
        parts.append(NotCriterion(excluded))

    if not parts:
        return PredicateCriterion(_accept_all, "any")
    return _combine(parts, AndCriterion)
