"""
Criteria Package - Concrete and Composite Criteria.

Concrete criteria:
    - ColorCriterion, SizeCriterion, NameCriterion: Product attribute equality
    - AttributeCriterion: Equality on any named attribute
    - PredicateCriterion: Wraps a plain callable

Composite criteria:
    - AndCriterion / all_of: All children satisfied
    - OrCriterion / any_of: Any child satisfied
    - NotCriterion / negate: Child not satisfied

Usage:
    criterion = ColorCriterion(Color.BLUE) & SizeCriterion(Size.LARGE)
    matches = list(ProductFilter().filter(products, criterion))
"""

from product_filter.criteria.attribute import (
    AttributeCriterion,
    ColorCriterion,
    NameCriterion,
    PredicateCriterion,
    SizeCriterion,
)
from product_filter.criteria.base import Specification, describe, ensure_criterion
from product_filter.criteria.composite import (
    AndCriterion,
    CompositeCriterion,
    NotCriterion,
    OrCriterion,
    all_of,
    any_of,
    negate,
)

__all__ = [
    "AndCriterion",
    "AttributeCriterion",
    "ColorCriterion",
    "CompositeCriterion",
    "NameCriterion",
    "NotCriterion",
    "OrCriterion",
    "PredicateCriterion",
    "SizeCriterion",
    "Specification",
    "all_of",
    "any_of",
    "describe",
    "ensure_criterion",
    "negate",
]
