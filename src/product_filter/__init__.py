"""
Product Filter - Composable Criteria for Filtering Collections.

Items are queried against arbitrarily combinable criteria without the
filter ever changing when a new criterion or combination is needed.

Architecture:
    - Criterion protocol with a single ``is_satisfied_by`` operation
    - Composite criteria (AND / OR / NOT) that nest to any depth
    - Stateless filter engine returning lazy, restartable views
    - Configuration-driven screens via YAML

Main Components:
    - domain: Product entity, Color / Size enums, exceptions
    - interfaces: Criterion and ItemFilter protocols
    - criteria: Concrete and composite criteria
    - filters: The filter engine
    - registry: Named criterion factories
    - config: Configuration models, loader and screen builder

Example:
    >>> from product_filter import Color, ColorCriterion, Product, ProductFilter, Size
    >>> apple = Product(name="Apple", color=Color.GREEN, size=Size.SMALL)
    >>> [p.name for p in ProductFilter().filter([apple], ColorCriterion(Color.GREEN))]
    ['Apple']
"""

import logging

from product_filter.criteria import (
    AndCriterion,
    ColorCriterion,
    NameCriterion,
    NotCriterion,
    OrCriterion,
    PredicateCriterion,
    SizeCriterion,
    Specification,
    all_of,
    any_of,
    negate,
)
from product_filter.domain import Color, InvalidArgumentError, Product, ProductFilterError, Size
from product_filter.filters import FilteredItems, FilterResult, ProductFilter, filter_items
from product_filter.interfaces import Criterion

__version__ = "0.1.0"


def configure_logging(
    level: int = logging.INFO,
    format: str = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
) -> None:
    """
    Configure logging for Product Filter.

    Call this at application startup to see log messages.
    By default, only WARNING and above are visible.

    Args:
        level: Logging level (default: INFO)
        format: Log message format
    """
    logging.basicConfig(
        level=level,
        format=format,
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    logging.getLogger("product_filter").setLevel(level)


__all__ = [
    "AndCriterion",
    "Color",
    "ColorCriterion",
    "Criterion",
    "FilterResult",
    "FilteredItems",
    "InvalidArgumentError",
    "NameCriterion",
    "NotCriterion",
    "OrCriterion",
    "PredicateCriterion",
    "Product",
    "ProductFilter",
    "ProductFilterError",
    "Size",
    "SizeCriterion",
    "Specification",
    "all_of",
    "any_of",
    "configure_logging",
    "filter_items",
    "negate",
]
