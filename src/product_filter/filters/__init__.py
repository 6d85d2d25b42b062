"""
Filters Package - The Filter Engine.

    - ProductFilter: Applies a criterion to a collection
    - FilteredItems: Lazy, restartable view of the matches
    - FilterResult: Eager passed/rejected split
    - filter_items: Single-pass convenience generator
"""

from product_filter.filters.engine import (
    FilteredItems,
    FilterResult,
    ProductFilter,
    filter_items,
)

__all__ = [
    "FilteredItems",
    "FilterResult",
    "ProductFilter",
    "filter_items",
]
