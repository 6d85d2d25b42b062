"""
Interfaces Package - Abstract Protocols.

Protocols:
    - Criterion: Single-item predicate (``is_satisfied_by``)
    - ItemFilter: Applies a criterion across a collection
"""

from product_filter.interfaces.criterion import Criterion, ItemFilter

__all__ = ["Criterion", "ItemFilter"]
