"""
Registry Package - Named Criterion Factories.

Provides CriterionRegistry for plugging in new criteria by name.
"""

from product_filter.registry.criterion_registry import (
    CriterionInfo,
    CriterionRegistry,
    default_registry,
)

__all__ = ["CriterionInfo", "CriterionRegistry", "default_registry"]
