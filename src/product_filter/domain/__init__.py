"""
Domain Layer - Entities and Exceptions.

Entities:
    - Product: Immutable catalogue item (name, color, size)
    - Color, Size: Categorical attributes of a product

Exceptions:
    - ProductFilterError: Base error
    - InvalidArgumentError: Invalid criterion construction arguments

Design Principles:
    - Immutable (frozen pydantic models)
    - No infrastructure dependencies
"""

from product_filter.domain.entities import Color, Product, Size
from product_filter.domain.exceptions import InvalidArgumentError, ProductFilterError

__all__ = [
    "Color",
    "Product",
    "Size",
    "InvalidArgumentError",
    "ProductFilterError",
]
