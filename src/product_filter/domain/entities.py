"""
Core Domain Entities.

This module defines the items the filter operates on. Products are
immutable value objects: two products with the same attributes are equal.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field, field_validator

from product_filter.domain.exceptions import InvalidArgumentError


class Color(str, Enum):
    """Color of a product."""

    RED = "RED"
    GREEN = "GREEN"
    BLUE = "BLUE"


class Size(str, Enum):
    """Size of a product."""

    SMALL = "SMALL"
    MEDIUM = "MEDIUM"
    LARGE = "LARGE"
    YUGE = "YUGE"


class Product(BaseModel):
    """A catalogue item that can be filtered by name, color and size."""

    name: str = Field(..., description="Display name of the product")
    color: Color = Field(..., description="Product color")
    size: Size = Field(..., description="Product size")

    model_config = {"frozen": True}

    def __init__(self, **data: Any) -> None:
        """
        Build a product.

        Raises:
            InvalidArgumentError: If name is missing or blank
            ValidationError: If color or size is invalid
        """
        name = data.get("name")
        if not isinstance(name, str) or not name.strip():
            raise InvalidArgumentError("name", "must be a non-empty string")
        super().__init__(**data)

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("name must not be blank")
        return value

    def __str__(self) -> str:
        return f"{self.name} ({self.color.value}, {self.size.value})"
