"""
Configuration Models - Pydantic Models for Type-Safe Config.

All configuration is validated at load time using Pydantic.
"""

from __future__ import annotations

from typing import Dict, List

from pydantic import BaseModel, Field, field_validator

from product_filter.domain.entities import Color, Product, Size


class ProductConfig(BaseModel):
    """A catalogue entry."""

    name: str = Field(..., min_length=1)
    color: Color
    size: Size

    @field_validator("name")
    @classmethod
    def _name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("name must not be blank")
        return value

    def to_product(self) -> Product:
        return Product(name=self.name, color=self.color, size=self.size)


class ScreenConfig(BaseModel):
    """
    Allowed attribute values for a named screen.

    An empty list places no constraint on that attribute.
    """

    description: str = ""
    allowed_colors: List[Color] = Field(default_factory=list)
    allowed_sizes: List[Size] = Field(default_factory=list)
    exclude_names: List[str] = Field(default_factory=list)

    @field_validator("exclude_names")
    @classmethod
    def _names_not_blank(cls, value: List[str]) -> List[str]:
        blank = [i for i, name in enumerate(value) if not name.strip()]
        if blank:
            raise ValueError(f"exclude_names at positions {blank} must not be blank")
        return value


def _default_catalogue() -> List[ProductConfig]:
    return [
        ProductConfig(name="Apple", color=Color.GREEN, size=Size.SMALL),
        ProductConfig(name="Tree", color=Color.GREEN, size=Size.LARGE),
        ProductConfig(name="House", color=Color.BLUE, size=Size.LARGE),
    ]


class FilterConfig(BaseModel):
    """Root configuration object."""

    version: str = "1.0"
    log_level: str = Field(default="WARNING", pattern="^(DEBUG|INFO|WARNING|ERROR|CRITICAL)$")
    catalogue: List[ProductConfig] = Field(default_factory=_default_catalogue)
    screens: Dict[str, ScreenConfig] = Field(default_factory=dict)

    def products(self) -> List[Product]:
        """Build the catalogue as domain products, in declared order."""
        return [entry.to_product() for entry in self.catalogue]
