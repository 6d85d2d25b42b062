"""
Pytest Configuration and Shared Fixtures.

This module contains fixtures available to all tests.
"""

from __future__ import annotations

from pathlib import Path
from typing import List

import pytest

from product_filter.domain.entities import Color, Product, Size
from product_filter.filters.engine import ProductFilter


@pytest.fixture
def sample_config_path() -> Path:
    """Path to sample configuration file."""
    return Path(__file__).parent / "fixtures" / "sample_config.yaml"


@pytest.fixture
def engine() -> ProductFilter[Product]:
    """Create a filter engine."""
    return ProductFilter()


@pytest.fixture
def apple() -> Product:
    return Product(name="Apple", color=Color.GREEN, size=Size.SMALL)


@pytest.fixture
def tree() -> Product:
    return Product(name="Tree", color=Color.GREEN, size=Size.LARGE)


@pytest.fixture
def house() -> Product:
    return Product(name="House", color=Color.BLUE, size=Size.LARGE)


@pytest.fixture
def products(apple: Product, tree: Product, house: Product) -> List[Product]:
    """The reference catalogue: Apple, Tree, House."""
    return [apple, tree, house]


@pytest.fixture
def mixed_products() -> List[Product]:
    """A larger catalogue covering every color and size, with a duplicate."""
    return [
        Product(name="Apple", color=Color.GREEN, size=Size.SMALL),
        Product(name="Tree", color=Color.GREEN, size=Size.LARGE),
        Product(name="House", color=Color.BLUE, size=Size.LARGE),
        Product(name="Cherry", color=Color.RED, size=Size.SMALL),
        Product(name="Car", color=Color.RED, size=Size.MEDIUM),
        Product(name="Ocean", color=Color.BLUE, size=Size.YUGE),
        Product(name="Apple", color=Color.GREEN, size=Size.SMALL),
        Product(name="Mountain", color=Color.GREEN, size=Size.YUGE),
    ]
