"""
Console Demo.

Builds the Apple/Tree/House catalogue, runs the reference queries and
prints the matches. With ``--config`` the catalogue and named screens are
read from a YAML file instead.
"""

from __future__ import annotations

import argparse
import logging
from typing import List, Optional, Sequence

from product_filter import configure_logging
from product_filter.config.loader import load_config
from product_filter.config.models import FilterConfig
from product_filter.config.screens import build_criterion
from product_filter.criteria.attribute import ColorCriterion, SizeCriterion
from product_filter.criteria.base import describe
from product_filter.domain.entities import Color, Product, Size
from product_filter.filters.engine import ProductFilter
from product_filter.interfaces.criterion import Criterion

logger = logging.getLogger(__name__)


def _print_matches(
    title: str,
    products: Sequence[Product],
    criterion: Criterion[Product],
    engine: ProductFilter[Product],
) -> List[Product]:
    print(f"{title} [{describe(criterion)}]:")
    matches = list(engine.filter(products, criterion))
    for product in matches:
        print(f" - {product}")
    if not matches:
        print(" (none)")
    return matches


def run_reference_demo(products: Sequence[Product]) -> None:
    """Run the green / big-and-blue / big-and-green queries."""
    engine: ProductFilter[Product] = ProductFilter()
    _print_matches("Green products", products, ColorCriterion(Color.GREEN), engine)
    _print_matches(
        "Large blue products",
        products,
        ColorCriterion(Color.BLUE) & SizeCriterion(Size.LARGE),
        engine,
    )
    _print_matches(
        "Large green products",
        products,
        ColorCriterion(Color.GREEN) & SizeCriterion(Size.LARGE),
        engine,
    )


def run_screens(config: FilterConfig) -> None:
    """Run every named screen of a loaded configuration."""
    engine: ProductFilter[Product] = ProductFilter()
    products = config.products()
    for name, screen in config.screens.items():
        title = screen.description or name
        _print_matches(title, products, build_criterion(screen), engine)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Entry point for the ``product-filter`` console script."""
    parser = argparse.ArgumentParser(description="Filter a product catalogue.")
    parser.add_argument("--config", help="YAML file with catalogue and screens")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")
    args = parser.parse_args(argv)

    config = load_config(args.config) if args.config else FilterConfig()
    level = logging.DEBUG if args.verbose else getattr(logging, config.log_level)
    configure_logging(level)
    logger.info(f"Loaded catalogue with {len(config.catalogue)} products")

    if config.screens:
        run_screens(config)
    else:
        run_reference_demo(config.products())
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
