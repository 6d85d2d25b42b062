"""
Unit Tests for ProductFilter.

Test Aspects Covered:
    ✅ Business Logic: Matching subset in original order
    ✅ Edge Cases: Empty input, duplicates, uniform criteria, one-shot iterators
    ✅ Error Handling: None items, non-criterion argument
    ✅ Laziness: Evaluation deferred until iteration, restartable views
"""

from __future__ import annotations

import logging
from typing import Any, List

import pytest

from product_filter.criteria.attribute import ColorCriterion, PredicateCriterion, SizeCriterion
from product_filter.domain.entities import Color, Product, Size
from product_filter.domain.exceptions import InvalidArgumentError
from product_filter.filters.engine import FilteredItems, FilterResult, ProductFilter, filter_items


class CountingCriterion:
    """Accepts everything and counts evaluations."""

    def __init__(self) -> None:
        self.calls = 0

    def is_satisfied_by(self, item: Any) -> bool:
        self.calls += 1
        return True


class TestFilter:
    """Test cases for ProductFilter.filter."""

    def test_returns_matches_in_order(
        self,
        engine: ProductFilter[Product],
        products: List[Product],
        apple: Product,
        tree: Product,
    ) -> None:
        """
        SCENARIO: Filter reference catalogue by GREEN
        EXPECTED: Apple then Tree
        """
        result = list(engine.filter(products, ColorCriterion(Color.GREEN)))

        assert result == [apple, tree]

    def test_empty_input_returns_empty(self, engine: ProductFilter[Product]) -> None:
        assert list(engine.filter([], ColorCriterion(Color.GREEN))) == []

    def test_keeps_duplicates(self, engine: ProductFilter[Product], apple: Product) -> None:
        result = list(engine.filter([apple, apple], SizeCriterion(Size.SMALL)))

        assert result == [apple, apple]

    def test_uniformly_true(self, engine: ProductFilter[Product], products: List[Product]) -> None:
        always = PredicateCriterion(lambda p: True)

        assert list(engine.filter(products, always)) == products

    def test_uniformly_false(self, engine: ProductFilter[Product], products: List[Product]) -> None:
        never = PredicateCriterion(lambda p: False)

        assert list(engine.filter(products, never)) == []

    def test_does_not_mutate_input(
        self, engine: ProductFilter[Product], products: List[Product]
    ) -> None:
        snapshot = list(products)

        list(engine.filter(products, ColorCriterion(Color.BLUE)))

        assert products == snapshot

    def test_is_lazy(self, engine: ProductFilter[Product], products: List[Product]) -> None:
        """
        SCENARIO: filter called but result not iterated
        EXPECTED: Criterion never evaluated
        """
        criterion = CountingCriterion()

        view = engine.filter(products, criterion)

        assert isinstance(view, FilteredItems)
        assert criterion.calls == 0
        list(view)
        assert criterion.calls == len(products)

    def test_is_restartable(self, engine: ProductFilter[Product], products: List[Product]) -> None:
        view = engine.filter(products, SizeCriterion(Size.LARGE))

        assert list(view) == list(view)
        assert len(list(view)) == 2

    def test_one_shot_iterator_consumed_once(
        self, engine: ProductFilter[Product], products: List[Product]
    ) -> None:
        view = engine.filter(iter(products), SizeCriterion(Size.LARGE))

        assert len(list(view)) == 2
        assert list(view) == []

    def test_accepts_plain_criterion(
        self, engine: ProductFilter[Product], products: List[Product]
    ) -> None:
        """Objects that only implement is_satisfied_by are accepted."""
        assert list(engine.filter(products, CountingCriterion())) == products

    def test_none_items_raises(self, engine: ProductFilter[Product]) -> None:
        with pytest.raises(InvalidArgumentError):
            engine.filter(None, ColorCriterion(Color.RED))  # type: ignore[arg-type]

    def test_non_criterion_raises(
        self, engine: ProductFilter[Product], products: List[Product]
    ) -> None:
        with pytest.raises(InvalidArgumentError):
            engine.filter(products, lambda p: True)  # type: ignore[arg-type]

    def test_filter_items_helper(self, products: List[Product], house: Product) -> None:
        result = list(filter_items(products, ColorCriterion(Color.BLUE)))

        assert result == [house]


class TestPartition:
    """Test cases for ProductFilter.partition."""

    def test_splits_items(
        self,
        engine: ProductFilter[Product],
        products: List[Product],
        apple: Product,
        tree: Product,
        house: Product,
    ) -> None:
        result = engine.partition(products, SizeCriterion(Size.LARGE))

        assert result.passed == (tree, house)
        assert result.rejected == (apple,)
        assert result.passed_count == 2
        assert result.rejected_count == 1
        assert result.match_ratio == pytest.approx(2 / 3)

    def test_empty_input(self, engine: ProductFilter[Product]) -> None:
        result = engine.partition([], SizeCriterion(Size.LARGE))

        assert result == FilterResult()
        assert result.match_ratio == 0.0

    def test_logs_summary(
        self,
        engine: ProductFilter[Product],
        products: List[Product],
        caplog: pytest.LogCaptureFixture,
    ) -> None:
        with caplog.at_level(logging.DEBUG, logger="product_filter.filters.engine"):
            engine.partition(products, ColorCriterion(Color.GREEN))

        assert "color=GREEN" in caplog.text
        assert "2 passed, 1 rejected" in caplog.text

    def test_none_items_raises(self, engine: ProductFilter[Product]) -> None:
        with pytest.raises(InvalidArgumentError):
            engine.partition(None, ColorCriterion(Color.RED))  # type: ignore[arg-type]
