"""Tests for product predicates and pagination."""

import math

import pytest

from products_api.domain.filters import (
    Page,
    brand_contains,
    in_stock,
    match_all,
    paginate,
    price_between,
    rating_between,
    title_contains,
)


class TestPaginate:
    """Tests for the filter-then-slice window."""

    @pytest.mark.parametrize(
        "skip,limit",
        [(0, 10), (0, 2), (2, 2), (4, 10), (5, 3), (50, 5), (1, 0)],
    )
    def test_page_is_exact_slice(self, catalog, skip: int, limit: int) -> None:
        """The page is filtered[skip:skip + limit] and never longer than limit."""
        page = paginate(catalog, match_all, skip, limit)
        assert page.total == len(catalog)
        assert page.items == catalog[skip : skip + limit]
        assert len(page.items) <= limit

    def test_total_counts_matches_not_page(self, catalog) -> None:
        """Total reflects every match, not just the page."""
        page = paginate(catalog, in_stock, skip=0, limit=1)
        assert page.total == 3
        assert len(page.items) == 1

    def test_preserves_catalog_order(self, catalog) -> None:
        """Filtering keeps the original order."""
        page = paginate(catalog, brand_contains("apple"), skip=0, limit=10)
        assert [p.id for p in page.items] == [0, 2]

    def test_empty_catalog(self) -> None:
        """An empty catalog yields an empty page without error."""
        assert paginate([], match_all, skip=3, limit=10) == Page(total=0, items=[])


class TestSubstringPredicates:
    """Tests for title and brand matching."""

    def test_title_match_is_case_insensitive(self, make_product) -> None:
        """Uppercase query matches mixed-case title."""
        product = make_product(0, title="iPhone 12")
        assert title_contains("PHONE")(product)
        assert not title_contains("android")(product)

    def test_empty_name_matches_everything(self, catalog) -> None:
        """Empty substring is contained in every title."""
        assert all(title_contains("")(p) for p in catalog)

    def test_brand_match(self, catalog) -> None:
        """Brand substring matching ignores case."""
        matched = [p.id for p in catalog if brand_contains("ACQUA")(p)]
        assert matched == [3]


class TestRangePredicates:
    """Tests for the exclusive-lower, inclusive-upper ranges."""

    def test_price_at_min_excluded(self, make_product) -> None:
        """A product priced exactly at the minimum is excluded."""
        assert not price_between(100, 200)(make_product(0, price=100))

    def test_price_at_max_included(self, make_product) -> None:
        """A product priced exactly at the maximum is included."""
        assert price_between(100, 200)(make_product(0, price=200))

    def test_price_inside_and_outside(self, make_product) -> None:
        """Values strictly inside match, values above do not."""
        predicate = price_between(100, 200)
        assert predicate(make_product(0, price=150))
        assert not predicate(make_product(0, price=200.01))

    def test_unbounded_price_keeps_free_products(self, make_product) -> None:
        """Default bounds do not drop a zero price."""
        assert price_between(-math.inf, math.inf)(make_product(0, price=0))

    def test_rating_boundaries(self, make_product) -> None:
        """Rating uses the same boundary policy as price."""
        predicate = rating_between(4.0, 4.5)
        assert not predicate(make_product(0, rating=4.0))
        assert predicate(make_product(0, rating=4.5))
        assert predicate(make_product(0, rating=4.2))

    def test_inverted_range_matches_nothing(self, catalog) -> None:
        """min above max filters out every product."""
        assert paginate(catalog, rating_between(5, 1), 0, 10).total == 0


class TestInStock:
    """Tests for the stock predicate."""

    def test_excludes_exactly_zero_stock(self, catalog) -> None:
        """Only products with stock == 0 are dropped."""
        kept = [p.id for p in catalog if in_stock(p)]
        assert kept == [p.id for p in catalog if p.stock != 0]
        assert kept == [0, 2, 3]
