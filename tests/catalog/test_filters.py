"""Tests for the filter stage."""

from decimal import Decimal

from martcatalog.catalog.filters import FilterCriteria, filter_products
from martcatalog.catalog.models import Product


def ids(products: list[Product]) -> list[int]:
    return [p.id for p in products]


class TestFilterCriteria:
    """Tests for FilterCriteria."""

    def test_default_is_empty(self) -> None:
        """No criteria means nothing is rejected."""
        assert FilterCriteria().is_empty

    def test_all_category_is_empty(self) -> None:
        """The 'all' sentinel disables the category filter."""
        assert FilterCriteria(category="all").is_empty

    def test_false_flags_are_empty(self) -> None:
        """on_sale=False and in_stock=False do not filter."""
        assert FilterCriteria(on_sale=False, in_stock=False).is_empty


class TestFilterProducts:
    """Tests for filter_products."""

    def test_no_criteria_passes_everything(self, products: list[Product]) -> None:
        """Without criteria the input comes back unchanged."""
        result = filter_products(products)
        assert result == products
        assert result is not products

    def test_category(self, products: list[Product]) -> None:
        """Category filter keeps exact matches only."""
        result = filter_products(products, FilterCriteria(category="electronics"))
        assert ids(result) == [1, 2, 3, 4, 5]
        assert all(p.category.value == "electronics" for p in result)

    def test_unknown_category_matches_nothing(self, products: list[Product]) -> None:
        """An unknown category is an empty result, not an error."""
        assert filter_products(products, FilterCriteria(category="garden")) == []

    def test_search_is_case_insensitive(self, products: list[Product]) -> None:
        """Search ignores case."""
        result = filter_products(products, FilterCriteria(search="SMART"))
        assert ids(result) == [2]

    def test_search_matches_description(self, products: list[Product]) -> None:
        """Search looks at descriptions."""
        result = filter_products(products, FilterCriteria(search="recipes"))
        assert ids(result) == [6]

    def test_search_matches_category(self, products: list[Product]) -> None:
        """Search looks at the category value."""
        result = filter_products(products, FilterCriteria(search="books"))
        assert ids(result) == [6, 7, 8]

    def test_on_sale(self, products: list[Product]) -> None:
        """Sale-only keeps products with the sale flag."""
        result = filter_products(products, FilterCriteria(on_sale=True))
        assert ids(result) == [1, 7]

    def test_price_range_uses_effective_price(self, products: list[Product]) -> None:
        """Bounds apply to the sale price of on-sale products."""
        # Earbuds: 49.99 regular, 39.99 on sale
        result = filter_products(
            products, FilterCriteria(min_price=Decimal("30"), max_price=Decimal("40"))
        )
        assert ids(result) == [1]

    def test_price_bounds_are_inclusive(self, products: list[Product]) -> None:
        """Products priced exactly at a bound are kept."""
        result = filter_products(
            products,
            FilterCriteria(min_price=Decimal("19.99"), max_price=Decimal("22.99")),
        )
        assert ids(result) == [5, 8]

    def test_in_stock_excludes_zero_stock(self, products: list[Product]) -> None:
        """Zero stock is dropped; untracked stock is kept."""
        result = filter_products(products, FilterCriteria(in_stock=True))
        assert 4 not in ids(result)
        assert 8 not in ids(result)
        assert 3 in ids(result)

    def test_criteria_are_anded(self, products: list[Product]) -> None:
        """Every criterion must hold."""
        result = filter_products(
            products,
            FilterCriteria(category="books", in_stock=True, max_price=Decimal("20")),
        )
        assert ids(result) == [7]

    def test_order_preserved(self, products: list[Product]) -> None:
        """Matches keep catalog order."""
        reversed_products = list(reversed(products))
        result = filter_products(reversed_products, FilterCriteria(category="books"))
        assert ids(result) == [8, 7, 6]

    def test_blank_category_disables_filter(self, products: list[Product]) -> None:
        """An empty category string filters nothing out."""
        criteria = FilterCriteria(category="")
        assert criteria.is_empty
        assert filter_products(products, criteria) == products
