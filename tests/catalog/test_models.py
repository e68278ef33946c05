"""Tests for catalog records and the in-memory source."""

from decimal import Decimal

import pytest

from martcatalog.catalog.data import demo_products
from martcatalog.catalog.models import Category, Product
from martcatalog.catalog.source import InMemoryCatalog
from martcatalog.domain.exceptions import DuplicateProductError, InvalidProductError


class TestProduct:
    """Tests for Product invariants."""

    def test_effective_price_uses_sale_price(self) -> None:
        """On-sale products cost their sale price."""
        product = Product(
            id=1, name="Earbuds", price=Decimal("49.99"), category=Category.ELECTRONICS,
            on_sale=True, sale_price=Decimal("39.99"),
        )
        assert product.effective_price == Decimal("39.99")

    def test_effective_price_ignores_sale_price_when_not_on_sale(self) -> None:
        """Regular price applies when the sale flag is off."""
        product = Product(
            id=1, name="Earbuds", price=Decimal("49.99"), category=Category.ELECTRONICS,
            sale_price=Decimal("39.99"),
        )
        assert product.effective_price == Decimal("49.99")

    def test_category_string_is_coerced(self) -> None:
        """Category values are accepted as plain strings."""
        product = Product(id=1, name="Novel", price=Decimal("9.99"), category="books")
        assert product.category is Category.BOOKS

    def test_non_positive_price_rejected(self) -> None:
        """Price must be positive."""
        with pytest.raises(InvalidProductError):
            Product(id=1, name="Free", price=Decimal("0"), category=Category.BOOKS)

    def test_sale_price_must_be_below_price(self) -> None:
        """A sale price equal to the price is rejected."""
        with pytest.raises(InvalidProductError) as exc_info:
            Product(
                id=9, name="Lamp", price=Decimal("20"), category=Category.HOME,
                on_sale=True, sale_price=Decimal("20"),
            )
        assert exc_info.value.details["product_id"] == 9

    def test_on_sale_requires_sale_price(self) -> None:
        """The sale flag without a sale price is rejected."""
        with pytest.raises(InvalidProductError):
            Product(id=1, name="Lamp", price=Decimal("20"), category=Category.HOME, on_sale=True)

    def test_negative_stock_rejected(self) -> None:
        """Stock cannot go below zero."""
        with pytest.raises(InvalidProductError):
            Product(id=1, name="Lamp", price=Decimal("20"), category=Category.HOME, stock=-1)

    def test_all_is_not_assignable(self) -> None:
        """The 'all' sentinel is a filter value only."""
        with pytest.raises(InvalidProductError):
            Product(id=1, name="Lamp", price=Decimal("20"), category=Category.ALL)

    def test_unknown_category_rejected(self) -> None:
        """Categories outside the enumeration are rejected."""
        with pytest.raises(InvalidProductError):
            Product(id=1, name="Lamp", price=Decimal("20"), category="garden")

    def test_untracked_stock_is_in_stock(self) -> None:
        """Absent stock counts as available."""
        product = Product(id=1, name="Lamp", price=Decimal("20"), category=Category.HOME)
        assert product.in_stock

    def test_category_label(self) -> None:
        """Categories expose display labels."""
        assert Category.BOOKS.label == "Books & Stationery"


class TestInMemoryCatalog:
    """Tests for InMemoryCatalog."""

    def test_get_by_id(self, catalog: InMemoryCatalog) -> None:
        """Products are found by id."""
        assert catalog.get(3).name == "Bluetooth Speaker"
        assert catalog.get(999) is None

    def test_duplicate_ids_rejected(self, products: list[Product]) -> None:
        """Two products cannot share an id."""
        with pytest.raises(DuplicateProductError):
            InMemoryCatalog([*products, products[0]])

    def test_categories_in_first_appearance_order(self, catalog: InMemoryCatalog) -> None:
        """Categories start with 'all' and follow catalog order."""
        assert catalog.categories() == ["all", "electronics", "books"]

    def test_category_counts(self, catalog: InMemoryCatalog) -> None:
        """Counts include the overall total."""
        assert catalog.category_counts() == {"all": 8, "electronics": 5, "books": 3}

    def test_demo_catalog(self) -> None:
        """The demo catalog covers every category with unique ids."""
        catalog = InMemoryCatalog.demo()
        assert len(catalog) == len(demo_products()) == 32
        assert catalog.categories()[0] == "all"
        assert set(catalog.categories()[1:]) == {c.value for c in Category if c is not Category.ALL}
