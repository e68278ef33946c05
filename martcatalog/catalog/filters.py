"""Filter stage.

Pure predicate composition over a product sequence. Every criterion is
optional; the ones present are ANDed and the input order is preserved.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from decimal import Decimal

from martcatalog.catalog.models import Category, Product


@dataclass(frozen=True)
class FilterCriteria:
    """Filter parameters for product queries.

    Attributes:
        category: Exact category value; None, "" or "all" disables the filter.
        search: Already-sanitized text matched case-insensitively against
            name, description and category.
        on_sale: When True, keep only on-sale products.
        min_price: Inclusive lower bound on the effective price.
        max_price: Inclusive upper bound on the effective price.
        in_stock: When True, drop products with a tracked stock of zero.
    """

    category: str | None = None
    search: str | None = None
    on_sale: bool | None = None
    min_price: Decimal | None = None
    max_price: Decimal | None = None
    in_stock: bool | None = None

    @property
    def is_empty(self) -> bool:
        """Check whether no criterion would reject anything."""
        return (
            (not self.category or self.category == Category.ALL.value)
            and not self.search
            and self.on_sale is not True
            and self.min_price is None
            and self.max_price is None
            and self.in_stock is not True
        )

    def matches(self, product: Product) -> bool:
        """Check a single product against every criterion.

        Args:
            product: Product to test.

        Returns:
            True if the product passes all criteria.
        """
        if (
            self.category
            and self.category != Category.ALL.value
            and product.category.value != self.category
        ):
            return False

        if self.search and self.search.lower() not in product.searchable_text:
            return False

        if self.on_sale is True and not product.on_sale:
            return False

        price = product.effective_price
        if self.min_price is not None and price < self.min_price:
            return False
        if self.max_price is not None and price > self.max_price:
            return False

        if self.in_stock is True and not product.in_stock:
            return False

        return True

    def to_dict(self) -> dict:
        """Echo the criteria for response metadata."""
        return {
            "category": self.category,
            "search": self.search,
            "on_sale": self.on_sale,
            "min_price": str(self.min_price) if self.min_price is not None else None,
            "max_price": str(self.max_price) if self.max_price is not None else None,
            "in_stock": self.in_stock,
        }


def filter_products(
    products: Iterable[Product],
    criteria: FilterCriteria | None = None,
) -> list[Product]:
    """Select the products matching all criteria.

    Args:
        products: Products in catalog order.
        criteria: Filter criteria; None matches everything.

    Returns:
        New list of matching products, in input order.
    """
    if criteria is None or criteria.is_empty:
        return list(products)
    return [product for product in products if criteria.matches(product)]
