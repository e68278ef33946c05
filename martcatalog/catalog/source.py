"""In-memory catalog source.

Holds the product list the query engine reads from. The engine never
mutates it; callers that replace the catalog are expected to invalidate
the query cache themselves.
"""

from collections.abc import Iterable

from martcatalog.catalog.models import Category, Product
from martcatalog.domain.exceptions import DuplicateProductError


class InMemoryCatalog:
    """Read-only product collection with id lookup.

    Example usage:
        catalog = InMemoryCatalog(demo_products())
        catalog.get(3)
        catalog.categories()  # ["all", "electronics", ...]
    """

    def __init__(self, products: Iterable[Product]) -> None:
        """Initialize catalog.

        Args:
            products: Products in catalog order.

        Raises:
            DuplicateProductError: If two products share an id.
        """
        self._products: tuple[Product, ...] = tuple(products)
        self._by_id: dict[int, Product] = {}
        for product in self._products:
            if product.id in self._by_id:
                raise DuplicateProductError(product.id)
            self._by_id[product.id] = product

    @classmethod
    def demo(cls) -> "InMemoryCatalog":
        """Create a catalog holding the storefront demo products."""
        from martcatalog.catalog.data import demo_products

        return cls(demo_products())

    @property
    def products(self) -> tuple[Product, ...]:
        """All products in catalog order."""
        return self._products

    def __len__(self) -> int:
        return len(self._products)

    def get(self, product_id: int) -> Product | None:
        """Get product by ID.

        Args:
            product_id: Product ID.

        Returns:
            Product if found, None otherwise.
        """
        return self._by_id.get(product_id)

    def categories(self) -> list[str]:
        """Get category values present in the catalog.

        Returns:
            "all" followed by each category in order of first appearance.
        """
        seen: dict[str, None] = {}
        for product in self._products:
            seen.setdefault(product.category.value, None)
        return [Category.ALL.value, *seen]

    def category_counts(self) -> dict[str, int]:
        """Count products per category.

        Returns:
            Mapping with the "all" total followed by per-category counts.
        """
        counts: dict[str, int] = {Category.ALL.value: len(self._products)}
        for product in self._products:
            key = product.category.value
            counts[key] = counts.get(key, 0) + 1
        return counts
