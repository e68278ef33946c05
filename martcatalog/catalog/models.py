"""Catalog record types.

Defines the closed category enumeration and the immutable Product
record the query engine reads from.
"""

from dataclasses import dataclass
from decimal import Decimal
from enum import Enum

from martcatalog.domain.exceptions import InvalidProductError


class Category(str, Enum):
    """Product categories.

    ALL is a filter sentinel meaning "no category filter"; it is never
    assigned to a product.
    """

    ALL = "all"
    ELECTRONICS = "electronics"
    FASHION = "fashion"
    HOME = "home"
    BEAUTY = "beauty"
    SPORTS = "sports"
    FOOD = "food"
    BOOKS = "books"
    TOYS = "toys"

    @property
    def label(self) -> str:
        """Human-readable category name."""
        return CATEGORY_LABELS[self]


CATEGORY_LABELS: dict[Category, str] = {
    Category.ALL: "All Products",
    Category.ELECTRONICS: "Electronics",
    Category.FASHION: "Fashion & Apparel",
    Category.HOME: "Home & Living",
    Category.BEAUTY: "Beauty & Personal Care",
    Category.SPORTS: "Sports & Fitness",
    Category.FOOD: "Food & Beverages",
    Category.BOOKS: "Books & Stationery",
    Category.TOYS: "Toys & Games",
}


@dataclass(frozen=True)
class Product:
    """Product available in the catalog.

    Records are immutable from the engine's point of view; the same
    instances are shared between the catalog and cached results.

    Attributes:
        id: Unique product identifier. Higher ids are newer.
        name: Display name.
        price: Regular price in major currency units.
        category: Product category (never Category.ALL).
        description: Free-text description.
        image: Image URL or reference.
        on_sale: Whether the sale price applies.
        sale_price: Discounted price, strictly below price when on sale.
        stock: Units available; None means stock is not tracked.
    """

    id: int
    name: str
    price: Decimal
    category: Category
    description: str = ""
    image: str = ""
    on_sale: bool = False
    sale_price: Decimal | None = None
    stock: int | None = None

    def __post_init__(self) -> None:
        """Validate product invariants."""
        try:
            category = Category(self.category)
        except ValueError as exc:
            raise InvalidProductError(self.id, f"unknown category {self.category!r}") from exc
        object.__setattr__(self, "category", category)
        object.__setattr__(self, "price", Decimal(str(self.price)))
        if self.sale_price is not None:
            object.__setattr__(self, "sale_price", Decimal(str(self.sale_price)))

        if self.price <= 0:
            raise InvalidProductError(self.id, f"price must be positive, got {self.price}")
        if self.category is Category.ALL:
            raise InvalidProductError(self.id, "'all' is not an assignable category")
        if self.on_sale:
            if self.sale_price is None:
                raise InvalidProductError(self.id, "on-sale product has no sale price")
            if self.sale_price >= self.price:
                raise InvalidProductError(
                    self.id,
                    f"sale price {self.sale_price} must be below price {self.price}",
                )
        if self.stock is not None and self.stock < 0:
            raise InvalidProductError(self.id, f"stock cannot be negative, got {self.stock}")

    @property
    def effective_price(self) -> Decimal:
        """Get the price a customer pays.

        Returns:
            Sale price when on sale, otherwise the regular price.
        """
        if self.on_sale and self.sale_price is not None:
            return self.sale_price
        return self.price

    @property
    def in_stock(self) -> bool:
        """Check availability. Untracked stock counts as available."""
        return self.stock is None or self.stock > 0

    @property
    def searchable_text(self) -> str:
        """Lower-cased text that free-text search matches against."""
        return f"{self.name} {self.description} {self.category.value}".lower()

    def to_dict(self) -> dict:
        """Convert to dictionary.

        Returns:
            Dictionary representation.
        """
        return {
            "id": self.id,
            "name": self.name,
            "price": str(self.price),
            "effective_price": str(self.effective_price),
            "category": self.category.value,
            "description": self.description,
            "image": self.image,
            "on_sale": self.on_sale,
            "sale_price": str(self.sale_price) if self.sale_price is not None else None,
            "stock": self.stock,
        }
