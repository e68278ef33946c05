"""Synthetic catalog generator with deterministic seeding.

Builds larger catalogs than the storefront demo data, for load checks
and for exercising pagination over many pages. Uses seeded random for
reproducibility: the same config always yields the same products.
"""

import hashlib
import random
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterator

from martcatalog.catalog.models import Category, Product


# ============================================================================
# Constants
# ============================================================================

# House brands stocked by the storefront
BRANDS = [
    "Martline",
    "Brightfield",
    "Oakhaven",
    "Lumio",
    "Kestrel",
    "Pinecrest",
    "Solvay Home",
    "Tidewater",
]

# Price ranges by category (in cents)
PRICE_RANGES: dict[Category, tuple[int, int]] = {
    Category.ELECTRONICS: (2999, 49999),
    Category.FASHION: (1999, 19999),
    Category.HOME: (1499, 29999),
    Category.BEAUTY: (999, 14999),
    Category.SPORTS: (1499, 24999),
    Category.FOOD: (499, 4999),
    Category.BOOKS: (999, 4999),
    Category.TOYS: (999, 9999),
}

# Name patterns per category
PRODUCT_TEMPLATES: dict[Category, list[str]] = {
    Category.ELECTRONICS: [
        "{brand} {adj} Over-Ear Headset",
        "{brand} Wireless {adj} Speaker",
        "{brand} {adj} Smart Watch",
    ],
    Category.FASHION: [
        "{brand} {adj} Running Shoes",
        "{brand} {adj} Linen Shirt",
        "{brand} {adj} Jacket",
    ],
    Category.HOME: [
        "{brand} {adj} Desk Lamp",
        "{brand} {adj} Coffee Maker",
        "{brand} {adj} Throw Pillow",
    ],
    Category.BEAUTY: [
        "{brand} {adj} Skincare Kit",
        "{brand} {adj} Hair Dryer",
    ],
    Category.SPORTS: [
        "{brand} {adj} Yoga Mat",
        "{brand} {adj} Fitness Band",
        "{brand} {adj} Water Bottle",
    ],
    Category.FOOD: [
        "{brand} {adj} Coffee Beans",
        "{brand} {adj} Tea Sampler",
    ],
    Category.BOOKS: [
        "The {adj} Guide by {brand}",
        "{brand}'s {adj} Handbook",
    ],
    Category.TOYS: [
        "{brand} {adj} Puzzle Box",
        "{brand} {adj} Building Blocks",
    ],
}

# Collection names mixed into product names
ADJECTIVES = [
    "Everyday", "Signature", "Studio", "Compact", "Heritage", "Urban",
    "Coastal", "Deluxe", "Travel", "Midnight", "Harvest", "Summit",
]


# ============================================================================
# Generator Configuration
# ============================================================================


@dataclass
class GeneratorConfig:
    """Configuration for product generation.

    Attributes:
        seed: Random seed for reproducibility.
        products_per_category: Number of products per category.
        sale_ratio: Fraction of products put on sale.
        out_of_stock_ratio: Fraction of tracked products with zero stock.
        track_stock_ratio: Fraction of products with a stock count at all.
        first_id: Id assigned to the first generated product.
    """

    seed: int = 42
    products_per_category: int = 10
    sale_ratio: float = 0.2
    out_of_stock_ratio: float = 0.1
    track_stock_ratio: float = 0.7
    first_id: int = 1

    @classmethod
    def small(cls) -> "GeneratorConfig":
        """Create config for small catalog (~40 products).

        Returns:
            Config for small catalog.
        """
        return cls(seed=42, products_per_category=5)

    @classmethod
    def full(cls) -> "GeneratorConfig":
        """Create config for full catalog (~400 products).

        Returns:
            Config for full catalog.
        """
        return cls(seed=42, products_per_category=50)


# ============================================================================
# Product Generator
# ============================================================================


class ProductGenerator:
    """Builds reproducible synthetic catalogs.

    Products are generated category by category with sequential ids,
    so "newest" ordering follows generation order.

    Example usage:
        generator = ProductGenerator(GeneratorConfig.small())
        catalog = InMemoryCatalog(generator.generate())
    """

    def __init__(self, config: GeneratorConfig) -> None:
        """Initialize generator.

        Args:
            config: Generator configuration.
        """
        self.config = config

    def _deterministic_seed(self, *args: str | int) -> int:
        """Derive a stable integer seed from the given values.

        Args:
            args: Values to include in seed.

        Returns:
            Deterministic integer seed.
        """
        data = "|".join(str(a) for a in args)
        hash_bytes = hashlib.md5(data.encode()).digest()
        return int.from_bytes(hash_bytes[:4], "big")

    def _generate_product(self, product_id: int, category: Category, index: int) -> Product:
        """Generate a single product.

        Args:
            product_id: Id to assign.
            category: Product category.
            index: Product index within category.

        Returns:
            Generated Product.
        """
        rng = random.Random(
            self._deterministic_seed(self.config.seed, category.value, index)
        )

        brand = rng.choice(BRANDS)
        adj = rng.choice(ADJECTIVES)
        name = rng.choice(PRODUCT_TEMPLATES[category]).format(brand=brand, adj=adj)

        # Round to .99
        min_price, max_price = PRICE_RANGES[category]
        price_cents = (rng.randint(min_price, max_price) // 100) * 100 + 99
        price = Decimal(price_cents) / 100

        sale_price = None
        if rng.random() < self.config.sale_ratio:
            discount = rng.choice([10, 15, 20, 25, 30])
            sale_cents = (price_cents * (100 - discount) // 100 // 100) * 100 + 99
            if sale_cents < price_cents:
                sale_price = Decimal(sale_cents) / 100

        stock = None
        if rng.random() < self.config.track_stock_ratio:
            in_stock = rng.random() >= self.config.out_of_stock_ratio
            stock = rng.randint(1, 200) if in_stock else 0

        return Product(
            id=product_id,
            name=name,
            price=price,
            category=category,
            description=f"High-quality {category.label.lower()} from {brand}. "
                        f"Part of our {adj.lower()} collection.",
            image=f"https://picsum.photos/seed/{self._deterministic_seed(product_id)}/400/400",
            on_sale=sale_price is not None,
            sale_price=sale_price,
            stock=stock,
        )

    def generate(self) -> Iterator[Product]:
        """Generate all products.

        Yields:
            Generated Product instances.
        """
        product_id = self.config.first_id
        for category in Category:
            if category is Category.ALL:
                continue
            for i in range(self.config.products_per_category):
                yield self._generate_product(product_id, category, i)
                product_id += 1

    def generate_list(self) -> list[Product]:
        """Materialize the whole catalog.

        Returns:
            List of generated products.
        """
        return list(self.generate())

    @property
    def expected_count(self) -> int:
        """Number of products generate() will yield.

        Returns:
            Expected product count.
        """
        return (len(Category) - 1) * self.config.products_per_category
