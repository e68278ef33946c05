"""Shared fixtures for engine tests."""

import random
from datetime import datetime, timedelta, timezone
from decimal import Decimal

import pytest

from martcatalog.application.products_service import ProductsService
from martcatalog.catalog.models import Category, Product
from martcatalog.catalog.source import InMemoryCatalog
from martcatalog.infrastructure.cache import QueryCache
from martcatalog.infrastructure.config import Settings
from martcatalog.infrastructure.latency import NetworkDelay


class FakeClock:
    """Manually advanced UTC clock."""

    def __init__(self, start: datetime | None = None) -> None:
        self.now = start or datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        return self.now

    def advance(self, **kwargs: float) -> None:
        """Move the clock forward by a timedelta's keyword arguments."""
        self.now += timedelta(**kwargs)


def make_product(
    product_id: int,
    name: str,
    price: str,
    category: Category = Category.ELECTRONICS,
    sale_price: str | None = None,
    stock: int | None = None,
    description: str = "",
) -> Product:
    """Build a product with sensible defaults."""
    return Product(
        id=product_id,
        name=name,
        price=Decimal(price),
        category=category,
        description=description or f"{name} description.",
        on_sale=sale_price is not None,
        sale_price=Decimal(sale_price) if sale_price is not None else None,
        stock=stock,
    )


@pytest.fixture
def products() -> list[Product]:
    """Five electronics and three books, in catalog order."""
    return [
        make_product(1, "Wireless Earbuds", "49.99", sale_price="39.99", stock=25,
                     description="Noise cancellation for your commute."),
        make_product(2, "Smart Watch", "129.99", stock=12),
        make_product(3, "Bluetooth Speaker", "79.99"),
        make_product(4, "4K Action Camera", "199.99", stock=0),
        make_product(5, "USB-C Charger", "19.99"),
        make_product(6, "Cookbook", "27.99", Category.BOOKS,
                     description="100 recipes for quick and healthy meals."),
        make_product(7, "bestselling Novel", "14.99", Category.BOOKS, sale_price="9.99"),
        make_product(8, "Journal Set", "22.99", Category.BOOKS, stock=0),
    ]


@pytest.fixture
def catalog(products: list[Product]) -> InMemoryCatalog:
    """Catalog over the fixture products."""
    return InMemoryCatalog(products)


@pytest.fixture
def clock() -> FakeClock:
    """Controllable clock."""
    return FakeClock()


@pytest.fixture
def settings() -> Settings:
    """Settings with latency off and a small default page size."""
    return Settings(
        _env_file=None,
        simulate_latency=False,
        default_page_size=3,
        infinite_page_size=3,
        cache_max_size=50,
        cache_ttl_seconds=300,
        random_seed=7,
    )


@pytest.fixture
def cache(clock: FakeClock) -> QueryCache:
    """Empty cache driven by the fake clock."""
    return QueryCache(max_size=50, ttl=timedelta(minutes=5), clock=clock)


@pytest.fixture
def service(
    catalog: InMemoryCatalog,
    cache: QueryCache,
    settings: Settings,
) -> ProductsService:
    """Service with no latency and a seeded random source."""
    return ProductsService(
        catalog=catalog,
        cache=cache,
        delay=NetworkDelay(enabled=False),
        rng=random.Random(7),
        settings=settings,
    )
