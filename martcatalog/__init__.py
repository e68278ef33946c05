"""Mart catalog query engine.

In-process filtered, sorted and paginated product queries with a
time-boxed result cache.
"""

from martcatalog.application import (
    ProductsResponse,
    ProductsService,
    QueryMeta,
    SearchSuggestions,
)
from martcatalog.catalog import (
    SORT_OPTIONS,
    Category,
    CursorResult,
    InMemoryCatalog,
    PageResult,
    Pagination,
    Product,
    SortOption,
)
from martcatalog.domain import DomainError, InvalidQueryError
from martcatalog.infrastructure import NetworkDelay, QueryCache, Settings, configure_logging

__version__ = "0.1.0"

__all__ = [
    "SORT_OPTIONS",
    "Category",
    "CursorResult",
    "DomainError",
    "InMemoryCatalog",
    "InvalidQueryError",
    "NetworkDelay",
    "PageResult",
    "Pagination",
    "Product",
    "ProductsResponse",
    "ProductsService",
    "QueryCache",
    "QueryMeta",
    "SearchSuggestions",
    "Settings",
    "SortOption",
    "configure_logging",
]
