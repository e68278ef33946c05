"""Application layer.

Orchestrates the catalog stages behind async entry points.
"""

from martcatalog.application.products_service import ProductsService
from martcatalog.application.queries import ProductQuery, QueryDescriptor
from martcatalog.application.schemas import (
    FetchInfiniteOptions,
    FetchProductsOptions,
    ProductsResponse,
    QueryMeta,
    SearchSuggestions,
)

__all__ = [
    "FetchInfiniteOptions",
    "FetchProductsOptions",
    "ProductQuery",
    "ProductsResponse",
    "ProductsService",
    "QueryDescriptor",
    "QueryMeta",
    "SearchSuggestions",
]
