"""Product catalog query stages.

Provides the catalog records and source, plus the pure filter, sort,
pagination and recommendation stages the products service composes.
"""

from martcatalog.catalog.filters import FilterCriteria, filter_products
from martcatalog.catalog.generator import GeneratorConfig, ProductGenerator
from martcatalog.catalog.models import CATEGORY_LABELS, Category, Product
from martcatalog.catalog.pagination import (
    CursorResult,
    PageResult,
    Pagination,
    paginate,
    paginate_by_cursor,
)
from martcatalog.catalog.recommendations import select_featured, select_related
from martcatalog.catalog.sorting import SORT_OPTIONS, SortOption, sort_products
from martcatalog.catalog.source import InMemoryCatalog

__all__ = [
    # Models
    "CATEGORY_LABELS",
    "Category",
    "Product",
    # Source
    "InMemoryCatalog",
    # Generator
    "GeneratorConfig",
    "ProductGenerator",
    # Stages
    "FilterCriteria",
    "filter_products",
    "SORT_OPTIONS",
    "SortOption",
    "sort_products",
    "CursorResult",
    "PageResult",
    "Pagination",
    "paginate",
    "paginate_by_cursor",
    "select_featured",
    "select_related",
]
