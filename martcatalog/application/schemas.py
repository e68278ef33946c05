"""Option and result schemas for the products service.

Option models validate caller input at the service boundary; result
types are the structures returned by the service entry points.
"""

from collections.abc import Mapping
from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator

from martcatalog.catalog.models import Product
from martcatalog.catalog.pagination import Pagination


# ============================================================================
# Option Schemas
# ============================================================================


class FilterOptions(BaseModel):
    """Filter options shared by both listing entry points."""

    model_config = ConfigDict(extra="forbid")

    category: str | None = Field(default=None, description="Category value or 'all'")
    search: str | None = Field(default=None, description="Free-text search term")
    on_sale: bool | None = Field(default=None, description="Only on-sale products")
    min_price: Decimal | None = Field(default=None, ge=0, description="Minimum effective price")
    max_price: Decimal | None = Field(default=None, ge=0, description="Maximum effective price")
    in_stock: bool | None = Field(default=None, description="Only available products")
    sort_by: str = Field(default="default", description="Sort strategy name")

    @field_validator("category", "sort_by", mode="before")
    @classmethod
    def _enum_to_value(cls, value: Any) -> Any:
        """Accept enum members wherever their string value is accepted."""
        if isinstance(value, Enum):
            return value.value
        return value

    @field_validator("category")
    @classmethod
    def _blank_category_to_none(cls, value: str | None) -> str | None:
        """Treat a blank category like no category filter."""
        if value is None:
            return None
        return value.strip() or None


class FetchProductsOptions(FilterOptions):
    """Options for offset-paginated product listings."""

    page: int = Field(default=1, description="Page number (1-based, clamped)")
    page_size: int | None = Field(default=None, gt=0, description="Items per page")
    use_cache: bool = Field(default=True, description="Read and write the query cache")


class FetchInfiniteOptions(FilterOptions):
    """Options for cursor-paginated product listings."""

    cursor: int | str | None = Field(default=None, description="Last id previously returned")
    limit: int | None = Field(default=None, gt=0, description="Items to return")


# ============================================================================
# Results
# ============================================================================


@dataclass(frozen=True)
class QueryMeta:
    """Echo of the query that produced a listing.

    Attributes:
        filters: Read-only view of the filter values after normalization.
        sort_by: Sort strategy actually applied.
        fetched_at: When the listing was computed (UTC).
    """

    filters: Mapping[str, Any]
    sort_by: str
    fetched_at: datetime


@dataclass(frozen=True)
class ProductsResponse:
    """One page of products with pagination and query metadata."""

    items: tuple[Product, ...]
    pagination: Pagination
    meta: QueryMeta


@dataclass(frozen=True)
class SearchSuggestions:
    """Autocomplete suggestions for a search query.

    Attributes:
        suggestions: Distinct product names containing the query.
        products: Sample of matching products.
        total_matches: Number of products matched before capping.
    """

    suggestions: tuple[str, ...] = ()
    products: tuple[Product, ...] = ()
    total_matches: int = 0
