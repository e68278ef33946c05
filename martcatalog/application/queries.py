"""Query descriptors.

Each descriptor is a frozen dataclass whose declared field order is the
serialization order of its cache key, so logically identical queries
always produce identical keys regardless of how the caller built them.

Key format: "<kind>|<field>=<value>|<field>=<value>|...". Every pair is
terminated by "|", so invalidating with "category=books|" cannot match
"category=bookstore|". Absent values serialize as "~"; string values have
"\\", "|" and "," escaped and a leading "~" escaped, so no string can
serialize to the same text as None or spill into a neighbouring field.
"""

from dataclasses import dataclass, fields
from decimal import Decimal
from enum import Enum
from typing import Any, ClassVar

NONE_MARKER = "~"


def _escape(text: str) -> str:
    """Escape key delimiters inside a string value."""
    for char in ("\\", "|", ","):
        text = text.replace(char, "\\" + char)
    if text.startswith(NONE_MARKER):
        text = "\\" + text
    return text


def _serialize(value: Any) -> str:
    """Render one field value for a cache key."""
    if value is None:
        return NONE_MARKER
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, Enum):
        return str(value.value)
    if isinstance(value, Decimal):
        return format(value.normalize(), "f")
    if isinstance(value, tuple):
        return ",".join(_serialize(item) for item in value)
    if isinstance(value, str):
        return _escape(value)
    return str(value)


@dataclass(frozen=True)
class QueryDescriptor:
    """Base class for cacheable query descriptors."""

    kind: ClassVar[str] = "query"

    def cache_key(self) -> str:
        """Serialize the descriptor into its canonical cache key.

        Returns:
            Key string built from fields in declaration order.
        """
        parts = [self.kind]
        for descriptor_field in fields(self):
            value = _serialize(getattr(self, descriptor_field.name))
            parts.append(f"{descriptor_field.name}={value}")
        return "|".join(parts) + "|"


@dataclass(frozen=True)
class ProductQuery(QueryDescriptor):
    """Filtered, sorted, offset-paginated product listing."""

    kind: ClassVar[str] = "products"

    page: int
    page_size: int
    category: str | None = None
    search: str | None = None
    on_sale: bool | None = None
    min_price: Decimal | None = None
    max_price: Decimal | None = None
    in_stock: bool | None = None
    sort_by: str = "default"


@dataclass(frozen=True)
class ProductLookup(QueryDescriptor):
    """Single product by id."""

    kind: ClassVar[str] = "product"

    product_id: int


@dataclass(frozen=True)
class CategoriesQuery(QueryDescriptor):
    """List of categories present in the catalog."""

    kind: ClassVar[str] = "categories"


@dataclass(frozen=True)
class CategoryCountsQuery(QueryDescriptor):
    """Product counts per category."""

    kind: ClassVar[str] = "category_counts"


@dataclass(frozen=True)
class FeaturedQuery(QueryDescriptor):
    """Featured products; exclude_ids is kept sorted and de-duplicated."""

    kind: ClassVar[str] = "featured"

    limit: int
    exclude_ids: tuple[int, ...] = ()


@dataclass(frozen=True)
class RelatedQuery(QueryDescriptor):
    """Products related to a source product."""

    kind: ClassVar[str] = "related"

    product_id: int
    limit: int
