"""Domain layer for the catalog query engine.

Exports the exception taxonomy shared by every layer.
"""

from martcatalog.domain.exceptions import (
    CatalogError,
    DomainError,
    DuplicateProductError,
    InvalidProductError,
    InvalidQueryError,
)

__all__ = [
    "CatalogError",
    "DomainError",
    "DuplicateProductError",
    "InvalidProductError",
    "InvalidQueryError",
]
