"""Domain exceptions.

Errors raised when catalog records or caller-supplied query options
violate the engine's rules. "Nothing matched" is never an error: unknown
ids, empty result sets and out-of-range pages are returned as empty
results or None.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain exceptions.

    All domain errors should inherit from this class to allow
    catching engine-specific errors at the caller's boundary.
    """

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """Initialize domain error.

        Args:
            message: Human-readable error message.
            details: Optional dictionary with additional error context.
        """
        super().__init__(message)
        self.message = message
        self.details = details or {}


# ============================================================================
# Catalog Errors
# ============================================================================


class CatalogError(DomainError):
    """Base class for catalog record errors."""

    pass


class InvalidProductError(CatalogError):
    """Raised when a product record violates catalog invariants."""

    def __init__(self, product_id: int | str, reason: str) -> None:
        """Initialize invalid product error.

        Args:
            product_id: ID of the offending product.
            reason: What rule was broken.
        """
        super().__init__(
            f"Invalid product {product_id}: {reason}",
            details={"product_id": product_id, "reason": reason},
        )


class DuplicateProductError(CatalogError):
    """Raised when a catalog is built with a repeated product id."""

    def __init__(self, product_id: int) -> None:
        """Initialize duplicate product error.

        Args:
            product_id: The repeated ID.
        """
        super().__init__(
            f"Product id {product_id} appears more than once in the catalog",
            details={"product_id": product_id},
        )


# ============================================================================
# Query Errors
# ============================================================================


class InvalidQueryError(DomainError):
    """Raised when caller-supplied query options are malformed.

    Surfaced at the service boundary before anything reaches the
    paginators, which assume validated input.
    """

    def __init__(
        self,
        operation: str,
        errors: list[dict[str, Any]] | None = None,
    ) -> None:
        """Initialize invalid query error.

        Args:
            operation: Entry point that rejected the options.
            errors: Field-level validation errors.
        """
        errors = errors or []
        fields = ", ".join(
            ".".join(str(part) for part in error.get("loc", ())) or "options"
            for error in errors
        )
        super().__init__(
            f"Invalid options for {operation}: {fields or 'malformed input'}",
            details={"operation": operation, "errors": errors},
        )
        self.errors = errors
