"""Domain exceptions.

Errors produced while validating product queries and looking up
catalog records. The query parser and the catalog service return these
as values inside result objects; the API layer maps them to HTTP
responses.
"""

from typing import Any


class DomainError(Exception):
    """Base class for all domain exceptions.

    All domain errors should inherit from this class to allow
    catching domain-specific errors at the application layer.
    """

    error_code = "DOMAIN_ERROR"

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
# Query Errors
# ============================================================================


class InvalidQueryError(DomainError):
    """Raised when a query parameter is unknown or cannot be parsed."""

    error_code = "INVALID_QUERY"

    def __init__(self, parameter: str, value: str | None, reason: str) -> None:
        """Initialize invalid query error.

        Args:
            parameter: Name of the offending query parameter.
            value: Raw value received, if any.
            reason: Explanation of why the value was rejected.
        """
        super().__init__(
            f"Invalid query parameter '{parameter}': {reason}",
            details={"parameter": parameter, "value": value, "reason": reason},
        )
        self.parameter = parameter


# ============================================================================
# Product Errors
# ============================================================================


class InvalidProductIdError(DomainError):
    """Raised when the product id path parameter is not an integer."""

    error_code = "INVALID_PRODUCT_ID"

    def __init__(self, raw_id: str) -> None:
        """Initialize invalid product id error.

        Args:
            raw_id: The path parameter as received.
        """
        super().__init__(
            "Invalid product id",
            details={"product_id": raw_id},
        )


class ProductNotFoundError(DomainError):
    """Raised when a product id is out of range or matches no product."""

    error_code = "PRODUCT_NOT_FOUND"

    def __init__(self, product_id: int) -> None:
        """Initialize product not found error.

        Args:
            product_id: The requested product id.
        """
        super().__init__(
            "Product does not exist",
            details={"product_id": product_id},
        )


# ============================================================================
# Catalog Errors
# ============================================================================


class CatalogLoadError(DomainError):
    """Raised when the catalog source is missing, unreadable, or malformed."""

    error_code = "CATALOG_UNAVAILABLE"

    def __init__(self, source: str, reason: str) -> None:
        """Initialize catalog load error.

        Args:
            source: Location of the catalog (usually a file path).
            reason: What went wrong while loading it.
        """
        super().__init__(
            f"Could not load product catalog from {source}: {reason}",
            details={"source": source, "reason": reason},
        )
