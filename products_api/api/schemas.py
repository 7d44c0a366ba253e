"""API schemas for the products API.

Pydantic models for response serialization. Field names on the wire
are camelCase; Python attributes stay snake_case.
"""

from pydantic import BaseModel, ConfigDict, Field

from products_api.domain.models import Product


# ============================================================================
# Common Schemas
# ============================================================================


class ErrorDetail(BaseModel):
    """Detailed error information."""

    field: str | None = Field(default=None, description="Field that caused the error")
    message: str = Field(..., description="Error message")


class ErrorResponse(BaseModel):
    """Standard error response.

    All API errors follow this format for consistency.
    """

    error_code: str = Field(..., description="Machine-readable error code")
    message: str = Field(..., description="Human-readable error message")
    details: list[ErrorDetail] = Field(
        default_factory=list, description="Additional error details"
    )
    request_id: str | None = Field(
        default=None, description="Request ID for correlation"
    )


# ============================================================================
# Product Schemas
# ============================================================================


class PageResponse(BaseModel):
    """Base paginated product response."""

    model_config = ConfigDict(populate_by_name=True)

    limit: int = Field(..., description="Maximum number of products per page")
    skip: int = Field(..., description="Offset into the matching products")
    products: list[Product] = Field(default_factory=list, description="Current page")


class ProductListResponse(PageResponse):
    """Page of the whole catalog."""

    total_products: int = Field(
        ..., alias="totalProducts", description="Number of products in the catalog"
    )


class ProductQueryResponse(PageResponse):
    """Page of products matching a filter."""

    total_products_queried: int = Field(
        ...,
        alias="totalProductsQueried",
        description="Number of products matching the filter",
    )
