"""Application layer.

Use cases that compose catalog loading, query parsing, and pagination.
"""

from products_api.application.catalog_service import (
    CatalogService,
    GetProductResult,
    ProductPageResult,
)

__all__ = [
    "CatalogService",
    "GetProductResult",
    "ProductPageResult",
]
