"""Domain layer.

Product records, query parsing, filtering and pagination, and the
domain error taxonomy. Nothing here performs I/O.
"""

from products_api.domain.exceptions import (
    CatalogLoadError,
    DomainError,
    InvalidProductIdError,
    InvalidQueryError,
    ProductNotFoundError,
)
from products_api.domain.filters import Page, paginate
from products_api.domain.models import Product
from products_api.domain.query import ParseResult, ProductId, ProductQuery

__all__ = [
    # Exceptions
    "DomainError",
    "InvalidQueryError",
    "InvalidProductIdError",
    "ProductNotFoundError",
    "CatalogLoadError",
    # Models
    "Product",
    # Query
    "ProductQuery",
    "ProductId",
    "ParseResult",
    # Pagination
    "Page",
    "paginate",
]
