"""Product predicates and pagination.

Every list endpoint is the same two steps: keep the products matching a
predicate (in catalog order), then slice out ``[skip, skip + limit)``.
"""

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field

from products_api.domain.models import Product

ProductPredicate = Callable[[Product], bool]


@dataclass(frozen=True)
class Page:
    """One page of filtered products.

    Attributes:
        total: Number of products matching the predicate.
        items: Products inside the requested window.
    """

    total: int
    items: list[Product] = field(default_factory=list)


# ============================================================================
# Predicates
# ============================================================================


def match_all(product: Product) -> bool:
    """Predicate that keeps every product."""
    return True


def in_stock(product: Product) -> bool:
    """Keep products with at least one unit available."""
    return product.in_stock


def title_contains(name: str) -> ProductPredicate:
    """Case-insensitive substring match on the title."""
    needle = name.lower()
    return lambda product: needle in product.title.lower()


def brand_contains(name: str) -> ProductPredicate:
    """Case-insensitive substring match on the brand."""
    needle = name.lower()
    return lambda product: needle in product.brand.lower()


def price_between(min_price: float, max_price: float) -> ProductPredicate:
    """Keep products with ``min_price < price <= max_price``."""
    return lambda product: min_price < product.price <= max_price


def rating_between(min_rating: float, max_rating: float) -> ProductPredicate:
    """Keep products with ``min_rating < rating <= max_rating``."""
    return lambda product: min_rating < product.rating <= max_rating


# ============================================================================
# Pagination
# ============================================================================


def paginate(
    products: Iterable[Product],
    predicate: ProductPredicate,
    skip: int,
    limit: int,
) -> Page:
    """Filter products and return the requested window.

    Args:
        products: Catalog in its original order.
        predicate: Filter applied to every product.
        skip: Offset into the filtered sequence.
        limit: Maximum number of products in the page.

    Returns:
        Page with the match count and the sliced products. A skip past
        the end yields an empty page.
    """
    filtered = [product for product in products if predicate(product)]
    return Page(total=len(filtered), items=filtered[skip : skip + limit])
