"""Query parsing for the product endpoints.

Raw request parameters arrive as strings (or not at all). They are
validated here exactly once per request and turned into an immutable
``ProductQuery`` or ``ProductId``. Parsing never raises: callers get a
``ParseResult`` holding either the value or the domain error.
"""

import math
import re
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Generic, TypeVar

from products_api.domain.exceptions import (
    DomainError,
    InvalidProductIdError,
    InvalidQueryError,
    ProductNotFoundError,
)

T = TypeVar("T")

_UNSIGNED_INT = re.compile(r"\d+")
_SIGNED_INT = re.compile(r"-?\d+")

# Query parameter names as they appear on the wire.
LIMIT = "limit"
SKIP = "skip"
NAME = "name"
MIN_PRICE = "minPrice"
MAX_PRICE = "maxPrice"
MIN_RATING = "minRating"
MAX_RATING = "maxRating"

PAGINATION_PARAMS = frozenset({LIMIT, SKIP})
NAME_PARAMS = PAGINATION_PARAMS | {NAME}
PRICE_RANGE_PARAMS = PAGINATION_PARAMS | {MIN_PRICE, MAX_PRICE}
RATING_RANGE_PARAMS = PAGINATION_PARAMS | {MIN_RATING, MAX_RATING}


@dataclass(frozen=True)
class ProductQuery:
    """Validated list query.

    Attributes:
        limit: Maximum page size.
        skip: Offset into the filtered sequence.
        name: Substring to match against title or brand.
        min_price: Exclusive lower price bound.
        max_price: Inclusive upper price bound.
        min_rating: Exclusive lower rating bound.
        max_rating: Inclusive upper rating bound.
    """

    limit: int
    skip: int = 0
    name: str = ""
    min_price: float = -math.inf
    max_price: float = math.inf
    min_rating: float = -math.inf
    max_rating: float = math.inf


@dataclass(frozen=True)
class ProductId:
    """Validated product id path parameter."""

    value: int

    def check_bounds(
        self, catalog_size: int, inclusive_upper: bool = False
    ) -> ProductNotFoundError | None:
        """Check the id against the catalog size.

        Args:
            catalog_size: Number of products in the catalog.
            inclusive_upper: Accept ``catalog_size`` itself as an id, as
                older deployments did.

        Returns:
            ProductNotFoundError if the id is out of range, None otherwise.
        """
        upper = catalog_size if inclusive_upper else catalog_size - 1
        if self.value < 0 or self.value > upper:
            return ProductNotFoundError(self.value)
        return None


@dataclass(frozen=True)
class ParseResult(Generic[T]):
    """Outcome of parsing raw request input.

    Attributes:
        value: Parsed value when successful.
        error: Domain error when parsing failed.
    """

    value: T | None = None
    error: DomainError | None = None

    @property
    def success(self) -> bool:
        """Check if parsing produced a value."""
        return self.error is None


# ============================================================================
# Field Parsers
# ============================================================================


def _pairs(params: Mapping[str, str]) -> list[tuple[str, str]]:
    # Starlette's QueryParams keeps every value; a plain dict has one per key.
    multi_items = getattr(params, "multi_items", None)
    if multi_items is not None:
        return multi_items()
    return list(params.items())


def _parse_count(params: Mapping[str, str], key: str, default: int) -> int:
    raw = params.get(key)
    if raw is None:
        return default
    if not _UNSIGNED_INT.fullmatch(raw):
        raise InvalidQueryError(key, raw, "must be a non-negative integer")
    try:
        return int(raw)
    except ValueError:
        # More digits than int() will convert.
        raise InvalidQueryError(key, raw, "must be a non-negative integer") from None


def _parse_bound(params: Mapping[str, str], key: str, default: float) -> float:
    raw = params.get(key)
    if raw is None:
        return default
    try:
        value = float(raw)
    except ValueError:
        raise InvalidQueryError(key, raw, "must be a number") from None
    if not math.isfinite(value):
        raise InvalidQueryError(key, raw, "must be a finite number")
    return value


# ============================================================================
# Public API
# ============================================================================


def parse_query(
    params: Mapping[str, str],
    allowed: frozenset[str] = PAGINATION_PARAMS,
    default_limit: int = 10,
    default_skip: int = 0,
) -> ParseResult[ProductQuery]:
    """Parse raw query parameters into a ProductQuery.

    Args:
        params: Raw query string parameters.
        allowed: Parameter names the endpoint accepts. Anything else is
            rejected.
        default_limit: Limit used when the parameter is absent.
        default_skip: Skip used when the parameter is absent.

    Returns:
        ParseResult with the query, or with an InvalidQueryError.
    """
    keys = [key for key, _ in _pairs(params)]
    repeated = sorted({key for key in keys if keys.count(key) > 1})
    if repeated:
        return ParseResult(
            error=InvalidQueryError(
                repeated[0], params[repeated[0]], "given more than once"
            )
        )

    unknown = sorted(set(params) - allowed)
    if unknown:
        return ParseResult(
            error=InvalidQueryError(
                unknown[0],
                params[unknown[0]],
                f"unknown parameter, expected one of {sorted(allowed)}",
            )
        )

    try:
        query = ProductQuery(
            limit=_parse_count(params, LIMIT, default_limit),
            skip=_parse_count(params, SKIP, default_skip),
            name=params.get(NAME, ""),
            min_price=_parse_bound(params, MIN_PRICE, -math.inf),
            max_price=_parse_bound(params, MAX_PRICE, math.inf),
            min_rating=_parse_bound(params, MIN_RATING, -math.inf),
            max_rating=_parse_bound(params, MAX_RATING, math.inf),
        )
    except InvalidQueryError as e:
        return ParseResult(error=e)

    return ParseResult(value=query)


def parse_product_id(raw: str) -> ParseResult[ProductId]:
    """Parse the product id path parameter.

    Args:
        raw: Path segment as received.

    Returns:
        ParseResult with the id, or with an InvalidProductIdError.
    """
    if not _SIGNED_INT.fullmatch(raw):
        return ParseResult(error=InvalidProductIdError(raw))
    try:
        value = int(raw)
    except ValueError:
        return ParseResult(error=InvalidProductIdError(raw))
    return ParseResult(value=ProductId(value))
