"""Catalog application service.

Each use case is one linear pass: parse the raw query, load the
catalog, filter, paginate. Failures come back as domain errors inside
the result object instead of being raised.
"""

from collections.abc import Callable, Mapping
from dataclasses import dataclass

import structlog

from products_api.domain.exceptions import (
    CatalogLoadError,
    DomainError,
    ProductNotFoundError,
)
from products_api.domain.filters import (
    Page,
    ProductPredicate,
    brand_contains,
    in_stock,
    match_all,
    paginate,
    price_between,
    rating_between,
    title_contains,
)
from products_api.domain.models import Product
from products_api.domain.query import (
    NAME_PARAMS,
    PAGINATION_PARAMS,
    PRICE_RANGE_PARAMS,
    RATING_RANGE_PARAMS,
    ProductQuery,
    parse_product_id,
    parse_query,
)
from products_api.infrastructure.catalog_loader import CatalogLoader

logger = structlog.get_logger()


# ============================================================================
# Result Types
# ============================================================================


@dataclass
class ProductPageResult:
    """Result of a filtered product listing."""

    query: ProductQuery | None = None
    page: Page | None = None
    error: DomainError | None = None

    @property
    def success(self) -> bool:
        """Check if the listing succeeded."""
        return self.error is None


@dataclass
class GetProductResult:
    """Result of a product lookup by id.

    ``product`` may be None on success when legacy id bounds let an id
    through that matches nothing.
    """

    product: Product | None = None
    error: DomainError | None = None

    @property
    def success(self) -> bool:
        """Check if the lookup succeeded."""
        return self.error is None


# ============================================================================
# Catalog Service
# ============================================================================


class CatalogService:
    """Application service for read-only catalog queries.

    Example usage:
        service = CatalogService(ProductsFileLoader(path))
        result = await service.list_in_stock({"limit": "5"})
        if result.success:
            print(result.page.total, result.page.items)
    """

    def __init__(
        self,
        loader: CatalogLoader,
        default_limit: int = 10,
        default_skip: int = 0,
        legacy_id_bounds: bool = False,
    ) -> None:
        """Initialize service.

        Args:
            loader: Catalog source, read once per call.
            default_limit: Page size when the query has no limit.
            default_skip: Offset when the query has no skip.
            legacy_id_bounds: Accept ids up to the catalog size and
                return no product instead of an error when none match.
        """
        self.loader = loader
        self.default_limit = default_limit
        self.default_skip = default_skip
        self.legacy_id_bounds = legacy_id_bounds

    async def list_products(self, params: Mapping[str, str]) -> ProductPageResult:
        """List the whole catalog, paginated."""
        return await self._list(params, PAGINATION_PARAMS, lambda q: match_all)

    async def search_by_title(self, params: Mapping[str, str]) -> ProductPageResult:
        """List products whose title contains ``name`` (case-insensitive)."""
        return await self._list(params, NAME_PARAMS, lambda q: title_contains(q.name))

    async def filter_by_price_range(
        self, params: Mapping[str, str]
    ) -> ProductPageResult:
        """List products with ``minPrice < price <= maxPrice``."""
        return await self._list(
            params,
            PRICE_RANGE_PARAMS,
            lambda q: price_between(q.min_price, q.max_price),
        )

    async def filter_by_brand(self, params: Mapping[str, str]) -> ProductPageResult:
        """List products whose brand contains ``name`` (case-insensitive)."""
        return await self._list(params, NAME_PARAMS, lambda q: brand_contains(q.name))

    async def list_in_stock(self, params: Mapping[str, str]) -> ProductPageResult:
        """List products with stock above zero."""
        return await self._list(params, PAGINATION_PARAMS, lambda q: in_stock)

    async def filter_by_rating_range(
        self, params: Mapping[str, str]
    ) -> ProductPageResult:
        """List products with ``minRating < rating <= maxRating``."""
        return await self._list(
            params,
            RATING_RANGE_PARAMS,
            lambda q: rating_between(q.min_rating, q.max_rating),
        )

    async def get_product(self, raw_id: str) -> GetProductResult:
        """Look up a single product by its id path parameter.

        The id is validated before the catalog is read, and checked
        against the catalog size after. The first product with a
        matching id wins.

        Args:
            raw_id: Path parameter as received.

        Returns:
            Lookup result.
        """
        parsed = parse_product_id(raw_id)
        if not parsed.success:
            logger.warning("Product id rejected", product_id=raw_id)
            return GetProductResult(error=parsed.error)

        product_id = parsed.value
        try:
            products = await self.loader.load()
        except CatalogLoadError as e:
            logger.error("Catalog unavailable", error=e.message)
            return GetProductResult(error=e)

        bounds_error = product_id.check_bounds(
            len(products), inclusive_upper=self.legacy_id_bounds
        )
        if bounds_error:
            return GetProductResult(error=bounds_error)

        product = next((p for p in products if p.id == product_id.value), None)
        if product is None and not self.legacy_id_bounds:
            return GetProductResult(error=ProductNotFoundError(product_id.value))

        return GetProductResult(product=product)

    async def _list(
        self,
        params: Mapping[str, str],
        allowed: frozenset[str],
        build_predicate: Callable[[ProductQuery], ProductPredicate],
    ) -> ProductPageResult:
        parsed = parse_query(
            params,
            allowed=allowed,
            default_limit=self.default_limit,
            default_skip=self.default_skip,
        )
        if not parsed.success:
            logger.warning("Query rejected", error=parsed.error.message)
            return ProductPageResult(error=parsed.error)

        query = parsed.value
        try:
            products = await self.loader.load()
        except CatalogLoadError as e:
            logger.error("Catalog unavailable", error=e.message)
            return ProductPageResult(query=query, error=e)

        page = paginate(products, build_predicate(query), query.skip, query.limit)
        return ProductPageResult(query=query, page=page)
