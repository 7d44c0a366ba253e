"""Product API endpoints.

Read-only queries over the product catalog. Query parameters are taken
raw from the request and validated by the catalog service, so every
malformed value is reported with the same error body.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request

from products_api.api.errors import error_to_http
from products_api.api.schemas import (
    ErrorResponse,
    ProductListResponse,
    ProductQueryResponse,
)
from products_api.application.catalog_service import (
    CatalogService,
    ProductPageResult,
)
from products_api.domain.models import Product
from products_api.infrastructure.catalog_loader import CatalogLoader, get_catalog_loader
from products_api.infrastructure.config import Settings, get_settings

router = APIRouter(prefix="/products", tags=["Products"])

ERROR_RESPONSES = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


# ============================================================================
# Dependencies
# ============================================================================


def get_service(
    loader: Annotated[CatalogLoader, Depends(get_catalog_loader)],
    settings: Annotated[Settings, Depends(get_settings)],
) -> CatalogService:
    """Get catalog service for the current request."""
    return CatalogService(
        loader,
        default_limit=settings.default_limit,
        default_skip=settings.default_skip,
        legacy_id_bounds=settings.legacy_id_bounds,
    )


# ============================================================================
# Converters
# ============================================================================


def result_to_response(result: ProductPageResult) -> ProductQueryResponse:
    """Convert a filtered listing to the response schema."""
    if not result.success:
        raise error_to_http(result.error)

    return ProductQueryResponse(
        limit=result.query.limit,
        skip=result.query.skip,
        total_products_queried=result.page.total,
        products=result.page.items,
    )


# ============================================================================
# Endpoints
# ============================================================================


@router.get(
    "",
    response_model=ProductListResponse,
    responses=ERROR_RESPONSES,
    summary="List products",
    description="Page through the whole catalog. Accepts limit and skip.",
)
async def list_products(
    request: Request,
    service: Annotated[CatalogService, Depends(get_service)],
) -> ProductListResponse:
    """List all products.

    Returns:
        Page of products with the catalog size.
    """
    result = await service.list_products(request.query_params)
    if not result.success:
        raise error_to_http(result.error)

    return ProductListResponse(
        limit=result.query.limit,
        skip=result.query.skip,
        total_products=result.page.total,
        products=result.page.items,
    )


@router.get(
    "/search",
    response_model=ProductQueryResponse,
    responses=ERROR_RESPONSES,
    summary="Search products by title",
    description="Case-insensitive title substring match. Accepts limit, skip and name.",
)
async def search_by_title(
    request: Request,
    service: Annotated[CatalogService, Depends(get_service)],
) -> ProductQueryResponse:
    """Search products by title."""
    return result_to_response(await service.search_by_title(request.query_params))


@router.get(
    "/price-range",
    response_model=ProductQueryResponse,
    responses=ERROR_RESPONSES,
    summary="Filter products by price",
    description=(
        "Products with minPrice < price <= maxPrice. "
        "Accepts limit, skip, minPrice and maxPrice."
    ),
)
async def filter_by_price_range(
    request: Request,
    service: Annotated[CatalogService, Depends(get_service)],
) -> ProductQueryResponse:
    """Filter products by price range."""
    return result_to_response(
        await service.filter_by_price_range(request.query_params)
    )


@router.get(
    "/brand",
    response_model=ProductQueryResponse,
    responses=ERROR_RESPONSES,
    summary="Filter products by brand",
    description="Case-insensitive brand substring match. Accepts limit, skip and name.",
)
async def filter_by_brand(
    request: Request,
    service: Annotated[CatalogService, Depends(get_service)],
) -> ProductQueryResponse:
    """Filter products by brand name."""
    return result_to_response(await service.filter_by_brand(request.query_params))


@router.get(
    "/in-stock",
    response_model=ProductQueryResponse,
    responses=ERROR_RESPONSES,
    summary="List products in stock",
    description="Products with stock above zero. Accepts limit and skip.",
)
async def list_in_stock(
    request: Request,
    service: Annotated[CatalogService, Depends(get_service)],
) -> ProductQueryResponse:
    """List products that are in stock."""
    return result_to_response(await service.list_in_stock(request.query_params))


@router.get(
    "/rating-range",
    response_model=ProductQueryResponse,
    responses=ERROR_RESPONSES,
    summary="Filter products by rating",
    description=(
        "Products with minRating < rating <= maxRating. "
        "Accepts limit, skip, minRating and maxRating."
    ),
)
async def filter_by_rating_range(
    request: Request,
    service: Annotated[CatalogService, Depends(get_service)],
) -> ProductQueryResponse:
    """Filter products by rating range."""
    return result_to_response(
        await service.filter_by_rating_range(request.query_params)
    )


@router.get(
    "/{product_id}",
    response_model=Product | None,
    responses={**ERROR_RESPONSES, 404: {"model": ErrorResponse}},
    summary="Get product by id",
    description="Get a single product by its catalog id.",
)
async def get_product(
    product_id: str,
    service: Annotated[CatalogService, Depends(get_service)],
) -> Product | None:
    """Get a product by id.

    Args:
        product_id: Catalog id, as a path segment.
        service: Catalog service.

    Returns:
        The product. None only with legacy id bounds, when an id equal
        to the catalog size matches nothing.

    Raises:
        HTTPException: If the id is malformed or the product does not exist.
    """
    result = await service.get_product(product_id)
    if not result.success:
        raise error_to_http(result.error)
    return result.product
