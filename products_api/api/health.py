"""Health check endpoints.

Provides endpoints for monitoring service health and readiness.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel

from products_api.api.schemas import ErrorResponse
from products_api.domain.exceptions import CatalogLoadError
from products_api.infrastructure.catalog_loader import CatalogLoader, get_catalog_loader
from products_api.infrastructure.config import Settings, get_settings

router = APIRouter()


class HealthResponse(BaseModel):
    """Health check response schema."""

    status: str
    service: str
    version: str


class ReadinessResponse(BaseModel):
    """Readiness check response schema."""

    status: str
    product_count: int


@router.get("/health", response_model=HealthResponse)
async def health_check(
    settings: Annotated[Settings, Depends(get_settings)],
) -> HealthResponse:
    """Check service health.

    Returns:
        Health status with service name and version.
    """
    return HealthResponse(
        status="healthy",
        service="products-api",
        version=settings.api_version,
    )


@router.get(
    "/ready",
    response_model=ReadinessResponse,
    responses={503: {"model": ErrorResponse}},
)
async def readiness_check(
    loader: Annotated[CatalogLoader, Depends(get_catalog_loader)],
) -> ReadinessResponse:
    """Check if the catalog can be loaded.

    Returns:
        Readiness status with the current catalog size.

    Raises:
        HTTPException: If the catalog is unavailable.
    """
    try:
        products = await loader.load()
    except CatalogLoadError as e:
        raise HTTPException(
            status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
            detail={
                "error_code": e.error_code,
                "message": e.message,
            },
        )
    return ReadinessResponse(status="ready", product_count=len(products))
