"""Error responses for the products API.

Domain errors become ``HTTPException`` through ``error_to_http``. The
handlers registered by ``register_exception_handlers`` turn every
HTTPException (ours and Starlette's routing errors) and every unhandled
exception into an ``ErrorResponse`` body tagged with the request id.
"""

from typing import Any

import structlog
from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from products_api.api.schemas import ErrorResponse
from products_api.domain.exceptions import (
    CatalogLoadError,
    DomainError,
    InvalidProductIdError,
    InvalidQueryError,
    ProductNotFoundError,
)

logger = structlog.get_logger()

ERROR_STATUS: dict[type[DomainError], int] = {
    InvalidQueryError: status.HTTP_400_BAD_REQUEST,
    InvalidProductIdError: status.HTTP_400_BAD_REQUEST,
    ProductNotFoundError: status.HTTP_404_NOT_FOUND,
    CatalogLoadError: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

# error_code for HTTPExceptions raised without one, e.g. unknown routes.
GENERIC_ERROR_CODE = "ERROR"


def error_to_http(error: DomainError) -> HTTPException:
    """Convert a domain error to an HTTPException.

    Args:
        error: Error returned by the service layer.

    Returns:
        HTTPException ready to be raised.
    """
    status_code = ERROR_STATUS.get(type(error), status.HTTP_400_BAD_REQUEST)

    details = []
    if isinstance(error, InvalidQueryError):
        details.append(
            {"field": error.parameter, "message": error.details["reason"]}
        )

    return HTTPException(
        status_code=status_code,
        detail={
            "error_code": error.error_code,
            "message": error.message,
            "details": details,
        },
    )


def error_response(
    request: Request,
    status_code: int,
    error_code: str,
    message: str,
    details: list[dict[str, Any]] | None = None,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    """Render an ErrorResponse for the current request."""
    body = ErrorResponse(
        error_code=error_code,
        message=message,
        details=details or [],
        request_id=getattr(request.state, "request_id", None),
    )
    return JSONResponse(
        status_code=status_code,
        content=body.model_dump(mode="json"),
        headers=headers,
    )


async def handle_http_exception(
    request: Request, exc: StarletteHTTPException
) -> JSONResponse:
    detail = exc.detail
    if not isinstance(detail, dict):
        detail = {"message": str(detail)}
    return error_response(
        request,
        exc.status_code,
        detail.get("error_code", GENERIC_ERROR_CODE),
        detail.get("message", ""),
        details=detail.get("details"),
        headers=exc.headers,
    )


async def handle_unexpected_error(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(
        "Unhandled error while serving request",
        method=request.method,
        path=request.url.path,
        error=str(exc),
    )
    return error_response(
        request,
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "INTERNAL_ERROR",
        "An internal error occurred",
    )


def register_exception_handlers(app: FastAPI) -> None:
    """Install the uniform error body on the application.

    Args:
        app: FastAPI application instance.
    """
    app.add_exception_handler(StarletteHTTPException, handle_http_exception)
    app.add_exception_handler(Exception, handle_unexpected_error)
