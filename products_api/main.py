"""Products API application.

``create_app`` assembles the FastAPI application: CORS, request id
middleware, routers and the uniform error handlers. The module-level
``app`` is what uvicorn serves.
"""

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import structlog
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from products_api.api.errors import register_exception_handlers
from products_api.api.health import router as health_router
from products_api.api.middleware import setup_middleware
from products_api.api.products import router as products_router
from products_api.infrastructure.config import Settings, settings
from products_api.infrastructure.logging import configure_logging

logger = structlog.get_logger()


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Log application startup and shutdown."""
    config: Settings = app.state.settings
    logger.info(
        "Products API starting",
        version=app.version,
        catalog=str(config.products_file),
        legacy_id_bounds=config.legacy_id_bounds,
    )
    yield
    logger.info("Products API stopped")


def create_app(config: Settings) -> FastAPI:
    """Build the application for the given settings.

    Args:
        config: Application settings.

    Returns:
        Configured FastAPI application.
    """
    configure_logging(config.log_level, json=config.log_json)

    application = FastAPI(
        title="Products API",
        description="Read-only query layer over a static product catalog",
        version=config.api_version,
        debug=config.debug,
        lifespan=lifespan,
    )
    application.state.settings = config

    application.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_methods=["GET"],
        allow_headers=["*"],
    )
    setup_middleware(application)
    register_exception_handlers(application)

    application.include_router(health_router, tags=["Health"])
    application.include_router(products_router)
    return application


app = create_app(settings)
