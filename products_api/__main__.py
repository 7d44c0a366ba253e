"""Run the Products API with uvicorn."""

import uvicorn

from products_api.infrastructure.config import settings


def main() -> None:
    """Start the HTTP server."""
    uvicorn.run(
        "products_api.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
        reload=settings.debug,
    )


if __name__ == "__main__":
    main()
