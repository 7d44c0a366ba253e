"""Application configuration.

Loads settings from environment variables with sensible defaults.
"""

from pathlib import Path

from pydantic import Field
from pydantic_settings import BaseSettings

DEFAULT_PRODUCTS_FILE = Path(__file__).resolve().parent.parent / "data" / "products.json"


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Server
    host: str = "0.0.0.0"
    port: int = 8000

    # API
    api_version: str = "0.1.0"
    debug: bool = False
    cors_origins: list[str] = ["*"]

    # Catalog
    products_file: Path = DEFAULT_PRODUCTS_FILE

    # Pagination
    default_limit: int = Field(default=10, ge=0)
    default_skip: int = Field(default=0, ge=0)

    # Accept ids up to and including the catalog size and answer null
    # when nothing matches, instead of 404.
    legacy_id_bounds: bool = False

    # Logging
    log_level: str = "INFO"
    log_json: bool = True

    model_config = {
        "env_file": ".env",
        "env_file_encoding": "utf-8",
        "extra": "ignore",
    }


settings = Settings()


def get_settings() -> Settings:
    """Get settings dependency."""
    return settings
