"""Catalog loading from a static JSON file.

The file is read on every call; there is no cache. It may hold either a
bare list of product records or an object with a ``products`` list.
"""

import asyncio
import json
from pathlib import Path
from typing import Annotated, Any, Protocol

import structlog
from fastapi import Depends
from pydantic import TypeAdapter, ValidationError

from products_api.domain.exceptions import CatalogLoadError
from products_api.domain.models import Product
from products_api.infrastructure.config import Settings, get_settings

logger = structlog.get_logger()

_catalog_adapter = TypeAdapter(list[Product])


class CatalogLoader(Protocol):
    """Source of the ordered product catalog."""

    async def load(self) -> list[Product]:
        """Load every product, in catalog order.

        Raises:
            CatalogLoadError: If the catalog cannot be produced.
        """
        ...


def parse_catalog(raw: bytes | str, source: str = "<memory>") -> list[Product]:
    """Parse catalog JSON into products.

    Records without an ``id`` get their position in the file.

    Args:
        raw: JSON document.
        source: Where the document came from, for error messages.

    Returns:
        Products in file order.

    Raises:
        CatalogLoadError: If the document is not valid catalog JSON.
    """
    try:
        document = json.loads(raw)
    except json.JSONDecodeError as e:
        raise CatalogLoadError(source, f"invalid JSON: {e.msg}") from e
    except UnicodeDecodeError as e:
        raise CatalogLoadError(source, f"not valid text: {e.reason}") from e

    if isinstance(document, dict):
        document = document.get("products")
    if not isinstance(document, list):
        raise CatalogLoadError(source, "expected a list of products")

    records: list[Any] = []
    for index, record in enumerate(document):
        if not isinstance(record, dict):
            raise CatalogLoadError(source, f"record {index} is not an object")
        records.append({"id": index, **record})

    try:
        return _catalog_adapter.validate_python(records)
    except ValidationError as e:
        raise CatalogLoadError(
            source, f"{e.error_count()} invalid field(s): {e.errors()[0]['msg']}"
        ) from e


class ProductsFileLoader:
    """Loads the catalog from a JSON file on disk."""

    def __init__(self, path: Path) -> None:
        """Initialize loader.

        Args:
            path: Location of the products JSON file.
        """
        self.path = path

    async def load(self) -> list[Product]:
        """Read and parse the products file.

        The blocking read runs in a worker thread.

        Returns:
            Products in file order.

        Raises:
            CatalogLoadError: If the file is missing, unreadable, or invalid.
        """
        try:
            raw = await asyncio.to_thread(self.path.read_bytes)
        except OSError as e:
            raise CatalogLoadError(str(self.path), e.strerror or str(e)) from e

        products = parse_catalog(raw, source=str(self.path))
        logger.debug("Catalog loaded", path=str(self.path), product_count=len(products))
        return products


def get_catalog_loader(
    settings: Annotated[Settings, Depends(get_settings)],
) -> CatalogLoader:
    """Get catalog loader dependency."""
    return ProductsFileLoader(settings.products_file)
