"""Shared fixtures for products API tests."""

import pytest
from fastapi.testclient import TestClient

from products_api.domain.models import Product
from products_api.infrastructure.catalog_loader import get_catalog_loader
from products_api.infrastructure.config import Settings, get_settings
from products_api.main import app


class StaticCatalogLoader:
    """In-memory catalog loader that records how often it was read."""

    def __init__(self, products: list[Product]) -> None:
        self.products = products
        self.load_count = 0

    async def load(self) -> list[Product]:
        self.load_count += 1
        return list(self.products)


def build_product(product_id: int, **overrides) -> Product:
    """Build a product with sensible defaults."""
    data = {
        "id": product_id,
        "title": f"Product {product_id}",
        "brand": "Acme",
        "price": 100,
        "stock": 10,
        "rating": 4.0,
    }
    data.update(overrides)
    return Product(**data)


@pytest.fixture
def catalog() -> list[Product]:
    """Small catalog covering every filter dimension."""
    return [
        build_product(0, title="iPhone 12", brand="Apple", price=549, stock=94, rating=4.69),
        build_product(1, title="Galaxy S21", brand="Samsung", price=1249, stock=0, rating=4.09),
        build_product(2, title="MacBook Pro", brand="Apple", price=1749, stock=83, rating=4.57),
        build_product(
            3,
            title="Perfume Oil",
            brand="Impression of Acqua Di Gio",
            price=13,
            stock=65,
            rating=4.26,
            category="fragrances",
        ),
        build_product(4, title="Tree Oil 30ml", brand="Hemani Tea", price=12, stock=0, rating=4.52),
    ]


@pytest.fixture
def loader(catalog: list[Product]) -> StaticCatalogLoader:
    """Catalog loader serving the test catalog."""
    return StaticCatalogLoader(catalog)


@pytest.fixture
def test_settings() -> Settings:
    """Settings with the defaults the tests rely on."""
    return Settings(default_limit=10, default_skip=0, legacy_id_bounds=False)


@pytest.fixture
def client(loader: StaticCatalogLoader, test_settings: Settings) -> TestClient:
    """Create test client backed by the in-memory catalog."""
    app.dependency_overrides[get_catalog_loader] = lambda: loader
    app.dependency_overrides[get_settings] = lambda: test_settings
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def make_product():
    """Factory for products with default field values."""
    return build_product


@pytest.fixture
def make_loader():
    """Factory for in-memory catalog loaders."""
    return StaticCatalogLoader
