"""Catalog record model."""

from pydantic import BaseModel, ConfigDict, Field


class Product(BaseModel):
    """A single catalog record.

    Only the fields the query endpoints filter on are declared. Any other
    field present in the source record (description, category, images...)
    is kept and serialized back unchanged.
    """

    model_config = ConfigDict(frozen=True, extra="allow")

    id: int = Field(..., ge=0, description="Catalog id, assigned by position when absent")
    title: str = Field(..., description="Product title")
    brand: str = Field(..., description="Brand name")
    price: float = Field(..., ge=0, description="Unit price")
    stock: int = Field(..., description="Units available, 0 means out of stock")
    rating: float = Field(..., description="Average customer rating")

    @property
    def in_stock(self) -> bool:
        """Check if at least one unit is available."""
        return self.stock > 0
