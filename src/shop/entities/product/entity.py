"""Entity: Product."""

from pydantic import Field

from src.shop.entities._base import STORE_INT_MAX, Entity

DEFAULT_CATEGORY = "General"


class Product(Entity):
    """A catalog product with a price and a stock counter."""

    name: str = Field(description="Name")
    description: str | None = Field(default=None, description="Description")
    price: float = Field(ge=0, description="Unit price")
    image: str | None = Field(default=None, description="Image reference")
    stock: int = Field(default=0, ge=0, le=STORE_INT_MAX, description="Units in stock")
    category: str = Field(default=DEFAULT_CATEGORY, description="Category")
