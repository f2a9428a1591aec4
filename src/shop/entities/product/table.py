"""Product database table model."""

from sqlmodel import Field

from src.shop.entities._base import EntityTable
from src.shop.entities.product.entity import DEFAULT_CATEGORY


class ProductTable(EntityTable, table=True):
    """Database persistence model for products."""

    __tablename__ = "product"

    name: str
    description: str | None = None
    price: float
    image: str | None = None
    stock: int = 0
    category: str = Field(default=DEFAULT_CATEGORY, index=True)
