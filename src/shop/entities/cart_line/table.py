"""CartLine database table model."""

from sqlalchemy import UniqueConstraint
from sqlmodel import Field

from src.shop.entities._base import EntityTable


class CartLineTable(EntityTable, table=True):
    """Database persistence model for cart lines.

    ``user_id`` and ``product_id`` are plain identifiers, not foreign keys;
    the unique constraint collapses concurrent creates for the same pair.
    """

    __tablename__ = "cart_line"
    __table_args__ = (
        UniqueConstraint("user_id", "product_id", name="uq_cart_line_user_product"),
    )

    user_id: str = Field(index=True)
    product_id: str = Field(index=True)
    quantity: int
