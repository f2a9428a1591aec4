"""Result models returned by the cart engine."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from src.shop.entities.cart_line import CartLine


class CartAction(str, Enum):
    CREATED = "created"
    UPDATED = "updated"
    REMOVED = "removed"


class CartMutation(BaseModel):
    """Outcome of applying a delta to one cart line.

    ``line`` is the stored line after a create or update and None after a
    removal; ``removed_quantity`` is the quantity the line held before it was
    removed, so callers can restore stock elsewhere.
    """

    action: CartAction
    line: CartLine | None = None
    removed_quantity: int | None = None


class CartItemView(BaseModel):
    """A cart line joined with its product."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    product_id: str
    name: str
    price: float
    image: str | None = None
    quantity: int
    line_total: float


class CartTotal(BaseModel):
    total_items: int = Field(default=0, ge=0)
    total_price: float = Field(default=0.0, ge=0)
