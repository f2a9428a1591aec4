"""Entity: CartLine."""

from pydantic import Field

from src.shop.entities._base import STORE_INT_MAX, Entity


class CartLine(Entity):
    """One (user, product) row of a cart.

    A stored line always has a positive quantity; a line that would drop to
    zero is deleted instead.
    """

    user_id: str = Field(description="Owning account id")
    product_id: str = Field(description="Referenced product id")
    quantity: int = Field(ge=1, le=STORE_INT_MAX, description="Units in the cart")
