"""Cart routes: deltas, listing with totals, clearing and line removal."""

from fastapi import APIRouter, Depends, Response, status

from src.shop.api.http.deps import get_cart_service
from src.shop.api.http.schemas import (
    CartClearedResponse,
    CartDeltaRequest,
    CartLineRemovedResponse,
    CartMutationResponse,
    CartResponse,
)
from src.shop.core.models.cart import CartAction
from src.shop.core.services import CartService

router = APIRouter(prefix="/cart", tags=["cart"])

_MESSAGES = {
    CartAction.CREATED: "Item added to cart",
    CartAction.UPDATED: "Cart item updated",
    CartAction.REMOVED: "Item removed from cart",
}


@router.post("", response_model=CartMutationResponse)
def apply_delta(
    payload: CartDeltaRequest,
    response: Response,
    service: CartService = Depends(get_cart_service),
) -> CartMutationResponse:
    """Add ``quantityChange`` to the user's line for the product."""
    mutation = service.apply_delta(
        payload.user_id, payload.product_id, payload.quantity_change
    )
    if mutation.action == CartAction.CREATED:
        response.status_code = status.HTTP_201_CREATED
    return CartMutationResponse(
        message=_MESSAGES[mutation.action],
        action=mutation.action,
        user_id=payload.user_id,
        product_id=payload.product_id,
        quantity=mutation.line.quantity if mutation.line else 0,
        removed_quantity=mutation.removed_quantity,
    )


@router.get("/{user_id}", response_model=CartResponse)
def get_cart(
    user_id: str,
    service: CartService = Depends(get_cart_service),
) -> CartResponse:
    items = service.list_lines(user_id)
    total = service.compute_total(user_id)
    return CartResponse(
        user_id=user_id,
        items=items,
        total_items=total.total_items,
        total_price=total.total_price,
    )


@router.delete("/{user_id}", response_model=CartClearedResponse)
def clear_cart(
    user_id: str,
    service: CartService = Depends(get_cart_service),
) -> CartClearedResponse:
    removed = service.clear_cart(user_id)
    return CartClearedResponse(message="Cart cleared", removed_count=removed)


@router.delete("/{user_id}/{product_id}", response_model=CartLineRemovedResponse)
def remove_line(
    user_id: str,
    product_id: str,
    service: CartService = Depends(get_cart_service),
) -> CartLineRemovedResponse:
    removed = service.remove_line(user_id, product_id)
    return CartLineRemovedResponse(
        message="Item removed from cart", removed_quantity=removed
    )
