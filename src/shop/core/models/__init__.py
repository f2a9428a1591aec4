from .cart import CartAction, CartItemView, CartMutation, CartTotal

__all__ = ["CartAction", "CartItemView", "CartMutation", "CartTotal"]
