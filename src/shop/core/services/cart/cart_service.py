"""Cart engine: signed quantity deltas over the cart ledger and cart totals."""

from loguru import logger
from sqlmodel import Session

from src.shop.core.errors import Conflict, InvalidArgument, NotFound
from src.shop.core.models.cart import CartAction, CartItemView, CartMutation, CartTotal
from src.shop.core.services.database.db_utils import unit_of_work
from src.shop.core.validation import require_id, require_int
from src.shop.entities.account import AccountRepository
from src.shop.entities.cart_line import CartLine, CartLineRepository
from src.shop.entities.product import Product, ProductRepository


class CartService:
    """Applies deltas to cart lines and aggregates carts against the catalog.

    Each public method is one unit of work on the injected session. The engine
    never touches product stock as a side effect of a cart change; stock is
    only changed through ``set_stock``.
    """

    def __init__(self, session: Session):
        self._session = session
        self._lines = CartLineRepository(session)
        self._products = ProductRepository(session)
        self._accounts = AccountRepository(session)

    def apply_delta(self, user_id: str, product_id: str, delta: int) -> CartMutation:
        require_id(user_id, "user_id")
        require_id(product_id, "product_id")
        require_int(delta, "delta")
        if delta == 0:
            raise InvalidArgument("delta must be nonzero")

        try:
            with unit_of_work(self._session, "apply_delta"):
                mutation = self._apply(user_id, product_id, delta)
        except Conflict:
            # another request created the same line first; its row now exists
            logger.bind(user_id=user_id, product_id=product_id).info(
                "cart.create_collision"
            )
            with unit_of_work(self._session, "apply_delta"):
                mutation = self._apply(user_id, product_id, delta)

        logger.bind(
            user_id=user_id,
            product_id=product_id,
            delta=delta,
            action=mutation.action.value,
        ).info("cart.delta_applied")
        return mutation

    def _apply(self, user_id: str, product_id: str, delta: int) -> CartMutation:
        new_quantity = self._lines.increment(user_id, product_id, delta)

        if new_quantity is None:
            if delta < 0:
                raise NotFound("Cart item not found")
            if not self._accounts.exists(user_id):
                raise NotFound("User not found")
            if not self._products.exists(product_id):
                raise NotFound("Product not found")
            line = self._lines.create(
                CartLine(user_id=user_id, product_id=product_id, quantity=delta)
            )
            return CartMutation(action=CartAction.CREATED, line=line)

        if new_quantity <= 0:
            self._lines.delete_depleted(user_id, product_id)
            return CartMutation(
                action=CartAction.REMOVED, removed_quantity=new_quantity - delta
            )

        return CartMutation(
            action=CartAction.UPDATED, line=self._lines.get_line(user_id, product_id)
        )

    def remove_line(self, user_id: str, product_id: str) -> int:
        """Delete a line regardless of quantity and return the quantity it held."""
        require_id(user_id, "user_id")
        require_id(product_id, "product_id")
        with unit_of_work(self._session, "remove_line"):
            removed = self._lines.delete_line(user_id, product_id)
            if removed is None:
                raise NotFound("Cart item not found")
        logger.bind(user_id=user_id, product_id=product_id).info("cart.line_removed")
        return removed.quantity

    def clear_cart(self, user_id: str) -> int:
        require_id(user_id, "user_id")
        with unit_of_work(self._session, "clear_cart"):
            count = self._lines.delete_for_user(user_id)
        logger.bind(user_id=user_id, removed=count).info("cart.cleared")
        return count

    def list_lines(self, user_id: str) -> list[CartItemView]:
        require_id(user_id, "user_id")
        with unit_of_work(self._session, "list_lines"):
            rows = self._lines.list_with_products(user_id)
        return [
            CartItemView(
                product_id=line.product_id,
                name=product.name,
                price=product.price,
                image=product.image,
                quantity=line.quantity,
                line_total=round(line.quantity * product.price, 2),
            )
            for line, product in rows
        ]

    def compute_total(self, user_id: str) -> CartTotal:
        require_id(user_id, "user_id")
        with unit_of_work(self._session, "compute_total"):
            total_items, total_price = self._lines.totals(user_id)
        return CartTotal(total_items=total_items, total_price=round(total_price, 2))

    def set_stock(self, product_id: str, new_stock: int) -> Product:
        """Overwrite a product's stock; outstanding cart lines are not reconciled."""
        require_id(product_id, "product_id")
        require_int(new_stock, "stock")
        if new_stock < 0:
            raise InvalidArgument("stock must be non-negative")
        with unit_of_work(self._session, "set_stock"):
            product = self._products.set_stock(product_id, new_stock)
            if product is None:
                raise NotFound("Product not found")
        logger.bind(product_id=product_id, stock=new_stock).info("catalog.stock_set")
        return product
