"""CartLine data access."""

from sqlalchemy import delete, func, update
from sqlmodel import col, select

from src.shop.entities._repository import EntityRepository
from src.shop.entities.product.table import ProductTable

from .entity import CartLine
from .table import CartLineTable


class CartLineRepository(EntityRepository[CartLine, CartLineTable]):
    """Data-access layer for cart lines, keyed by (user_id, product_id)."""

    entity_cls = CartLine
    table_cls = CartLineTable

    def _pair(self, user_id: str, product_id: str):
        return (CartLineTable.user_id == user_id) & (
            CartLineTable.product_id == product_id
        )

    def get_line(self, user_id: str, product_id: str) -> CartLine | None:
        row = self._session.exec(
            select(CartLineTable).where(self._pair(user_id, product_id))
        ).first()
        if row is None:
            return None
        return self._to_entity(row)

    def increment(self, user_id: str, product_id: str, delta: int) -> int | None:
        """Atomically add ``delta`` to a line's quantity.

        Returns the new quantity, or None when no line matched.
        """
        result = self._session.exec(
            update(CartLineTable)
            .where(self._pair(user_id, product_id))
            .values(quantity=CartLineTable.quantity + delta)
            .execution_options(synchronize_session="fetch")
        )
        if result.rowcount == 0:
            return None
        return self._session.exec(
            select(CartLineTable.quantity).where(self._pair(user_id, product_id))
        ).one()

    def delete_depleted(self, user_id: str, product_id: str) -> int:
        """Delete the line if its quantity dropped to zero or below."""
        result = self._session.exec(
            delete(CartLineTable)
            .where(self._pair(user_id, product_id))
            .where(CartLineTable.quantity <= 0)
            .execution_options(synchronize_session="fetch")
        )
        return result.rowcount

    def delete_line(self, user_id: str, product_id: str) -> CartLine | None:
        row = self._session.exec(
            select(CartLineTable).where(self._pair(user_id, product_id))
        ).first()
        if row is None:
            return None
        removed = self._to_entity(row)
        self._session.delete(row)
        self._session.flush()
        return removed

    def delete_for_user(self, user_id: str) -> int:
        result = self._session.exec(
            delete(CartLineTable)
            .where(CartLineTable.user_id == user_id)
            .execution_options(synchronize_session="fetch")
        )
        return result.rowcount

    def delete_for_product(self, product_id: str) -> int:
        result = self._session.exec(
            delete(CartLineTable)
            .where(CartLineTable.product_id == product_id)
            .execution_options(synchronize_session="fetch")
        )
        return result.rowcount

    def list_with_products(self, user_id: str) -> list[tuple[CartLine, ProductTable]]:
        """Lines for ``user_id`` joined to their product; orphaned lines are skipped."""
        statement = (
            select(CartLineTable, ProductTable)
            .join(ProductTable, col(ProductTable.id) == col(CartLineTable.product_id))
            .where(CartLineTable.user_id == user_id)
            .order_by(col(CartLineTable.created_at).desc())
        )
        return [
            (self._to_entity(line), product)
            for line, product in self._session.exec(statement).all()
        ]

    def totals(self, user_id: str) -> tuple[int, float]:
        """Sum of quantities and of quantity x price over lines with a live product."""
        statement = (
            select(
                func.coalesce(func.sum(CartLineTable.quantity), 0),
                func.coalesce(func.sum(CartLineTable.quantity * ProductTable.price), 0),
            )
            .select_from(CartLineTable)
            .join(ProductTable, col(ProductTable.id) == col(CartLineTable.product_id))
            .where(CartLineTable.user_id == user_id)
        )
        total_items, total_price = self._session.exec(statement).one()
        return int(total_items), float(total_price)
