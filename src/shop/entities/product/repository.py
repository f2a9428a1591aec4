"""Product data access."""

from sqlmodel import select

from src.shop.entities._repository import EntityRepository

from .entity import Product
from .table import ProductTable


class ProductRepository(EntityRepository[Product, ProductTable]):
    """Data-access layer for products."""

    entity_cls = Product
    table_cls = ProductTable

    def list_all(self, category: str | None = None) -> list[Product]:
        statement = select(ProductTable).order_by(ProductTable.created_at)
        if category is not None:
            statement = statement.where(ProductTable.category == category)
        return [self._to_entity(row) for row in self._session.exec(statement).all()]

    def set_stock(self, product_id: str, stock: int) -> Product | None:
        row = self._session.get(ProductTable, product_id)
        if row is None:
            return None
        row.stock = stock
        self._session.add(row)
        self._session.flush()
        self._session.refresh(row)
        return self._to_entity(row)
