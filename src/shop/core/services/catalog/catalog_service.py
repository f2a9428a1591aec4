from typing import Any

from loguru import logger
from sqlmodel import Session

from src.shop.core.errors import InvalidArgument, NotFound
from src.shop.core.services.database.db_utils import unit_of_work
from src.shop.core.validation import require_id
from src.shop.entities.cart_line import CartLineRepository
from src.shop.entities.product import Product, ProductRepository
from src.shop.runtime.context import get_config


class CatalogService:
    """Product CRUD; deleting a product also deletes every cart line for it."""

    def __init__(self, session: Session):
        self._session = session
        self._products = ProductRepository(session)
        self._lines = CartLineRepository(session)

    def create_product(self, **fields: Any) -> Product:
        if fields.get("category") is None:
            fields["category"] = get_config().catalog.default_category
        try:
            product = Product(**fields)
        except ValueError as e:
            raise InvalidArgument(str(e)) from e
        with unit_of_work(self._session, "create_product"):
            created = self._products.create(product)
        logger.bind(product_id=created.id).info("catalog.product_created")
        return created

    def get_product(self, product_id: str) -> Product:
        require_id(product_id, "product_id")
        with unit_of_work(self._session, "get_product"):
            product = self._products.get(product_id)
        if product is None:
            raise NotFound("Product not found")
        return product

    def list_products(self, category: str | None = None) -> list[Product]:
        with unit_of_work(self._session, "list_products"):
            return self._products.list_all(category=category)

    def update_product(self, product_id: str, changes: dict[str, Any]) -> Product:
        """Apply a partial update; keys not present in ``changes`` are kept."""
        require_id(product_id, "product_id")
        with unit_of_work(self._session, "update_product"):
            current = self._products.get(product_id)
            if current is None:
                raise NotFound("Product not found")
            try:
                updated = Product.model_validate({**current.model_dump(), **changes})
            except ValueError as e:
                raise InvalidArgument(str(e)) from e
            product = self._products.update(updated)
        logger.bind(product_id=product_id, fields=sorted(changes)).info(
            "catalog.product_updated"
        )
        return product

    def delete_product(self, product_id: str) -> int:
        """Delete a product and its cart lines; returns the number of lines removed."""
        require_id(product_id, "product_id")
        with unit_of_work(self._session, "delete_product"):
            if not self._products.delete(product_id):
                raise NotFound("Product not found")
            removed_lines = self._lines.delete_for_product(product_id)
        logger.bind(product_id=product_id, removed_lines=removed_lines).info(
            "catalog.product_deleted"
        )
        return removed_lines
