"""Schema management for the storefront tables."""

from loguru import logger
from sqlalchemy.engine import Engine
from sqlmodel import SQLModel


def register_tables() -> None:
    """Import the table modules so their metadata is registered."""
    from src.shop.entities.account import AccountTable  # noqa: F401
    from src.shop.entities.cart_line import CartLineTable  # noqa: F401
    from src.shop.entities.product import ProductTable  # noqa: F401


class DbManageService:
    def __init__(self, engine: Engine):
        self._engine = engine

    def create_all(self) -> None:
        """Create all database tables."""
        register_tables()
        SQLModel.metadata.create_all(self._engine)
        logger.info("Database initialized with tables.")

    def drop_all(self) -> None:
        """Drop all database tables."""
        register_tables()
        SQLModel.metadata.drop_all(self._engine)
        logger.warning("Database tables dropped.")
