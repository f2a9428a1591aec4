"""Core services exports."""

from .account.account_service import AccountService
from .cart.cart_service import CartService
from .catalog.catalog_service import CatalogService
from .database.db_manage import DbManageService
from .database.db_session import DbSessionService

__all__ = [
    "AccountService",
    "CartService",
    "CatalogService",
    "DbManageService",
    "DbSessionService",
]
