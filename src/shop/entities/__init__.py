"""Entities module with an entity-centric structure.

Each entity has its own package containing:
- entity.py: immutable domain model
- table.py: database persistence model
- repository.py: data access layer
"""

from .account import Account, AccountRepository, AccountRole, AccountTable
from .cart_line import CartLine, CartLineRepository, CartLineTable
from .product import Product, ProductRepository, ProductTable

__all__ = [
    "Account",
    "AccountRole",
    "AccountTable",
    "AccountRepository",
    "Product",
    "ProductTable",
    "ProductRepository",
    "CartLine",
    "CartLineTable",
    "CartLineRepository",
]
