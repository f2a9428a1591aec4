"""Entity package: Product."""

from .entity import DEFAULT_CATEGORY, Product
from .repository import ProductRepository
from .table import ProductTable

__all__ = ["DEFAULT_CATEGORY", "Product", "ProductRepository", "ProductTable"]
