"""Entity package: CartLine."""

from .entity import CartLine
from .repository import CartLineRepository
from .table import CartLineTable

__all__ = ["CartLine", "CartLineRepository", "CartLineTable"]
