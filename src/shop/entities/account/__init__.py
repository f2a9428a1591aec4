"""Entity package: Account."""

from .entity import Account, AccountRole
from .repository import AccountRepository
from .table import AccountTable

__all__ = ["Account", "AccountRole", "AccountRepository", "AccountTable"]
