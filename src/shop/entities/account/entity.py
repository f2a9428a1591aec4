"""Account domain entity."""

from enum import Enum

from pydantic import Field

from src.shop.entities._base import Entity


class AccountRole(str, Enum):
    CUSTOMER = "customer"
    ADMIN = "admin"


class Account(Entity):
    """A registered customer or administrator.

    ``password_hash`` is opaque to everything except ``core.security``.
    """

    name: str = Field(description="Display name")
    email: str = Field(description="Login email, unique across accounts")
    password_hash: str = Field(description="Salted password hash")
    role: AccountRole = Field(default=AccountRole.CUSTOMER, description="Account role")

    @property
    def is_admin(self) -> bool:
        return self.role == AccountRole.ADMIN
