"""Account database table model."""

from sqlmodel import Field

from src.shop.entities._base import EntityTable


class AccountTable(EntityTable, table=True):
    """Database persistence model for accounts."""

    __tablename__ = "account"

    name: str
    email: str = Field(unique=True, index=True)
    password_hash: str
    role: str = Field(default="customer", index=True)
