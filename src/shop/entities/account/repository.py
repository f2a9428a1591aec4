"""Account data access."""

from sqlmodel import select

from src.shop.entities._repository import EntityRepository

from .entity import Account, AccountRole
from .table import AccountTable


class AccountRepository(EntityRepository[Account, AccountTable]):
    """Data-access layer for accounts."""

    entity_cls = Account
    table_cls = AccountTable

    def get_by_email(self, email: str, role: AccountRole | None = None) -> Account | None:
        statement = select(AccountTable).where(AccountTable.email == email)
        if role is not None:
            statement = statement.where(AccountTable.role == role.value)
        row = self._session.exec(statement).first()
        if row is None:
            return None
        return self._to_entity(row)

    def list_by_role(self, role: AccountRole) -> list[Account]:
        statement = (
            select(AccountTable)
            .where(AccountTable.role == role.value)
            .order_by(AccountTable.created_at)
        )
        return [self._to_entity(row) for row in self._session.exec(statement).all()]
