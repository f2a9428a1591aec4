from loguru import logger
from sqlmodel import Session

from src.shop.core.errors import Conflict, Unauthorized
from src.shop.core.security import hash_password, verify_password
from src.shop.core.services.database.db_utils import unit_of_work
from src.shop.entities.account import Account, AccountRepository, AccountRole


class AccountService:
    """Registration and login for customers and administrators."""

    def __init__(self, session: Session):
        self._session = session
        self._accounts = AccountRepository(session)

    def _create(self, name: str, email: str, password: str, role: AccountRole) -> Account:
        email = email.strip().lower()
        with unit_of_work(self._session, "create_account"):
            if self._accounts.get_by_email(email) is not None:
                raise Conflict("This email address is already registered.")
            account = self._accounts.create(
                Account(
                    name=name,
                    email=email,
                    password_hash=hash_password(password),
                    role=role,
                )
            )
        logger.bind(account_id=account.id, role=role.value).info("account.created")
        return account

    def register(self, name: str, email: str, password: str) -> Account:
        return self._create(name, email, password, AccountRole.CUSTOMER)

    def setup_admin(self, name: str, email: str, password: str) -> Account:
        return self._create(name, email, password, AccountRole.ADMIN)

    def admin_login(self, email: str, password: str) -> Account:
        with unit_of_work(self._session, "admin_login"):
            account = self._accounts.get_by_email(email.strip().lower(), role=AccountRole.ADMIN)
        if account is None or not verify_password(password, account.password_hash):
            logger.bind(email=email).warning("account.login_failed")
            raise Unauthorized("Invalid credentials or not an admin.")
        logger.bind(account_id=account.id).info("account.admin_login")
        return account

    def list_customers(self) -> list[Account]:
        with unit_of_work(self._session, "list_customers"):
            return self._accounts.list_by_role(AccountRole.CUSTOMER)
