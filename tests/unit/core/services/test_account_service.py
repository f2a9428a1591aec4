"""Unit tests for registration and admin login."""

import pytest
from sqlmodel import Session

from src.shop.core.errors import Conflict, Unauthorized
from src.shop.core.services import AccountService
from src.shop.entities.account import AccountRole


@pytest.fixture
def accounts(session: Session) -> AccountService:
    return AccountService(session)


class TestAccountService:
    def test_register_creates_customer(self, accounts):
        account = accounts.register("Ada", "Ada@Example.com", "pw")

        assert account.role == AccountRole.CUSTOMER
        assert account.email == "ada@example.com"
        assert account.password_hash != "pw"

    def test_duplicate_email_conflicts(self, accounts):
        accounts.register("Ada", "ada@example.com", "pw")

        with pytest.raises(Conflict):
            accounts.register("Other", "ada@example.com", "pw2")

    def test_admin_login(self, accounts):
        admin = accounts.setup_admin("Root", "root@example.com", "s3cret")

        assert accounts.admin_login("root@example.com", "s3cret").id == admin.id

    def test_admin_login_wrong_password(self, accounts):
        accounts.setup_admin("Root", "root@example.com", "s3cret")

        with pytest.raises(Unauthorized):
            accounts.admin_login("root@example.com", "nope")

    def test_customer_cannot_use_admin_login(self, accounts):
        accounts.register("Ada", "ada@example.com", "pw")

        with pytest.raises(Unauthorized):
            accounts.admin_login("ada@example.com", "pw")

    def test_list_customers_excludes_admins(self, accounts):
        accounts.register("Ada", "ada@example.com", "pw")
        accounts.setup_admin("Root", "root@example.com", "pw")

        assert [a.name for a in accounts.list_customers()] == ["Ada"]
