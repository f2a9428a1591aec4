"""Account registration and admin login routes."""

from fastapi import APIRouter, Depends, status

from src.shop.api.http.deps import get_account_service
from src.shop.api.http.schemas import (
    AccountCreatedResponse,
    AccountPublic,
    LoginRequest,
    LoginResponse,
    RegisterRequest,
)
from src.shop.core.services import AccountService

router = APIRouter(tags=["accounts"])


@router.post(
    "/register",
    response_model=AccountCreatedResponse,
    status_code=status.HTTP_201_CREATED,
)
def register(
    payload: RegisterRequest,
    service: AccountService = Depends(get_account_service),
) -> AccountCreatedResponse:
    """Register a customer account."""
    account = service.register(payload.name, payload.email, payload.password)
    return AccountCreatedResponse(
        message="Account created successfully", user=AccountPublic.from_account(account)
    )


@router.post(
    "/admin/setup",
    response_model=AccountCreatedResponse,
    status_code=status.HTTP_201_CREATED,
)
def setup_admin(
    payload: RegisterRequest,
    service: AccountService = Depends(get_account_service),
) -> AccountCreatedResponse:
    """Create an administrator account."""
    account = service.setup_admin(payload.name, payload.email, payload.password)
    return AccountCreatedResponse(
        message="Admin user created successfully!", user=AccountPublic.from_account(account)
    )


@router.post("/admin/login", response_model=LoginResponse)
def admin_login(
    payload: LoginRequest,
    service: AccountService = Depends(get_account_service),
) -> LoginResponse:
    account = service.admin_login(payload.email, payload.password)
    return LoginResponse(
        message="Admin login successful", user=AccountPublic.from_account(account)
    )


@router.get("/users", response_model=list[AccountPublic])
def list_customers(
    service: AccountService = Depends(get_account_service),
) -> list[AccountPublic]:
    """List customer accounts without their password hashes."""
    return [AccountPublic.from_account(a) for a in service.list_customers()]
