"""FastAPI dependency implementations."""

from __future__ import annotations

from collections.abc import Iterator

from fastapi import Depends, Request
from sqlmodel import Session

from src.shop.api.http.app_data import ApplicationDependencies
from src.shop.core.services import AccountService, CartService, CatalogService


def get_session(request: Request) -> Iterator[Session]:
    """Open a database session for the duration of one request."""
    app_deps: ApplicationDependencies = request.app.state.app_dependencies
    with app_deps.database_service.session_scope() as session:
        yield session


def get_cart_service(session: Session = Depends(get_session)) -> CartService:
    return CartService(session)


def get_catalog_service(session: Session = Depends(get_session)) -> CatalogService:
    return CatalogService(session)


def get_account_service(session: Session = Depends(get_session)) -> AccountService:
    return AccountService(session)
