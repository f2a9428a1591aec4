"""Shared utilities for CLI commands."""

from collections.abc import Iterator
from contextlib import contextmanager

from rich.console import Console
from sqlmodel import Session

from src.shop.core.services import DbManageService, DbSessionService

console = Console()


@contextmanager
def open_session() -> Iterator[Session]:
    """Open a session against the configured database, creating tables if needed."""
    db_service = DbSessionService()
    try:
        DbManageService(db_service.engine).create_all()
        with db_service.session_scope() as session:
            yield session
    finally:
        db_service.dispose()
