"""Database management CLI commands."""

import typer
from rich.prompt import Confirm

from src.shop.core.services import DbManageService, DbSessionService
from src.shop.runtime.init_db import init_db

from .utils import console

db_app = typer.Typer(help="Manage the storefront database schema")


@db_app.command("init")
def init() -> None:
    """Create all tables that do not exist yet."""
    init_db()
    console.print("[green]✅ Database initialized[/green]")


@db_app.command("reset")
def reset(
    force: bool = typer.Option(False, "--force", "-f", help="Skip confirmation"),
) -> None:
    """Drop and recreate every table."""
    if not force and not Confirm.ask("[red]This deletes all data. Continue?[/red]"):
        console.print("[yellow]Aborted[/yellow]")
        raise typer.Exit(code=1)

    db_service = DbSessionService()
    try:
        manage = DbManageService(db_service.engine)
        manage.drop_all()
        manage.create_all()
    finally:
        db_service.dispose()
    console.print("[green]✅ Database reset[/green]")
