"""Administrator account CLI commands."""

import typer

from src.shop.core.errors import Conflict
from src.shop.core.services import AccountService

from .utils import console, open_session

admin_app = typer.Typer(help="Manage administrator accounts")


@admin_app.command("create")
def create_admin(
    email: str = typer.Argument(..., help="Login email"),
    name: str = typer.Option("Administrator", "--name", "-n", help="Display name"),
    password: str = typer.Option(
        ..., "--password", "-p", prompt=True, hide_input=True, confirmation_prompt=True
    ),
) -> None:
    """Create an administrator account."""
    with open_session() as session:
        try:
            account = AccountService(session).setup_admin(name, email, password)
        except Conflict as e:
            console.print(f"[red]❌ {e.message}[/red]")
            raise typer.Exit(code=1) from e
    console.print(f"[green]✅ Admin '{account.email}' created with id {account.id}[/green]")
