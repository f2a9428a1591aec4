"""Main CLI application module."""

import typer

from .admin_commands import admin_app
from .catalog_commands import products_app
from .db_commands import db_app
from .server_commands import serve

app = typer.Typer(
    help="🛒 Storefront CLI - database, accounts and catalog administration",
    no_args_is_help=True,
    rich_markup_mode="rich",
)

app.add_typer(db_app, name="db")
app.add_typer(admin_app, name="admin")
app.add_typer(products_app, name="products")
app.command(name="serve")(serve)


def main() -> None:
    """Main entry point for the CLI."""
    app()


if __name__ == "__main__":
    main()
