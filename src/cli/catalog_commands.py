"""Catalog CLI commands."""

import typer
from rich.table import Table

from src.shop.core.errors import StoreError
from src.shop.core.services import CartService, CatalogService

from .utils import console, open_session

products_app = typer.Typer(help="Inspect and maintain the product catalog")


@products_app.command("list")
def list_products(
    category: str | None = typer.Option(None, "--category", "-c", help="Filter by category"),
) -> None:
    """List products with their price and stock."""
    with open_session() as session:
        products = CatalogService(session).list_products(category=category)

    if not products:
        console.print("[yellow]No products found[/yellow]")
        return

    table = Table(title="Products")
    table.add_column("ID", style="cyan")
    table.add_column("Name", style="green")
    table.add_column("Category", style="magenta")
    table.add_column("Price", justify="right")
    table.add_column("Stock", justify="right", style="yellow")
    for product in products:
        table.add_row(
            product.id,
            product.name,
            product.category,
            f"{product.price:.2f}",
            str(product.stock),
        )
    console.print(table)
    console.print(f"\n[green]Found {len(products)} products[/green]")


@products_app.command("set-stock")
def set_stock(
    product_id: str = typer.Argument(..., help="Product id"),
    stock: int = typer.Argument(..., help="New stock level"),
) -> None:
    """Overwrite a product's stock level."""
    with open_session() as session:
        try:
            product = CartService(session).set_stock(product_id, stock)
        except StoreError as e:
            console.print(f"[red]❌ {e.message}[/red]")
            raise typer.Exit(code=1) from e
    console.print(f"[green]✅ {product.name} stock set to {product.stock}[/green]")
