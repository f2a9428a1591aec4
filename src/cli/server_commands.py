"""Server CLI command."""

import typer
from rich.panel import Panel

from src.shop.runtime.context import get_config

from .utils import console


def serve(
    host: str | None = typer.Option(None, help="Host to bind (defaults to config)"),
    port: int | None = typer.Option(None, help="Port to bind (defaults to config)"),
    reload: bool = typer.Option(False, help="Enable auto-reload on code changes"),
) -> None:
    """Start the API server with uvicorn."""
    import uvicorn

    config = get_config()
    host = host or config.app.host
    port = port or config.app.port
    console.print(
        Panel.fit(
            f"[bold green]Starting Storefront API on {host}:{port}[/bold green]",
            border_style="green",
        )
    )
    uvicorn.run("src.shop.api.http.app:app", host=host, port=port, reload=reload)
