"""
CLI: ``storefront serve`` — start the API server.
"""

from __future__ import annotations

import typer
import uvicorn

from storefront.cli.utils import console

app = typer.Typer(no_args_is_help=True)


@app.command("start")
def start(
    host: str | None = typer.Option(None, "--host", "-h", help="Bind address (default: HOST)"),
    port: int | None = typer.Option(None, "--port", "-p", help="Bind port (default: PORT)"),
    reload: bool = typer.Option(False, "--reload", help="Auto-reload on changes"),
    workers: int = typer.Option(1, "--workers", "-w", help="Number of workers"),
    log_level: str = typer.Option("info", "--log-level"),
) -> None:
    """Start the storefront REST API server."""
    from storefront.api.deps import get_settings

    settings = get_settings()
    host = host or settings.host
    port = port or settings.port

    console.print(f"[bold green]Starting storefront API[/bold green] on {host}:{port}")
    uvicorn.run(
        "storefront.api.app:create_app",
        factory=True,
        host=host,
        port=port,
        reload=reload,
        workers=workers,
        log_level=log_level,
    )
