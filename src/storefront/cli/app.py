"""
Root Typer application for the storefront CLI.
"""

from __future__ import annotations

import typer
from typer import Typer

app = Typer(
    name="storefront",
    help="storefront — admin backend for the delivery marketplace.",
    no_args_is_help=True,
    rich_markup_mode="rich",
)


# ── Version callback ─────────────────────────────────────────────────────


def _version_callback(value: bool) -> None:
    if value:
        from storefront import __version__

        typer.echo(f"storefront {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        help="Show version and exit.",
        callback=_version_callback,
        is_eager=True,
    ),
) -> None:
    """storefront CLI — database setup and the API server."""


# ── Sub-command registration ─────────────────────────────────────────────

from storefront.cli.db import app as db_app  # noqa: E402
from storefront.cli.serve import app as serve_app  # noqa: E402

app.add_typer(db_app, name="db", help="Database operations.")
app.add_typer(serve_app, name="serve", help="API server.")


if __name__ == "__main__":
    app()
