"""
CLI: ``storefront db`` — database management commands.
"""

from __future__ import annotations

import typer

from storefront.cli.utils import console, err_console, output_result, run_operation

app = typer.Typer(no_args_is_help=True)


@app.command()
def check(
    json_out: bool = typer.Option(False, "--json", help="JSON output"),
) -> None:
    """Test connectivity to the configured database."""
    from storefront.ops.database import check_connection

    result = run_operation(check_connection)
    output_result(result, as_json=json_out, title="Database Connection")


@app.command()
def init(
    json_out: bool = typer.Option(False, "--json", help="JSON output"),
) -> None:
    """Create the storefront tables for the active dialect."""
    from storefront.ops.database import initialize_database

    result = run_operation(initialize_database)
    output_result(result, as_json=json_out, title="Database Init")


@app.command()
def dialect() -> None:
    """Print the dialect selected by DATABASE_MODE."""
    from storefront.core.dialect import get_active_dialect
    from storefront.core.errors import ConfigError

    try:
        mode = get_active_dialect()
    except ConfigError as e:
        err_console.print(f"[bold red]Error[/bold red]: {e}")
        raise typer.Exit(code=1) from e
    console.print(mode.value)
