"""
Shared CLI plumbing: run an operation against a short-lived adapter and
render its result with rich.
"""

from __future__ import annotations

import asyncio
import json
from collections.abc import Awaitable, Callable
from dataclasses import asdict, is_dataclass
from typing import Any

import typer
from rich.console import Console
from rich.table import Table

from storefront.core.adapters import create_adapter
from storefront.core.logging import configure_logging
from storefront.core.settings import get_settings
from storefront.ops.context import OperationContext
from storefront.ops.result import OperationResult

console = Console()
err_console = Console(stderr=True)


def run_operation(operation: Callable[[OperationContext], Awaitable[OperationResult]]) -> OperationResult:
    """Build the adapter from settings, run *operation* once, close the pool.

    The adapter is ``None`` when the active dialect has no connection
    settings; the operation then reports "Database connection not
    configured".
    """
    settings = get_settings()
    configure_logging(level=settings.log_level, json_format=settings.log_json, service="storefront-cli")

    async def _main() -> OperationResult:
        adapter = create_adapter(settings)
        try:
            return await operation(OperationContext(db=adapter, caller="cli"))
        finally:
            if adapter is not None:
                await adapter.close()

    return asyncio.run(_main())


def _as_dict(obj: Any) -> dict[str, Any]:
    if is_dataclass(obj) and not isinstance(obj, type):
        return asdict(obj)
    if isinstance(obj, dict):
        return obj
    return {"value": str(obj)}


def output_result(result: OperationResult, *, as_json: bool = False, title: str = "") -> None:
    """Print *result*; on failure print the error to stderr and exit 1."""
    if not result.success:
        error = result.error
        message = error.message if error else "Unknown error"
        err_console.print(f"[bold red]Error[/bold red] ({error.code if error else 'ERROR'}): {message}")
        cause = error.details.get("cause") if error else None
        if cause and cause != message:
            err_console.print(f"  [dim]{cause}[/dim]")
        raise typer.Exit(code=1)

    data = result.data
    if as_json:
        payload = [_as_dict(d) for d in data] if isinstance(data, list) else _as_dict(data)
        console.print_json(json.dumps(payload, default=str))
    elif isinstance(data, list):
        _print_table(data, title=title)
    else:
        _print_fields(_as_dict(data), title=title)


def _print_table(items: list[Any], *, title: str = "") -> None:
    if not items:
        console.print("[dim]No items.[/dim]")
        return
    records = [_as_dict(item) for item in items]
    table = Table(title=title or None, pad_edge=False)
    for column in records[0]:
        table.add_column(column, overflow="fold")
    for record in records:
        table.add_row(*(str(v) for v in record.values()))
    console.print(table)


def _print_fields(data: dict[str, Any], *, title: str = "") -> None:
    if title:
        console.print(f"[bold]{title}[/bold]")
    for key, value in data.items():
        console.print(f"  [cyan]{key}[/cyan]: {value}")
