"""Apply the bundled storefront DDL through an adapter.

DDL lives in ``core/schema/<dialect>/NN_name.sql``.  Files are applied in
name order, one statement per ``query`` call, and every statement is
``CREATE … IF NOT EXISTS`` so re-applying is a no-op.
"""

from __future__ import annotations

from pathlib import Path

from storefront.core.adapters import DatabaseAdapter
from storefront.core.dialect import DialectMode
from storefront.core.logging import get_logger

logger = get_logger(__name__)

SCHEMA_DIR = Path(__file__).resolve().parent / "schema"

_TABLE_LIST_SQL = {
    DialectMode.POSTGRESQL: (
        "SELECT tablename AS name FROM pg_tables WHERE schemaname = 'public' ORDER BY tablename"
    ),
    DialectMode.MYSQL: (
        "SELECT TABLE_NAME AS name FROM INFORMATION_SCHEMA.TABLES "
        "WHERE TABLE_SCHEMA = DATABASE() ORDER BY TABLE_NAME"
    ),
}


def _split_sql(script: str) -> list[str]:
    """Split a DDL script into statements.

    Blank lines and ``--`` comment lines are dropped.  A statement ends on a
    line ending with ``;``; a trailing unterminated statement is kept.
    """
    statements: list[str] = []
    pending: list[str] = []
    for line in script.splitlines():
        text = line.strip()
        if not text or text.startswith("--"):
            continue
        pending.append(line)
        if text.endswith(";"):
            statements.append("\n".join(pending).strip())
            pending = []
    if pending:
        statements.append("\n".join(pending).strip())
    return [s for s in statements if s and s != ";"]


def get_schema_files(mode: DialectMode | str, schema_dir: Path | str | None = None) -> list[Path]:
    """Sorted ``.sql`` files for *mode* under *schema_dir* (default: bundled)."""
    directory = Path(schema_dir or SCHEMA_DIR) / DialectMode.parse(mode).value
    return sorted(directory.glob("*.sql")) if directory.is_dir() else []


async def apply_schema(adapter: DatabaseAdapter, schema_dir: Path | str | None = None) -> list[str]:
    """Apply every schema file for the adapter's dialect; return the names applied."""
    applied: list[str] = []

    for path in get_schema_files(adapter.mode, schema_dir):
        for statement in _split_sql(path.read_text(encoding="utf-8")):
            await adapter.query(statement)
        applied.append(path.name)
        logger.debug("schema_applied", file=path.name)

    logger.info("schema_all_applied", dialect=adapter.mode.value, count=len(applied))
    return applied


async def get_table_list(adapter: DatabaseAdapter) -> list[str]:
    """Names of the tables in the connected database, alphabetically."""
    rows, _ = await adapter.query(_TABLE_LIST_SQL[adapter.mode])
    return [row["name"] for row in rows]


__all__ = [
    "SCHEMA_DIR",
    "get_schema_files",
    "apply_schema",
    "get_table_list",
]
