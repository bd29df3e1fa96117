"""Row value coercion shared by the operation modules.

Both drivers return ``Decimal`` for NUMERIC/DECIMAL columns and
``datetime`` for timestamps; responses carry floats and ISO strings.
"""

from __future__ import annotations

from datetime import date, datetime
from typing import Any


def as_float(value: Any) -> float:
    return float(value) if value is not None else 0.0


def iso_timestamp(value: Any) -> str | None:
    if value is None:
        return None
    if isinstance(value, (datetime, date)):
        return value.isoformat()
    return str(value)
