"""
Request-scoped context for operations.

Every operation function receives an :class:`OperationContext` as its first
argument.  The context carries the database adapter built at startup, the
request ID bound into the logs, and the caller identity.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from typing import Any

from storefront.core.adapters import DatabaseAdapter


@dataclass
class OperationContext:
    """Context passed to every operation function.

    Attributes:
        db: The process's database adapter, or ``None`` when no database is
            configured (every database operation then fails with
            "Database connection not configured").
        request_id: Unique ID for this operation invocation (auto-generated).
        caller: Origin of the request, ``"api"`` or ``"cli"``.
        debug: Whether failure causes (driver messages) may be shown to the
            caller.
        metadata: Arbitrary key/value pairs forwarded to logging.
    """

    db: DatabaseAdapter | None
    request_id: str = field(default_factory=lambda: str(uuid.uuid4()))
    caller: str = "api"
    debug: bool = False
    metadata: dict[str, Any] = field(default_factory=dict)
