"""
Operation result envelope.

Operations never raise for expected outcomes.  They return an
:class:`OperationResult` that is either ``ok`` with a payload or ``fail``
with an :class:`OperationError`; the API maps the error code to an HTTP
status and the CLI to an exit code.

Error codes used by storefront:

    NOT_FOUND           the row does not exist (or a store's list is empty)
    VALIDATION_FAILED   a business rule rejected the input
    INTERNAL            the database failed or is not configured
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Any

from storefront.core.errors import ErrorCategory, StorefrontError, categorize_error, is_retryable


@dataclass(frozen=True, slots=True)
class OperationError:
    code: str
    message: str
    category: ErrorCategory | None = None
    details: dict[str, Any] = field(default_factory=dict)
    retryable: bool = False


@dataclass
class OperationResult[T]:
    """Success or failure of one operation, with its timing.

    Build instances with :meth:`ok` and :meth:`fail`.
    """

    success: bool
    data: T | None = None
    error: OperationError | None = None
    warnings: list[str] = field(default_factory=list)
    elapsed_ms: float = 0.0

    @classmethod
    def ok(cls, data: T, *, warnings: list[str] | None = None, elapsed_ms: float = 0.0) -> OperationResult[T]:
        return cls(success=True, data=data, warnings=list(warnings or []), elapsed_ms=elapsed_ms)

    @classmethod
    def fail(
        cls,
        code: str,
        message: str,
        *,
        category: ErrorCategory | None = None,
        details: dict[str, Any] | None = None,
        retryable: bool = False,
        elapsed_ms: float = 0.0,
    ) -> OperationResult[T]:
        error = OperationError(code, message, category, dict(details or {}), retryable)
        return cls(success=False, error=error, elapsed_ms=elapsed_ms)


def internal_error(action: str, exc: Exception, *, elapsed_ms: float = 0.0) -> OperationResult:
    """``INTERNAL`` failure for an exception raised while trying to *action*.

    A :class:`StorefrontError` keeps its own message ("Database connection
    not configured").  Anything else becomes "Failed to <action>" and the
    driver text is kept only in ``details["cause"]``.
    """
    message = exc.message if isinstance(exc, StorefrontError) else f"Failed to {action}"
    return OperationResult.fail(
        "INTERNAL",
        message,
        category=categorize_error(exc),
        details={"cause": str(exc)},
        retryable=is_retryable(exc),
        elapsed_ms=elapsed_ms,
    )


@dataclass
class Timer:
    started: float = field(default_factory=time.perf_counter)

    @property
    def elapsed_ms(self) -> float:
        return (time.perf_counter() - self.started) * 1000


def start_timer() -> Timer:
    return Timer()
