"""
Error types raised by storefront code.

Two families matter to the admin backend: configuration problems (no
database configured, unknown ``DATABASE_MODE``) and problems the access
layer detects itself (the pool could not be created).  Each error carries an
:class:`ErrorCategory` and a ``retryable`` flag so the ops layer can build a
failure result without inspecting message text.

Driver exceptions (``asyncpg.PostgresError``, ``pymysql.err.*``) are left
alone: the access layer logs and re-raises them unchanged.

Hierarchy::

    StorefrontError
    ├── ConfigError                    CONFIG, never retryable
    │   ├── MissingConfigError(key)
    │   ├── InvalidConfigError(key, value)
    │   └── DatabaseNotConfiguredError
    └── DatabaseError                  DATABASE
        └── DatabaseConnectionError    retryable

Examples:
    >>> err = InvalidConfigError("DATABASE_MODE", "oracle")
    >>> err.category
    <ErrorCategory.CONFIG: 'CONFIG'>
    >>> err.retryable
    False
"""

from __future__ import annotations

from enum import Enum
from typing import Any


class ErrorCategory(str, Enum):
    """Coarse classification used in logs and failure results."""

    NETWORK = "NETWORK"
    DATABASE = "DATABASE"
    VALIDATION = "VALIDATION"
    CONFIG = "CONFIG"
    INTERNAL = "INTERNAL"
    UNKNOWN = "UNKNOWN"


class StorefrontError(Exception):
    """Base class for errors raised by storefront itself.

    ``category`` and ``retryable`` default to the class attributes and can
    be overridden per instance.  ``cause`` is chained as ``__cause__``.
    """

    category: ErrorCategory = ErrorCategory.INTERNAL
    retryable: bool = False

    def __init__(
        self,
        message: str,
        *,
        category: ErrorCategory | None = None,
        retryable: bool | None = None,
        details: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ):
        super().__init__(message)
        self.message = message
        if category is not None:
            self.category = category
        if retryable is not None:
            self.retryable = retryable
        self.details = dict(details or {})
        self.cause = cause
        if cause is not None:
            self.__cause__ = cause

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, category={self.category.value})"


# ── Configuration ────────────────────────────────────────────────────────


class ConfigError(StorefrontError):
    """The process is misconfigured; retrying will not help."""

    category = ErrorCategory.CONFIG


class MissingConfigError(ConfigError):
    def __init__(self, key: str, message: str | None = None):
        self.key = key
        super().__init__(message or f"Missing required configuration: {key}")


class InvalidConfigError(ConfigError):
    def __init__(self, key: str, value: Any, message: str | None = None):
        self.key = key
        self.value = value
        super().__init__(message or f"Invalid configuration for {key}: {value!r}")


class DatabaseNotConfiguredError(ConfigError):
    """No connection pool exists for the active dialect.

    The application starts without a database; this is raised at the
    first data access instead.
    """

    def __init__(self, message: str = "Database connection not configured"):
        super().__init__(message)


# ── Database ─────────────────────────────────────────────────────────────


class DatabaseError(StorefrontError):
    """A failure detected by the access layer (not a driver error)."""

    category = ErrorCategory.DATABASE


class DatabaseConnectionError(DatabaseError):
    """Creating the pool or reaching the server failed."""

    retryable = True


def is_retryable(error: Exception) -> bool:
    """Storefront errors answer for themselves; OS-level errors are retryable."""
    if isinstance(error, StorefrontError):
        return error.retryable
    return isinstance(error, OSError)


def categorize_error(error: Exception) -> ErrorCategory:
    if isinstance(error, StorefrontError):
        return error.category
    if isinstance(error, OSError):
        return ErrorCategory.NETWORK
    if isinstance(error, ValueError):
        return ErrorCategory.VALIDATION
    return ErrorCategory.UNKNOWN


__all__ = [
    "ErrorCategory",
    "StorefrontError",
    "ConfigError",
    "MissingConfigError",
    "InvalidConfigError",
    "DatabaseNotConfiguredError",
    "DatabaseError",
    "DatabaseConnectionError",
    "is_retryable",
    "categorize_error",
]
