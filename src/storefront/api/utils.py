"""
Shared API router utilities.

- ``_dc()`` — convert a dataclass or dict to a plain dict
- ``_handle_error()`` — convert a failed OperationResult to a ``problem_response``
- ``_success()`` — wrap an ops payload in the ``SuccessResponse`` envelope

Tags:
    api, utils, shared, dataclass-conversion
"""

from __future__ import annotations

from dataclasses import asdict
from typing import Any

from storefront.api.middleware.errors import problem_response, status_for_error_code
from storefront.api.schemas.common import SuccessResponse


def _dc(obj: Any) -> dict[str, Any]:
    """Convert a dataclass (or dict) to a plain dict.

    Returns an empty dict for objects that are neither dataclasses nor dicts.
    """
    if hasattr(obj, "__dataclass_fields__"):
        return asdict(obj)
    return obj if isinstance(obj, dict) else {}


def _handle_error(result, ctx):
    """Convert a failed ``OperationResult`` into a Problem Details response.

    The underlying cause of an ``INTERNAL`` failure is only exposed when the
    request context was built with ``debug`` on.
    """
    code = result.error.code if result.error else "INTERNAL"
    detail = ""
    if result.error and ctx.debug:
        detail = str(result.error.details.get("cause", ""))
    return problem_response(
        status=status_for_error_code(code),
        title=result.error.message if result.error else "Operation failed",
        detail=detail,
    )


def _success(result) -> SuccessResponse:
    data = result.data
    payload = [_dc(item) for item in data] if isinstance(data, list) else _dc(data)
    return SuccessResponse(data=payload, elapsed_ms=round(result.elapsed_ms, 2), warnings=result.warnings)
