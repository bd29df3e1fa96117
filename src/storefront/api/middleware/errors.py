"""
Error responses: ops error codes to HTTP statuses, and the catch-all
handler for exceptions that escape a route.
"""

from __future__ import annotations

from fastapi import Request
from fastapi.responses import JSONResponse

from storefront.api.schemas.common import ProblemDetail
from storefront.core.logging import get_logger

logger = get_logger(__name__)

ERROR_CODE_TO_STATUS: dict[str, int] = {
    "VALIDATION_FAILED": 400,
    "NOT_FOUND": 404,
    "INTERNAL": 500,
}


def status_for_error_code(code: str) -> int:
    """HTTP status for an ops error code; unknown codes are 500."""
    return ERROR_CODE_TO_STATUS.get(code, 500)


def problem_response(*, status: int, title: str, detail: str = "", instance: str = "") -> JSONResponse:
    body = ProblemDetail(title=title, status=status, detail=detail, instance=instance)
    return JSONResponse(status_code=status, content=body.model_dump())


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    """500 for anything a route did not turn into an ``OperationResult``."""
    logger.exception("unhandled_exception", path=request.url.path, error=str(exc))
    settings = getattr(request.app.state, "settings", None)
    show_cause = bool(settings is not None and settings.debug)
    return problem_response(
        status=500,
        title="Internal Server Error",
        detail=str(exc) if show_cause else "An unexpected error occurred.",
        instance=str(request.url),
    )
