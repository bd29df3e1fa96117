"""
Response envelopes shared by every router.

A 2xx response body is a :class:`SuccessResponse`; a 4xx/5xx body is a
:class:`ProblemDetail` (RFC 7807).  The admin dashboard reads ``data`` on
success and shows ``title`` in its error toast.
"""

from __future__ import annotations

from typing import Generic, TypeVar

from pydantic import BaseModel, Field

T = TypeVar("T")


class ProblemDetail(BaseModel):
    """RFC 7807 error body.

    Example::

        {"type": "about:blank", "title": "Store not found", "status": 404,
         "detail": "", "instance": ""}
    """

    type: str = "about:blank"
    title: str = Field(description="What went wrong, shown to the operator")
    status: int = Field(description="HTTP status code")
    detail: str = Field(default="", description="Underlying cause (debug mode only)")
    instance: str = Field(default="", description="Request URL, for unhandled errors")


class SuccessResponse(BaseModel, Generic[T]):
    data: T
    elapsed_ms: float = Field(default=0.0, description="Time spent in the operation")
    warnings: list[str] = Field(default_factory=list)
