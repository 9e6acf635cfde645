"""Result envelope returned by every valobj service call.

INVARIANT: services never raise for bad input; they answer with
``ok=False`` and a :class:`ServiceError` carrying a machine-readable code.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Why an operation failed: ``code`` for machines, ``message`` for people."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Outcome of one codec operation.

    Attributes:
        ok: Whether the operation succeeded.
        op: ``"build"``, ``"encode"`` or ``"decode"``.
        data: ``{"value": ...}`` on success.
        warnings: Non-fatal notes, such as keys dropped by a lenient decode.
        error: Set exactly when ``ok`` is False.
        meta: ``{"duration_ms": float}`` once the operation has been timed.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None
    meta: dict[str, Any] | None = None

    @classmethod
    def failure(
        cls, op: str, code: str, message: str, **detail: Any
    ) -> ServiceResult:
        return cls(
            ok=False,
            op=op,
            error=ServiceError(code=code, message=message, detail=detail),
        )
