"""ServiceResult and ServiceError: the contract between services and interfaces.

INVARIANT: All service-layer methods return ServiceResult.
The CLI and any embedding application consume this type.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, Field


class ServiceError(BaseModel):
    """Structured error payload within a ServiceResult."""

    model_config = {"frozen": True}

    code: str
    message: str
    detail: dict[str, Any] = Field(default_factory=dict)


class ServiceResult(BaseModel):
    """Return type for all service operations.

    Attributes:
        ok: Whether the operation succeeded (for validation: everything valid).
        op: Name of the operation (e.g. ``"check_file"``).
        data: Operation-specific payload; populated on failure too, so
            invalid-field details reach the renderer.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
        meta: Optional metadata (counts, config in effect).
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
        cls,
        op: str,
        code: str,
        message: str,
        *,
        detail: dict[str, Any] | None = None,
        data: dict[str, Any] | None = None,
        meta: dict[str, Any] | None = None,
    ) -> ServiceResult:
        """Build an ``ok=False`` result carrying a ServiceError."""
        return cls(
            ok=False,
            op=op,
            data=data or {},
            error=ServiceError(code=code, message=message, detail=detail or {}),
            meta=meta,
        )
