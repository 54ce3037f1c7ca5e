"""Shared service-layer helper functions."""

from __future__ import annotations

from typing import Any

from toyrobot.domain.errors import CommandError
from toyrobot.services.result import ServiceError, ServiceResult


def ok_result(
    op: str,
    message: str,
    *,
    warnings: list[str] | None = None,
    **data: Any,
) -> ServiceResult:
    """Successful result whose human form is *message*."""
    return ServiceResult(
        ok=True,
        op=op,
        data={"message": message, **data},
        warnings=warnings or [],
    )


def rejected_result(op: str, message: str, **data: Any) -> ServiceResult:
    """A constraint rejection: informational, state unchanged."""
    return ok_result(op, message, rejected=True, **data)


def error_result(op: str, code: str, message: str, **detail: Any) -> ServiceResult:
    """Failed result carrying a ServiceError."""
    return ServiceResult(
        ok=False,
        op=op,
        error=ServiceError(code=code, message=message, detail=detail),
    )


def result_from_error(op: str, exc: CommandError, **detail: Any) -> ServiceResult:
    """Convert a recoverable exception into a failed result.

    Direction errors keep the offending token and the requesting verb.
    """
    token = getattr(exc, "token", None)
    if token is not None:
        detail.setdefault("token", token)
        detail.setdefault("verb", getattr(exc, "verb", ""))
    return error_result(op, exc.code, str(exc), **detail)
