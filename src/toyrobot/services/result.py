"""ServiceResult and ServiceError — the universal result contract.

INVARIANT: Every entity response and run-loop step returns ServiceResult.
The CLI formatters are the only consumers that turn them into text.
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
    """Universal return type for simulator operations.

    Attributes:
        ok: Whether the operation succeeded.  A constraint rejection is
            still ``ok``; it carries ``data["rejected"] = True``.
        op: Name of the operation (the verb, or ``"parse"``/``"run"``).
        data: Operation-specific payload; always holds ``message`` for
            human output.
        warnings: Non-fatal issues encountered during the operation.
        error: Structured error if ``ok`` is False.
    """

    model_config = {"frozen": True}

    ok: bool
    op: str
    data: dict[str, Any] = Field(default_factory=dict)
    warnings: list[str] = Field(default_factory=list)
    error: ServiceError | None = None

    @property
    def message(self) -> str:
        if self.error is not None:
            return self.error.message
        return str(self.data.get("message", ""))

    @property
    def rejected(self) -> bool:
        return bool(self.data.get("rejected", False))
