"""Output mode selection for ServiceResult.

The CLI renders results for humans (Rich), for scripts (``--quiet``), or
for machines (``--json``, one JSON object per line).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from pydantic import BaseModel

from toyrobot.output.renderers import render_quiet, render_result

if TYPE_CHECKING:
    from toyrobot.services.result import ServiceResult


class OutputSettings(BaseModel):
    """Output mode flags, frozen after construction."""

    model_config = {"frozen": True}

    json_output: bool = False
    quiet: bool = False


def format_result(
    result: ServiceResult,
    *,
    settings: OutputSettings | None = None,
) -> str | None:
    """Format a ServiceResult for display.

    Returns None when the current mode suppresses this result.
    """
    settings = settings or OutputSettings()
    if settings.json_output:
        return result.model_dump_json()
    if settings.quiet:
        return render_quiet(result)
    return render_result(result)
