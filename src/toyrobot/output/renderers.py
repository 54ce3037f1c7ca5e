"""Operation-specific Rich renderers for ServiceResult.

Renderers are dispatched by ``result.op`` in :func:`render_result`.
Unknown ops fall through to the generic message renderer.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from rich.table import Table
from rich.text import Text

from toyrobot.output.console import create_console, get_output

if TYPE_CHECKING:
    from rich.console import Console

    from toyrobot.services.result import ServiceResult

# Ops whose successful results are still shown in --quiet mode.
QUIET_OPS = frozenset({"report", "help"})


def render_result(result: ServiceResult) -> str:
    """Render a ServiceResult to a styled string via Rich.

    Returns plain text (no ANSI) when Rich detects no terminal,
    which is the case inside Click's CliRunner and piped output.
    """
    console = create_console()
    if not result.ok:
        _render_error(result, console)
    elif result.rejected:
        console.print(Text(result.message, style="robot.rejected"))
    else:
        renderer = _OP_RENDERERS.get(result.op, _render_message)
        renderer(result, console)
    return get_output(console).rstrip("\n")


def render_quiet(result: ServiceResult) -> str | None:
    """Render for ``--quiet``: reports, rejections, and errors only."""
    if not result.ok or result.rejected or result.op in QUIET_OPS:
        return render_result(result)
    return None


# ── Renderers ─────────────────────────────────────────────────────────


def _render_message(result: ServiceResult, console: Console) -> None:
    console.print(Text(result.message))


def _render_help(result: ServiceResult, console: Console) -> None:
    console.print(Text(result.message, style="robot.ok"))
    table = Table(show_header=False, box=None, pad_edge=False)
    table.add_column("usage", style="robot.usage")
    table.add_column("summary", style="robot.summary")
    for entry in result.data.get("commands", []):
        table.add_row(entry["usage"], entry["summary"])
    console.print(table)
    console.print(Text("Prefix a command with '<name>: ' to address one robot.", style="dim"))


def _render_error(result: ServiceResult, console: Console) -> None:
    label = Text("ERROR", style="robot.error")
    body = Text(f" {result.op}: {result.message}")
    console.print(label, body, sep="")


_OP_RENDERERS = {
    "help": _render_help,
}
