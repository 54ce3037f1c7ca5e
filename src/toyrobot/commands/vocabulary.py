"""Command: list the verbs the interpreter accepts."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from toyrobot.commands._base import RobotCommand

if TYPE_CHECKING:
    from toyrobot.commands._context import AppContext


@click.command(
    cls=RobotCommand,
    examples="""\
  toyrobot vocabulary
  toyrobot --json vocabulary""",
)
@click.pass_obj
def vocabulary(app: AppContext) -> None:
    """List the accepted commands and their grammar."""
    from toyrobot.domain.commands import resolve_vocabulary
    from toyrobot.services.interpreter import vocabulary_result

    app.emit(vocabulary_result(resolve_vocabulary(app.settings.parser.vocabulary)))
