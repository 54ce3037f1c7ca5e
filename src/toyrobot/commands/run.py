"""Command: interpret robot commands from files or stdin."""

from __future__ import annotations

import functools
from collections.abc import Callable
from pathlib import Path
from typing import TYPE_CHECKING

import click

from toyrobot.commands._base import RobotCommand

if TYPE_CHECKING:
    from toyrobot.commands._context import AppContext


@click.command(
    cls=RobotCommand,
    examples="""\
  toyrobot run moves.txt
  toyrobot run setup.txt moves.txt
  printf 'place 0 0 N\\nmove\\nreport\\n' | toyrobot run
  toyrobot --quiet run moves.txt
  toyrobot --json run moves.txt""",
)
@click.argument("files", nargs=-1, type=click.Path(dir_okay=False, path_type=Path))
@click.pass_obj
def run(app: AppContext, files: tuple[Path, ...]) -> None:
    """Interpret commands from FILES in order, or from stdin when none are given.

    World state carries over from one file to the next; ``quit`` stops
    reading altogether.
    """
    from toyrobot.domain.errors import RegistrationError, StartupError
    from toyrobot.infrastructure.line_source import iter_command_lines, iter_file_lines
    from toyrobot.services._helpers import error_result
    from toyrobot.services.interpreter import Interpreter

    try:
        world = app.build_world()
    except RegistrationError as exc:
        app.emit(error_result("run", "STARTUP_ERROR", str(exc)))
        return
    interpreter = Interpreter(world, app.build_parser(world), sink=app.echo)

    if files:
        lines = iter_file_lines(files)
    else:
        stdin = click.get_text_stream("stdin")
        prompt: Callable[[], None] | None = None
        if stdin.isatty():
            if app.settings.interpreter.banner:
                app.echo(interpreter.help())
            prompt = functools.partial(click.echo, app.settings.interpreter.prompt, nl=False)

        lines = iter_command_lines(stdin, prompt=prompt)

    try:
        interpreter.run(lines)
    except StartupError as exc:
        app.emit(error_result("run", "STARTUP_ERROR", str(exc)))
