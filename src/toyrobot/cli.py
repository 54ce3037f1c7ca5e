"""Root CLI group for toyrobot with global flags and command registration."""

from __future__ import annotations

import click

from toyrobot import __version__
from toyrobot.commands import register_commands
from toyrobot.commands._base import RobotGroup
from toyrobot.commands._context import AppContext
from toyrobot.config.settings import RobotSettings


@click.group(
    cls=RobotGroup,
    invoke_without_command=True,
    examples="""\
  toyrobot run moves.txt
  toyrobot -v run moves.txt
  toyrobot -c ./toyrobot.toml run
  toyrobot vocabulary""",
)
@click.version_option(version=__version__, prog_name="toyrobot")
@click.option("--json", "json_output", is_flag=True, help="One JSON object per result line.")
@click.option("-q", "--quiet", is_flag=True, help="Only reports, rejections, and errors.")
@click.option("-v", "--verbose", is_flag=True, help="Debug logging on stderr.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
@click.option("-c", "--config", "config_path", default=None, help="Override config file path.")
@click.pass_context
def cli(
    ctx: click.Context,
    json_output: bool,
    quiet: bool,
    verbose: bool,
    log_json: bool,
    config_path: str | None,
) -> None:
    """Drive toy robots around a table."""
    settings = RobotSettings.from_cli(
        config_path=config_path,
        json_output=json_output,
        quiet=quiet,
        verbose=verbose,
        log_json=log_json,
    )
    ctx.obj = AppContext(settings)
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


register_commands(cli)
