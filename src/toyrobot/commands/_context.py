"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``.  Builds the world and parser from settings and
centralizes result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from toyrobot.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from toyrobot.config.settings import RobotSettings
    from toyrobot.services.parser import CommandParser
    from toyrobot.services.result import ServiceResult
    from toyrobot.services.world import World


class AppContext:
    """Shared context flowing through Click's command hierarchy."""

    def __init__(self, settings: RobotSettings) -> None:
        self.settings = settings
        self.output = OutputSettings(json_output=settings.json_output, quiet=settings.quiet)

        from toyrobot.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def build_world(self) -> World:
        """A fresh world: table, configured robots, plugin voters."""
        from toyrobot.services.world import World

        return World.from_settings(self.settings)

    def build_parser(self, world: World) -> CommandParser:
        from toyrobot.services.parser import CommandParser

        return CommandParser(
            world.registry,
            self.settings.parser.vocabulary,
            strict_numbers=self.settings.parser.strict_numbers,
        )

    def echo(self, result: ServiceResult) -> None:
        """Write one result without ending the process.

        Successes go to stdout, failures to stderr.  Warnings go to stderr
        so they don't pollute piped output (JSON mode already carries them).
        """
        output = format_result(result, settings=self.output)
        if output is not None:
            click.echo(output, err=not result.ok)
        if not self.output.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)

    def emit(self, result: ServiceResult) -> None:
        """Write a final result; a failure exits with code 1."""
        self.echo(result)
        if not result.ok:
            raise SystemExit(1)
