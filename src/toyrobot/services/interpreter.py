"""The run loop.

Pulls one line at a time, parses it, and then:

- ``quit`` says goodbye and stops; remaining input is abandoned.
- ``help`` lists the vocabulary.
- ``create`` builds robots in the world instead of being dispatched.
- everything else goes to the dispatcher.

A bad line is reported and the loop carries on with the next one.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import TYPE_CHECKING

from toyrobot.domain.commands import VERB_USAGE, Command, Verb
from toyrobot.domain.errors import CommandError
from toyrobot.services._helpers import ok_result, result_from_error
from toyrobot.services.parser import CommandParser

if TYPE_CHECKING:
    from toyrobot.services.result import ServiceResult
    from toyrobot.services.world import World

logger = logging.getLogger(__name__)

Sink = Callable[["ServiceResult"], None]


@dataclass
class RunSummary:
    """What happened during one :meth:`Interpreter.run`."""

    lines: int = 0
    errors: int = 0
    quit: bool = False


class Interpreter:
    """Feeds lines through the parser into the world.

    Parameters:
        world: The world commands act upon.
        parser: Defaults to a parser over the world's registry.
        sink: Receives every result as it is produced (e.g. for printing).
    """

    def __init__(
        self,
        world: World,
        parser: CommandParser | None = None,
        *,
        sink: Sink | None = None,
    ) -> None:
        self._world = world
        self._parser = parser or CommandParser(world.registry)
        self._sink = sink
        self._finished = False

    @property
    def finished(self) -> bool:
        """True once ``quit`` has been interpreted."""
        return self._finished

    def run(self, lines: Iterable[str]) -> RunSummary:
        """Interpret *lines* until exhausted or ``quit``."""
        summary = RunSummary()
        for line in lines:
            summary.lines += 1
            for result in self.execute(line):
                if not result.ok:
                    summary.errors += 1
                if self._sink is not None:
                    self._sink(result)
            if self._finished:
                summary.quit = True
                break
        logger.debug(
            "Run finished: %d lines, %d errors, quit=%s",
            summary.lines,
            summary.errors,
            summary.quit,
        )
        return summary

    def execute(self, line: str) -> list[ServiceResult]:
        """Parse and handle one line. Recoverable errors become results."""
        try:
            command = self._parser.parse(line)
        except CommandError as exc:
            logger.debug("Could not parse %r: %s", line, exc)
            return [result_from_error("parse", exc, line=line)]
        return self.handle(command)

    def handle(self, command: Command) -> list[ServiceResult]:
        if command.verb is Verb.QUIT:
            self._finished = True
            return [ok_result("quit", "Bye!")]
        if command.verb is Verb.HELP:
            return [self.help()]
        if command.verb is Verb.CREATE:
            return [self._create(name) for name in command.names]
        return self._world.dispatcher.dispatch(command)

    def help(self) -> ServiceResult:
        return vocabulary_result(self._parser.vocabulary)

    def _create(self, name: str) -> ServiceResult:
        warnings: list[str] = []
        try:
            robot = self._world.create_robot(name, warnings)
        except CommandError as exc:
            return result_from_error("create", exc, name=name)
        return ok_result(
            "create", f"Created Robot {robot.name}", warnings=warnings, entity=robot.name
        )


def vocabulary_result(verbs: Iterable[Verb]) -> ServiceResult:
    """List *verbs* with their grammar, as the ``help`` verb shows them."""
    commands = [
        {"verb": str(verb), "usage": VERB_USAGE[verb][0], "summary": VERB_USAGE[verb][1]}
        for verb in verbs
    ]
    return ok_result("help", "Valid commands are:", commands=commands)
