"""Route a Command to one entity or broadcast it to all.

Broadcast delivery follows listener-registration order and is total: a
recoverable error from one listener becomes an error result for that
listener and delivery carries on with the rest.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from toyrobot.domain.errors import CommandError
from toyrobot.services._helpers import result_from_error

if TYPE_CHECKING:
    from toyrobot.domain.commands import Command
    from toyrobot.services.entities import Entity
    from toyrobot.services.registry import EntityRegistry
    from toyrobot.services.result import ServiceResult

logger = logging.getLogger(__name__)


class Dispatcher:
    """Holds the command listeners and delivers commands to them."""

    def __init__(self, registry: EntityRegistry) -> None:
        self._registry = registry
        self._listeners: list[Entity] = []

    def subscribe(self, entity: Entity) -> None:
        self._listeners.append(entity)

    @property
    def listeners(self) -> list[Entity]:
        return list(self._listeners)

    def dispatch(self, command: Command) -> list[ServiceResult]:
        """Deliver *command* and collect one result per recipient.

        An explicitly targeted entity always receives the command, and
        answers with an error if it does not handle the verb.  Broadcast
        listeners that do not handle the verb are skipped.
        """
        if command.target is not None:
            return [self._deliver(self._registry.get(command.target), command)]

        results: list[ServiceResult] = []
        for listener in self._listeners:
            if listener.handles(command.verb):
                results.append(self._deliver(listener, command))
        if not results:
            logger.debug("No listener handled %s", command.verb)
        return results

    @staticmethod
    def _deliver(entity: Entity, command: Command) -> ServiceResult:
        try:
            return entity.respond(command)
        except CommandError as exc:
            logger.debug("%s rejected %s: %s", entity.name, command.verb, exc)
            return result_from_error(str(command.verb), exc, entity=entity.name)
