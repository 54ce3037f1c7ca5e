"""Index-based arena of addressable entities.

Ids are list positions and stay stable for the life of the world because
entities are never unregistered.  Name lookup is exact and case-sensitive.
"""

from __future__ import annotations

import logging
from collections.abc import Iterator
from typing import TYPE_CHECKING

from toyrobot.domain.errors import InvariantViolation, RegistrationError

if TYPE_CHECKING:
    from toyrobot.services.entities import Entity

logger = logging.getLogger(__name__)


class EntityRegistry:
    """Tracks live entities by id and by name, in registration order."""

    def __init__(self) -> None:
        self._entities: list[Entity] = []
        self._ids: dict[str, int] = {}

    def add(self, entity: Entity) -> int:
        """Register *entity* and return its id.

        Raises:
            RegistrationError: if the name is already registered.
        """
        if entity.name in self._ids:
            msg = f"An entity named {entity.name} already exists"
            raise RegistrationError(msg)
        entity_id = len(self._entities)
        self._entities.append(entity)
        self._ids[entity.name] = entity_id
        logger.debug("Registered %s as entity %d", entity.name, entity_id)
        return entity_id

    def get(self, entity_id: int) -> Entity:
        """Return the entity with *entity_id*; unknown ids are a defect."""
        if not 0 <= entity_id < len(self._entities):
            msg = f"No entity with id {entity_id}"
            raise InvariantViolation(msg)
        return self._entities[entity_id]

    def find_id(self, name: str) -> int | None:
        """Return the id registered under exactly *name*, or None."""
        return self._ids.get(name)

    def find(self, name: str) -> Entity | None:
        entity_id = self.find_id(name)
        return None if entity_id is None else self._entities[entity_id]

    def names(self) -> list[str]:
        return [entity.name for entity in self._entities]

    def __contains__(self, name: object) -> bool:
        return name in self._ids

    def __iter__(self) -> Iterator[Entity]:
        return iter(list(self._entities))

    def __len__(self) -> int:
        return len(self._entities)
