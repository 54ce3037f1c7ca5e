"""The one owning context for a simulation run.

Holds the entity registry, the constraint engine, the dispatcher, the
table, and the optional plugin event bus.  Every entity is enrolled in
all three of registry, constraints, and dispatcher, in that order.
Build a fresh World per run (or per test); nothing here is global.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from toyrobot.domain.commands import Bounds
from toyrobot.domain.errors import RegistrationError
from toyrobot.services.constraints import ConstraintEngine
from toyrobot.services.dispatcher import Dispatcher
from toyrobot.services.entities import Entity, Robot, Table
from toyrobot.services.registry import EntityRegistry

if TYPE_CHECKING:
    from toyrobot.config.settings import RobotSettings
    from toyrobot.plugins.event_bus import EventBus

logger = logging.getLogger(__name__)

DEFAULT_BOUNDS = Bounds(xmin=0, ymin=0, xmax=10, ymax=10)


class World:
    """Registry, constraints, dispatcher, and the table, owned together."""

    def __init__(
        self,
        *,
        bounds: Bounds | None = None,
        events: EventBus | None = None,
    ) -> None:
        self.registry = EntityRegistry()
        self.constraints = ConstraintEngine()
        self.dispatcher = Dispatcher(self.registry)
        self.events = events
        self.table = Table(bounds or DEFAULT_BOUNDS, self.constraints, events)
        self._enroll(self.table)

    @classmethod
    def from_settings(cls, settings: RobotSettings) -> World:
        """Build the startup world: the table, the configured robots, plugin voters."""
        events: EventBus | None = None
        voters: list[Any] = []
        if settings.plugins.enabled:
            from toyrobot.plugins.event_bus import EventBus
            from toyrobot.plugins.manager import PluginManager

            pm = PluginManager()
            names = pm.discover_and_load(local_dir=settings.plugins.local_dir)
            if names:
                logger.debug("Loaded plugins: %s", ", ".join(names))
            events = EventBus(pm)
            voters = pm.constraint_voters()

        world = cls(bounds=Bounds(**settings.table.model_dump()), events=events)
        for name in settings.world.robots:
            world.create_robot(name)
        for voter in voters:
            world.constraints.register_voter(voter)
        return world

    # ------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------

    def create_robot(self, name: str, warnings: list[str] | None = None) -> Robot:
        """Create a robot and enroll it everywhere.

        A failed ``post_create_robot`` hook is appended to *warnings*.

        Raises:
            RegistrationError: if an entity with *name* already exists.
        """
        if name in self.registry:
            msg = f"Robot {name} already exists"
            raise RegistrationError(msg)
        robot = Robot(name, self.constraints, self.events)
        self._enroll(robot)
        logger.debug("Created robot %s", name)
        if self.events is not None:
            delivered = self.events.dispatch("post_create_robot", {"name": name})
            if not delivered and warnings is not None:
                warnings.append("Event dispatch failed for post_create_robot")
        return robot

    def robot(self, name: str) -> Robot | None:
        entity = self.registry.find(name)
        return entity if isinstance(entity, Robot) else None

    @property
    def robots(self) -> list[Robot]:
        return [entity for entity in self.registry if isinstance(entity, Robot)]

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _enroll(self, entity: Entity) -> int:
        entity_id = self.registry.add(entity)
        self.constraints.register(entity.name, entity.vote)
        self.dispatcher.subscribe(entity)
        return entity_id
