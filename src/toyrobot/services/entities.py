"""Robots and the table.

Every entity carries two capabilities:

- ``respond(command)``: act on a command addressed or broadcast to it.
- ``vote(candidate, proposal)``: approve or veto another entity's
  proposed state, from this entity's own perspective.

Robots consult the :class:`ConstraintEngine` before every placement or
move and mutate state only on approval.  Rotation never changes position
and is never checked.  Table resizing is unconditional: robots stranded
outside new bounds stay where they are.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import TYPE_CHECKING, Any, ClassVar

from toyrobot.domain import direction as compass
from toyrobot.domain.commands import Bounds, Command, Verb
from toyrobot.domain.direction import Direction
from toyrobot.domain.errors import ParseError, UnsupportedCommandError
from toyrobot.services._helpers import error_result, ok_result, rejected_result

if TYPE_CHECKING:
    from toyrobot.plugins.event_bus import EventBus
    from toyrobot.services.constraints import ConstraintEngine, Proposal
    from toyrobot.services.result import ServiceResult

logger = logging.getLogger(__name__)

TABLE_NAME = "Table"

Handler = Callable[[Command], "ServiceResult"]


class Entity(ABC):
    """Abstract base for anything that responds to commands and votes."""

    verbs: ClassVar[frozenset[Verb]] = frozenset()

    def __init__(
        self,
        name: str,
        constraints: ConstraintEngine,
        events: EventBus | None = None,
    ) -> None:
        self._name = name
        self._constraints = constraints
        self._events = events

    @property
    def name(self) -> str:
        return self._name

    def handles(self, verb: Verb) -> bool:
        return verb in self.verbs

    def respond(self, command: Command) -> ServiceResult:
        """Apply *command* and return its outcome.

        Raises:
            UnsupportedCommandError: if this entity has no handler for the verb.
        """
        handler = self._handlers().get(command.verb)
        if handler is None:
            msg = f"{self.name} does not know how to {command.verb}"
            raise UnsupportedCommandError(msg)
        return handler(command)

    @abstractmethod
    def vote(self, candidate: Entity, proposal: Proposal) -> bool:
        """Approve (True) or veto (False) *candidate* adopting *proposal*."""
        ...

    @abstractmethod
    def report(self) -> ServiceResult:
        """Describe current state without changing it."""
        ...

    @abstractmethod
    def _handlers(self) -> dict[Verb, Handler]: ...

    def _dispatch_event(self, hook_name: str, payload: dict[str, Any], warnings: list[str]) -> None:
        """Fire a lifecycle event. No-op without an event bus.

        INVARIANT: Plugin failures are warnings, never errors.
        """
        if self._events is None:
            return
        if not self._events.dispatch(hook_name, payload):
            warnings.append(f"Event dispatch failed for {hook_name}")

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.name!r})"


class Robot(Entity):
    """A movable robot.

    States: Unplaced (``on_table`` False, facing ``INVALID``) and
    Placed(x, y, facing).  ``x`` and ``y`` are meaningful only while placed.
    """

    verbs = frozenset({Verb.PLACE, Verb.MOVE, Verb.LEFT, Verb.RIGHT, Verb.REPORT, Verb.REMOVE})

    def __init__(
        self,
        name: str,
        constraints: ConstraintEngine,
        events: EventBus | None = None,
    ) -> None:
        super().__init__(name, constraints, events)
        self._x = -1
        self._y = -1
        self._facing = Direction.INVALID
        self._on_table = False

    @property
    def x(self) -> int:
        return self._x

    @property
    def y(self) -> int:
        return self._y

    @property
    def facing(self) -> Direction:
        return self._facing

    @property
    def on_table(self) -> bool:
        return self._on_table

    def _state(self) -> dict[str, Any]:
        state: dict[str, Any] = {"entity": self.name, "on_table": self._on_table}
        if self._on_table:
            state.update(x=self._x, y=self._y, facing=str(self._facing))
        return state

    # ------------------------------------------------------------------
    # Transitions
    # ------------------------------------------------------------------

    def place(self, x: int, y: int, facing: Direction) -> ServiceResult:
        """Enter Placed(x, y, facing) from any state, if the world agrees."""
        if not self._constraints.acceptable(self, x, y, facing, on_table=True):
            return rejected_result(
                "place",
                f"Cannot place Robot {self.name} at ( {x}, {y} ), ignored",
                **self._state(),
            )
        self._x, self._y, self._facing = x, y, facing
        self._on_table = True
        warnings: list[str] = []
        self._dispatch_event(
            "post_place",
            {"name": self.name, "x": x, "y": y, "facing": str(facing)},
            warnings,
        )
        return self._report_result("place", warnings)

    def move(self) -> ServiceResult:
        """Step one cell forward, if the world agrees."""
        if not self._on_table:
            return rejected_result(
                "move", f"Cannot move Robot {self.name} when not on table", **self._state()
            )
        new_x, new_y = compass.step(self._facing, self._x, self._y)
        if not self._constraints.acceptable(self, new_x, new_y, self._facing, on_table=True):
            return rejected_result(
                "move",
                f"Cannot move Robot {self.name} to ( {new_x}, {new_y} ), ignored",
                **self._state(),
            )
        self._x, self._y = new_x, new_y
        warnings: list[str] = []
        self._dispatch_event(
            "post_move",
            {"name": self.name, "x": new_x, "y": new_y, "facing": str(self._facing)},
            warnings,
        )
        return self._report_result("move", warnings)

    def left(self) -> ServiceResult:
        return self._turn("left", compass.left)

    def right(self) -> ServiceResult:
        return self._turn("right", compass.right)

    def _turn(self, op: str, rotate: Callable[[Direction], Direction]) -> ServiceResult:
        if not self._on_table:
            return rejected_result(
                op, f"Cannot turn Robot {self.name} {op} when not on table", **self._state()
            )
        self._facing = rotate(self._facing)
        warnings: list[str] = []
        self._dispatch_event(
            "post_turn", {"name": self.name, "facing": str(self._facing)}, warnings
        )
        return self._report_result(op, warnings)

    def remove(self) -> ServiceResult:
        """Unconditionally return to Unplaced."""
        self._on_table = False
        self._facing = Direction.INVALID
        warnings: list[str] = []
        self._dispatch_event("post_remove", {"name": self.name}, warnings)
        return self._report_result("remove", warnings)

    def report(self) -> ServiceResult:
        return self._report_result("report")

    def _report_result(self, op: str, warnings: list[str] | None = None) -> ServiceResult:
        if self._on_table:
            message = f"{self.name} is at ( {self._x}, {self._y} ) facing {self._facing}"
        else:
            message = f"{self.name} is not on the table"
        return ok_result(op, message, warnings=warnings, **self._state())

    # ------------------------------------------------------------------
    # Capabilities
    # ------------------------------------------------------------------

    def vote(self, candidate: Entity, proposal: Proposal) -> bool:
        """Veto only a proposal landing exactly on this robot's cell."""
        if candidate is self or not self._on_table or not proposal.on_table:
            return True
        return (proposal.x, proposal.y) != (self._x, self._y)

    def _handlers(self) -> dict[Verb, Handler]:
        return {
            Verb.PLACE: self._on_place,
            Verb.MOVE: lambda _command: self.move(),
            Verb.LEFT: lambda _command: self.left(),
            Verb.RIGHT: lambda _command: self.right(),
            Verb.REPORT: lambda _command: self.report(),
            Verb.REMOVE: lambda _command: self.remove(),
        }

    def _on_place(self, command: Command) -> ServiceResult:
        if command.placement is None:
            raise ParseError("place needs <x> <y> <direction>")
        p = command.placement
        return self.place(p.x, p.y, p.direction)


class Table(Entity):
    """The table surface: a half-open rectangle of valid cells."""

    verbs = frozenset({Verb.TABLE, Verb.REPORT})

    def __init__(
        self,
        bounds: Bounds,
        constraints: ConstraintEngine,
        events: EventBus | None = None,
        *,
        name: str = TABLE_NAME,
    ) -> None:
        super().__init__(name, constraints, events)
        self._bounds = bounds

    @property
    def bounds(self) -> Bounds:
        return self._bounds

    def resize(self, bounds: Bounds) -> ServiceResult:
        """Replace the bounds. Robots outside the new bounds are left alone."""
        if bounds.is_empty:
            return error_result(
                "table",
                "INVALID_BOUNDS",
                f"Invalid table co-ordinates {_describe(bounds)}",
                **bounds.model_dump(),
            )
        self._bounds = bounds
        logger.debug("Table resized to %s", _describe(bounds))
        warnings: list[str] = []
        self._dispatch_event("post_table_resize", bounds.model_dump(), warnings)
        return self._report_result("table", warnings)

    def report(self) -> ServiceResult:
        return self._report_result("report")

    def _report_result(self, op: str, warnings: list[str] | None = None) -> ServiceResult:
        return ok_result(
            op,
            f"{self.name} is at {_describe(self._bounds)}",
            warnings=warnings,
            entity=self.name,
            **self._bounds.model_dump(),
        )

    def vote(self, candidate: Entity, proposal: Proposal) -> bool:
        """Veto an on-table proposal outside the bounds."""
        if candidate is self or not proposal.on_table:
            return True
        return self._bounds.contains(proposal.x, proposal.y)

    def _handlers(self) -> dict[Verb, Handler]:
        return {
            Verb.TABLE: self._on_table_command,
            Verb.REPORT: lambda _command: self.report(),
        }

    def _on_table_command(self, command: Command) -> ServiceResult:
        if command.bounds is None:
            raise ParseError("table needs <xmin> <ymin> <xmax> <ymax>")
        return self.resize(command.bounds)


def _describe(bounds: Bounds) -> str:
    return f"[ ( {bounds.xmin}, {bounds.ymin} ), ( {bounds.xmax}, {bounds.ymax} ) ]"
