"""Verbs, the default vocabulary, and the immutable Command value.

A Command is created by the parser for one input line, consumed once by
the dispatcher (or the run loop), then discarded.
"""

from __future__ import annotations

from collections.abc import Iterable
from enum import StrEnum

from pydantic import BaseModel

from toyrobot.domain.direction import Direction


class Verb(StrEnum):
    """Every verb the interpreter understands."""

    CREATE = "create"
    TABLE = "table"
    PLACE = "place"
    MOVE = "move"
    LEFT = "left"
    RIGHT = "right"
    REPORT = "report"
    REMOVE = "remove"
    HELP = "help"
    QUIT = "quit"


DEFAULT_VOCABULARY: frozenset[Verb] = frozenset(Verb)

# Verbs the run loop always needs, whatever vocabulary is configured.
CONTROL_VERBS: frozenset[Verb] = frozenset({Verb.HELP, Verb.QUIT})


# Grammar and one-line description per verb, in help order.
VERB_USAGE: dict[Verb, tuple[str, str]] = {
    Verb.CREATE: ("create <name>...", "Create one or more robots."),
    Verb.TABLE: ("table <xmin> <ymin> <xmax> <ymax>", "Redefine the table bounds."),
    Verb.PLACE: ("place <x> <y> <direction>", "Put a robot on the table."),
    Verb.MOVE: ("move", "Step one cell forward."),
    Verb.LEFT: ("left", "Turn 90 degrees anticlockwise."),
    Verb.RIGHT: ("right", "Turn 90 degrees clockwise."),
    Verb.REPORT: ("report", "Show position and facing."),
    Verb.REMOVE: ("remove", "Take a robot off the table."),
    Verb.HELP: ("help", "List the valid commands."),
    Verb.QUIT: ("quit", "Stop reading commands."),
}


def resolve_vocabulary(verbs: Iterable[Verb | str]) -> list[Verb]:
    """Normalise a configured vocabulary: declaration order, control verbs always present."""
    wanted = {Verb(v) for v in verbs} | CONTROL_VERBS
    return [verb for verb in Verb if verb in wanted]


class Placement(BaseModel):
    """Arguments of ``place``."""

    model_config = {"frozen": True}

    x: int
    y: int
    direction: Direction


class Bounds(BaseModel):
    """Arguments of ``table``: half-open on the max side."""

    model_config = {"frozen": True}

    xmin: int
    ymin: int
    xmax: int
    ymax: int

    @property
    def is_empty(self) -> bool:
        return self.xmin >= self.xmax or self.ymin >= self.ymax

    def contains(self, x: int, y: int) -> bool:
        return self.xmin <= x < self.xmax and self.ymin <= y < self.ymax


class Command(BaseModel):
    """One parsed instruction.

    Attributes:
        verb: The lowercased verb.
        text: Raw argument text following the verb.
        target: Registry id of the explicitly addressed entity, or None to
            broadcast.
        placement: Parsed ``place`` arguments.
        bounds: Parsed ``table`` arguments.
        names: Parsed ``create`` arguments.
    """

    model_config = {"frozen": True}

    verb: Verb
    text: str = ""
    target: int | None = None
    placement: Placement | None = None
    bounds: Bounds | None = None
    names: tuple[str, ...] = ()

    @property
    def is_targeted(self) -> bool:
        return self.target is not None
