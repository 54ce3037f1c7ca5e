"""Compass directions and the arithmetic around them.

``Direction.INVALID`` is a sentinel for "never placed" or "failed to
parse"; only the four compass values are valid facings.
"""

from __future__ import annotations

from enum import StrEnum

from toyrobot.domain.errors import InvalidDirectionError, InvariantViolation


class Direction(StrEnum):
    """Facing of a robot. The value is the textual form used in reports."""

    INVALID = "Invalid"
    NORTH = "North"
    EAST = "East"
    SOUTH = "South"
    WEST = "West"


COMPASS: tuple[Direction, ...] = (
    Direction.NORTH,
    Direction.EAST,
    Direction.SOUTH,
    Direction.WEST,
)

# Accepted spellings, matched case-insensitively.
_ALIASES: dict[str, Direction] = {
    "n": Direction.NORTH,
    "north": Direction.NORTH,
    "e": Direction.EAST,
    "east": Direction.EAST,
    "s": Direction.SOUTH,
    "south": Direction.SOUTH,
    "w": Direction.WEST,
    "west": Direction.WEST,
}

_OFFSETS: dict[Direction, tuple[int, int]] = {
    Direction.NORTH: (0, 1),
    Direction.EAST: (1, 0),
    Direction.SOUTH: (0, -1),
    Direction.WEST: (-1, 0),
}


def is_valid(direction: Direction) -> bool:
    """Return True for the four compass values, False for the sentinel."""
    return direction in _OFFSETS


def to_text(direction: Direction) -> str:
    """Textual form, e.g. ``"North"``."""
    return direction.value


def parse_direction(token: str, verb: str = "place") -> Direction:
    """Parse *token* (``n``, ``North``, ``WEST``...) into a compass Direction.

    Raises:
        InvalidDirectionError: if *token* is not a recognised spelling.
            The error carries the token and the *verb* that asked for it.
    """
    try:
        return _ALIASES[token.strip().lower()]
    except KeyError:
        raise InvalidDirectionError(token, verb) from None


def _require_valid(direction: Direction) -> None:
    if not is_valid(direction):
        msg = f"No compass arithmetic for {direction!r}"
        raise InvariantViolation(msg)


def left(direction: Direction) -> Direction:
    """Rotate 90 degrees anticlockwise: N -> W -> S -> E -> N."""
    _require_valid(direction)
    return COMPASS[(COMPASS.index(direction) - 1) % len(COMPASS)]


def right(direction: Direction) -> Direction:
    """Rotate 90 degrees clockwise: N -> E -> S -> W -> N."""
    _require_valid(direction)
    return COMPASS[(COMPASS.index(direction) + 1) % len(COMPASS)]


def step(direction: Direction, x: int, y: int) -> tuple[int, int]:
    """Return the cell one step from ``(x, y)`` in *direction*."""
    _require_valid(direction)
    dx, dy = _OFFSETS[direction]
    return x + dx, y + dy
