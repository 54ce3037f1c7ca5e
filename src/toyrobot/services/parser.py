"""Parse one raw text line into one Command.

Grammar::

    [ <name>: ] <verb> [ <arguments> ]

The verb is matched case-insensitively against an injectable vocabulary.
The optional ``<name>:`` prefix is resolved against the entity registry
by exact, case-sensitive name; an unknown name leaves the colon-bearing
token in place as the verb, which then fails vocabulary validation.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable
from typing import TYPE_CHECKING

from toyrobot.domain.commands import (
    DEFAULT_VOCABULARY,
    Bounds,
    Command,
    Placement,
    Verb,
    resolve_vocabulary,
)
from toyrobot.domain.direction import parse_direction
from toyrobot.domain.errors import ParseError

if TYPE_CHECKING:
    from toyrobot.services.registry import EntityRegistry

logger = logging.getLogger(__name__)

# Arguments split on runs of whitespace and commas: "place 1, 2,NORTH".
_ARG_SPLIT = re.compile(r"[\s,]+")

_NO_ARGUMENT_VERBS = frozenset(
    {Verb.MOVE, Verb.LEFT, Verb.RIGHT, Verb.REPORT, Verb.REMOVE, Verb.HELP, Verb.QUIT}
)


def split_arguments(text: str) -> list[str]:
    """Tokenize argument text, skipping empty tokens."""
    return [token for token in _ARG_SPLIT.split(text) if token]


class CommandParser:
    """Turn raw lines into Commands.

    Parameters:
        registry: Used to resolve ``<name>:`` targeting prefixes.
        vocabulary: Verbs to accept. ``help`` and ``quit`` are always kept.
        strict_numbers: Reject unparseable numbers (default).  When False
            they silently become 0.
    """

    def __init__(
        self,
        registry: EntityRegistry,
        vocabulary: Iterable[Verb | str] = DEFAULT_VOCABULARY,
        *,
        strict_numbers: bool = True,
    ) -> None:
        self._registry = registry
        self._vocabulary = resolve_vocabulary(vocabulary)
        self._strict_numbers = strict_numbers

    @property
    def vocabulary(self) -> list[Verb]:
        """Accepted verbs in declaration order."""
        return list(self._vocabulary)

    def parse(self, line: str) -> Command:
        """Parse *line* into a Command.

        Raises:
            ParseError: unknown verb or malformed arguments.
            InvalidDirectionError: unrecognised direction token.
        """
        text = line.strip()
        if not text:
            raise ParseError("Empty command")

        head, rest = _split_first(text)
        if head.endswith(":"):
            target = self._registry.find_id(head[:-1])
            if target is not None:
                if not rest:
                    msg = f"No command given after {head}"
                    raise ParseError(msg)
                return self._parse_command(rest, target)
        return self._parse_command(text, None)

    # ------------------------------------------------------------------
    # Internal
    # ------------------------------------------------------------------

    def _parse_command(self, text: str, target: int | None) -> Command:
        word, rest = _split_first(text)
        verb = self._verb(word)

        if verb is Verb.PLACE:
            return Command(verb=verb, text=rest, target=target, placement=self._placement(rest))
        if verb is Verb.TABLE:
            return Command(verb=verb, text=rest, target=target, bounds=self._bounds(rest))
        if verb is Verb.CREATE:
            return Command(verb=verb, text=rest, target=target, names=_names(rest))
        if verb in _NO_ARGUMENT_VERBS and rest:
            msg = f"{verb} takes no arguments, got {rest!r}"
            raise ParseError(msg)
        return Command(verb=verb, text=rest, target=target)

    def _verb(self, word: str) -> Verb:
        lowered = word.lower()
        try:
            verb = Verb(lowered)
        except ValueError:
            verb = None
        if verb is None or verb not in self._vocabulary:
            msg = f"Don't know how to {word}"
            raise ParseError(msg)
        return verb

    def _placement(self, text: str) -> Placement:
        tokens = split_arguments(text)
        if len(tokens) != 3:
            raise ParseError("place needs <x> <y> <direction>")
        x = self._number(tokens[0], Verb.PLACE, "x")
        y = self._number(tokens[1], Verb.PLACE, "y")
        return Placement(x=x, y=y, direction=parse_direction(tokens[2], str(Verb.PLACE)))

    def _bounds(self, text: str) -> Bounds:
        tokens = split_arguments(text)
        if len(tokens) != 4:
            raise ParseError("table needs <xmin> <ymin> <xmax> <ymax>")
        fields = ("xmin", "ymin", "xmax", "ymax")
        values = [self._number(t, Verb.TABLE, f) for t, f in zip(tokens, fields, strict=True)]
        return Bounds(**dict(zip(fields, values, strict=True)))

    def _number(self, token: str, verb: Verb, field: str) -> int:
        try:
            return int(token)
        except ValueError:
            if self._strict_numbers:
                msg = f"Invalid number {token!r} for {field} in {verb}"
                raise ParseError(msg) from None
            logger.debug("Treating %r as 0 for %s in %s", token, field, verb)
            return 0


def _split_first(text: str) -> tuple[str, str]:
    """Split off the first whitespace-delimited token."""
    parts = text.split(None, 1)
    if len(parts) == 1:
        return parts[0], ""
    return parts[0], parts[1].strip()


def _names(text: str) -> tuple[str, ...]:
    names = tuple(split_arguments(text))
    if not names:
        raise ParseError("create needs at least one <name>")
    for name in names:
        if name.endswith(":"):
            msg = f"Robot names may not end with ':', got {name!r}"
            raise ParseError(msg)
    return names
