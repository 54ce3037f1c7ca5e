"""ConstraintEngine — unanimous multi-party approval of proposed states.

Every entity able to object to a placement installs exactly one decider
when it is created; plugins may add more.  Before any placement or move
is committed the mover asks :meth:`ConstraintEngine.acceptable`, which
polls the deciders in registration order and stops at the first veto.

Each decider answers strictly from its own owner's perspective, given
the candidate entity and the full :class:`Proposal`.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from toyrobot.domain.direction import Direction, is_valid

if TYPE_CHECKING:
    from toyrobot.services.entities import Entity

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Proposal:
    """Candidate state for an entity, handed to every decider."""

    x: int
    y: int
    direction: Direction
    on_table: bool = True


Decider = Callable[["Entity", Proposal], bool]


@dataclass(frozen=True)
class Registration:
    """One (owner, decider) pair."""

    owner: str
    decide: Decider


class ConstraintEngine:
    """Ordered set of deciders requiring unanimous approval."""

    def __init__(self) -> None:
        self._registrations: list[Registration] = []

    def register(self, owner: str, decide: Decider) -> None:
        """Append a decider owned by *owner*."""
        self._registrations.append(Registration(owner=owner, decide=decide))
        logger.debug("Constraint decider registered for %s", owner)

    def register_voter(self, voter: Any) -> None:
        """Register an object exposing ``name`` and ``vote(candidate, proposal)``."""
        owner = getattr(voter, "name", None) or voter.__class__.__name__
        self.register(str(owner), voter.vote)

    @property
    def owners(self) -> list[str]:
        return [reg.owner for reg in self._registrations]

    def acceptable(
        self,
        candidate: Entity,
        x: int,
        y: int,
        direction: Direction,
        on_table: bool = True,
    ) -> bool:
        """Return True only if every registered decider approves.

        A proposal whose *direction* is not a compass value is refused
        before any decider is asked.
        """
        if not is_valid(direction):
            logger.debug("Refused %s: invalid direction %s", candidate.name, direction)
            return False

        proposal = Proposal(x=x, y=y, direction=direction, on_table=on_table)
        for reg in self._registrations:
            if not reg.decide(candidate, proposal):
                logger.debug(
                    "Proposal for %s at (%d, %d) vetoed by %s",
                    candidate.name,
                    x,
                    y,
                    reg.owner,
                )
                return False
        return True

    def __len__(self) -> int:
        return len(self._registrations)
