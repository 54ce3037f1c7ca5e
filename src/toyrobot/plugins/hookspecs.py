"""Pluggy hook specifications for toyrobot lifecycle events and voters.

Six lifecycle events fire synchronously after a state change has been
committed.  One setup-time hook lets plugins contribute extra constraint
voters to every new world.
"""

from __future__ import annotations

from typing import Any

import pluggy

hookspec = pluggy.HookspecMarker("toyrobot")


class RobotHookSpec:
    """Hook specifications for the toyrobot plugin system."""

    @hookspec
    def post_create_robot(self, name: str) -> None:
        """Called after a robot joins the world."""

    @hookspec
    def post_place(self, name: str, x: int, y: int, facing: str) -> None:
        """Called after a robot is placed on the table."""

    @hookspec
    def post_move(self, name: str, x: int, y: int, facing: str) -> None:
        """Called after a robot steps forward."""

    @hookspec
    def post_turn(self, name: str, facing: str) -> None:
        """Called after a robot turns left or right."""

    @hookspec
    def post_remove(self, name: str) -> None:
        """Called after a robot is taken off the table."""

    @hookspec
    def post_table_resize(self, xmin: int, ymin: int, xmax: int, ymax: int) -> None:
        """Called after the table bounds change."""

    @hookspec
    def register_constraint_voters(self) -> list[Any] | None:
        """Return extra voters, each with ``name`` and ``vote(candidate, proposal)``.

        ``vote`` receives the candidate entity and a
        :class:`~toyrobot.services.constraints.Proposal` and returns True
        to approve.
        """
