"""Tests for targeted and broadcast delivery."""

from toyrobot.domain.commands import Bounds, Command, Placement, Verb
from toyrobot.domain.direction import Direction
from toyrobot.services.world import World


class TestBroadcast:
    def test_listeners_in_registration_order(self, world: World) -> None:
        world.create_robot("Robbie")
        world.create_robot("Arthur")
        assert [e.name for e in world.dispatcher.listeners] == ["Table", "Robbie", "Arthur"]

    def test_report_reaches_everyone(self, world: World) -> None:
        world.create_robot("Robbie")
        results = world.dispatcher.dispatch(Command(verb=Verb.REPORT))
        assert [r.data["entity"] for r in results] == ["Table", "Robbie"]

    def test_skips_listeners_without_the_verb(self, world: World) -> None:
        world.create_robot("Robbie")
        results = world.dispatcher.dispatch(Command(verb=Verb.MOVE))
        assert len(results) == 1
        assert results[0].data["entity"] == "Robbie"

    def test_table_resize_only_reaches_table(self, world: World) -> None:
        world.create_robot("Robbie")
        bounds = Bounds(xmin=0, ymin=0, xmax=5, ymax=5)
        results = world.dispatcher.dispatch(Command(verb=Verb.TABLE, bounds=bounds))
        assert [r.data["entity"] for r in results] == ["Table"]

    def test_broadcast_place_collides_second_robot(self, world: World) -> None:
        robbie = world.create_robot("Robbie")
        arthur = world.create_robot("Arthur")
        placement = Placement(x=0, y=0, direction=Direction.NORTH)
        results = world.dispatcher.dispatch(Command(verb=Verb.PLACE, placement=placement))
        assert [r.rejected for r in results] == [False, True]
        assert robbie.on_table
        assert not arthur.on_table

    def test_no_listener(self, world: World) -> None:
        assert world.dispatcher.dispatch(Command(verb=Verb.MOVE)) == []


class TestTargeted:
    def test_only_target_acts(self, world: World) -> None:
        robbie = world.create_robot("Robbie")
        arthur = world.create_robot("Arthur")
        robbie.place(0, 0, Direction.NORTH)
        arthur.place(5, 5, Direction.NORTH)
        target = world.registry.find_id("Robbie")
        results = world.dispatcher.dispatch(Command(verb=Verb.MOVE, target=target))
        assert len(results) == 1
        assert (robbie.x, robbie.y) == (0, 1)
        assert (arthur.x, arthur.y) == (5, 5)

    def test_unsupported_verb_becomes_error_result(self, world: World) -> None:
        target = world.registry.find_id("Table")
        results = world.dispatcher.dispatch(Command(verb=Verb.MOVE, target=target))
        assert len(results) == 1
        result = results[0]
        assert not result.ok
        assert result.error is not None
        assert result.error.code == "UNSUPPORTED"
        assert result.error.detail == {"entity": "Table"}
        assert result.message == "Table does not know how to move"
