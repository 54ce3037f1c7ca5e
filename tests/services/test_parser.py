"""Tests for CommandParser grammar, targeting prefixes, and number handling."""

import pytest

from toyrobot.domain.commands import Bounds, Placement, Verb
from toyrobot.domain.direction import Direction
from toyrobot.domain.errors import InvalidDirectionError, ParseError
from toyrobot.services.parser import CommandParser, split_arguments
from toyrobot.services.world import World


@pytest.fixture
def parser(world: World) -> CommandParser:
    world.create_robot("Robbie")
    world.create_robot("Arthur")
    return CommandParser(world.registry)


class TestSplitArguments:
    def test_whitespace_and_commas(self) -> None:
        assert split_arguments("1, 2,NORTH") == ["1", "2", "NORTH"]

    def test_empty(self) -> None:
        assert split_arguments("   ") == []


class TestVerbs:
    @pytest.mark.parametrize("word", ["MOVE", "Move", "move"])
    def test_case_insensitive(self, parser: CommandParser, word: str) -> None:
        assert parser.parse(word).verb is Verb.MOVE

    def test_surrounding_whitespace_ignored(self, parser: CommandParser) -> None:
        assert parser.parse("   report   ").verb is Verb.REPORT

    def test_unknown_verb(self, parser: CommandParser) -> None:
        with pytest.raises(ParseError, match="Don't know how to fly"):
            parser.parse("fly")

    def test_empty_line(self, parser: CommandParser) -> None:
        with pytest.raises(ParseError, match="Empty command"):
            parser.parse("   ")

    def test_no_argument_verb_with_arguments(self, parser: CommandParser) -> None:
        with pytest.raises(ParseError, match="takes no arguments"):
            parser.parse("move 3")

    def test_broadcast_has_no_target(self, parser: CommandParser) -> None:
        command = parser.parse("left")
        assert command.target is None
        assert not command.is_targeted


class TestPlace:
    def test_place(self, parser: CommandParser) -> None:
        command = parser.parse("PLACE 1,2,EAST")
        assert command.verb is Verb.PLACE
        assert command.placement == Placement(x=1, y=2, direction=Direction.EAST)

    def test_place_abbreviated_direction(self, parser: CommandParser) -> None:
        command = parser.parse("place 0 0 n")
        assert command.placement is not None
        assert command.placement.direction is Direction.NORTH

    def test_negative_coordinates_parse(self, parser: CommandParser) -> None:
        command = parser.parse("place -1 -2 s")
        assert command.placement == Placement(x=-1, y=-2, direction=Direction.SOUTH)

    def test_bad_direction(self, parser: CommandParser) -> None:
        with pytest.raises(InvalidDirectionError) as exc_info:
            parser.parse("place 1 2 UP")
        assert exc_info.value.token == "UP"
        assert exc_info.value.verb == "place"

    @pytest.mark.parametrize("line", ["place", "place 1 2", "place 1 2 n extra"])
    def test_wrong_argument_count(self, parser: CommandParser, line: str) -> None:
        with pytest.raises(ParseError):
            parser.parse(line)

    def test_bad_number_is_an_error(self, parser: CommandParser) -> None:
        with pytest.raises(ParseError, match="Invalid number 'x'"):
            parser.parse("place x 2 n")

    def test_permissive_numbers_become_zero(self, world: World) -> None:
        parser = CommandParser(world.registry, strict_numbers=False)
        command = parser.parse("place x 2 n")
        assert command.placement == Placement(x=0, y=2, direction=Direction.NORTH)


class TestTable:
    def test_table(self, parser: CommandParser) -> None:
        command = parser.parse("table 0 0 5 5")
        assert command.bounds == Bounds(xmin=0, ymin=0, xmax=5, ymax=5)

    def test_table_wrong_count(self, parser: CommandParser) -> None:
        with pytest.raises(ParseError, match="table needs"):
            parser.parse("table 0 0 5")


class TestCreate:
    def test_create_many(self, parser: CommandParser) -> None:
        assert parser.parse("create Marvin, Kryten").names == ("Marvin", "Kryten")

    def test_create_keeps_name_case(self, parser: CommandParser) -> None:
        assert parser.parse("CREATE hal").names == ("hal",)

    def test_create_without_names(self, parser: CommandParser) -> None:
        with pytest.raises(ParseError, match="at least one"):
            parser.parse("create")

    def test_create_name_with_colon(self, parser: CommandParser) -> None:
        with pytest.raises(ParseError, match="may not end with ':'"):
            parser.parse("create Marvin:")


class TestTargeting:
    def test_known_prefix(self, parser: CommandParser, world: World) -> None:
        command = parser.parse("Robbie: move")
        assert command.verb is Verb.MOVE
        assert command.target == world.registry.find_id("Robbie")

    def test_prefix_with_arguments(self, parser: CommandParser, world: World) -> None:
        command = parser.parse("Arthur: place 3 3 w")
        assert command.target == world.registry.find_id("Arthur")
        assert command.placement == Placement(x=3, y=3, direction=Direction.WEST)

    def test_table_prefix(self, parser: CommandParser, world: World) -> None:
        assert parser.parse("Table: report").target == world.registry.find_id("Table")

    def test_unknown_prefix_becomes_verb(self, parser: CommandParser) -> None:
        with pytest.raises(ParseError, match="Don't know how to Nobody:"):
            parser.parse("Nobody: move")

    def test_prefix_is_case_sensitive(self, parser: CommandParser) -> None:
        with pytest.raises(ParseError):
            parser.parse("robbie: move")

    def test_prefix_without_command(self, parser: CommandParser) -> None:
        with pytest.raises(ParseError, match="No command given after Robbie:"):
            parser.parse("Robbie:")

    def test_prefixes_do_not_nest(self, parser: CommandParser) -> None:
        with pytest.raises(ParseError):
            parser.parse("Robbie: Arthur: move")


class TestVocabulary:
    def test_restricted_vocabulary(self, world: World) -> None:
        parser = CommandParser(world.registry, ["place", "report"])
        assert parser.vocabulary == [Verb.PLACE, Verb.REPORT, Verb.HELP, Verb.QUIT]
        with pytest.raises(ParseError, match="Don't know how to move"):
            parser.parse("move")

    def test_control_verbs_survive(self, world: World) -> None:
        parser = CommandParser(world.registry, [])
        assert parser.parse("quit").verb is Verb.QUIT
        assert parser.parse("HELP").verb is Verb.HELP
