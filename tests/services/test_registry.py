"""Tests for the EntityRegistry arena."""

import pytest

from toyrobot.domain.errors import InvariantViolation, RegistrationError
from toyrobot.services.constraints import ConstraintEngine
from toyrobot.services.entities import Robot
from toyrobot.services.registry import EntityRegistry


@pytest.fixture
def engine() -> ConstraintEngine:
    return ConstraintEngine()


class TestEntityRegistry:
    def test_ids_follow_registration_order(self, engine: ConstraintEngine) -> None:
        registry = EntityRegistry()
        assert registry.add(Robot("Robbie", engine)) == 0
        assert registry.add(Robot("Arthur", engine)) == 1
        assert registry.names() == ["Robbie", "Arthur"]
        assert len(registry) == 2

    def test_lookup(self, engine: ConstraintEngine) -> None:
        registry = EntityRegistry()
        robot = Robot("Robbie", engine)
        entity_id = registry.add(robot)
        assert registry.get(entity_id) is robot
        assert registry.find("Robbie") is robot
        assert registry.find_id("Robbie") == entity_id
        assert "Robbie" in registry

    def test_lookup_is_case_sensitive(self, engine: ConstraintEngine) -> None:
        registry = EntityRegistry()
        registry.add(Robot("Robbie", engine))
        assert registry.find_id("robbie") is None
        assert registry.find("ROBBIE") is None
        assert "robbie" not in registry

    def test_duplicate_name(self, engine: ConstraintEngine) -> None:
        registry = EntityRegistry()
        registry.add(Robot("Robbie", engine))
        with pytest.raises(RegistrationError, match="already exists"):
            registry.add(Robot("Robbie", engine))
        assert len(registry) == 1

    def test_unknown_id_is_a_defect(self) -> None:
        with pytest.raises(InvariantViolation):
            EntityRegistry().get(0)

    def test_iteration(self, engine: ConstraintEngine) -> None:
        registry = EntityRegistry()
        robots = [Robot(name, engine) for name in ("A", "B", "C")]
        for robot in robots:
            registry.add(robot)
        assert list(registry) == robots
