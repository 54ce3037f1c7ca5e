"""Tests for plugin discovery and constraint voter collection."""

from __future__ import annotations

from pathlib import Path

import pluggy
import pytest

from toyrobot.plugins.manager import PluginManager
from toyrobot.services.constraints import Proposal
from toyrobot.services.entities import Entity

hookimpl = pluggy.HookimplMarker("toyrobot")


class OddColumnsOnly:
    name = "odd-columns"

    def vote(self, candidate: Entity, proposal: Proposal) -> bool:
        return proposal.x % 2 == 1


class VoterPlugin:
    @hookimpl
    def register_constraint_voters(self) -> list[object]:
        return [OddColumnsOnly()]


class BrokenVoterPlugin:
    @hookimpl
    def register_constraint_voters(self) -> list[object]:
        raise RuntimeError("boom")


class NotAListPlugin:
    @hookimpl
    def register_constraint_voters(self) -> object:
        return OddColumnsOnly()


class NoVoteMethodPlugin:
    @hookimpl
    def register_constraint_voters(self) -> list[object]:
        return [object()]


LOCAL_PLUGIN = """\
import pluggy

hookimpl = pluggy.HookimplMarker("toyrobot")


class Counter:
    def __init__(self):
        self.moves = 0

    @hookimpl
    def post_move(self, name, x, y, facing):
        self.moves += 1


class Helper:
    pass
"""


class TestRegistration:
    def test_register_and_list(self) -> None:
        pm = PluginManager()
        pm.register_plugin(VoterPlugin())
        assert "VoterPlugin" in pm.list_plugin_names()

    def test_unregister(self) -> None:
        pm = PluginManager()
        plugin = VoterPlugin()
        pm.register_plugin(plugin, name="voters")
        pm.unregister(plugin)
        assert "voters" not in pm.list_plugin_names()

    def test_discover_marks_loaded(self) -> None:
        pm = PluginManager()
        assert not pm.is_loaded
        pm.discover_and_load()
        assert pm.is_loaded


class TestConstraintVoters:
    def test_collects_voters(self) -> None:
        pm = PluginManager()
        pm.register_plugin(VoterPlugin())
        voters = pm.constraint_voters()
        assert len(voters) == 1
        assert voters[0].name == "odd-columns"

    @pytest.mark.parametrize("plugin", [BrokenVoterPlugin, NotAListPlugin, NoVoteMethodPlugin])
    def test_bad_plugins_are_skipped(self, plugin: type) -> None:
        pm = PluginManager()
        pm.register_plugin(plugin())
        pm.register_plugin(VoterPlugin())
        assert [v.name for v in pm.constraint_voters()] == ["odd-columns"]

    def test_no_plugins(self) -> None:
        assert PluginManager().constraint_voters() == []


class TestLocalDiscovery:
    def test_loads_hook_classes_only(self, tmp_path: Path) -> None:
        (tmp_path / "counter.py").write_text(LOCAL_PLUGIN)
        (tmp_path / "_private.py").write_text("raise RuntimeError('never imported')\n")
        pm = PluginManager()
        names = pm.discover_and_load(local_dir=tmp_path)
        assert "toyrobot_local_plugin_counter.Counter" in names
        assert not any(name.endswith(".Helper") for name in names)

    def test_broken_file_is_skipped(self, tmp_path: Path) -> None:
        (tmp_path / "broken.py").write_text("this is not python\n")
        (tmp_path / "counter.py").write_text(LOCAL_PLUGIN)
        names = PluginManager().discover_and_load(local_dir=tmp_path)
        assert "toyrobot_local_plugin_counter.Counter" in names

    def test_missing_directory(self, tmp_path: Path) -> None:
        pm = PluginManager()
        pm.discover_and_load(local_dir=tmp_path / "nope")
        assert pm.is_loaded

    def test_local_hooks_fire(self, tmp_path: Path) -> None:
        (tmp_path / "counter.py").write_text(LOCAL_PLUGIN)
        pm = PluginManager()
        pm.discover_and_load(local_dir=tmp_path)
        pm.hook.post_move(name="Robbie", x=0, y=1, facing="North")
        [counter] = [p for p in pm._pm.get_plugins() if p.__class__.__name__ == "Counter"]
        assert counter.moves == 1
