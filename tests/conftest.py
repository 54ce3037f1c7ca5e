"""Shared pytest fixtures and test helpers for toyrobot tests."""

from __future__ import annotations

import logging
from collections.abc import Callable, Generator
from pathlib import Path

import pytest
from click.testing import CliRunner

from toyrobot.services.interpreter import Interpreter
from toyrobot.services.result import ServiceResult
from toyrobot.services.world import World


@pytest.fixture(autouse=True)
def _isolated_cwd(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> None:
    """Run every test from an empty directory with no config env vars.

    Keeps a stray ``toyrobot.toml`` from leaking into settings discovery.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("TOYROBOT_CONFIG", raising=False)


@pytest.fixture(autouse=True)
def _restore_logging() -> Generator[None]:
    """CLI invocations reconfigure the root logger; put it back afterwards."""
    root = logging.getLogger()
    original_handlers = root.handlers[:]
    original_level = root.level
    robot = logging.getLogger("toyrobot")
    robot_level = robot.level
    yield
    root.handlers = original_handlers
    root.setLevel(original_level)
    robot.setLevel(robot_level)


@pytest.fixture
def cli_runner() -> CliRunner:
    """Provide a Click CLI test runner."""
    return CliRunner()


@pytest.fixture
def world() -> World:
    """A fresh world with the default 10x10 table and no robots."""
    return World()


@pytest.fixture
def interpreter(world: World) -> Interpreter:
    return Interpreter(world)


@pytest.fixture
def run_lines(interpreter: Interpreter) -> Callable[..., list[ServiceResult]]:
    """Execute lines in order and return every result produced."""

    def _run(*lines: str) -> list[ServiceResult]:
        results: list[ServiceResult] = []
        for line in lines:
            results.extend(interpreter.execute(line))
        return results

    return _run
