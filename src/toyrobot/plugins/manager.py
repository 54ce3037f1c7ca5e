"""Plugin discovery and loading.

Discovery: ``toyrobot.plugins`` entry points via pluggy, plus single-file
plugins from a local directory (``[plugins] local_dir``).
Capabilities: lifecycle hooks and extra constraint voters.
"""

from __future__ import annotations

import importlib.util
import inspect
import logging
import sys
from pathlib import Path
from typing import Any

import pluggy

from toyrobot.plugins.hookspecs import RobotHookSpec

PROJECT_NAME = "toyrobot"
ENTRY_POINT_GROUP = "toyrobot.plugins"

logger = logging.getLogger(__name__)


class PluginManager:
    """Manages plugin discovery, loading, and hook dispatch."""

    def __init__(self) -> None:
        self._pm = pluggy.PluginManager(PROJECT_NAME)
        self._pm.add_hookspecs(RobotHookSpec)
        self._loaded: bool = False

    def discover_and_load(self, *, local_dir: Path | None = None) -> list[str]:
        """Load entry-point plugins and any plugins found in *local_dir*.

        Returns a list of loaded plugin names.
        """
        self._pm.load_setuptools_entrypoints(ENTRY_POINT_GROUP)
        self._instantiate_entry_point_classes()
        if local_dir is not None:
            self._discover_local(local_dir)
        self._loaded = True
        return self.list_plugin_names()

    def register_plugin(self, plugin: object, name: str | None = None) -> None:
        """Register a plugin instance directly."""
        resolved_name = name or plugin.__class__.__name__
        self._pm.register(plugin, name=resolved_name)
        logger.debug("Registered plugin: %s", resolved_name)

    def unregister(self, plugin: object) -> None:
        self._pm.unregister(plugin)

    @property
    def is_loaded(self) -> bool:
        """Whether discover_and_load() has been called."""
        return self._loaded

    @property
    def hook(self) -> pluggy.HookRelay:
        """Access the hook relay for dispatching events."""
        return self._pm.hook

    def list_plugin_names(self) -> list[str]:
        return [self._pm.get_name(p) or p.__class__.__name__ for p in self._pm.get_plugins()]

    def constraint_voters(self) -> list[Any]:
        """Collect extra constraint voters from every plugin.

        A plugin whose hook raises, or returns something other than a list
        of objects with a ``vote`` method, is skipped with a warning.
        """
        voters: list[Any] = []
        for plugin in self._pm.get_plugins():
            hook = getattr(plugin, "register_constraint_voters", None)
            if hook is None:
                continue
            plugin_name = self._pm.get_name(plugin) or plugin.__class__.__name__
            try:
                contributed = hook()
            except Exception:
                logger.warning(
                    "Failed to collect constraint voters from plugin %s",
                    plugin_name,
                    exc_info=True,
                )
                continue
            if contributed is None:
                continue
            if not isinstance(contributed, list):
                logger.warning("Plugin %s returned non-list constraint voters", plugin_name)
                continue
            for voter in contributed:
                if callable(getattr(voter, "vote", None)):
                    voters.append(voter)
                else:
                    logger.warning("Skipping voter %r from plugin %s", voter, plugin_name)
        return voters

    # ------------------------------------------------------------------
    # Local directory discovery
    # ------------------------------------------------------------------

    def _discover_local(self, local_dir: Path) -> None:
        """Load every ``*.py`` in *local_dir* not starting with ``_``.

        Classes carrying hookimpl-decorated methods are instantiated and
        registered.  A broken file is logged and skipped.
        """
        if not local_dir.is_dir():
            logger.debug("Local plugin directory %s does not exist", local_dir)
            return

        for py_file in sorted(local_dir.glob("*.py")):
            if py_file.name.startswith("_"):
                continue
            module_name = f"toyrobot_local_plugin_{py_file.stem}"
            try:
                spec = importlib.util.spec_from_file_location(module_name, py_file)
                if spec is None or spec.loader is None:
                    logger.warning("Could not create module spec for %s", py_file)
                    continue
                module = importlib.util.module_from_spec(spec)
                sys.modules[module_name] = module
                spec.loader.exec_module(module)
            except Exception:
                logger.warning("Failed to load local plugin %s", py_file, exc_info=True)
                sys.modules.pop(module_name, None)
                continue

            for _attr_name, obj in inspect.getmembers(module, inspect.isclass):
                if obj.__module__ != module_name or not self._has_hook_impls(obj):
                    continue
                try:
                    self.register_plugin(obj(), name=f"{module_name}.{obj.__name__}")
                except Exception:
                    logger.warning(
                        "Failed to instantiate plugin class %s from %s",
                        obj.__name__,
                        py_file,
                        exc_info=True,
                    )

    def _instantiate_entry_point_classes(self) -> None:
        """Replace plugin classes registered by entry points with instances.

        Hook dispatch against a class object leaves ``self`` unbound.
        """
        for plugin in list(self._pm.get_plugins()):
            if not inspect.isclass(plugin) or not self._has_hook_impls(plugin):
                continue

            plugin_name = self._pm.get_name(plugin) or plugin.__name__
            self._pm.unregister(plugin)
            try:
                instance = plugin()
            except Exception:
                logger.warning(
                    "Failed to instantiate entry-point plugin %s",
                    plugin_name,
                    exc_info=True,
                )
                continue
            self._pm.register(instance, name=plugin_name)

    @staticmethod
    def _has_hook_impls(cls: type) -> bool:
        """Whether *cls* has a method marked by ``HookimplMarker("toyrobot")``."""
        for name in dir(cls):
            if name.startswith("_"):
                continue
            method = getattr(cls, name, None)
            if callable(method) and getattr(method, "toyrobot_impl", None):
                return True
        return False
