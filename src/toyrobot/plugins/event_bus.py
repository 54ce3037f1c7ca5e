"""Synchronous lifecycle event dispatch via pluggy.

The simulator is single-threaded, so events fire inline on the caller's
thread, in the order the state changes were committed.

INVARIANT: Plugin failures are warnings, never errors.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from toyrobot.plugins.manager import PluginManager

logger = logging.getLogger(__name__)


class EventBus:
    """Fire lifecycle hooks on every registered plugin.

    Parameters:
        plugin_manager: Loaded PluginManager for hook dispatch.
    """

    def __init__(self, plugin_manager: PluginManager) -> None:
        self._pm = plugin_manager
        self.dispatched: int = 0
        self.failed: int = 0

    def dispatch(self, hook_name: str, payload: dict[str, Any]) -> bool:
        """Call *hook_name* with *payload*.

        Returns False if a plugin raised; the failure is logged and
        swallowed.  Unknown hook names are ignored.
        """
        hook_fn = getattr(self._pm.hook, hook_name, None)
        if hook_fn is None:
            logger.debug("No hook named %s", hook_name)
            return True

        self.dispatched += 1
        try:
            hook_fn(**payload)
        except Exception:
            self.failed += 1
            logger.warning("Hook %s failed", hook_name, exc_info=True)
            return False
        return True
