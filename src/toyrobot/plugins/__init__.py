"""Extension layer — plugin system via pluggy.

Discovery: ``toyrobot.plugins`` entry points plus an optional local
directory of single-file plugins.
INVARIANT: Plugin failures are warnings, never errors.
"""

from toyrobot.plugins.event_bus import EventBus
from toyrobot.plugins.manager import PluginManager

__all__ = ["EventBus", "PluginManager"]
