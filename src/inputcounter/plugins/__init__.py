"""Extension layer — host hooks and counter filters via pluggy.

Discovery: entry_points (pip-installed) via pluggy setuptools entrypoints.
INVARIANT: Plugin failures are warnings, never errors.
"""

from inputcounter.plugins.manager import PluginManager, create_plugin_manager

__all__ = ["PluginManager", "create_plugin_manager"]
