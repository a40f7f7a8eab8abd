"""Extension layer — plugin system via pluggy.

Discovery: entry_points (pip-installed) in the ``banksim.plugins`` group.
INVARIANT: Plugin failures are warnings, never errors.
"""

from banksim.plugins.hookspecs import hookimpl
from banksim.plugins.manager import PluginHook, PluginManager

__all__ = ["PluginHook", "PluginManager", "hookimpl"]
