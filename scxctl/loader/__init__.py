"""Loader subpackage.

- dbus_client: blocking jeepney connection bound to the loader object
- client: ScxLoader, the scheduler control operations
"""

from .client import ArgsResult, SchedulerState, ScxLoader
from .dbus_client import DbusConnection

__all__ = [
    "ArgsResult",
    "DbusConnection",
    "SchedulerState",
    "ScxLoader",
]
