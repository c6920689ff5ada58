"""scxctl: control client for the scx scheduler loader."""
from __future__ import annotations

from .core.errors import DecodeError, InvalidRequest, ScxctlError, TransportError
from .core.modes import Mode
from .loader.client import ArgsResult, SchedulerState, ScxLoader

__version__ = "0.1.0"

__all__ = [
    "ArgsResult",
    "DecodeError",
    "InvalidRequest",
    "Mode",
    "SchedulerState",
    "ScxLoader",
    "ScxctlError",
    "TransportError",
]
