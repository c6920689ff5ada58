"""Telemetry subpackage (lightweight).

Exposes the call timer and Prometheus wrappers used by the bus layer.
"""

from .metrics import Timer
from .prom import Counter, Histogram

__all__ = [
    "Timer",
    "Counter",
    "Histogram",
]
