"""Prometheus collectors for loader calls.

scxctl never starts an exporter itself; a long-running process that embeds
the client can serve ``prometheus_client``'s default registry.
"""
from __future__ import annotations

from typing import Optional

from prometheus_client import Counter as _PCounter, Histogram as _PHist

# Cache created metrics to avoid duplicate registration errors when clients
# construct metric wrappers multiple times (e.g., in tests or reconnects).
_COUNTERS: dict[str, object] = {}
_HISTS: dict[str, object] = {}


class Counter:
    def __init__(self, name: str, desc: str = "", labelnames: list[str] | None = None) -> None:
        self._name = name
        if name in _COUNTERS:
            self._c = _COUNTERS[name]
        else:
            self._c = _PCounter(name, desc, list(labelnames or ()))
            _COUNTERS[name] = self._c

    def inc(self, amt: float = 1.0, **labels: str) -> None:
        if labels:
            self._c.labels(**labels).inc(amt)
        else:
            self._c.inc(amt)


class Histogram:
    def __init__(
        self,
        name: str,
        desc: str = "",
        labelnames: list[str] | None = None,
        buckets: Optional[list[float]] = None,
    ) -> None:
        self._name = name
        if name in _HISTS:
            self._h = _HISTS[name]
        else:
            kwargs = {"buckets": buckets} if buckets is not None else {}
            self._h = _PHist(name, desc, list(labelnames or ()), **kwargs)
            _HISTS[name] = self._h

    def observe(self, val: float, **labels: str) -> None:
        if labels:
            self._h.labels(**labels).observe(val)
        else:
            self._h.observe(val)
