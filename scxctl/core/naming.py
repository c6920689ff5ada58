"""Scheduler name normalization at the loader boundary.

The loader names every scheduler with an ``scx_`` prefix; scxctl never shows
it. ``ensure_prefix`` is idempotent and ``strip_prefix`` removes at most one
prefix, so ``strip_prefix(ensure_prefix(name)) == name`` for unprefixed names.
"""
from __future__ import annotations

SCHED_PREFIX = "scx_"

# Value of CurrentScheduler while nothing is loaded.
NO_SCHEDULER = "unknown"


def ensure_prefix(name: str) -> str:
    if name.startswith(SCHED_PREFIX):
        return name
    return f"{SCHED_PREFIX}{name}"


def strip_prefix(name: str) -> str:
    if name.startswith(SCHED_PREFIX):
        return name[len(SCHED_PREFIX) :]
    return name
