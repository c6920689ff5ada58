"""Environment parsing helpers.

Small helpers to consistently parse env vars with sane defaults.
"""
from __future__ import annotations

from typing import Iterable
import os


def env_choice(name: str, choices: Iterable[str], default: str) -> str:
    """Return the env value upper-cased if it is one of ``choices``.

    Matching is case-insensitive; anything else (including unset) yields
    ``default``.
    """
    val = os.getenv(name)
    if not val:
        return default
    allowed = {c.upper() for c in choices}
    val = val.strip().upper()
    return val if val in allowed else default
