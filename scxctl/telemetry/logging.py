from __future__ import annotations

"""Logging setup shared by the CLI and the library.

Environment variables:
- SCXCTL_LOG_LEVEL: DEBUG|INFO|WARNING|ERROR (default WARNING)
"""

import logging
import os
from typing import Optional, Dict


_CONFIGURED = False
_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def _resolve_level(level: str | None) -> int:
    name = (level or os.getenv("SCXCTL_LOG_LEVEL", "WARNING")).upper()
    lvl = logging.getLevelName(name)
    return lvl if isinstance(lvl, int) else logging.WARNING


def configure(level: str | None = None) -> None:
    """Configure root logging once; an explicit ``level`` always applies."""
    global _CONFIGURED
    if not _CONFIGURED:
        logging.basicConfig(level=_resolve_level(level), format=_FORMAT)
        _CONFIGURED = True
    if level is not None:
        logging.getLogger().setLevel(_resolve_level(level))


def get_logger(name: str, context: Optional[Dict[str, object]] = None) -> logging.Logger:
    configure()
    logger = logging.getLogger(name)
    if context:
        # Prepend context to messages via adapter
        class _Adapter(logging.LoggerAdapter):
            def process(self, msg, kwargs):  # type: ignore[override]
                ctx = " ".join(f"{k}={v}" for k, v in context.items())
                return f"[{ctx}] {msg}", kwargs

        return _Adapter(logger, {})  # type: ignore[return-value]
    return logger
