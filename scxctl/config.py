"""Endpoint configuration for the scx loader.

The loader is reached on the system bus at a fixed name and path. For a
development loader running on the session bus, set ``SCXCTL_BUS=session``.
"""
from __future__ import annotations

from dataclasses import dataclass

from .constants import INTERFACE_NAME, OBJECT_PATH, SERVICE_NAME
from .utils.env import env_choice

BUSES = ("SYSTEM", "SESSION")


@dataclass(frozen=True, slots=True)
class LoaderEndpoint:
    service: str = SERVICE_NAME
    path: str = OBJECT_PATH
    interface: str = INTERFACE_NAME
    bus: str = "SYSTEM"


DEFAULT_ENDPOINT = LoaderEndpoint()


def load_endpoint() -> LoaderEndpoint:
    return LoaderEndpoint(bus=env_choice("SCXCTL_BUS", BUSES, default="SYSTEM"))
