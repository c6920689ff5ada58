"""Common exceptions for scxctl."""
from __future__ import annotations

from typing import Optional


class ScxctlError(Exception):
    pass


class TransportError(ScxctlError):
    """A property read or method call against the loader failed.

    ``dbus_name`` holds the D-Bus error name when the service itself rejected
    the call (e.g. ``org.freedesktop.DBus.Error.ServiceUnknown``).
    """

    def __init__(self, message: str, dbus_name: Optional[str] = None) -> None:
        super().__init__(message)
        self.dbus_name = dbus_name


class DecodeError(ScxctlError):
    def __init__(self, code: object) -> None:
        super().__init__(f"unknown scheduler mode code: {code!r}")
        self.code = code


class InvalidRequest(ScxctlError):
    pass
