"""Blocking D-Bus connection to the scx loader.

Wraps a jeepney connection bound to one object (service name, path,
interface) and exposes the two primitives the control client needs:
property reads and method calls. Every call waits at most
``CALL_TIMEOUT_S`` and is never retried.
"""
from __future__ import annotations

from typing import Any, Optional

from jeepney import DBusAddress, Properties, new_method_call
from jeepney.auth import AuthenticationError
from jeepney.io.blocking import open_dbus_connection
from jeepney.wrappers import DBusErrorResponse, unwrap_msg

from ..config import DEFAULT_ENDPOINT, LoaderEndpoint
from ..constants import CALL_TIMEOUT_S
from ..core.errors import TransportError
from ..telemetry.logging import get_logger
from ..telemetry.metrics import Timer
from ..telemetry.prom import Counter, Histogram


class DbusConnection:
    def __init__(self, endpoint: LoaderEndpoint = DEFAULT_ENDPOINT, conn: Any = None) -> None:
        self.endpoint = endpoint
        self._log = get_logger("scxctl.dbus", {"bus": endpoint.bus.lower()})
        self._addr = DBusAddress(endpoint.path, bus_name=endpoint.service, interface=endpoint.interface)
        self._props = Properties(self._addr)
        self._calls = Counter("scxctl_dbus_calls_total", "Remote calls to the scx loader", ["member", "outcome"])
        self._latency = Histogram("scxctl_dbus_call_seconds", "Latency of remote calls to the scx loader", ["member"])
        if conn is None:
            try:
                conn = open_dbus_connection(bus=endpoint.bus)
            except (OSError, AuthenticationError) as e:
                raise TransportError(f"cannot connect to the {endpoint.bus.lower()} bus: {e}") from e
            except KeyError as e:
                # jeepney looks the session bus address up in the environment
                raise TransportError(f"cannot connect to the {endpoint.bus.lower()} bus: {e.args[0]} is not set") from e
        self._conn = conn

    def get_property(self, name: str) -> Any:
        """Read one property of the loader interface and unwrap its variant."""
        body = self._send(f"Get({name})", self._props.get(name))
        # org.freedesktop.DBus.Properties.Get returns a single variant: (signature, value)
        [(_sig, value)] = body
        return value

    def call(self, method: str, signature: Optional[str] = None, body: tuple = ()) -> tuple:
        return self._send(method, new_method_call(self._addr, method, signature, body))

    def _send(self, member: str, msg: Any) -> tuple:
        outcome = "error"
        try:
            with Timer(member) as t:
                reply = self._conn.send_and_get_reply(msg, timeout=CALL_TIMEOUT_S)
                out = unwrap_msg(reply)
            outcome = "ok"
            self._latency.observe(t.elapsed, member=member)
            self._log.debug("%s -> ok in %.1f ms", member, t.ms)
            return out
        except DBusErrorResponse as e:
            detail = " ".join(str(d) for d in (e.data or ()))
            raise TransportError(f"{member} rejected by {self.endpoint.service}: {e.name} {detail}".rstrip(), dbus_name=e.name) from e
        except TimeoutError as e:
            raise TransportError(f"{member} timed out after {CALL_TIMEOUT_S:g}s") from e
        except OSError as e:
            raise TransportError(f"{member} failed: {e}") from e
        finally:
            self._calls.inc(member=member, outcome=outcome)

    def close(self) -> None:
        try:
            self._conn.close()
        except OSError:
            pass

    def __enter__(self) -> "DbusConnection":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # noqa: ANN001
        self.close()
