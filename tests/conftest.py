from __future__ import annotations

import pytest

from scxctl.core.errors import TransportError


class FakeLoaderBus:
    """In-memory stand-in for the loader object.

    Applies start/switch/stop to its own properties the way the daemon does,
    and records every read and call in order.
    """

    def __init__(
        self,
        current: str = "unknown",
        mode: int = 0,
        supported: list[str] | None = None,
    ) -> None:
        self.props: dict[str, object] = {
            "CurrentScheduler": current,
            "SchedulerMode": mode,
            "SupportedSchedulers": list(supported or ["scx_rustland", "scx_lavd", "scx_bpfland"]),
        }
        self.log: list[tuple] = []
        self.fail_on: set[str] = set()
        # names added to fail_on once a method call has succeeded
        self.fail_after_call: set[str] = set()
        self.closed = False

    @property
    def calls(self) -> list[tuple]:
        return [e[1:] for e in self.log if e[0] == "call"]

    @property
    def reads(self) -> list[str]:
        return [e[1] for e in self.log if e[0] == "read"]

    def get_property(self, name: str):  # noqa: ANN201
        self.log.append(("read", name))
        if name in self.fail_on:
            raise TransportError(f"Get({name}) failed: connection reset")
        return self.props[name]

    def call(self, method: str, signature: str | None = None, body: tuple = ()) -> tuple:
        self.log.append(("call", method, signature, body))
        if method in self.fail_on:
            raise TransportError(f"{method} rejected", dbus_name="org.freedesktop.DBus.Error.Failed")
        if method in ("StartScheduler", "SwitchScheduler"):
            self.props["CurrentScheduler"], self.props["SchedulerMode"] = body
        elif method in ("StartSchedulerWithArgs", "SwitchSchedulerWithArgs"):
            self.props["CurrentScheduler"] = body[0]
        elif method == "StopScheduler":
            self.props["CurrentScheduler"] = "unknown"
        self.fail_on |= self.fail_after_call
        return ()

    def close(self) -> None:
        self.closed = True


@pytest.fixture
def stopped_bus() -> FakeLoaderBus:
    return FakeLoaderBus()


@pytest.fixture
def running_bus() -> FakeLoaderBus:
    return FakeLoaderBus(current="scx_bpfland", mode=2)
