"""Scheduler control client for the scx loader.

Translates start/switch/stop/get/list intents into property reads and method
calls on the loader. The client holds no scheduler or mode state: omitted
values are read from the service before a call, and every mutating call is
followed by fresh reads so the result reflects what the loader actually
runs. Failures propagate unchanged; nothing is retried.
"""
from __future__ import annotations

from typing import Any, List, NamedTuple, Optional, Sequence

from ..config import LoaderEndpoint, load_endpoint
from ..constants import (
    METHOD_START,
    METHOD_START_WITH_ARGS,
    METHOD_STOP,
    METHOD_SWITCH,
    METHOD_SWITCH_WITH_ARGS,
    PROP_CURRENT_SCHEDULER,
    PROP_SCHEDULER_MODE,
    PROP_SUPPORTED_SCHEDULERS,
    SIG_NAME_ARGS,
    SIG_NAME_MODE,
)
from ..core.errors import InvalidRequest
from ..core.modes import Mode
from ..core.naming import NO_SCHEDULER, ensure_prefix, strip_prefix
from ..telemetry.logging import get_logger
from .dbus_client import DbusConnection


class SchedulerState(NamedTuple):
    """Observed loader state; both fields are None when nothing runs."""

    scheduler: Optional[str]
    mode: Optional[Mode]

    @property
    def running(self) -> bool:
        return self.scheduler is not None


class ArgsResult(NamedTuple):
    scheduler: Optional[str]
    args: List[str]


_log = get_logger(__name__)


class ScxLoader:
    """Control operations against one loader endpoint.

    ``bus`` is anything with ``get_property(name)`` and
    ``call(method, signature, body)``; normally a :class:`DbusConnection`.
    """

    def __init__(self, bus: Any) -> None:
        self._bus = bus
        self._owns_bus = False

    @classmethod
    def connect(cls, endpoint: LoaderEndpoint | None = None) -> "ScxLoader":
        client = cls(DbusConnection(endpoint or load_endpoint()))
        client._owns_bus = True
        return client

    def close(self) -> None:
        if self._owns_bus:
            self._bus.close()

    def __enter__(self) -> "ScxLoader":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:  # noqa: ANN001
        self.close()

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def _current_scheduler(self) -> Optional[str]:
        name = strip_prefix(str(self._bus.get_property(PROP_CURRENT_SCHEDULER)))
        if name == NO_SCHEDULER:
            return None
        return name

    def _current_mode(self) -> Mode:
        return Mode.from_code(self._bus.get_property(PROP_SCHEDULER_MODE))

    def get(self) -> SchedulerState:
        sched = self._current_scheduler()
        raw_mode = self._bus.get_property(PROP_SCHEDULER_MODE)
        if sched is None:
            return SchedulerState(None, None)
        return SchedulerState(sched, Mode.from_code(raw_mode))

    def list_schedulers(self) -> List[str]:
        return [strip_prefix(str(s)) for s in self._bus.get_property(PROP_SUPPORTED_SCHEDULERS)]

    # ------------------------------------------------------------------
    # Mutations
    # ------------------------------------------------------------------

    def start(self, scheduler: str, mode: Optional[Mode] = None) -> SchedulerState:
        _require_name(scheduler)
        if mode is None:
            mode = self._current_mode()
        wire = ensure_prefix(scheduler)
        _log.info("starting %s in %s mode", wire, mode.label)
        self._bus.call(METHOD_START, SIG_NAME_MODE, (wire, mode.code))
        return self.get()

    def start_with_args(self, scheduler: str, args: Sequence[str]) -> ArgsResult:
        _require_name(scheduler)
        args = list(args)
        wire = ensure_prefix(scheduler)
        _log.info("starting %s with args %s", wire, args)
        self._bus.call(METHOD_START_WITH_ARGS, SIG_NAME_ARGS, (wire, args))
        return ArgsResult(self._current_scheduler(), args)

    def switch(self, scheduler: Optional[str] = None, mode: Optional[Mode] = None) -> SchedulerState:
        if scheduler is None:
            scheduler = self._running_scheduler()
        _require_name(scheduler)
        if mode is None:
            mode = self._current_mode()
        wire = ensure_prefix(scheduler)
        _log.info("switching to %s in %s mode", wire, mode.label)
        self._bus.call(METHOD_SWITCH, SIG_NAME_MODE, (wire, mode.code))
        return self.get()

    def switch_with_args(self, scheduler: Optional[str], args: Sequence[str]) -> ArgsResult:
        if scheduler is None:
            scheduler = self._running_scheduler()
        _require_name(scheduler)
        args = list(args)
        wire = ensure_prefix(scheduler)
        _log.info("switching to %s with args %s", wire, args)
        self._bus.call(METHOD_SWITCH_WITH_ARGS, SIG_NAME_ARGS, (wire, args))
        return ArgsResult(self._current_scheduler(), args)

    def stop(self) -> None:
        _log.info("stopping scheduler")
        self._bus.call(METHOD_STOP, None, ())

    # ------------------------------------------------------------------
    # Checked entry points (mode and args are alternatives)
    # ------------------------------------------------------------------

    def start_scheduler(
        self,
        scheduler: str,
        mode: Optional[Mode] = None,
        args: Optional[Sequence[str]] = None,
    ) -> SchedulerState | ArgsResult:
        _exclusive(mode, args)
        if args is not None:
            return self.start_with_args(scheduler, args)
        return self.start(scheduler, mode)

    def switch_scheduler(
        self,
        scheduler: Optional[str] = None,
        mode: Optional[Mode] = None,
        args: Optional[Sequence[str]] = None,
    ) -> SchedulerState | ArgsResult:
        _exclusive(mode, args)
        if args is not None:
            return self.switch_with_args(scheduler, args)
        return self.switch(scheduler, mode)

    def _running_scheduler(self) -> str:
        sched = self._current_scheduler()
        if sched is None:
            raise InvalidRequest("no scx scheduler running; pass a scheduler to switch to")
        return sched


def _require_name(scheduler: str) -> None:
    if not scheduler or not strip_prefix(scheduler):
        raise InvalidRequest("scheduler name must not be empty")


def _exclusive(mode: Optional[Mode], args: Optional[Sequence[str]]) -> None:
    if mode is not None and args is not None:
        raise InvalidRequest("mode and args are mutually exclusive")
