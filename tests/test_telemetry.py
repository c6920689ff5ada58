from __future__ import annotations

import logging

from prometheus_client import REGISTRY

from scxctl.telemetry.logging import configure, get_logger
from scxctl.telemetry.metrics import Timer
from scxctl.telemetry.prom import Counter


def test_logger_context_prefix(caplog) -> None:  # noqa: ANN001
    log = get_logger("scxctl.test", {"bus": "system"})
    with caplog.at_level(logging.INFO, logger="scxctl.test"):
        log.info("hello")
    assert "[bus=system] hello" in caplog.text


def test_configure_explicit_level_applies() -> None:
    root = logging.getLogger()
    before = root.level
    try:
        configure("DEBUG")
        assert root.level == logging.DEBUG
        configure("bogus")
        assert root.level == logging.WARNING
    finally:
        root.setLevel(before)


def test_timer_measures_elapsed() -> None:
    with Timer("noop") as t:
        pass
    assert t.elapsed >= 0.0
    assert t.ms == t.elapsed * 1000.0


def test_counter_is_registered_once() -> None:
    a = Counter("scxctl_test_events_total", "test", ["member"])
    b = Counter("scxctl_test_events_total", "test", ["member"])
    a.inc(member="Get")
    b.inc(member="Get")
    assert REGISTRY.get_sample_value("scxctl_test_events_total", {"member": "Get"}) == 2.0
