from __future__ import annotations

from scxctl.core.naming import ensure_prefix, strip_prefix


def test_ensure_prefix_adds_once() -> None:
    assert ensure_prefix("rustland") == "scx_rustland"
    assert ensure_prefix("scx_rustland") == "scx_rustland"
    assert ensure_prefix(ensure_prefix("lavd")) == "scx_lavd"


def test_strip_prefix_inverts_ensure() -> None:
    for name in ("rustland", "lavd", "bpfland", "flash"):
        assert strip_prefix(ensure_prefix(name)) == name


def test_strip_prefix_leaves_plain_names() -> None:
    assert strip_prefix("rustland") == "rustland"
    assert strip_prefix("unknown") == "unknown"
    # only a leading prefix counts
    assert strip_prefix("my_scx_sched") == "my_scx_sched"
