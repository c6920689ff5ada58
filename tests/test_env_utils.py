from __future__ import annotations

from scxctl.config import DEFAULT_ENDPOINT, load_endpoint
from scxctl.utils.env import env_choice


def test_env_choice(monkeypatch) -> None:  # noqa: ANN001
    monkeypatch.setenv("X_BUS", "session")
    assert env_choice("X_BUS", ["SYSTEM", "SESSION"], "SYSTEM") == "SESSION"
    monkeypatch.setenv("X_BUS", " System ")
    assert env_choice("X_BUS", ["SYSTEM", "SESSION"], "SESSION") == "SYSTEM"
    monkeypatch.setenv("X_BUS", "tcp")
    assert env_choice("X_BUS", ["SYSTEM", "SESSION"], "SYSTEM") == "SYSTEM"
    monkeypatch.delenv("X_BUS", raising=False)
    assert env_choice("X_BUS", ["SYSTEM"], "SYSTEM") == "SYSTEM"


def test_load_endpoint(monkeypatch) -> None:  # noqa: ANN001
    monkeypatch.delenv("SCXCTL_BUS", raising=False)
    assert load_endpoint() == DEFAULT_ENDPOINT
    assert DEFAULT_ENDPOINT.service == "org.scx.Loader"
    assert DEFAULT_ENDPOINT.path == "/org/scx/Loader"
    monkeypatch.setenv("SCXCTL_BUS", "SESSION")
    assert load_endpoint().bus == "SESSION"
