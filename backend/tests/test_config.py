from __future__ import annotations

from app.core.config import Settings


def test_defaults_serve_on_fixed_port(monkeypatch):
    for name in ("PORT", "HOST", "SENTRY_DSN"):
        monkeypatch.delenv(name, raising=False)
    s = Settings(_env_file=None)
    assert s.PORT == 8081
    assert s.HOST == "0.0.0.0"
    assert s.SENTRY_DSN is None


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("PORT", "9090")
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    s = Settings(_env_file=None)
    assert s.PORT == 9090
    assert s.LOG_LEVEL == "DEBUG"
