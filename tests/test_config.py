"""Tests for environment-driven settings."""

from crawler.config import Settings


def test_defaults(monkeypatch):
    for name in ("REQUEST_TIMEOUT", "USER_AGENT", "START_URL", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)

    s = Settings()
    assert s.request_timeout == 30.0
    assert s.start_url == "http://golang.org/"
    assert s.log_level == "WARNING"
    assert "crawler" in s.user_agent


def test_environment_overrides(monkeypatch):
    monkeypatch.setenv("REQUEST_TIMEOUT", "5")
    monkeypatch.setenv("START_URL", "https://example.com/")
    monkeypatch.setenv("LOG_LEVEL", "debug")

    s = Settings()
    assert s.request_timeout == 5.0
    assert s.start_url == "https://example.com/"
    assert s.log_level == "DEBUG"
