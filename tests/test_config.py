from __future__ import annotations

from newsroom_feed.config import DEFAULT_FEEDS, load_config


def test_defaults(monkeypatch, tmp_path):
    for name in ("POLL_INTERVAL_MS", "FEED_TIMEOUT_SECONDS", "PORT", "FRONTEND_DIR", "LOG_LEVEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)

    config = load_config()

    assert config.feeds == DEFAULT_FEEDS
    assert len(config.feeds) == 7
    assert config.poll_interval_ms == 60_000
    assert config.refresh_interval_seconds == 60.0
    assert config.api_port == 2000
    assert config.frontend_dir is None
    assert config.fetcher.timeout == 8.0


def test_env_overrides(monkeypatch, tmp_path):
    frontend = tmp_path / "site"
    frontend.mkdir()
    monkeypatch.setenv("POLL_INTERVAL_MS", "120000")
    monkeypatch.setenv("FEED_TIMEOUT_SECONDS", "3.5")
    monkeypatch.setenv("PORT", "9000")
    monkeypatch.setenv("FRONTEND_DIR", str(frontend))
    monkeypatch.setenv("LOG_LEVEL", "debug")

    config = load_config()

    assert config.refresh_interval_seconds == 120.0
    assert config.fetcher.timeout == 3.5
    assert config.api_port == 9000
    assert config.frontend_dir == frontend.resolve()
    assert config.log_level == "DEBUG"


def test_invalid_values_fall_back(monkeypatch):
    monkeypatch.setenv("POLL_INTERVAL_MS", "soon")
    monkeypatch.setenv("FEED_TIMEOUT_SECONDS", "-1")
    monkeypatch.setenv("PORT", "")

    config = load_config()

    assert config.poll_interval_ms == 60_000
    assert config.fetcher.timeout == 8.0
    assert config.api_port == 2000
