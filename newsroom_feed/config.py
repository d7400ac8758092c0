"""Configuration helpers for the feed aggregator service."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple
import logging
import math
import os

LOGGER = logging.getLogger(__name__)

DEFAULT_FEEDS: Tuple[str, ...] = (
    "https://news.google.com/rss?hl=en-US&gl=US&ceid=US:en",
    "https://news.google.com/rss?hl=en-GB&gl=GB&ceid=GB:en",
    "https://feeds.bbci.co.uk/news/rss.xml",
    "https://www.aljazeera.com/xml/rss/all.xml",
    "https://www.theguardian.com/world/rss",
    "https://rss.nytimes.com/services/xml/rss/nyt/HomePage.xml",
    "https://feeds.a.dj.com/rss/RSSWorldNews.xml",
)

DEFAULT_POLL_INTERVAL_MS = 60_000


@dataclass
class FetcherConfig:
    """Configuration for the feed fetcher."""

    timeout: float = 8.0
    user_agent: str = "newsroom-feed/1.0"


@dataclass
class AggregatorConfig:
    """Top-level configuration for the service."""

    feeds: Tuple[str, ...] = DEFAULT_FEEDS
    poll_interval_ms: int = DEFAULT_POLL_INTERVAL_MS
    fetcher: FetcherConfig = field(default_factory=FetcherConfig)
    api_host: str = "0.0.0.0"
    api_port: int = 2000
    frontend_dir: Optional[Path] = None
    log_level: str = "INFO"

    @property
    def refresh_interval_seconds(self) -> float:
        return self.poll_interval_ms / 1000.0


def _int_from_env(name: str, default: int) -> int:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw)
    except ValueError:
        LOGGER.warning("Ignoring invalid %s=%r, using %s", name, raw, default)
        return default


def _float_from_env(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = float(raw)
    except ValueError:
        LOGGER.warning("Ignoring invalid %s=%r, using %s", name, raw, default)
        return default
    if not math.isfinite(value) or value <= 0:
        LOGGER.warning("Ignoring non-positive %s=%r, using %s", name, raw, default)
        return default
    return value


def _resolve_frontend_dir() -> Optional[Path]:
    """Return the static document root if one is configured or present."""

    env_dir = os.getenv("FRONTEND_DIR")
    candidate = Path(env_dir).expanduser() if env_dir else Path("frontend")
    if candidate.is_dir():
        return candidate.resolve()
    if env_dir:
        LOGGER.warning("FRONTEND_DIR %s is not a directory; static files disabled", candidate)
    return None


def load_config() -> AggregatorConfig:
    """Load configuration from environment variables with sensible defaults."""

    poll_interval_ms = _int_from_env("POLL_INTERVAL_MS", DEFAULT_POLL_INTERVAL_MS)
    if poll_interval_ms <= 0:
        LOGGER.warning(
            "POLL_INTERVAL_MS must be positive, using %s", DEFAULT_POLL_INTERVAL_MS
        )
        poll_interval_ms = DEFAULT_POLL_INTERVAL_MS

    fetcher = FetcherConfig(
        timeout=_float_from_env("FEED_TIMEOUT_SECONDS", 8.0),
        user_agent=os.getenv("FEED_USER_AGENT", "newsroom-feed/1.0"),
    )

    return AggregatorConfig(
        feeds=DEFAULT_FEEDS,
        poll_interval_ms=poll_interval_ms,
        fetcher=fetcher,
        api_host=os.getenv("API_HOST", "0.0.0.0"),
        api_port=_int_from_env("PORT", 2000),
        frontend_dir=_resolve_frontend_dir(),
        log_level=os.getenv("LOG_LEVEL", "INFO").upper(),
    )


__all__ = [
    "AggregatorConfig",
    "DEFAULT_FEEDS",
    "DEFAULT_POLL_INTERVAL_MS",
    "FetcherConfig",
    "load_config",
]
