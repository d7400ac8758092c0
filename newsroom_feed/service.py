"""Core news aggregation service."""

from __future__ import annotations

import logging
import threading
import time
from datetime import datetime, timezone
from typing import Optional

from .cache import ArticleCache, CacheSnapshot
from .config import AggregatorConfig
from .deduplication import merge_articles
from .fetching import FeedFetcher
from .query import NewsQuery, QueryResult, filter_articles

LOGGER = logging.getLogger(__name__)


class NewsAggregator:
    """Poll the configured feeds on an interval and serve the merged result."""

    def __init__(
        self,
        config: AggregatorConfig,
        cache: Optional[ArticleCache] = None,
        fetcher: Optional[FeedFetcher] = None,
    ) -> None:
        self.config = config
        self.cache = cache or ArticleCache()
        self._fetcher = fetcher or FeedFetcher(config.fetcher)
        self._stop_event = threading.Event()
        self._fetch_thread: Optional[threading.Thread] = None

    @property
    def running(self) -> bool:
        return self._fetch_thread is not None and self._fetch_thread.is_alive()

    def start(self) -> None:
        if self.running:
            return
        LOGGER.info(
            "Starting feed refresher: %d feeds every %.1fs",
            len(self.config.feeds),
            self.config.refresh_interval_seconds,
        )
        self._stop_event.clear()
        self._fetch_thread = threading.Thread(
            target=self._fetch_loop, name="feed-refresher", daemon=True
        )
        self._fetch_thread.start()

    def stop(self, timeout: float = 5.0) -> None:
        LOGGER.info("Stopping feed refresher")
        self._stop_event.set()
        if self._fetch_thread is not None:
            self._fetch_thread.join(timeout=timeout)
            self._fetch_thread = None

    def close(self) -> None:
        """Stop refreshing and release the HTTP client."""

        self.stop()
        self._fetcher.close()

    def _fetch_loop(self) -> None:
        while not self._stop_event.is_set():
            start = time.monotonic()
            try:
                self.refresh()
            except Exception as exc:  # pragma: no cover - resilience
                LOGGER.exception("Periodic feed refresh failed: %s", exc)
            elapsed = time.monotonic() - start
            wait_time = max(0.0, self.config.refresh_interval_seconds - elapsed)
            self._stop_event.wait(wait_time)

    def refresh(self) -> bool:
        """Run one fetch-merge cycle and install the result in the cache.

        Returns ``False`` if the cycle aborted; the cache then keeps its
        previous generation.
        """

        try:
            outcome = self._fetcher.collect(self.config.feeds)
            merged = merge_articles(outcome.articles)
            snapshot = self.cache.replace(merged, datetime.now(timezone.utc))
        except Exception as exc:
            LOGGER.exception("Error refreshing feeds: %s", exc)
            return False

        LOGGER.info(
            "Feeds polled: articles=%d failed_feeds=%d at %s",
            len(snapshot.articles),
            len(outcome.failures),
            snapshot.last_updated.isoformat() if snapshot.last_updated else None,
        )
        return True

    def snapshot(self) -> CacheSnapshot:
        return self.cache.read()

    def search(self, query: NewsQuery) -> tuple[QueryResult, CacheSnapshot]:
        snapshot = self.cache.read()
        return filter_articles(snapshot.articles, query), snapshot


__all__ = ["NewsAggregator"]
