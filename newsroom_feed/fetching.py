"""Feed retrieval utilities for the aggregator refresh cycle."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Iterable, List, Optional

import feedparser
import httpx

from .config import FetcherConfig
from .exceptions import FeedFetchError
from .models import Article, ParsedFeed
from .normalizer import entry_from_feedparser, normalize_entry

LOGGER = logging.getLogger(__name__)


@dataclass
class FeedFailure:
    """A feed that could not be retrieved during a cycle."""

    url: str
    reason: str


@dataclass
class FetchOutcome:
    """Articles gathered from every reachable feed plus the feeds that failed."""

    articles: List[Article] = field(default_factory=list)
    failures: List[FeedFailure] = field(default_factory=list)


class FeedFetcher:
    """Download and normalize syndication feeds, one attempt per feed."""

    def __init__(
        self,
        config: Optional[FetcherConfig] = None,
        client: Optional[httpx.Client] = None,
    ) -> None:
        self.config = config or FetcherConfig()
        self._owns_client = client is None
        self._client = client or httpx.Client(
            timeout=self.config.timeout,
            follow_redirects=True,
            headers={"User-Agent": self.config.user_agent},
        )

    def close(self) -> None:
        if self._owns_client:
            self._client.close()

    def fetch_feed(self, url: str) -> ParsedFeed:
        """Fetch and parse a single feed.

        Raises :class:`FeedFetchError` on network errors, non-2xx responses and
        documents that feedparser cannot make sense of.
        """

        try:
            response = self._client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise FeedFetchError(url, f"HTTP {exc.response.status_code}") from exc
        except httpx.HTTPError as exc:
            raise FeedFetchError(url, f"{type(exc).__name__}: {exc}") from exc

        parsed = feedparser.parse(
            response.content,
            response_headers={
                "content-type": response.headers.get("content-type", "application/xml"),
                "content-location": str(response.url),
            },
        )
        entries = getattr(parsed, "entries", None) or []
        if getattr(parsed, "bozo", 0) and not entries:
            exc = getattr(parsed, "bozo_exception", None)
            raise FeedFetchError(url, f"invalid feed document ({exc})" if exc else "invalid feed document")

        try:
            raw_entries = [entry_from_feedparser(entry) for entry in entries]
        except (AttributeError, TypeError, ValueError) as exc:
            raise FeedFetchError(url, f"malformed entry ({exc})") from exc

        feed_meta = getattr(parsed, "feed", None) or {}
        return ParsedFeed(url=url, title=feed_meta.get("title") or None, entries=raw_entries)

    def collect(self, feeds: Iterable[str], now: Optional[datetime] = None) -> FetchOutcome:
        """Fetch every feed in order, skipping (and recording) the ones that fail."""

        outcome = FetchOutcome()
        for url in feeds:
            try:
                feed = self.fetch_feed(url)
            except FeedFetchError as exc:
                LOGGER.warning("Failed to fetch feed %s: %s", url, exc.reason)
                outcome.failures.append(FeedFailure(url=url, reason=exc.reason))
                continue

            stamp = now or datetime.now(timezone.utc)
            source = feed.source_name
            outcome.articles.extend(
                normalize_entry(entry, source, now=stamp) for entry in feed.entries
            )
            LOGGER.debug("Fetched %d entries from %s", len(feed.entries), source)
        return outcome


__all__ = ["FeedFailure", "FeedFetcher", "FetchOutcome"]
