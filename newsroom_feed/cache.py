"""Process-wide holder for the latest merged article list."""

from __future__ import annotations

import threading
from dataclasses import dataclass
from datetime import datetime
from typing import Iterable, Optional, Tuple

from .models import Article


@dataclass(frozen=True)
class CacheSnapshot:
    """One generation of the article list and the time it was produced."""

    articles: Tuple[Article, ...] = ()
    last_updated: Optional[datetime] = None


class ArticleCache:
    """Atomically replaceable cell holding a :class:`CacheSnapshot`.

    Readers grab the current snapshot reference and never see a partially
    written generation; the snapshot itself is immutable.
    """

    def __init__(self) -> None:
        self._snapshot = CacheSnapshot()
        self._write_lock = threading.Lock()

    def replace(self, articles: Iterable[Article], timestamp: datetime) -> CacheSnapshot:
        snapshot = CacheSnapshot(articles=tuple(articles), last_updated=timestamp)
        with self._write_lock:
            self._snapshot = snapshot
        return snapshot

    def read(self) -> CacheSnapshot:
        return self._snapshot


__all__ = ["ArticleCache", "CacheSnapshot"]
