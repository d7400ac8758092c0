"""Article deduplication for the refresh cycle."""

from __future__ import annotations

from typing import Dict, Iterable, List

from .models import Article


def canonical_url(url: str) -> str:
    """Return ``url`` without its fragment; this is the merge key."""

    return url.split("#", 1)[0]


def merge_articles(articles: Iterable[Article]) -> List[Article]:
    """Collapse articles sharing a canonical url and sort them newest first.

    Articles without a url are dropped. When two articles share a key the one
    with the later ``published_at`` wins; on a tie the first one seen is kept.
    """

    merged: Dict[str, Article] = {}
    for article in articles:
        if not article.url:
            continue
        key = canonical_url(article.url)
        existing = merged.get(key)
        if existing is None or article.published_at > existing.published_at:
            merged[key] = article

    # sorted() is stable, so equal timestamps keep insertion order
    return sorted(merged.values(), key=lambda item: item.published_at, reverse=True)


__all__ = ["canonical_url", "merge_articles"]
