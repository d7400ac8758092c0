from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable

import pytest

from newsroom_feed.models import Article


def ts(value: str) -> datetime:
    return datetime.fromisoformat(value.replace("Z", "+00:00")).astimezone(timezone.utc)


@pytest.fixture
def make_article() -> Callable[..., Article]:
    counter = {"n": 0}

    def _make(
        url: str = "",
        published: str = "2024-01-01T00:00:00Z",
        title: str = "",
        description: str = "",
        source: str = "Example",
        image: str | None = None,
    ) -> Article:
        counter["n"] += 1
        return Article(
            id=f"article-{counter['n']}",
            title=title,
            description=description,
            url=url,
            source=source,
            published_at=ts(published),
            image=image,
        )

    return _make


RSS_TEMPLATE = """<?xml version="1.0" encoding="UTF-8"?>
<rss version="2.0">
  <channel>
    <title>{title}</title>
    <link>https://example.com/</link>
    <description>Example feed</description>
    {items}
  </channel>
</rss>
"""


def rss_item(
    title: str,
    link: str,
    pub_date: str = "Tue, 02 Jan 2024 10:00:00 GMT",
    description: str = "",
    guid: str | None = None,
    enclosure: str | None = None,
) -> str:
    parts = [f"<title>{title}</title>", f"<link>{link}</link>", f"<pubDate>{pub_date}</pubDate>"]
    if description:
        parts.append(f"<description>{description}</description>")
    if guid:
        parts.append(f'<guid isPermaLink="false">{guid}</guid>')
    if enclosure:
        parts.append(f'<enclosure url="{enclosure}" type="image/jpeg" length="0"/>')
    return "<item>" + "".join(parts) + "</item>"


def rss_document(title: str, *items: str) -> str:
    return RSS_TEMPLATE.format(title=title, items="\n".join(items))
