"""Core data models for the feed aggregator."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, List, Optional


def format_timestamp(value: datetime) -> str:
    """Render a datetime as a UTC ISO-8601 string with millisecond precision."""

    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    value = value.astimezone(timezone.utc)
    return value.isoformat(timespec="milliseconds").replace("+00:00", "Z")


@dataclass(frozen=True)
class RawEntry:
    """One feed entry as delivered by a source; every field is optional."""

    id: Optional[str] = None
    guid: Optional[str] = None
    link: Optional[str] = None
    title: Optional[str] = None
    pub_date: Optional[str] = None
    published: Optional[datetime] = None
    content_snippet: Optional[str] = None
    content: Optional[str] = None
    description: Optional[str] = None
    enclosure_url: Optional[str] = None
    source_title: Optional[str] = None


@dataclass(frozen=True)
class Article:
    """Canonical article record served by the read API."""

    id: str
    title: str
    description: str
    url: str
    source: str
    published_at: datetime
    image: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "url": self.url,
            "source": self.source,
            "publishedAt": format_timestamp(self.published_at),
            "image": self.image,
        }


@dataclass(frozen=True)
class ParsedFeed:
    """A successfully downloaded and parsed feed document."""

    url: str
    title: Optional[str]
    entries: List[RawEntry]

    @property
    def source_name(self) -> str:
        return (self.title or "").strip() or self.url


__all__ = ["Article", "ParsedFeed", "RawEntry", "format_timestamp"]
