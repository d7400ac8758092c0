"""Map raw feed entries onto canonical :class:`Article` records."""

from __future__ import annotations

import html
import re
from datetime import datetime, timezone
from typing import Any, Mapping, Optional

from dateutil import parser as dtparse

from .models import Article, RawEntry

_TAG_RE = re.compile(r"<[^>]+>")
_WS_RE = re.compile(r"\s+")

# North American zone names allowed by RFC 822, as UTC offsets in seconds
RFC822_ZONES = {
    "EST": -5 * 3600,
    "EDT": -4 * 3600,
    "CST": -6 * 3600,
    "CDT": -5 * 3600,
    "MST": -7 * 3600,
    "MDT": -6 * 3600,
    "PST": -8 * 3600,
    "PDT": -7 * 3600,
}


def strip_html(text: Optional[str]) -> str:
    """Return ``text`` with markup removed, entities decoded and whitespace collapsed."""

    if not text:
        return ""
    stripped = _TAG_RE.sub(" ", text)
    return _WS_RE.sub(" ", html.unescape(stripped)).strip()


def _first_non_empty(*values: Optional[str]) -> str:
    for value in values:
        if value:
            return value
    return ""


def _as_utc(dt: datetime) -> datetime:
    if dt.tzinfo is None:
        dt = dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def parse_published(entry: RawEntry) -> Optional[datetime]:
    """Best-effort publication timestamp for ``entry`` in UTC.

    A zone-less parse of ``pub_date`` only wins when no structured timestamp
    is available.
    """

    parsed: Optional[datetime] = None
    if entry.pub_date:
        try:
            parsed = dtparse.parse(entry.pub_date, tzinfos=RFC822_ZONES)
        except (ValueError, OverflowError):
            parsed = None
    if parsed is not None and parsed.tzinfo is not None:
        return _as_utc(parsed)
    if entry.published is not None:
        return _as_utc(entry.published)
    if parsed is not None:
        return _as_utc(parsed)
    return None


def normalize_entry(
    entry: RawEntry,
    source: str,
    now: Optional[datetime] = None,
) -> Article:
    """Build an :class:`Article` from ``entry``; never raises on missing data."""

    published_at = parse_published(entry)
    if published_at is None:
        published_at = _as_utc(now) if now is not None else datetime.now(timezone.utc)

    article_id = _first_non_empty(entry.id, entry.guid, entry.link)
    if not article_id:
        article_id = f"{entry.title or ''}|{entry.pub_date or ''}"

    return Article(
        id=article_id,
        title=entry.title or "",
        description=_first_non_empty(
            entry.content_snippet, entry.content, entry.description
        ),
        url=entry.link or "",
        source=_first_non_empty(source, entry.source_title),
        published_at=published_at,
        image=entry.enclosure_url or None,
    )


def _struct_to_datetime(value: Any) -> Optional[datetime]:
    if not value:
        return None
    try:
        return datetime(*value[:6], tzinfo=timezone.utc)
    except (TypeError, ValueError):
        return None


def entry_from_feedparser(entry: Mapping[str, Any]) -> RawEntry:
    """Convert a feedparser entry into a :class:`RawEntry`."""

    content = None
    blocks = entry.get("content") or []
    if blocks:
        content = blocks[0].get("value") or None
    description = entry.get("summary") or entry.get("description") or None
    if content is None:
        content = description

    enclosure_url = None
    for enclosure in entry.get("enclosures") or []:
        href = enclosure.get("href") or enclosure.get("url")
        if href:
            enclosure_url = href
            break

    source = entry.get("source") or {}
    source_title = source.get("title") if hasattr(source, "get") else None

    return RawEntry(
        id=entry.get("id") or None,
        guid=entry.get("guid") or None,
        link=entry.get("link") or None,
        title=entry.get("title") or None,
        pub_date=entry.get("published") or entry.get("updated") or None,
        published=_struct_to_datetime(
            entry.get("published_parsed") or entry.get("updated_parsed")
        ),
        content_snippet=strip_html(content) or None,
        content=content,
        description=description,
        enclosure_url=enclosure_url,
        source_title=source_title or None,
    )


__all__ = ["entry_from_feedparser", "normalize_entry", "parse_published", "strip_html"]
