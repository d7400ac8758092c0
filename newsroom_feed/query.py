"""Filtering of the cached article list for read requests."""

from __future__ import annotations

import math
import re
from dataclasses import dataclass
from typing import List, Optional, Sequence

from .models import Article

DEFAULT_MAX_RESULTS = 20
MIN_RESULTS = 1
MAX_RESULTS = 200


_DECIMAL_RE = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?")
_RADIX_RE = re.compile(r"0([xXoObB])([0-9a-fA-F]+)")
_RADIX_BASES = {"x": 16, "o": 8, "b": 2}


def _number_from_text(text: str) -> float:
    """Convert ``text`` the way a JavaScript ``Number()`` call would; NaN on failure."""

    text = text.strip()
    if not text:
        return 0.0
    if text in ("Infinity", "+Infinity"):
        return math.inf
    if text == "-Infinity":
        return -math.inf
    if _DECIMAL_RE.fullmatch(text):
        return float(text)
    radix = _RADIX_RE.fullmatch(text)
    if radix:
        try:
            return float(int(radix.group(2), _RADIX_BASES[radix.group(1).lower()]))
        except ValueError:
            return math.nan
        except OverflowError:
            return math.inf
    return math.nan


def parse_max_results(raw: Optional[object]) -> int:
    """Interpret a ``max`` query value.

    Missing, non-numeric and zero values fall back to the default; anything
    else is clamped to ``[MIN_RESULTS, MAX_RESULTS]``.
    """

    if raw is None:
        return DEFAULT_MAX_RESULTS
    if isinstance(raw, (int, float)):
        value = float(raw)
    else:
        value = _number_from_text(str(raw))
    if math.isnan(value) or value == 0:
        return DEFAULT_MAX_RESULTS
    value = min(float(MAX_RESULTS), max(float(MIN_RESULTS), value))
    return int(value)


@dataclass(frozen=True)
class NewsQuery:
    """Normalized search parameters; empty strings mean "no filter"."""

    search_text: str = ""
    source_text: str = ""
    max_results: int = DEFAULT_MAX_RESULTS

    @classmethod
    def from_params(
        cls,
        q: Optional[str] = None,
        source: Optional[str] = None,
        max_results: Optional[object] = None,
    ) -> "NewsQuery":
        return cls(
            search_text=(q or "").strip().casefold(),
            source_text=(source or "").strip().casefold(),
            max_results=parse_max_results(max_results),
        )


@dataclass(frozen=True)
class QueryResult:
    total: int
    articles: List[Article]


def _haystack(article: Article) -> str:
    return f"{article.title} {article.description} {article.source}".casefold()


def filter_articles(articles: Sequence[Article], query: NewsQuery) -> QueryResult:
    """Apply ``query`` to an already sorted article list."""

    matches = list(articles)
    if query.search_text:
        matches = [a for a in matches if query.search_text in _haystack(a)]
    if query.source_text:
        matches = [a for a in matches if query.source_text in a.source.casefold()]
    return QueryResult(total=len(matches), articles=matches[: query.max_results])


__all__ = [
    "DEFAULT_MAX_RESULTS",
    "MAX_RESULTS",
    "MIN_RESULTS",
    "NewsQuery",
    "QueryResult",
    "filter_articles",
    "parse_max_results",
]
