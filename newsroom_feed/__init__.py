"""Feed aggregator application package."""

from .cache import ArticleCache, CacheSnapshot
from .config import AggregatorConfig, DEFAULT_FEEDS, FetcherConfig, load_config
from .deduplication import canonical_url, merge_articles
from .exceptions import FeedFetchError, NewsroomFeedError
from .fetching import FeedFailure, FeedFetcher, FetchOutcome
from .models import Article, ParsedFeed, RawEntry
from .normalizer import entry_from_feedparser, normalize_entry
from .query import NewsQuery, QueryResult, filter_articles, parse_max_results
from .service import NewsAggregator

__all__ = [
    "AggregatorConfig",
    "Article",
    "ArticleCache",
    "CacheSnapshot",
    "DEFAULT_FEEDS",
    "FeedFailure",
    "FeedFetchError",
    "FeedFetcher",
    "FetchOutcome",
    "FetcherConfig",
    "NewsAggregator",
    "NewsQuery",
    "NewsroomFeedError",
    "ParsedFeed",
    "QueryResult",
    "RawEntry",
    "canonical_url",
    "entry_from_feedparser",
    "filter_articles",
    "load_config",
    "merge_articles",
    "normalize_entry",
    "parse_max_results",
]
