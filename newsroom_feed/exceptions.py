class NewsroomFeedError(Exception):
    """Base class for errors raised by the feed aggregator."""


class FeedFetchError(NewsroomFeedError):
    """Raised when a feed cannot be downloaded or parsed."""

    def __init__(self, url: str, reason: str) -> None:
        super().__init__(f"Failed to fetch feed: {url} ({reason})")
        self.url = url
        self.reason = reason
