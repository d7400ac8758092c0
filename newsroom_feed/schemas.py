"""Pydantic schemas for response payloads."""

from __future__ import annotations

from typing import List, Optional

from pydantic import BaseModel, Field

from .cache import CacheSnapshot
from .models import Article, format_timestamp
from .query import QueryResult


class PingResponse(BaseModel):
    ok: bool = True
    msg: str = "pong"


class ErrorResponse(BaseModel):
    error: str


class ArticleResponse(BaseModel):
    id: str
    title: str
    description: str
    url: str
    source: str
    publishedAt: str = Field(..., description="ISO-8601 publication time (UTC)")
    image: Optional[str] = None

    @classmethod
    def from_article(cls, article: Article) -> "ArticleResponse":
        return cls(**article.to_dict())


class NewsResponse(BaseModel):
    total: int = Field(..., description="Number of matches before the result cap")
    lastUpdated: Optional[str] = Field(
        None, description="Completion time of the last refresh, null before the first"
    )
    articles: List[ArticleResponse]

    @classmethod
    def from_result(cls, result: QueryResult, snapshot: CacheSnapshot) -> "NewsResponse":
        last_updated = snapshot.last_updated
        return cls(
            total=result.total,
            lastUpdated=format_timestamp(last_updated) if last_updated else None,
            articles=[ArticleResponse.from_article(article) for article in result.articles],
        )


__all__ = ["ArticleResponse", "ErrorResponse", "NewsResponse", "PingResponse"]
