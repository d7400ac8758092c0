"""FastAPI application serving the aggregated news list."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from fastapi import Depends, FastAPI, Query
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import FileResponse, JSONResponse, PlainTextResponse

from .query import NewsQuery
from .schemas import ErrorResponse, NewsResponse, PingResponse
from .service import NewsAggregator

LOGGER = logging.getLogger(__name__)


def _static_file(root: Path, requested: str) -> Optional[Path]:
    """Resolve ``requested`` under ``root``; ``None`` if missing or outside it."""

    candidate = (root / requested).resolve()
    try:
        candidate.relative_to(root)
    except ValueError:
        return None
    if candidate.is_file():
        return candidate
    return None


def create_app(aggregator: NewsAggregator, frontend_dir: Optional[Path] = None) -> FastAPI:
    app = FastAPI(title="Newsroom Feed", version="1.0.0")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    def get_aggregator() -> NewsAggregator:
        return aggregator

    @app.get("/api/ping", response_model=PingResponse)
    def ping() -> PingResponse:
        return PingResponse()

    @app.get(
        "/api/news",
        response_model=NewsResponse,
        responses={500: {"model": ErrorResponse}},
    )
    def list_news(
        q: Optional[str] = Query(None, description="Text searched in title, description and source"),
        max_results: Optional[str] = Query(None, alias="max", description="Result cap, 1-200"),
        source: Optional[str] = Query(None, description="Substring of the source name"),
        service: NewsAggregator = Depends(get_aggregator),
    ):
        try:
            query = NewsQuery.from_params(q=q, source=source, max_results=max_results)
            result, snapshot = service.search(query)
            return NewsResponse.from_result(result, snapshot)
        except Exception:
            LOGGER.exception("Error serving /api/news")
            return JSONResponse(status_code=500, content={"error": "failed"})

    root = frontend_dir.resolve() if frontend_dir is not None else None

    @app.api_route("/{full_path:path}", methods=["GET", "HEAD"], include_in_schema=False)
    def frontend(full_path: str):
        if full_path == "api" or full_path.startswith("api/"):
            return JSONResponse(status_code=404, content={"detail": "Not Found"})
        if root is not None:
            static = _static_file(root, full_path) if full_path else None
            if static is not None:
                return FileResponse(static)
            index_file = root / "index.html"
            if index_file.is_file():
                return FileResponse(index_file)
        return PlainTextResponse("Index file not found (server).", status_code=404)

    return app


__all__ = ["create_app"]
