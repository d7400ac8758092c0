"""Entrypoint for running the feed aggregator application."""

from __future__ import annotations

import argparse
import logging
from typing import Sequence

import uvicorn
from rich.console import Console
from rich.table import Table

from .config import AggregatorConfig, load_config
from .query import NewsQuery
from .server import create_app
from .service import NewsAggregator


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Run the newsroom feed aggregator")
    parser.add_argument(
        "--once",
        action="store_true",
        help="Run a single refresh cycle, print the newest headlines and exit.",
    )
    parser.add_argument(
        "--max",
        dest="max_results",
        default=None,
        help="Number of headlines to print with --once (default 20, at most 200).",
    )
    return parser.parse_args(argv)


def run_once(
    config: AggregatorConfig,
    max_results: str | None = None,
    console: Console | None = None,
    aggregator: NewsAggregator | None = None,
) -> int:
    """Refresh once and render the merged list as a table; returns the article count."""

    console = console or Console()
    aggregator = aggregator or NewsAggregator(config)
    try:
        ok = aggregator.refresh()
    finally:
        aggregator.close()
    if not ok:
        console.print("[red]Refresh failed; see log output.[/red]")
        return 0

    result, snapshot = aggregator.search(NewsQuery.from_params(max_results=max_results))
    table = Table(title=f"{result.total} articles")
    table.add_column("Published", no_wrap=True)
    table.add_column("Source")
    table.add_column("Title")
    for article in result.articles:
        table.add_row(
            article.published_at.strftime("%Y-%m-%d %H:%M"),
            article.source,
            article.title or article.url,
        )
    console.print(table)
    return len(snapshot.articles)


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)
    config = load_config()
    logging.basicConfig(
        level=getattr(logging, config.log_level, logging.INFO),
        format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    )

    if args.once:
        run_once(config, args.max_results)
        return

    if config.frontend_dir is not None:
        logging.info("Serving static files from %s", config.frontend_dir)
    else:
        logging.warning("Frontend folder not found; static files will not be served")

    aggregator = NewsAggregator(config)
    aggregator.start()

    app = create_app(aggregator, config.frontend_dir)

    @app.on_event("shutdown")
    async def _shutdown() -> None:  # pragma: no cover - runtime hook
        aggregator.close()

    logging.info("Starting API server on %s:%s", config.api_host, config.api_port)
    try:
        uvicorn.run(app, host=config.api_host, port=config.api_port)
    finally:
        aggregator.close()


if __name__ == "__main__":  # pragma: no cover
    main()
