"""Crawler CLI — entry-point for fetching a page and listing what it references.

Usage:
    python cli/main.py --help

Commands:
    fetch   → fetch one page, print its links and assets
    crawl   → run against the configured start URL and log what was found
"""

from __future__ import annotations

import sys
from pathlib import Path

# Ensure the project root is on sys.path so that `from crawler.xxx import ...`
# works when the CLI is invoked as `python cli/main.py` from any working
# directory.
_ROOT = Path(__file__).resolve().parent.parent
if str(_ROOT) not in sys.path:
    sys.path.insert(0, str(_ROOT))

import json
import logging
from typing import List, Optional

import httpx
import typer

from crawler.config import settings
from crawler.scraper import ExtractionResult, HttpFetcher

logger = logging.getLogger(__name__)

app = typer.Typer(
    name="crawler",
    help="Fetch a web page and list the links and assets it references.",
    no_args_is_help=True,
)


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    """Configure logging before any command runs."""
    level = logging.DEBUG if verbose else getattr(logging, settings.log_level, logging.WARNING)
    logging.basicConfig(
        level=level,
        format="%(asctime)s - %(levelname)s - %(name)s - %(message)s",
    )


def _fetch_or_exit(url: str, prefix: str) -> ExtractionResult:
    try:
        return HttpFetcher().fetch(url)
    except httpx.HTTPError as e:
        typer.echo(f"[{prefix}] Error: {e}")
        raise typer.Exit(code=1)


def _echo_urls(prefix: str, label: str, urls: List[str]) -> None:
    typer.echo(f"[{prefix}] {label:<7}: {len(urls)}")
    for u in urls:
        typer.echo(f"  {u}")


# ---------------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------------
@app.command("fetch")
def fetch(
    url: str = typer.Argument(..., help="URL of the page to fetch."),
    as_json: bool = typer.Option(False, "--json", help="Print one JSON object instead of text."),
    links: bool = typer.Option(True, "--links/--no-links", help="Include anchor targets."),
    assets: bool = typer.Option(True, "--assets/--no-assets", help="Include page assets."),
) -> None:
    """Fetch URL and print the absolute links and assets it references."""
    if as_json:
        result = _fetch_or_exit(url, "fetch")
        payload = {"url": url}
        if links:
            payload["links"] = result.links
        if assets:
            payload["assets"] = result.assets
        typer.echo(json.dumps(payload, indent=2))
        return

    typer.echo(f"[fetch] Fetching {url!r} …")
    result = _fetch_or_exit(url, "fetch")
    if links:
        _echo_urls("fetch", "Links", result.links)
    if assets:
        _echo_urls("fetch", "Assets", result.assets)


@app.command("crawl")
def crawl(
    url: Optional[str] = typer.Argument(None, help="Start URL (defaults to START_URL)."),
) -> None:
    """Fetch the start page and log the URLs found on it."""
    target = url or settings.start_url
    result = _fetch_or_exit(target, "crawl")
    logger.info("URLs found: %s", result.links)
    typer.echo(f"[crawl] {target}: {len(result.links)} links, {len(result.assets)} assets")


# ---------------------------------------------------------------------------
# Entry-point
# ---------------------------------------------------------------------------
if __name__ == "__main__":
    app()
