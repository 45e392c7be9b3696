"""HTTP retrieval and the fetch → parse → extract pipeline for one page."""

from __future__ import annotations

import logging
from typing import Protocol

import httpx

from crawler.config import settings
from crawler.scraper.document import parse_document
from crawler.scraper.extractor import extract
from crawler.scraper.models import ExtractionResult, RawPage

logger = logging.getLogger(__name__)


def _default_headers() -> dict[str, str]:
    return {"User-Agent": settings.user_agent}


def fetch_url(url: str) -> RawPage:
    """Fetch *url* and return a :class:`RawPage`.

    Redirects are followed; the URL the body finally came from is recorded as
    ``final_url``.

    Raises:
        httpx.HTTPStatusError: If the server returns a 4xx/5xx status code.
        httpx.TransportError: On timeouts, DNS and connection failures.
    """
    with httpx.Client(
        headers=_default_headers(),
        timeout=settings.request_timeout,
        follow_redirects=True,
    ) as client:
        response = client.get(url)
        response.raise_for_status()
        html = response.text
        status_code = response.status_code
        final_url = str(response.url)

    return RawPage(url=url, html=html, status_code=status_code, final_url=final_url)


class Fetcher(Protocol):
    def fetch(self, url: str) -> ExtractionResult:
        """Return the links and assets found on the page at *url*."""
        ...


class HttpFetcher:
    """:class:`Fetcher` backed by :func:`fetch_url` and BeautifulSoup."""

    def fetch(self, url: str) -> ExtractionResult:
        raw = fetch_url(url)
        result = extract(parse_document(raw))

        logger.debug("URLs: %s", result.links)
        logger.debug("Assets: %s", result.assets)

        return result
