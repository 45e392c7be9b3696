"""Scraper package — page fetch, parsing and link/asset extraction."""

from crawler.scraper.document import ParsedDocument, parse_document
from crawler.scraper.extractor import extract, extract_assets, extract_links
from crawler.scraper.fetcher import Fetcher, HttpFetcher, fetch_url
from crawler.scraper.models import ExtractionResult, Node, NodeKind, RawPage
from crawler.scraper.urls import normalize_url

__all__ = [
    "fetch_url",
    "parse_document",
    "extract",
    "extract_links",
    "extract_assets",
    "normalize_url",
    "Fetcher",
    "HttpFetcher",
    "ParsedDocument",
    "ExtractionResult",
    "Node",
    "NodeKind",
    "RawPage",
]
