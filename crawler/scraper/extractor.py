"""Link and asset extraction: turns a :class:`ParsedDocument` into an
:class:`ExtractionResult`."""

from __future__ import annotations

import logging
from typing import Callable, Iterable, List, Optional

from crawler.scraper.document import ParsedDocument
from crawler.scraper.models import Candidate, CandidateKind, ExtractionResult, Node
from crawler.scraper.urls import dedupe_urls, normalize_url

logger = logging.getLogger(__name__)

Rule = Callable[[Node], Optional[Candidate]]


# ---------------------------------------------------------------------------
# Per-node rules
# ---------------------------------------------------------------------------

def _anchor_candidate(node: Node) -> Optional[Candidate]:
    """Return the first non-empty ``href`` of an ``<a>`` element."""
    if not node.is_element("a"):
        return None
    href = node.first("href")
    if href is None:
        return None
    return Candidate(raw=href, kind=CandidateKind.LINK)


def _src_rule(kind: CandidateKind) -> Rule:
    def rule(node: Node) -> Optional[Candidate]:
        src = node.first("src")
        if src is None:
            return None
        return Candidate(raw=src, kind=kind)

    return rule


def _link_candidate(node: Node) -> Optional[Candidate]:
    """Stylesheets and shortcut icons referenced from ``<link>`` elements.

    ``rel``, ``type`` and ``href`` are read last-wins.  Any other ``rel``
    (alternate, preload, ...) is not treated as an asset.
    """
    rel = node.last("rel")
    link_type = node.last("type")
    href = node.last("href")
    if href is None:
        return None
    if rel == "stylesheet" and link_type == "text/css":
        return Candidate(raw=href, kind=CandidateKind.STYLESHEET)
    if rel == "shortcut icon":
        return Candidate(raw=href, kind=CandidateKind.ICON)
    return None


_ASSET_RULES = (
    ("img", _src_rule(CandidateKind.IMAGE)),
    ("script", _src_rule(CandidateKind.SCRIPT)),
    ("link", _link_candidate),
)


# ---------------------------------------------------------------------------
# Internal helpers
# ---------------------------------------------------------------------------

def _candidates(nodes: Iterable[Node], rule: Rule) -> List[Candidate]:
    found = (rule(n) for n in nodes)
    return [c for c in found if c is not None]


def _resolve(base: str, candidates: List[Candidate], label: str) -> List[str]:
    resolved = [normalize_url(base, c.raw) for c in candidates]
    urls = dedupe_urls(u for u in resolved if u is not None)
    logger.debug(
        "%s: %d candidates, %d rejected, %d unique on %s",
        label,
        len(candidates),
        resolved.count(None),
        len(urls),
        base,
    )
    return urls


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def extract_links(doc: ParsedDocument) -> List[str]:
    """Return the absolute targets of every ``<a href>`` in *doc*."""
    return _resolve(doc.url, _candidates(doc.query("a"), _anchor_candidate), "links")


def extract_assets(doc: ParsedDocument) -> List[str]:
    """Return the absolute URLs of images, scripts, stylesheets and icons.

    Candidates are pooled in pass order (images, scripts, then ``<link>``
    resources) before deduplication.
    """
    candidates: List[Candidate] = []
    for tag, rule in _ASSET_RULES:
        candidates.extend(_candidates(doc.query(tag), rule))
    return _resolve(doc.url, candidates, "assets")


def extract(doc: Optional[ParsedDocument]) -> ExtractionResult:
    """Extract the links and assets referenced by *doc*.

    Never raises for content reasons: unusable nodes, attributes and URLs are
    skipped individually.  An absent document yields an empty result.
    """
    if doc is None:
        return ExtractionResult()
    return ExtractionResult(links=extract_links(doc), assets=extract_assets(doc))
