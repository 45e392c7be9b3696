"""Markup parsing: turns a :class:`RawPage` into a queryable :class:`ParsedDocument`."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List

from bs4 import BeautifulSoup, NavigableString, Tag

from crawler.scraper.models import Node, NodeKind, RawPage


def _accumulate(attrs: Dict[str, Any], key: str, value: str) -> None:
    """Keep every copy of a repeated attribute instead of the last one only."""
    existing = attrs[key]
    if isinstance(existing, list):
        existing.append(value)
    else:
        attrs[key] = [existing, value]


def _to_node(element: Any) -> Node:
    if isinstance(element, Tag):
        pairs = []
        for key, value in element.attrs.items():
            values = value if isinstance(value, list) else [value]
            pairs.extend((key, "" if v is None else str(v)) for v in values)
        return Node(kind=NodeKind.ELEMENT, tag=element.name, attrs=tuple(pairs))
    if type(element) is NavigableString:
        return Node(kind=NodeKind.TEXT)
    return Node(kind=NodeKind.OTHER)


@dataclass
class ParsedDocument:
    """A parsed page plus the URL it was served from.

    ``url`` is the origin URL used as the base for relative references.
    """

    url: str
    root: BeautifulSoup

    @classmethod
    def from_html(cls, url: str, html: str) -> ParsedDocument:
        # Multi-valued attributes are disabled so ``rel="shortcut icon"``
        # stays a single string.
        soup = BeautifulSoup(
            html,
            "html.parser",
            multi_valued_attributes=None,
            on_duplicate_attribute=_accumulate,
        )
        return cls(url=url, root=soup)

    def query(self, tag: str) -> List[Node]:
        """Return the nodes matching *tag*, in document order."""
        return [_to_node(el) for el in self.root.find_all(tag)]


def parse_document(raw: RawPage) -> ParsedDocument:
    """Parse *raw* using its post-redirect URL as the document origin."""
    return ParsedDocument.from_html(raw.final_url, raw.html)
