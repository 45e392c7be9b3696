"""Data models for the scraper pipeline."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Tuple


@dataclass
class RawPage:
    """The raw HTTP response for a single URL fetch.

    ``final_url`` is the URL the body was actually served from once redirects
    have been followed; it is the base for resolving relative references.
    """

    url: str
    html: str
    status_code: int
    final_url: str = ""

    def __post_init__(self) -> None:
        if not self.final_url:
            self.final_url = self.url


class NodeKind(str, Enum):
    ELEMENT = "element"
    TEXT = "text"
    OTHER = "other"


@dataclass(frozen=True)
class Node:
    """A single unit of a parsed document.

    Attributes are kept as ordered ``(key, value)`` pairs because HTML allows
    a key to repeat and the extraction rules disagree on which copy wins.
    """

    kind: NodeKind
    tag: str = ""
    attrs: Tuple[Tuple[str, str], ...] = ()

    def is_element(self, tag: str) -> bool:
        return self.kind is NodeKind.ELEMENT and self.tag == tag

    def first(self, key: str) -> Optional[str]:
        """Return the first non-empty value for *key*, or ``None``."""
        for k, v in self.attrs:
            if k == key and v:
                return v
        return None

    def last(self, key: str) -> Optional[str]:
        """Return the value of the last *key* attribute, empty or not."""
        value = None
        for k, v in self.attrs:
            if k == key:
                value = v
        return value


class CandidateKind(str, Enum):
    LINK = "link"
    IMAGE = "image"
    SCRIPT = "script"
    STYLESHEET = "stylesheet"
    ICON = "icon"


@dataclass(frozen=True)
class Candidate:
    """A raw attribute value considered for inclusion before normalization."""

    raw: str
    kind: CandidateKind


@dataclass
class ExtractionResult:
    """Absolute, deduplicated URLs referenced by one page, in first-seen order."""

    links: List[str] = field(default_factory=list)
    assets: List[str] = field(default_factory=list)
