"""Resolution of raw attribute values into absolute URLs."""

from __future__ import annotations

import logging
import re
from typing import Iterable, List, Optional
from urllib.parse import quote, urljoin, urlsplit, urlunsplit

logger = logging.getLogger(__name__)

_CONTROL_CHARS_RE = re.compile(r"[\x00-\x1f\x7f]")
_BAD_ESCAPE_RE = re.compile(r"%(?![0-9A-Fa-f]{2})")
# Printable ASCII that can never appear in a host name.
_BAD_HOST_CHARS_RE = re.compile(r"[ \"<>\\^`{|}]")

# HTML strips ASCII whitespace only, not NBSP and friends.
_ASCII_WHITESPACE = " \t\n\f\r"

_PATH_SAFE = "/%:@!$&'()*+,;=~"
_QUERY_SAFE = _PATH_SAFE + "?"


def _strip_fragment(value: str) -> str:
    return value.split("#", 1)[0]


def _remove_dot_segments(path: str) -> str:
    """Drop ``.`` and ``..`` segments from an absolute path (RFC 3986 §5.2.4)."""
    segments = path.split("/")
    out: List[str] = []
    for seg in segments[1:]:
        if seg == ".":
            continue
        if seg == "..":
            if out:
                out.pop()
            continue
        out.append(seg)
    if segments[-1] in (".", ".."):
        out.append("")
    return "/" + "/".join(out)


def _is_malformed(ref: str) -> bool:
    return bool(
        _CONTROL_CHARS_RE.search(ref)
        or _BAD_ESCAPE_RE.search(ref)
        or ref.startswith(":")
    )


def _canonical(url: str) -> str:
    parts = urlsplit(url)
    path = parts.path
    if path.startswith("/"):
        path = _remove_dot_segments(path)
    return urlunsplit(
        (
            parts.scheme,
            parts.netloc,
            quote(path, safe=_PATH_SAFE),
            quote(parts.query, safe=_QUERY_SAFE),
            "",
        )
    )


def normalize_url(base: str, raw: str) -> Optional[str]:
    """Resolve *raw* against *base* and return an absolute URL without fragment.

    *raw* may be absolute, scheme-relative (``//host/path``) or relative to
    *base*.  The result has its dot segments removed and its path and query
    percent-encoded, so equal resources compare equal as strings.

    Returns ``None`` when the reference cannot be parsed (control characters,
    a stray ``%``, an empty scheme, a bad host or port) or does not end up
    absolute.  Never raises.
    """
    ref = _strip_fragment(raw).strip(_ASCII_WHITESPACE)

    if _is_malformed(ref):
        logger.debug("Failed to parse URL: %r", ref)
        return None

    try:
        # Accessing .port validates it; urlsplit alone does not.
        urlsplit(ref).port
        resolved = _strip_fragment(urljoin(base, ref))
        parts = urlsplit(resolved)
        parts.port
    except ValueError:
        logger.debug("Failed to parse URL: %r", ref)
        return None

    if not parts.scheme:
        logger.debug("Not an absolute URL: %r (base %r)", resolved, base)
        return None

    if parts.hostname and _BAD_HOST_CHARS_RE.search(parts.hostname):
        logger.debug("Invalid host in URL: %r", resolved)
        return None

    return _canonical(resolved)


def dedupe_urls(urls: Iterable[str]) -> List[str]:
    """Drop repeated URLs, keeping the first occurrence of each in order."""
    seen: set[str] = set()
    ret: List[str] = []
    for url in urls:
        if url in seen:
            continue
        seen.add(url)
        ret.append(url)
    return ret
