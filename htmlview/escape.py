"""Escaping helpers for HTML text, attribute values and URL paths."""

from __future__ import annotations

import re
from typing import Iterable
from urllib.parse import quote

# Ampersand goes first so later entities are not escaped twice.
_HTML_REPLACEMENTS = (
    ("&", "&amp;"),
    (">", "&gt;"),
    ("<", "&lt;"),
    ('"', "&quot;"),
    ("'", "&#x27;"),
    ("`", "&#x60;"),
)

_HTML_ENTITY_PATTERN = re.compile("|".join(re.escape(entity) for _, entity in _HTML_REPLACEMENTS))
_HTML_ENTITY_TO_CHAR = {entity: char for char, entity in _HTML_REPLACEMENTS}

# Characters encodeURIComponent leaves alone but which are reserved in RFC 3986.
_URL_SUB_DELIMS = re.compile(r"[!'()*]")


def escape_in_html(text: str) -> str:
    """Escape text content and attribute values."""

    for char, entity in _HTML_REPLACEMENTS:
        text = text.replace(char, entity)
    return text


def unescape_in_html(text: str) -> str:
    """Inverse of :func:`escape_in_html`; other entities are left untouched."""

    return _HTML_ENTITY_PATTERN.sub(lambda match: _HTML_ENTITY_TO_CHAR[match.group(0)], text)


def escape_url(segment: str) -> str:
    """Percent-encode one URL path segment, including ``! ' ( ) *``."""

    encoded = quote(segment, safe="-_.~!'()*")
    return _URL_SUB_DELIMS.sub(lambda match: "%" + format(ord(match.group(0)), "x"), encoded)


def url_path(segments: Iterable[str]) -> str:
    """Join escaped segments into an absolute path: ``["a b", "c"]`` -> ``/a%20b/c``."""

    return "/" + "/".join(escape_url(segment) for segment in segments)


def url_from_path(origin: str, segments: Iterable[str]) -> str:
    """Prefix :func:`url_path` with an origin such as ``https://example.com``."""

    return origin.rstrip("/") + url_path(segments)


__all__ = ["escape_in_html", "escape_url", "unescape_in_html", "url_from_path", "url_path"]
