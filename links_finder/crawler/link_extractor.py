"""
Textual link extraction for LinksFinder.

Links are found by pattern matching on the raw page text, not by walking
the HTML tree: any substring that starts with the crawl prefix, follows a
quote/space/line start and runs up to the next quote, space, ``?`` or line
break is a candidate.
"""
from __future__ import annotations

import re
from typing import Iterable, Set

__all__ = ("LinkExtractor", "extract_links", "normalize_link")

# Preceded by a single quote, double quote, space, line break, or line start
_STARTS_WITH = r"(?:(?<=['\" \r\n])|^)"
# Runs until a query string, quote, space or line break
_ENDS_WITH = r"[^?'\" \r\n]+"
_LINE_BREAK_RE = re.compile(r"[\r\n]")


def normalize_link(url: str) -> str:
    """Drop a single trailing path separator."""
    if url.endswith("/"):
        return url[:-1]
    return url


class LinkExtractor:
    """Compiled extraction rule for one crawl prefix."""

    def __init__(self, prefix: str) -> None:
        if not prefix:
            raise ValueError("prefix must be a non-empty string")
        self.prefix = prefix
        self._pattern = re.compile(_STARTS_WITH + re.escape(prefix) + _ENDS_WITH)

    def extract(self, text: str) -> Set[str]:
        links: Set[str] = set()
        for line in _LINE_BREAK_RE.split(text):
            links.update(self._match_line(line))
        return links

    def _match_line(self, line: str) -> Iterable[str]:
        return (normalize_link(m.group(0)) for m in self._pattern.finditer(line))

    def __repr__(self) -> str:
        return f"LinkExtractor(prefix={self.prefix!r})"


def extract_links(text: str, prefix: str) -> Set[str]:
    """Return the set of normalized links in ``text`` starting with ``prefix``."""
    return LinkExtractor(prefix).extract(text)

