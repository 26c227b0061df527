"""
Fetcher module: blocking HTTP retrieval of page text.

The crawl core only needs ``fetch(url) -> FetchResult``; failures come back
as :class:`FetchFailure` values and are never raised into the worker pool.
"""
from __future__ import annotations

import codecs
import threading
from typing import List, Optional, Protocol
from urllib.parse import urlparse

import requests
from requests.utils import get_encoding_from_headers

from links_finder.config import CrawlerConfig
from links_finder.crawler.models import FetchFailure, FetchResult, FetchSuccess

__all__ = ("Fetcher", "HttpFetcher", "is_valid_url", "decode_body")

_SCHEMES = ("http", "https")


class Fetcher(Protocol):
    def fetch(self, url: str) -> FetchResult:
        ...


def is_valid_url(url: str) -> bool:
    """Return True for absolute http(s) URLs with a host and a valid port."""
    try:
        parsed = urlparse(url)
        parsed.port  # raises on a non-numeric port
        return parsed.scheme in _SCHEMES and bool(parsed.hostname)
    except ValueError:
        return False


def decode_body(content: bytes, declared: Optional[str], default: str) -> str:
    """
    Decode a response body.

    The charset from Content-Type wins when it names a known codec;
    otherwise ``default`` is used. Undecodable bytes become U+FFFD.
    """
    encoding = default
    if declared:
        try:
            encoding = codecs.lookup(declared).name
        except LookupError:
            encoding = default
    return content.decode(encoding, errors="replace")


class HttpFetcher:
    """requests-based fetcher with one Session per worker thread."""

    def __init__(self, config: CrawlerConfig) -> None:
        self.config = config
        self._local = threading.local()
        self._sessions: List[requests.Session] = []
        self._lock = threading.Lock()

    def fetch(self, url: str) -> FetchResult:
        if not is_valid_url(url):
            return FetchFailure(url, "malformed")
        try:
            resp = self._session().get(url, timeout=self.config.timeout)
            resp.raise_for_status()
        except requests.RequestException as exc:
            return FetchFailure(url, "fetch", exc)
        declared = self._declared_charset(resp)
        return FetchSuccess(url, decode_body(resp.content, declared, self.config.default_encoding))

    def close(self) -> None:
        with self._lock:
            sessions, self._sessions = self._sessions, []
        for session in sessions:
            session.close()

    def __enter__(self) -> HttpFetcher:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def _session(self) -> requests.Session:
        session = getattr(self._local, "session", None)
        if session is None:
            session = requests.Session()
            session.headers["User-Agent"] = self.config.user_agent
            self._local.session = session
            with self._lock:
                self._sessions.append(session)
        return session

    @staticmethod
    def _declared_charset(resp: requests.Response) -> Optional[str]:
        ctype = resp.headers.get("Content-Type", "")
        if "charset" not in ctype.lower():
            # requests falls back to ISO-8859-1 for text/*; ignore that guess
            return None
        return get_encoding_from_headers(resp.headers)
