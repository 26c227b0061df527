# File: tests/conftest.py
import logging
import threading
import time
from typing import Dict, Iterable, Optional

import pytest

from links_finder.config import CrawlerConfig
from links_finder.crawler.models import FetchFailure, FetchResult, FetchSuccess


class DictFetcher:
    """
    In-memory fetcher: serves page texts from a dict.
    URLs missing from ``pages`` or listed in ``fail`` produce a FetchFailure;
    URLs listed in ``explode`` raise RuntimeError.
    """

    def __init__(
        self,
        pages: Dict[str, str],
        fail: Iterable[str] = (),
        explode: Iterable[str] = (),
        delay: float = 0.0,
    ) -> None:
        self.pages = pages
        self.fail = set(fail)
        self.explode = set(explode)
        self.delay = delay
        self.calls: list[str] = []
        self.active = 0
        self.max_active = 0
        self._lock = threading.Lock()

    def fetch(self, url: str) -> FetchResult:
        with self._lock:
            self.calls.append(url)
            self.active += 1
            self.max_active = max(self.max_active, self.active)
        try:
            if self.delay:
                time.sleep(self.delay)
            if url in self.explode:
                raise RuntimeError(f"boom for {url}")
            if url in self.fail or url not in self.pages:
                return FetchFailure(url, "fetch", ConnectionError("refused"))
            return FetchSuccess(url, self.pages[url])
        finally:
            with self._lock:
                self.active -= 1


@pytest.fixture()
def make_config():
    """
    Return a factory for CrawlerConfig with a short poll interval for tests.
    """

    def _make(start_url: str = "http://x.com", **kwargs) -> CrawlerConfig:
        kwargs.setdefault("poll_interval", 0.05)
        kwargs.setdefault("timeout", 2.0)
        return CrawlerConfig(start_url=start_url, **kwargs)

    return _make


@pytest.fixture()
def log_records(caplog):
    """
    Attach caplog to the project logger (it does not propagate to root).
    """
    lg = logging.getLogger("LinksFinder")
    lg.addHandler(caplog.handler)
    caplog.set_level(logging.DEBUG, logger="LinksFinder")
    yield caplog
    lg.removeHandler(caplog.handler)


def messages(caplog, level: Optional[int] = None) -> list[str]:
    return [r.getMessage() for r in caplog.records if level is None or r.levelno == level]
