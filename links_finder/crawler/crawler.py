from __future__ import annotations

import enum
import threading
import time
from typing import Optional

from links_finder.config import CrawlerConfig
from links_finder.crawler.fetcher import Fetcher, HttpFetcher, is_valid_url
from links_finder.crawler.frontier import SeenSet
from links_finder.crawler.link_extractor import LinkExtractor
from links_finder.crawler.models import CrawlReport, FetchFailure
from links_finder.crawler.scheduler import TaskScheduler
from links_finder.logger import logger

__all__ = ("CrawlState", "LinksCrawler")


class CrawlState(enum.Enum):
    SEEDING = "seeding"
    DRAINING = "draining"
    REPORTING = "reporting"


class LinksCrawler:
    """Многопоточный обход всех ссылок, начинающихся со стартового URL."""

    def __init__(self, config: CrawlerConfig, fetcher: Optional[Fetcher] = None) -> None:
        self.config = config
        self.start_url = config.start_url
        self.extractor = LinkExtractor(self.start_url)
        self.seen = SeenSet()
        self.state = CrawlState.SEEDING
        self._owns_fetcher = fetcher is None
        self.fetcher: Fetcher = fetcher if fetcher is not None else HttpFetcher(config)
        self._scheduler: Optional[TaskScheduler] = None
        self._failures = 0
        self._failures_lock = threading.Lock()

    def __enter__(self) -> LinksCrawler:
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()

    def close(self) -> None:
        if self._owns_fetcher and isinstance(self.fetcher, HttpFetcher):
            self.fetcher.close()

    @property
    def outstanding(self) -> int:
        return 0 if self._scheduler is None else self._scheduler.outstanding

    def crawl(self) -> CrawlReport:
        if self._scheduler is not None:
            raise RuntimeError("LinksCrawler instances run a single crawl")
        logger.info("Старт обхода: %s", self.start_url)
        started_at = time.time()
        start = time.monotonic()
        scheduler = self._scheduler = TaskScheduler(self._process_page, workers=self.config.workers)

        try:
            self.seen.try_claim(self.start_url)
            scheduler.submit(self.start_url)
            self.state = CrawlState.DRAINING
            self._drain(scheduler)
        except BaseException:
            scheduler.shutdown(wait=False, cancel_pending=True)
            raise

        self.state = CrawlState.REPORTING
        links = tuple(self.seen.snapshot())
        report = CrawlReport(
            start_url=self.start_url,
            links=links,
            elapsed=time.monotonic() - start,
            started_at=started_at,
            failures=self._failure_count() + scheduler.errors,
        )
        scheduler.shutdown(wait=True)
        logger.info("Завершено: %d ссылок за %.2f с", report.count, report.elapsed)
        return report

    def _drain(self, scheduler: TaskScheduler) -> None:
        while True:
            # Condition.wait already retries EINTR (PEP 475); InterruptedError only
            # arrives from a signal handler that raises it, and the wait resumes.
            try:
                if scheduler.wait(self.config.poll_interval):
                    return
            except InterruptedError:
                logger.warning("Main thread was interrupted.")
                continue
            logger.info("Current number of planned tasks %d", scheduler.outstanding)

    def _process_page(self, url: str) -> None:
        """One unit of work: fetch, extract, claim, resubmit."""
        if not is_valid_url(url):
            self._report_failure(FetchFailure(url, "malformed"))
            return
        result = self.fetcher.fetch(url)
        if isinstance(result, FetchFailure):
            self._report_failure(result)
            return
        for link in self.extractor.extract(result.text):
            if self.seen.try_claim(link):
                self._scheduler.submit(link)  # type: ignore[union-attr]

    def _report_failure(self, failure: FetchFailure) -> None:
        logger.warning("%s", failure.describe())
        with self._failures_lock:
            self._failures += 1

    def _failure_count(self) -> int:
        with self._failures_lock:
            return self._failures
