"""links_finder.engine: точка входа для запуска обхода и печати отчёта."""

from __future__ import annotations

from typing import Optional

from links_finder.config import CrawlerConfig
from links_finder.crawler.crawler import LinksCrawler
from links_finder.crawler.fetcher import Fetcher
from links_finder.crawler.models import CrawlReport
from links_finder.logger import logger
from links_finder.report import print_report

__all__ = ["crawl", "run_crawl"]


def run_crawl(config: CrawlerConfig, fetcher: Optional[Fetcher] = None) -> CrawlReport:
    """Запускает обход по готовой конфигурации и возвращает отчёт без печати."""
    with LinksCrawler(config, fetcher=fetcher) as crawler:
        try:
            return crawler.crawl()
        except Exception as exc:
            logger.error("Crawl failed: %s", exc)
            raise


def crawl(
    starting_url: str,
    config: Optional[CrawlerConfig] = None,
    fetcher: Optional[Fetcher] = None,
) -> CrawlReport:
    """Обходит сайт от starting_url и печатает отсортированные ссылки и итог."""
    if config is None:
        config = CrawlerConfig(start_url=starting_url)
    elif config.start_url != starting_url:
        config = CrawlerConfig(**{**config.model_dump(), "start_url": starting_url})
    report = run_crawl(config, fetcher=fetcher)
    print_report(report)
    return report
