"""Concurrent crawl engine: extraction, dedup, scheduling and coordination."""

from links_finder.crawler.crawler import CrawlState, LinksCrawler
from links_finder.crawler.fetcher import Fetcher, HttpFetcher
from links_finder.crawler.frontier import SeenSet
from links_finder.crawler.link_extractor import LinkExtractor, extract_links, normalize_link
from links_finder.crawler.models import CrawlReport, FetchFailure, FetchResult, FetchSuccess
from links_finder.crawler.scheduler import SchedulerClosedError, TaskScheduler, WorkCounter

__all__ = [
    "CrawlReport",
    "CrawlState",
    "FetchFailure",
    "FetchResult",
    "FetchSuccess",
    "Fetcher",
    "HttpFetcher",
    "LinkExtractor",
    "LinksCrawler",
    "SchedulerClosedError",
    "SeenSet",
    "TaskScheduler",
    "WorkCounter",
    "extract_links",
    "normalize_link",
]
