"""
Data models for the LinksFinder crawler.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Optional, Tuple, Union


@dataclass(slots=True, frozen=True)
class FetchSuccess:
    """Page body retrieved and decoded as text."""

    url: str
    text: str


@dataclass(slots=True, frozen=True)
class FetchFailure:
    """Fetch that produced no text; ``reason`` is ``"malformed"`` or ``"fetch"``."""

    url: str
    reason: str
    error: Optional[BaseException] = None

    def describe(self) -> str:
        if self.reason == "malformed":
            return f"Malformed URL {self.url}"
        return f"Couldn't read URL {self.url}, exception {self.error!r}"


FetchResult = Union[FetchSuccess, FetchFailure]


@dataclass(slots=True, frozen=True)
class CrawlReport:
    """Final result of one crawl: sorted links plus statistics."""

    start_url: str
    links: Tuple[str, ...]
    elapsed: float
    started_at: float
    failures: int = 0
    count: int = field(init=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "count", len(self.links))

    def summary(self) -> str:
        return f"Found {self.count} links in {int(self.elapsed)} seconds."

    def as_dict(self) -> dict:
        return {
            "start_url": self.start_url,
            "count": self.count,
            "elapsed": round(self.elapsed, 3),
            "started_at": self.started_at,
            "failures": self.failures,
            "links": list(self.links),
        }
