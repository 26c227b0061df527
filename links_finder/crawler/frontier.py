"""
Concurrency-safe set of URLs already claimed by a crawl.
"""
from __future__ import annotations

import threading
from typing import List, Set


class SeenSet:
    """Set of claimed URLs with an atomic check-and-insert.

    Membership only grows. A URL is claimed when it is accepted for
    scheduling, not when its fetch completes, so each URL is fetched at
    most once no matter how many pages link to it.
    """

    def __init__(self) -> None:
        self._urls: Set[str] = set()
        self._lock = threading.Lock()

    def try_claim(self, url: str) -> bool:
        """Insert ``url`` and return True if it was not claimed yet."""
        with self._lock:
            if url in self._urls:
                return False
            self._urls.add(url)
            return True

    def snapshot(self) -> List[str]:
        """All claimed URLs in ascending lexicographic order."""
        with self._lock:
            return sorted(self._urls)

    def __contains__(self, url: object) -> bool:
        with self._lock:
            return url in self._urls

    def __len__(self) -> int:
        with self._lock:
            return len(self._urls)
