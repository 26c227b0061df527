"""
Fixed-width worker pool with termination detection for LinksFinder.

Every unit of work is counted by :class:`WorkCounter` from the moment it is
submitted until its last statement has run. A unit of work submits the
links it discovers before it finishes, so the counter can only reach zero
once no work is queued, running, or about to be submitted.
"""
from __future__ import annotations

import threading
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Optional

from links_finder.logger import logger

__all__ = ("WorkCounter", "TaskScheduler", "SchedulerClosedError", "DEFAULT_WORKERS")

DEFAULT_WORKERS = 10


class SchedulerClosedError(RuntimeError):
    """Raised when work is submitted after shutdown has begun."""


class WorkCounter:
    """Wait-group: increment on submit, decrement on completion, wait for zero."""

    def __init__(self) -> None:
        self._value = 0
        self._cond = threading.Condition()

    @property
    def value(self) -> int:
        with self._cond:
            return self._value

    def increment(self) -> int:
        with self._cond:
            self._value += 1
            return self._value

    def decrement(self) -> int:
        with self._cond:
            if self._value <= 0:
                raise RuntimeError("WorkCounter decremented below zero")
            self._value -= 1
            if self._value == 0:
                self._cond.notify_all()
            return self._value

    def wait_for_zero(self, timeout: Optional[float] = None) -> bool:
        """Block until the counter is zero; False if ``timeout`` elapsed first."""
        with self._cond:
            return self._cond.wait_for(lambda: self._value == 0, timeout=timeout)


class TaskScheduler:
    """Runs ``work(url)`` for each submitted URL on a bounded thread pool."""

    def __init__(self, work: Callable[[str], None], workers: int = DEFAULT_WORKERS) -> None:
        if workers < 1:
            raise ValueError("workers must be >= 1")
        self.workers = workers
        self.counter = WorkCounter()
        self._work = work
        self._executor = ThreadPoolExecutor(max_workers=workers, thread_name_prefix="links-finder")
        self._closed = False
        self._state_lock = threading.Lock()
        self._errors = 0

    @property
    def outstanding(self) -> int:
        return self.counter.value

    @property
    def errors(self) -> int:
        """Units of work that ended with an unexpected exception."""
        with self._state_lock:
            return self._errors

    @property
    def closed(self) -> bool:
        with self._state_lock:
            return self._closed

    def submit(self, url: str) -> None:
        if self.closed:
            raise SchedulerClosedError(f"scheduler is shut down, cannot submit {url}")
        self.counter.increment()
        try:
            self._executor.submit(self._run, url)
        except RuntimeError as exc:
            self.counter.decrement()
            raise SchedulerClosedError(f"scheduler is shut down, cannot submit {url}") from exc

    def wait(self, timeout: Optional[float] = None) -> bool:
        return self.counter.wait_for_zero(timeout)

    def shutdown(self, wait: bool = True, cancel_pending: bool = False) -> None:
        with self._state_lock:
            self._closed = True
        self._executor.shutdown(wait=wait, cancel_futures=cancel_pending)

    def _run(self, url: str) -> None:
        try:
            self._work(url)
        except Exception:
            logger.exception("Some error happened for URL %s", url)
            with self._state_lock:
                self._errors += 1
        finally:
            self.counter.decrement()
