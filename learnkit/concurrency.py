"""Concurrent website checks, a URL race and a thread-safe counter."""

from __future__ import annotations

import queue
import threading
import urllib.request
from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor

WebsiteChecker = Callable[[str], bool]


class RacerTimeoutError(TimeoutError):
    """Raised when neither URL answers within the timeout."""


def check_websites(checker: WebsiteChecker, urls: Sequence[str]) -> dict[str, bool]:
    """Run ``checker`` on every URL concurrently and map each URL to its result."""
    if not urls:
        return {}
    with ThreadPoolExecutor(max_workers=len(urls)) as pool:
        return dict(zip(urls, pool.map(checker, urls)))


def _ping(url: str, finished: queue.Queue) -> None:
    try:
        with urllib.request.urlopen(url) as response:
            response.read()
    except (OSError, ValueError):
        pass
    finished.put(url)


def racer(url1: str, url2: str, timeout: float) -> str:
    """Return whichever URL answers first; ``timeout`` is in seconds."""
    finished: queue.Queue = queue.Queue()
    for url in (url1, url2):
        threading.Thread(target=_ping, args=(url, finished), daemon=True).start()
    try:
        return finished.get(timeout=timeout)
    except queue.Empty:
        raise RacerTimeoutError(f"timed out waiting for {url1} and {url2}") from None


class Counter:
    """A counter that is safe to increment from many threads."""

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._value = 0

    def inc(self) -> None:
        with self._lock:
            self._value += 1

    @property
    def value(self) -> int:
        return self._value