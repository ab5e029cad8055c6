"""A countdown that sleeps between its numbers."""

from __future__ import annotations

import sys
import time
from abc import ABC, abstractmethod
from collections.abc import Iterator
from typing import Protocol

COUNTDOWN_START = 3
FINAL_WORD = "Go!"

WRITE = "write"
SLEEP = "sleep"


class _Writer(Protocol):
    def write(self, text: str) -> object: ...


class Sleeper(ABC):
    """Something that can pause."""

    @abstractmethod
    def sleep(self) -> None:
        """Pause once."""


class SpySleeper(Sleeper):
    """Counts how often it was asked to sleep."""

    def __init__(self) -> None:
        self.calls = 0

    def sleep(self) -> None:
        self.calls += 1


class DefaultSleeper(Sleeper):
    """Sleeps for real, one second by default."""

    def __init__(self, duration: float = 1.0) -> None:
        self.duration = duration

    def sleep(self) -> None:
        time.sleep(self.duration)


class SpyCountdownOperations(Sleeper):
    """Records the order of writes and sleeps."""

    def __init__(self) -> None:
        self.calls: list[str] = []

    def sleep(self) -> None:
        self.calls.append(SLEEP)

    def write(self, data: str) -> int:
        self.calls.append(WRITE)
        return len(data)


def _count_down_from(start: int) -> Iterator[int]:
    yield from range(start, 0, -1)


def countdown(out: _Writer, sleeper: Sleeper) -> None:
    """Write 3, 2, 1 and then "Go!", sleeping after each number."""
    for number in _count_down_from(COUNTDOWN_START):
        out.write(f"{number}\n")
        sleeper.sleep()
    out.write(FINAL_WORD)


def main(argv: list[str] | None = None) -> int:
    """Run the countdown on standard output."""
    countdown(sys.stdout, DefaultSleeper())
    sys.stdout.write("\n")
    return 0