"""Storage of player scores."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections import Counter


class PlayerStore(ABC):
    """Keeps the number of wins of each player."""

    @abstractmethod
    def get_player_score(self, name: str) -> int:
        """Return the score of ``name``; zero when unknown."""

    @abstractmethod
    def record_win(self, name: str) -> None:
        """Record one more win for ``name``."""


class InMemoryPlayerStore(PlayerStore):
    """A player store held in memory."""

    def __init__(self) -> None:
        self._scores: Counter[str] = Counter()

    def get_player_score(self, name: str) -> int:
        return self._scores[name]

    def record_win(self, name: str) -> None:
        self._scores[name] += 1