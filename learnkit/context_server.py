"""An async handler that writes what a store fetches, honouring cancellation."""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Awaitable, Callable
from typing import Protocol

_log = logging.getLogger(__name__)


class _Writer(Protocol):
    def write(self, text: str) -> object: ...


class Store(ABC):
    """A source of data that may take a while to fetch."""

    @abstractmethod
    async def fetch(self) -> str:
        """Fetch the data; cancelling the task stops the work."""


def server(store: Store) -> Callable[[_Writer], Awaitable[None]]:
    """Return a handler that writes the store's data to a response.

    If the store fails nothing is written; if the handling task is cancelled
    the cancellation reaches the store and nothing is written either.
    """

    async def handle(response: _Writer) -> None:
        try:
            data = await store.fetch()
        except Exception:
            _log.debug("store fetch failed", exc_info=True)
            return
        response.write(data)

    return handle