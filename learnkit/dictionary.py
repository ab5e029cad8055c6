"""A word dictionary with strict add, update and delete rules."""

from __future__ import annotations

from collections.abc import Iterator, Mapping


class DictionaryError(Exception):
    """Base class for dictionary errors."""


class WordNotFoundError(DictionaryError, KeyError):
    def __init__(self) -> None:
        super().__init__("could not find the word you were looking for")

    def __str__(self) -> str:
        return str(self.args[0])


class WordExistsError(DictionaryError):
    def __init__(self) -> None:
        super().__init__("cannot add word because it already exists")


class WordDoesNotExistError(DictionaryError):
    def __init__(self) -> None:
        super().__init__("cannot perform operation on word because it does not exist")


class Dictionary:
    """Maps words to their definitions."""

    def __init__(self, entries: Mapping[str, str] | None = None) -> None:
        self._entries: dict[str, str] = dict(entries or {})

    def __contains__(self, word: object) -> bool:
        return word in self._entries

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[str]:
        return iter(self._entries)

    def search(self, word: str) -> str:
        """Return the definition of ``word``."""
        try:
            return self._entries[word]
        except KeyError:
            raise WordNotFoundError() from None

    def add(self, word: str, definition: str) -> None:
        """Add a new word; it must not exist yet."""
        if word in self._entries:
            raise WordExistsError()
        self._entries[word] = definition

    def update(self, key: str, value: str) -> None:
        """Change the definition of an existing word."""
        if key not in self._entries:
            raise WordDoesNotExistError()
        self._entries[key] = value

    def delete(self, key: str) -> None:
        """Remove an existing word."""
        if key not in self._entries:
            raise WordDoesNotExistError()
        del self._entries[key]