"""Small everyday helpers: greetings, arithmetic and list sums."""

from __future__ import annotations

from collections.abc import Iterable, Sequence
from typing import Protocol

SPANISH = "Spanish"
FRENCH = "French"

_PREFIXES = {
    SPANISH: "Hola, ",
    FRENCH: "Bonjour, ",
}
_DEFAULT_PREFIX = "Hello, "


class _Writer(Protocol):
    def write(self, text: str) -> object: ...


def hello(name: str = "", language: str = "") -> str:
    """Greet ``name`` in ``language``, falling back to English and "World"."""
    return _PREFIXES.get(language, _DEFAULT_PREFIX) + (name or "World")


def add(a: int, b: int) -> int:
    """Return the sum of two integers."""
    return a + b


def repeat(character: str, times: int) -> str:
    """Return ``character`` repeated ``times`` times."""
    return character * times


def sum_of(numbers: Iterable[int]) -> int:
    """Return the sum of all numbers."""
    return sum(numbers)


def sum_all(*args: Sequence[int]) -> list[int]:
    """Return the sum of each given sequence."""
    return [sum_of(numbers) for numbers in args]


def sum_all_tails(*args: Sequence[int]) -> list[int]:
    """Return the sum of every element but the first of each sequence."""
    return [sum_of(numbers[1:]) for numbers in args]


def greet(writer: _Writer, name: str) -> None:
    """Write a greeting for ``name`` to ``writer``."""
    writer.write(f"Hello, {name}")