"""A generic stack, folding helpers and a tiny bank ledger."""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Iterable, Sequence
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

T = TypeVar("T")
A = TypeVar("A")
B = TypeVar("B")


class Stack(Generic[T]):
    """A last-in, first-out stack."""

    def __init__(self) -> None:
        self._values: list[T] = []

    def __len__(self) -> int:
        return len(self._values)

    def push(self, value: T) -> None:
        self._values.append(value)

    def is_empty(self) -> bool:
        return not self._values

    def pop(self) -> T:
        """Remove and return the top value; raise IndexError when empty."""
        if self.is_empty():
            raise IndexError("pop from empty stack")
        return self._values.pop()


def reduce(collection: Iterable[A], f: Callable[[B, A], B], initial_value: B) -> B:
    """Fold ``collection`` from the left, starting at ``initial_value``."""
    result = initial_value
    for item in collection:
        result = f(result, item)
    return result


def total(numbers: Iterable[int]) -> int:
    """Return the sum of all numbers."""
    return sum(numbers)


def sum_all(numbers: Iterable[int]) -> int:
    """Return the sum of all numbers, computed with ``reduce``."""
    return reduce(numbers, lambda a, b: a + b, 0)


def sum_all_tails(*args: Sequence[int]) -> list[int]:
    """Return the sum of every element but the first of each sequence."""
    return reduce(args, lambda sums, numbers: [*sums, total(numbers[1:])], [])


@dataclass(frozen=True)
class Account:
    name: str
    balance: float


@dataclass(frozen=True)
class Transaction:
    from_name: str
    to_name: str
    amount: float


def new_transaction(from_account: Account, to_account: Account, amount: float) -> Transaction:
    """Create a transfer of ``amount`` between two accounts."""
    return Transaction(from_account.name, to_account.name, amount)


def _apply_transaction(account: Account, transaction: Transaction) -> Account:
    balance = account.balance
    if transaction.from_name == account.name:
        balance -= transaction.amount
    if transaction.to_name == account.name:
        balance += transaction.amount
    return dataclasses.replace(account, balance=balance)


def new_balance_for(account: Account, transactions: Iterable[Transaction]) -> Account:
    """Return ``account`` with all relevant transactions applied."""
    return reduce(transactions, _apply_transaction, account)


def find(items: Iterable[T], predicate: Callable[[T], bool]) -> Optional[T]:
    """Return the first item matching ``predicate``, or None."""
    for item in items:
        if predicate(item):
            return item
    return None