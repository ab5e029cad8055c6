"""A wallet holding bitcoin."""

from __future__ import annotations


class Bitcoin(int):
    """An amount of bitcoin."""

    def __str__(self) -> str:
        return f"{int(self)} BTC"


class InsufficientFundsError(Exception):
    """Raised when a withdrawal exceeds the balance."""

    def __init__(self, message: str = "cannot withdraw, insufficient funds") -> None:
        super().__init__(message)


class Wallet:
    """Holds a balance that can be deposited into and withdrawn from."""

    def __init__(self, balance: Bitcoin = Bitcoin(0)) -> None:
        self._balance = Bitcoin(balance)

    @property
    def balance(self) -> Bitcoin:
        return self._balance

    def deposit(self, amount: Bitcoin) -> None:
        self._balance = Bitcoin(self._balance + amount)

    def withdraw(self, amount: Bitcoin) -> None:
        if amount > self._balance:
            raise InsufficientFundsError()
        self._balance = Bitcoin(self._balance - amount)