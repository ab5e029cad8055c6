import pytest

from learnkit.wallet import Bitcoin, InsufficientFundsError, Wallet


def test_deposit():
    wallet = Wallet()
    wallet.deposit(Bitcoin(10))
    assert wallet.balance == Bitcoin(10)


def test_withdraw_with_funds():
    wallet = Wallet(balance=Bitcoin(20))
    wallet.withdraw(Bitcoin(10))
    assert wallet.balance == Bitcoin(10)


def test_withdraw_insufficient_funds():
    starting = Bitcoin(20)
    wallet = Wallet(balance=starting)
    with pytest.raises(InsufficientFundsError, match="cannot withdraw, insufficient funds"):
        wallet.withdraw(Bitcoin(100))
    assert wallet.balance == starting


def test_bitcoin_str():
    assert str(Bitcoin(10)) == "10 BTC"


def test_balance_stays_bitcoin():
    wallet = Wallet()
    wallet.deposit(Bitcoin(3))
    assert str(wallet.balance) == "3 BTC"