from dataclasses import dataclass

import pytest

from learnkit.generics import (
    Account,
    Stack,
    find,
    new_balance_for,
    new_transaction,
    reduce,
    sum_all,
    sum_all_tails,
    total,
)


def test_bad_bank():
    riya = Account(name="Riya", balance=100)
    chris = Account(name="Chris", balance=75)
    adil = Account(name="Adil", balance=200)
    transactions = [
        new_transaction(chris, riya, 100),
        new_transaction(adil, chris, 25),
    ]
    assert new_balance_for(riya, transactions).balance == 200
    assert new_balance_for(chris, transactions).balance == 0
    assert new_balance_for(adil, transactions).balance == 175


def test_balance_does_not_change_original_account():
    riya = Account(name="Riya", balance=100)
    other = Account(name="Other", balance=0)
    new_balance_for(riya, [new_transaction(other, riya, 10)])
    assert riya.balance == 100


@dataclass
class Person:
    name: str


def test_find_best_programmer():
    people = [Person("Kent Beck"), Person("Martin Fowler"), Person("Chris James")]
    assert find(people, lambda p: "Chris" in p.name) == Person("Chris James")


def test_find_first_even_number():
    assert find(range(1, 11), lambda x: x % 2 == 0) == 2


def test_find_nothing():
    assert find([1, 3, 5], lambda x: x % 2 == 0) is None


def test_integer_stack():
    stack = Stack()
    assert stack.is_empty() is True

    stack.push(123)
    assert stack.is_empty() is False

    stack.push(456)
    assert stack.pop() == 456
    assert stack.pop() == 123
    assert stack.is_empty() is True

    stack.push(1)
    stack.push(2)
    assert stack.pop() + stack.pop() == 3


def test_pop_empty_stack_raises():
    with pytest.raises(IndexError):
        Stack().pop()


@pytest.mark.parametrize("numbers, expected", [([1, 2, 3, 4, 5], 15), ([1, 2, 3], 6)])
def test_total(numbers, expected):
    assert total(numbers) == expected


def test_sum_all():
    assert sum_all([1, 2, 0, 9]) == 12


def test_sum_all_tails():
    assert sum_all_tails([1, 2], [0, 9]) == [2, 9]


def test_sum_all_tails_empty_slices():
    assert sum_all_tails([], [0, 9]) == [0, 9]


def test_reduce_multiplication():
    assert reduce([1, 2, 3], lambda x, y: x * y, 1) == 6


def test_reduce_concatenate_strings():
    assert reduce(["a", "b", "c"], lambda x, y: x + y, "") == "abc"