import io

import pytest

from learnkit.basics import add, greet, hello, repeat, sum_all, sum_all_tails, sum_of


@pytest.mark.parametrize(
    "name, language, expected",
    [
        ("Chris", "", "Hello, Chris"),
        ("", "", "Hello, World"),
        ("Elodie", "Spanish", "Hola, Elodie"),
        ("Elodie", "French", "Bonjour, Elodie"),
        ("Elodie", "Klingon", "Hello, Elodie"),
    ],
)
def test_hello(name, language, expected):
    assert hello(name, language) == expected


def test_hello_defaults():
    assert hello() == "Hello, World"


@pytest.mark.parametrize("a, b, expected", [(2, 2, 4), (2, 4, 6)])
def test_add(a, b, expected):
    assert add(a, b) == expected


def test_repeat():
    assert repeat("a", 5) == "aaaaa"


def test_repeat_zero_times():
    assert repeat("a", 0) == ""


@pytest.mark.parametrize("numbers, expected", [([1, 2, 3, 4, 5], 15), ([1, 2, 3], 6)])
def test_sum_of(numbers, expected):
    assert sum_of(numbers) == expected


def test_sum_all():
    assert sum_all([1, 2], [0, 9]) == [3, 9]


def test_sum_all_without_arguments():
    assert sum_all() == []


def test_sum_all_tails():
    assert sum_all_tails([1, 2], [0, 9]) == [2, 9]


def test_sum_all_tails_empty_slices():
    assert sum_all_tails([], [0, 9]) == [0, 9]


def test_greet():
    buffer = io.StringIO()
    greet(buffer, "Chris")
    assert buffer.getvalue() == "Hello, Chris"