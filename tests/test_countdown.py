import io
from unittest import mock

from learnkit.countdown import (
    SLEEP,
    WRITE,
    DefaultSleeper,
    SpyCountdownOperations,
    SpySleeper,
    countdown,
)


def test_prints_3_to_go():
    buffer = io.StringIO()
    countdown(buffer, SpyCountdownOperations())
    assert buffer.getvalue() == "3\n2\n1\nGo!"


def test_sleep_before_every_print():
    spy = SpyCountdownOperations()
    countdown(spy, spy)
    assert spy.calls == [WRITE, SLEEP, WRITE, SLEEP, WRITE, SLEEP, WRITE]


def test_spy_sleeper_counts_calls():
    sleeper = SpySleeper()
    countdown(io.StringIO(), sleeper)
    assert sleeper.calls == 3


def test_default_sleeper_sleeps_one_second():
    with mock.patch("time.sleep") as fake_sleep:
        result = DefaultSleeper().sleep()
    assert result is None
    assert fake_sleep.call_args_list == [mock.call(1.0)]