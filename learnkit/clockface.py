"""Positions of the hands of an analogue clock."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Protocol

SECONDS_IN_HALF_CLOCK = 30
MINUTES_IN_HALF_CLOCK = 30
MINUTES_IN_CLOCK = 2 * MINUTES_IN_HALF_CLOCK
HOURS_IN_HALF_CLOCK = 6
HOURS_IN_CLOCK = 2 * HOURS_IN_HALF_CLOCK


class _TimeOfDay(Protocol):
    hour: int
    minute: int
    second: int


@dataclass(frozen=True)
class Point:
    """A Cartesian coordinate; the unit vector of a hand from the clock's centre."""

    x: float
    y: float


def _fraction_of_half_turn(value: int, half_turn: int) -> float:
    # A zero value lies at 12 o'clock.
    return math.pi / (half_turn / value) if value else 0.0


def seconds_in_radians(t: _TimeOfDay) -> float:
    """Return the angle of the second hand from 12 o'clock in radians."""
    return _fraction_of_half_turn(t.second, SECONDS_IN_HALF_CLOCK)


def second_hand_point(t: _TimeOfDay) -> Point:
    """Return the unit vector of the second hand at time ``t``."""
    return _angle_to_point(seconds_in_radians(t))


def minutes_in_radians(t: _TimeOfDay) -> float:
    """Return the angle of the minute hand from 12 o'clock in radians."""
    return seconds_in_radians(t) / MINUTES_IN_CLOCK + _fraction_of_half_turn(
        t.minute, MINUTES_IN_HALF_CLOCK
    )


def minute_hand_point(t: _TimeOfDay) -> Point:
    """Return the unit vector of the minute hand at time ``t``."""
    return _angle_to_point(minutes_in_radians(t))


def hours_in_radians(t: _TimeOfDay) -> float:
    """Return the angle of the hour hand from 12 o'clock in radians."""
    return minutes_in_radians(t) / HOURS_IN_CLOCK + _fraction_of_half_turn(
        t.hour % HOURS_IN_CLOCK, HOURS_IN_HALF_CLOCK
    )


def hour_hand_point(t: _TimeOfDay) -> Point:
    """Return the unit vector of the hour hand at time ``t``."""
    return _angle_to_point(hours_in_radians(t))


def _angle_to_point(angle: float) -> Point:
    return Point(math.sin(angle), math.cos(angle))