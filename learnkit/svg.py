"""Draw an analogue clock as SVG."""

from __future__ import annotations

import sys
from datetime import datetime
from typing import Protocol

from learnkit.clockface import (
    Point,
    hour_hand_point,
    minute_hand_point,
    second_hand_point,
)

SECOND_HAND_LENGTH = 90
MINUTE_HAND_LENGTH = 80
HOUR_HAND_LENGTH = 50
CLOCK_CENTRE_X = 150
CLOCK_CENTRE_Y = 150

SVG_START = """<?xml version="1.0" encoding="UTF-8" standalone="no"?>
<!DOCTYPE svg PUBLIC "-//W3C//DTD SVG 1.1//EN" "http://www.w3.org/Graphics/SVG/1.1/DTD/svg11.dtd">
<svg xmlns="http://www.w3.org/2000/svg"
     width="100%"
     height="100%"
     viewBox="0 0 300 300"
     version="2.0">"""

BEZEL = '<circle cx="150" cy="150" r="100" style="fill:#fff;stroke:#000;stroke-width:5px;"/>'

SVG_END = "</svg>"

_SECOND_COLOUR = "#f00"
_HAND_COLOUR = "#000"


class _Writer(Protocol):
    def write(self, text: str) -> object: ...


def _make_hand(p: Point, length: float) -> Point:
    return Point(p.x * length + CLOCK_CENTRE_X, -p.y * length + CLOCK_CENTRE_Y)


def _hand_line(p: Point, colour: str) -> str:
    return (
        f'<line x1="150" y1="150" x2="{p.x:.3f}" y2="{p.y:.3f}" '
        f'style="fill:none;stroke:{colour};stroke-width:3px;"/>'
    )


def write(writer: _Writer, t: datetime) -> None:
    """Write an SVG clock showing time ``t`` to ``writer``."""
    writer.write(SVG_START)
    writer.write(BEZEL)
    writer.write(_hand_line(_make_hand(second_hand_point(t), SECOND_HAND_LENGTH), _SECOND_COLOUR))
    writer.write(_hand_line(_make_hand(minute_hand_point(t), MINUTE_HAND_LENGTH), _HAND_COLOUR))
    writer.write(_hand_line(_make_hand(hour_hand_point(t), HOUR_HAND_LENGTH), _HAND_COLOUR))
    writer.write(SVG_END)


def main(argv: list[str] | None = None) -> int:
    """Write a clock showing the current time to standard output."""
    write(sys.stdout, datetime.now())
    return 0