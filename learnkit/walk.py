"""Visit every string held anywhere inside a nested value."""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Iterator, Mapping
from typing import Any


def walk(x: Any, fn: Callable[[str], object]) -> None:
    """Call ``fn`` on each string found in ``x``.

    Strings are reported, dataclass fields, sequences, mapping values and
    iterators are descended into, and anything else is ignored.
    """
    if isinstance(x, str):
        fn(x)
    elif isinstance(x, Mapping):
        for value in x.values():
            walk(value, fn)
    elif dataclasses.is_dataclass(x) and not isinstance(x, type):
        for field in dataclasses.fields(x):
            walk(getattr(x, field.name), fn)
    elif isinstance(x, (list, tuple, Iterator)):
        for item in x:
            walk(item, fn)