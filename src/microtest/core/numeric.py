# src/microtest/core/numeric.py
"""Small arithmetic helpers used by test programs."""

from __future__ import annotations

import math
from collections.abc import Callable, Iterable
from typing import Any


def round_to(value: float, accuracy: float) -> float:
    """Round ``value`` to the nearest multiple of ``accuracy``.

    ``round_to(2.71828, 0.01) == 2.72``. An accuracy of 0 returns the value
    unchanged; an accuracy larger than the value's magnitude rounds toward
    0 (``round_to(2.718, 10) == 0``).

    Raises:
        ValueError: If accuracy is negative.
    """
    if accuracy < 0:
        raise ValueError(f"accuracy must be >= 0, got {accuracy}")
    if accuracy == 0:
        return value
    steps = round(value / accuracy)
    if accuracy < 1:
        # Decimal accuracies: divide by the integral reciprocal so 0.1 yields 2.7, not 2.7000000000000002
        inverse = round(1 / accuracy)
        if math.isclose(inverse * accuracy, 1.0, rel_tol=1e-12):
            return steps / inverse
    return steps * accuracy


def sequence(count: int, start: Any, factory: Callable[[Iterable[Any]], Any] = list) -> Any:
    """Build ``count`` consecutive values starting at ``start``.

    The element type follows ``start``: ``sequence(2, 42.0) == [42.0, 43.0]``.
    Single-character text starts advance by code point.

    Args:
        count: Number of elements (>= 0).
        start: First value.
        factory: Container constructor taking an iterable (list, tuple, deque).
    """
    if count < 0:
        raise ValueError(f"count must be >= 0, got {count}")
    if isinstance(start, str):
        if len(start) != 1:
            raise ValueError(f"text sequences start from a single character, got {start!r}")
        first = ord(start)
        return factory(chr(first + i) for i in range(count))
    return factory(start + i for i in range(count))
