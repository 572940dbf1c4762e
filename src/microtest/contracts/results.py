# src/microtest/contracts/results.py
"""Result value for evaluating fallible test expressions.

``expect_except`` and ``expect_noexcept`` do not branch on try/except
directly. They evaluate the expression into an Outcome and branch on that
value, so the raised/not-raised distinction is explicit data.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True, slots=True)
class Outcome:
    """Either a returned value or the exception that was raised."""

    value: Any = None
    error: Exception | None = None

    @classmethod
    def success(cls, value: Any = None) -> Outcome:
        """Create an outcome for a call that returned normally."""
        return cls(value=value)

    @classmethod
    def failure(cls, error: Exception) -> Outcome:
        """Create an outcome for a call that raised."""
        return cls(error=error)

    @property
    def succeeded(self) -> bool:
        return self.error is None

    def describe_error(self) -> str:
        """Short ``Type: message`` rendering of the captured error."""
        if self.error is None:
            return ""
        text = str(self.error)
        name = type(self.error).__name__
        return f"{name}: {text}" if text else name


def evaluate(fn: Callable[..., Any], *args: Any, **kwargs: Any) -> Outcome:
    """Call ``fn`` and capture its result or exception as an Outcome.

    Only ``Exception`` subclasses are captured. KeyboardInterrupt and
    SystemExit propagate.
    """
    try:
        return Outcome.success(fn(*args, **kwargs))
    except Exception as exc:
        return Outcome.failure(exc)
