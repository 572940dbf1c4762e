# src/microtest/engine/assertions.py
"""Assertion facade invoked by test code.

Every check evaluates its input, commits exactly one pass or fail event
and returns the outcome as a bool, so follow-up checks can be guarded:

    if checks.expect_cond(response is not None):
        checks.expect_eq(response.status, 200)

Nothing here raises on a failed check. Exceptions raised while
evaluating a predicate or comparison are captured as failures.

Call sites are captured from the caller's frame unless an explicit
``location`` is passed. Without a message, the call-site source line is
used as the message.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import TYPE_CHECKING, Any

from microtest.contracts.events import SourceLocation
from microtest.contracts.results import Outcome, evaluate

if TYPE_CHECKING:
    from microtest.engine.harness import Harness
    from microtest.engine.reporter import CheckLogger


def _truth(predicate: bool | Callable[[], Any]) -> bool:
    value = predicate() if callable(predicate) else predicate
    return bool(value)


def _equals(a: Any, b: Any) -> bool:
    return bool(a == b)


def _not_equals(a: Any, b: Any) -> bool:
    return bool(a != b)


def join_parts(parts: tuple[Any, ...]) -> str:
    """Concatenate heterogeneous message parts with no separator."""
    return "".join(str(part) for part in parts)


class Checks:
    """Check operations bound to one harness."""

    def __init__(self, harness: Harness) -> None:
        self._harness = harness

    @property
    def _log(self) -> CheckLogger:
        return self._harness.log

    @staticmethod
    def _locate(location: SourceLocation | None) -> SourceLocation:
        # Frames: capture <- _locate <- public check method <- test code
        return location if location is not None else SourceLocation.capture(depth=2)

    @staticmethod
    def _describe(message: str, location: SourceLocation, operation: str) -> str:
        if message:
            return message
        return location.source_text() or operation

    def _commit_outcome(self, outcome: Outcome, location: SourceLocation, text: str, detail: str = "") -> bool:
        passed = outcome.succeeded and bool(outcome.value)
        if outcome.error is not None:
            text = f"{text} (raised {outcome.describe_error()})"
        elif not passed and detail:
            text = f"{text} ({detail})"
        return self._log.commit(passed, location, text)

    # -------------------------------------------------------------------------
    # Predicate checks
    # -------------------------------------------------------------------------

    def expect(
        self,
        predicate: bool | Callable[[], Any],
        message: str = "",
        *,
        location: SourceLocation | None = None,
    ) -> bool:
        """Pass if the predicate is truthy.

        ``predicate`` is a value or a zero-argument callable. A callable
        that raises counts as a failed check; the exception is not
        propagated.
        """
        location = self._locate(location)
        text = self._describe(message, location, "expect")
        return self._commit_outcome(evaluate(_truth, predicate), location, text)

    def expect_cond(
        self,
        predicate: bool | Callable[[], Any],
        message: str = "",
        *,
        location: SourceLocation | None = None,
    ) -> bool:
        """Same as ``expect``; use the returned bool to guard dependent checks."""
        location = self._locate(location)
        text = self._describe(message, location, "expect_cond")
        return self._commit_outcome(evaluate(_truth, predicate), location, text)

    def expect_eq(self, a: Any, b: Any, message: str = "", *, location: SourceLocation | None = None) -> bool:
        """Pass if ``a == b``. Works across comparable types (``"x" == str_value``, ``1 == 1.0``)."""
        location = self._locate(location)
        text = self._describe(message, location, "expect_eq")
        return self._commit_outcome(evaluate(_equals, a, b), location, text, f"{a!r} != {b!r}")

    def expect_ne(self, a: Any, b: Any, message: str = "", *, location: SourceLocation | None = None) -> bool:
        """Pass if ``a != b``."""
        location = self._locate(location)
        text = self._describe(message, location, "expect_ne")
        return self._commit_outcome(evaluate(_not_equals, a, b), location, text, f"{a!r} == {b!r}")

    # -------------------------------------------------------------------------
    # Exception checks
    # -------------------------------------------------------------------------

    def expect_except(
        self,
        fn: Callable[..., Any],
        *args: Any,
        expected: type[Exception] | tuple[type[Exception], ...] = Exception,
        location: SourceLocation | None = None,
        **kwargs: Any,
    ) -> bool:
        """Pass if ``fn(*args, **kwargs)`` raises (an instance of ``expected``).

        Fails if the call returns normally or raises an exception that is
        not an instance of ``expected``. A non-callable ``fn`` (an already
        evaluated expression) fails without being called.
        """
        location = self._locate(location)
        text = self._describe("", location, "expect_except")
        if not callable(fn):
            return self._log.commit(False, location, f"{text} (not callable: {fn!r})")
        outcome = evaluate(fn, *args, **kwargs)
        if outcome.error is None:
            return self._log.commit(False, location, f"{text} (no exception raised)")
        if not isinstance(outcome.error, expected):
            return self._log.commit(False, location, f"{text} (raised {outcome.describe_error()})")
        return self._log.commit(True, location, text)

    def expect_noexcept(
        self,
        fn: Callable[..., Any],
        *args: Any,
        location: SourceLocation | None = None,
        **kwargs: Any,
    ) -> bool:
        """Pass if ``fn(*args, **kwargs)`` returns normally, fail if it raises or ``fn`` is not callable."""
        location = self._locate(location)
        text = self._describe("", location, "expect_noexcept")
        if not callable(fn):
            return self._log.commit(False, location, f"{text} (not callable: {fn!r})")
        outcome = evaluate(fn, *args, **kwargs)
        if outcome.error is not None:
            return self._log.commit(False, location, f"{text} (raised {outcome.describe_error()})")
        return self._log.commit(True, location, text)

    # -------------------------------------------------------------------------
    # Unconditional events
    # -------------------------------------------------------------------------

    def pass_(self, *parts: Any, location: SourceLocation | None = None) -> None:
        self._log.pass_(self._locate(location), join_parts(parts))

    def fail(self, *parts: Any, location: SourceLocation | None = None) -> None:
        self._log.fail(self._locate(location), join_parts(parts))

    def warning(self, *parts: Any, location: SourceLocation | None = None) -> None:
        self._log.warning(self._locate(location), join_parts(parts))

    def info(self, *parts: Any) -> None:
        """Uncounted diagnostic line; parts are concatenated with ``str()``."""
        self._log.info(join_parts(parts))

    def note(self, *parts: Any) -> None:
        self._log.note(join_parts(parts))
