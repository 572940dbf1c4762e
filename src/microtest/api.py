# src/microtest/api.py
"""Module-level check functions bound to the process-wide harness.

These capture the caller's location themselves and forward it
explicitly, so log lines point at the test code and not at this module.

    from microtest import expect, expect_eq, info

    def test(args: list[str]) -> None:
        info("Test args are: ", args)
        expect_eq(parse("1"), 1)
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

from microtest.contracts.events import SourceLocation
from microtest.engine.harness import default_harness
from microtest.generators.random_values import ContainerOf, ValueKind
from microtest.resources.tempfs import TempDir, TempFile


def expect(predicate: bool | Callable[[], Any], message: str = "", *, location: SourceLocation | None = None) -> bool:
    return default_harness().checks.expect(predicate, message, location=location or SourceLocation.capture())


def expect_cond(
    predicate: bool | Callable[[], Any], message: str = "", *, location: SourceLocation | None = None
) -> bool:
    return default_harness().checks.expect_cond(predicate, message, location=location or SourceLocation.capture())


def expect_eq(a: Any, b: Any, message: str = "", *, location: SourceLocation | None = None) -> bool:
    return default_harness().checks.expect_eq(a, b, message, location=location or SourceLocation.capture())


def expect_ne(a: Any, b: Any, message: str = "", *, location: SourceLocation | None = None) -> bool:
    return default_harness().checks.expect_ne(a, b, message, location=location or SourceLocation.capture())


def expect_except(
    fn: Callable[..., Any],
    *args: Any,
    expected: type[Exception] | tuple[type[Exception], ...] = Exception,
    location: SourceLocation | None = None,
    **kwargs: Any,
) -> bool:
    return default_harness().checks.expect_except(
        fn, *args, expected=expected, location=location or SourceLocation.capture(), **kwargs
    )


def expect_noexcept(
    fn: Callable[..., Any], *args: Any, location: SourceLocation | None = None, **kwargs: Any
) -> bool:
    return default_harness().checks.expect_noexcept(
        fn, *args, location=location or SourceLocation.capture(), **kwargs
    )


def pass_(*parts: Any, location: SourceLocation | None = None) -> None:
    default_harness().checks.pass_(*parts, location=location or SourceLocation.capture())


def fail(*parts: Any, location: SourceLocation | None = None) -> None:
    default_harness().checks.fail(*parts, location=location or SourceLocation.capture())


def warning(*parts: Any, location: SourceLocation | None = None) -> None:
    default_harness().checks.warning(*parts, location=location or SourceLocation.capture())


def info(*parts: Any) -> None:
    default_harness().checks.info(*parts)


def note(*parts: Any) -> None:
    default_harness().checks.note(*parts)


def random_value(kind: ValueKind | ContainerOf | str | type, *args: int | float) -> Any:
    """Draw from the process-wide generator (seeded from settings)."""
    return default_harness().generate(kind, *args)


def make_tmpfile(*, suffix: str = "") -> TempFile:
    return default_harness().make_tmpfile(suffix=suffix)


def make_tmpdir(*, suffix: str = "") -> TempDir:
    return default_harness().make_tmpdir(suffix=suffix)


def summary() -> int:
    return default_harness().summary()


def reset() -> None:
    default_harness().reset()


def num_checks() -> int:
    return default_harness().num_checks()


def num_passed() -> int:
    return default_harness().num_passed()


def num_fails() -> int:
    return default_harness().num_fails()


def num_warnings() -> int:
    return default_harness().num_warnings()
