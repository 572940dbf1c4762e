"""
microtest: a lightweight check and reporting harness for test programs.

Counts passed, failed and warned checks, writes one (optionally colored)
line per check to a swappable text sink, and turns the totals into a
process exit code. Also provides type-directed random test values and
scoped temporary files and directories.

Usage:
    from microtest import expect, expect_eq, info, summary

    expect_eq(1 + 1, 2)
    raise SystemExit(summary())
"""

__version__ = "0.4.0"

from microtest.api import (  # noqa: E402
    expect,
    expect_cond,
    expect_eq,
    expect_except,
    expect_ne,
    expect_noexcept,
    fail,
    info,
    make_tmpdir,
    make_tmpfile,
    note,
    num_checks,
    num_fails,
    num_passed,
    num_warnings,
    pass_,
    random_value,
    reset,
    summary,
    warning,
)
from microtest.contracts import SourceLocation  # noqa: E402
from microtest.core.numeric import round_to, sequence  # noqa: E402
from microtest.core.platform import is_windows  # noqa: E402
from microtest.engine import Checks, Harness, default_harness, set_default_harness  # noqa: E402
from microtest.generators import ContainerOf, RandomValueGenerator  # noqa: E402
from microtest.resources import TempDir, TempFile  # noqa: E402

__all__ = [
    "Checks",
    "ContainerOf",
    "Harness",
    "RandomValueGenerator",
    "SourceLocation",
    "TempDir",
    "TempFile",
    "__version__",
    "default_harness",
    "expect",
    "expect_cond",
    "expect_eq",
    "expect_except",
    "expect_ne",
    "expect_noexcept",
    "fail",
    "info",
    "is_windows",
    "make_tmpdir",
    "make_tmpfile",
    "note",
    "num_checks",
    "num_fails",
    "num_passed",
    "num_warnings",
    "pass_",
    "random_value",
    "reset",
    "round_to",
    "sequence",
    "set_default_harness",
    "summary",
    "warning",
]
