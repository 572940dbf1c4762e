# src/microtest/contracts/events.py
"""Event and call-site types flowing from the assertion facade to the logger."""

from __future__ import annotations

import linecache
import sys
from dataclasses import dataclass
from pathlib import Path

from microtest.contracts.enums import EventKind


@dataclass(frozen=True, slots=True)
class SourceLocation:
    """File and line of a check call site.

    Attributes:
        file: File name as shown in log lines (``[@file:line]``).
        line: 1-based line number.
        path: Full path of the source file, used to look up the call-site
            text. Empty when the location was built by hand.
    """

    file: str
    line: int
    path: str = ""

    @classmethod
    def capture(cls, depth: int = 1) -> SourceLocation:
        """Capture the location of a caller.

        Args:
            depth: Number of frames above the caller of ``capture()``.
                ``depth=1`` returns the location of whoever called the
                function that calls ``capture()``.
        """
        frame = sys._getframe(depth + 1)
        filename = frame.f_code.co_filename
        return cls(file=Path(filename).name, line=frame.f_lineno, path=filename)

    def source_text(self) -> str:
        """Return the stripped source line at this location, or ''."""
        if not self.path:
            return ""
        return linecache.getline(self.path, self.line).strip()

    def __str__(self) -> str:
        return f"{self.file}:{self.line}"


@dataclass(frozen=True, slots=True)
class Event:
    """One pass/fail/warn/info/note event.

    Produced and consumed inside a single commit; never retained.
    """

    kind: EventKind
    location: SourceLocation | None = None
    message: str = ""

    @property
    def is_silent(self) -> bool:
        """Events with neither location nor message are counted but not written."""
        return self.location is None and not self.message


@dataclass(frozen=True, slots=True)
class Counts:
    """Snapshot of the statistics counters."""

    passed: int = 0
    failed: int = 0
    warned: int = 0

    @property
    def checks(self) -> int:
        """Number of checks (passes plus failures, warnings excluded)."""
        return self.passed + self.failed

    @property
    def total(self) -> int:
        """Every counted event including warnings."""
        return self.passed + self.failed + self.warned
