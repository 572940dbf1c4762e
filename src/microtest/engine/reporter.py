# src/microtest/engine/reporter.py
"""CheckLogger: commits check events into counters and the output sink.

The logger owns the output configuration (sink, ANSI colors, pass
omission) and a reference to the StatisticsEngine it drives. Every
counted event goes through ``_record()``; ``write()`` only renders.
"""

from __future__ import annotations

import sys
from collections.abc import Iterator
from contextlib import contextmanager
from typing import TextIO

from microtest.contracts.enums import EventKind
from microtest.contracts.events import Event, SourceLocation
from microtest.core.logging import get_logger
from microtest.engine.formatting import exit_code, format_line, summary_message, summary_status
from microtest.engine.statistics import StatisticsEngine

logger = get_logger(__name__)


class CheckLogger:
    """Formats check events and keeps the statistics in step.

    Output configuration is plain mutable state. Code that swaps the
    sink or a flag is responsible for putting the previous value back;
    ``redirect()`` does that for a ``with`` block.
    """

    def __init__(
        self,
        statistics: StatisticsEngine,
        *,
        sink: TextIO | None = None,
        ansi_colors: bool = False,
        omit_pass_log: bool = False,
    ) -> None:
        self._statistics = statistics
        self._sink = sink
        self.ansi_colors = ansi_colors
        self.omit_pass_log = omit_pass_log

    @property
    def statistics(self) -> StatisticsEngine:
        return self._statistics

    @property
    def sink(self) -> TextIO:
        """Current output stream (``sys.stdout`` at call time when unset)."""
        return self._sink if self._sink is not None else sys.stdout

    @sink.setter
    def sink(self, stream: TextIO | None) -> None:
        self._sink = stream

    @contextmanager
    def redirect(
        self,
        sink: TextIO,
        *,
        ansi_colors: bool | None = None,
        omit_pass_log: bool | None = None,
    ) -> Iterator[TextIO]:
        """Temporarily swap the sink (and optionally flags), restoring on exit.

        The previous configuration is restored on every exit path,
        including exceptions raised inside the block.
        """
        previous = (self._sink, self.ansi_colors, self.omit_pass_log)
        self._sink = sink
        if ansi_colors is not None:
            self.ansi_colors = ansi_colors
        if omit_pass_log is not None:
            self.omit_pass_log = omit_pass_log
        try:
            yield sink
        finally:
            self._sink, self.ansi_colors, self.omit_pass_log = previous

    # -------------------------------------------------------------------------
    # Rendering
    # -------------------------------------------------------------------------

    def write(self, kind: EventKind | str, location: SourceLocation | None = None, message: str = "") -> None:
        """Format one line and append it to the sink. Counters are untouched."""
        tag = kind.value if isinstance(kind, EventKind) else kind
        sink = self.sink
        sink.write(format_line(tag, message, location, ansi=self.ansi_colors))
        sink.write("\n")

    def _record(self, event: Event) -> None:
        self._statistics.increment(event.kind)
        if event.is_silent:
            return
        if event.kind is EventKind.PASS and self.omit_pass_log:
            return
        self.write(event.kind, event.location, event.message)

    # -------------------------------------------------------------------------
    # Counted events
    # -------------------------------------------------------------------------

    def commit(self, is_pass: bool, location: SourceLocation | None = None, message: str = "") -> bool:
        """Record a check that can only pass or fail.

        Fail lines are always written. Pass lines are written unless
        ``omit_pass_log`` is set.

        Returns:
            ``is_pass``, so callers can chain on the outcome.
        """
        kind = EventKind.PASS if is_pass else EventKind.FAIL
        self._record(Event(kind=kind, location=location, message=message))
        return is_pass

    def pass_(self, location: SourceLocation | None = None, message: str = "") -> None:
        self._record(Event(kind=EventKind.PASS, location=location, message=message))

    def fail(self, location: SourceLocation | None = None, message: str = "") -> None:
        self._record(Event(kind=EventKind.FAIL, location=location, message=message))

    def warning(self, location: SourceLocation | None = None, message: str = "") -> None:
        """Record a warning. Warnings are never omitted."""
        self._record(Event(kind=EventKind.WARN, location=location, message=message))

    # -------------------------------------------------------------------------
    # Uncounted diagnostics
    # -------------------------------------------------------------------------

    def info(self, message: str, location: SourceLocation | None = None) -> None:
        self.write(EventKind.INFO, location, message)

    def note(self, message: str, location: SourceLocation | None = None) -> None:
        self.write(EventKind.NOTE, location, message)

    # -------------------------------------------------------------------------
    # Summary
    # -------------------------------------------------------------------------

    def summary(self) -> int:
        """Write the summary line and return the process exit code.

        Returns:
            0 if no check failed, otherwise a positive value (the number
            of failures, capped at 255).
        """
        counts = self._statistics.counts()
        status = summary_status(counts)
        self.write(status.value, None, summary_message(counts))
        code = exit_code(counts)
        logger.debug(
            "Summary written",
            status=status.value,
            passed=counts.passed,
            failed=counts.failed,
            warned=counts.warned,
            exit_code=code,
        )
        return code

    def reset(self) -> None:
        """Zero the counters. Sink and flags keep their values."""
        self._statistics.reset()
