# src/microtest/engine/statistics.py
"""Pass/fail/warning counters.

Single-threaded by contract: the harness runs checks synchronously on one
thread, so there is no locking here.
"""

from __future__ import annotations

from microtest.contracts.enums import EventKind
from microtest.contracts.events import Counts


class StatisticsEngine:
    """Counters for passed, failed and warned events.

    Counters only grow; ``reset()`` is the single way to bring them back
    to zero and it clears all three together.
    """

    def __init__(self) -> None:
        self._passed = 0
        self._failed = 0
        self._warned = 0

    def increment(self, kind: EventKind) -> None:
        """Increment exactly one counter.

        Raises:
            ValueError: If kind is not PASS, FAIL or WARN.
        """
        if kind is EventKind.PASS:
            self._passed += 1
        elif kind is EventKind.FAIL:
            self._failed += 1
        elif kind is EventKind.WARN:
            self._warned += 1
        else:
            raise ValueError(f"{kind!r} events are not counted")

    def counts(self) -> Counts:
        """Snapshot of the current counters."""
        return Counts(passed=self._passed, failed=self._failed, warned=self._warned)

    def reset(self) -> None:
        self._passed = 0
        self._failed = 0
        self._warned = 0

    @property
    def num_passed(self) -> int:
        return self._passed

    @property
    def num_fails(self) -> int:
        return self._failed

    @property
    def num_warnings(self) -> int:
        return self._warned

    @property
    def num_checks(self) -> int:
        """Passes plus failures."""
        return self._passed + self._failed
