# src/microtest/contracts/enums.py
"""Kinds and modes shared between the engine, generators and resources."""

from enum import StrEnum


class EventKind(StrEnum):
    """Kind of a single logged event.

    Only PASS, FAIL and WARN are counted. INFO and NOTE are diagnostic
    lines that never touch the statistics.
    """

    PASS = "pass"
    FAIL = "fail"
    WARN = "warn"
    INFO = "info"
    NOTE = "note"

    @property
    def is_counted(self) -> bool:
        """True for the kinds tracked by the statistics engine."""
        return self in (EventKind.PASS, EventKind.FAIL, EventKind.WARN)


class SummaryStatus(StrEnum):
    """Tag of the terminal summary line."""

    DONE = "DONE"
    PASS = "PASS"
    FAIL = "FAIL"


class ValueCategory(StrEnum):
    """Capability tag of a random value kind."""

    INTEGER = "integer"
    FLOATING = "floating"
    TEXT = "text"


class ResourceKind(StrEnum):
    """Filesystem entry type of a scoped temporary resource."""

    FILE = "file"
    DIRECTORY = "directory"
