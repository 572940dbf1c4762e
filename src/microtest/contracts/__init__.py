"""Shared contracts for microtest.

Leaf package: enums, events, result values and exceptions used by the
engine, generators and resources. No imports from core or engine.
"""

from microtest.contracts.enums import EventKind, ResourceKind, SummaryStatus, ValueCategory
from microtest.contracts.errors import (
    HarnessStateError,
    MicrotestError,
    RandomSpecError,
    TempResourceError,
)
from microtest.contracts.events import Counts, Event, SourceLocation
from microtest.contracts.results import Outcome, evaluate

__all__ = [
    "Counts",
    "Event",
    "EventKind",
    "HarnessStateError",
    "MicrotestError",
    "Outcome",
    "RandomSpecError",
    "ResourceKind",
    "SourceLocation",
    "SummaryStatus",
    "TempResourceError",
    "ValueCategory",
    "evaluate",
]
