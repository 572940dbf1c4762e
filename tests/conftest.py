# tests/conftest.py
"""Shared test fixtures and helpers.

Every test that records checks gets its own Harness writing into a
StringIO, so no test touches the process-wide harness or stdout.

Output comparisons go through ``stripped()``, which drops newlines and
every other character below ' ' (ESC included), the same normalization
the check output consumers apply.

Hypothesis Configuration:
- "ci" profile: Fast tests for CI (100 examples) - default
- "nightly" profile: Thorough tests (1000 examples)
- "debug" profile: Minimal tests with verbose output (10 examples)

Set profile via environment variable:
    HYPOTHESIS_PROFILE=nightly pytest tests/property/
"""

import io
import os
from collections.abc import Iterator

import pytest
import structlog
from hypothesis import Phase, Verbosity, settings

from microtest.contracts.events import SourceLocation
from microtest.core.config import HarnessSettings
from microtest.engine.harness import Harness, set_default_harness


def stripped(text: str) -> str:
    """Remove newlines and control characters (< ' ') from captured output."""
    return "".join(ch for ch in text if ch >= " ")


def loc(file: str = "FILE", line: int = 1) -> SourceLocation:
    """Hand-built location, rendered as ``[@file:line]``."""
    return SourceLocation(file=file, line=line)


@pytest.fixture
def sink() -> io.StringIO:
    return io.StringIO()


@pytest.fixture
def harness(sink: io.StringIO) -> Iterator[Harness]:
    """Fresh initialized harness writing plain lines into ``sink``."""
    h = Harness(HarnessSettings(seed=1234), sink=sink).init()
    yield h
    h.teardown()


@pytest.fixture
def default_harness_swap(harness: Harness) -> Iterator[Harness]:
    """Install ``harness`` as the process-wide harness for module-level API tests."""
    previous = set_default_harness(harness)
    yield harness
    set_default_harness(previous)


@pytest.fixture(autouse=True)
def _reset_structlog() -> Iterator[None]:
    """Each test starts with unconfigured structlog so ensure_logging() is predictable."""
    structlog.reset_defaults()
    yield
    structlog.reset_defaults()


# =============================================================================
# Hypothesis Configuration
# =============================================================================

# CI profile: Fast tests for continuous integration
settings.register_profile(
    "ci",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,  # Disable deadline for CI (timing varies)
)

# Nightly profile: Thorough testing for scheduled runs
settings.register_profile(
    "nightly",
    max_examples=1000,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,
)

# Debug profile: Minimal examples with verbose output for debugging
settings.register_profile(
    "debug",
    max_examples=10,
    verbosity=Verbosity.verbose,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,
)

# Load profile from environment, default to "ci"
settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "ci"))
