# src/microtest/engine/harness.py
"""Harness: the explicit context object holding all per-process test state.

One Harness bundles the statistics, the check logger and its output
configuration, the random value generator and the temp resource root.
Lifecycle:

    harness = Harness(settings).init()   # process start
    ...checks...
    harness.reset()                      # between logical test groups
    code = harness.summary()
    harness.teardown()                   # process end

``default_harness()`` returns the single process-wide instance used by
the module-level API and the runner. Code that wants isolation (meta
tests, embedding) creates its own Harness and passes it by reference.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, TextIO

from microtest.contracts.errors import HarnessStateError
from microtest.contracts.events import Counts
from microtest.core.config import HarnessSettings, load_settings
from microtest.core.logging import ensure_logging, get_logger
from microtest.core.platform import is_windows
from microtest.engine.assertions import Checks
from microtest.engine.reporter import CheckLogger
from microtest.engine.statistics import StatisticsEngine
from microtest.generators.random_values import ContainerOf, RandomValueGenerator, ValueKind
from microtest.resources.tempfs import TempDir, TempFile

logger = get_logger(__name__)


@dataclass(frozen=True)
class TestEnvironment:
    """Arguments and environment entries collected at process start.

    Attributes:
        args: Command line arguments after the program name.
        env: Environment as ``NAME=value`` entries.
    """

    __test__ = False  # not a pytest test class

    args: list[str] = field(default_factory=list)
    env: list[str] = field(default_factory=list)

    @property
    def is_windows(self) -> bool:
        return is_windows(self.env)


class Harness:
    """Process-wide test state with an explicit lifecycle."""

    def __init__(self, settings: HarnessSettings | None = None, *, sink: TextIO | None = None) -> None:
        """Build a harness.

        Diagnostic logging is configured here (unless the host program
        already configured structlog) so no diagnostic reaches the check
        stream on stdout.

        Args:
            settings: Initial configuration (default: HarnessSettings()).
            sink: Output stream for check lines (default: sys.stdout at write time).
        """
        self._settings = settings if settings is not None else HarnessSettings()
        ensure_logging(json_output=self._settings.json_logs, level=self._settings.log_level)
        self._statistics = StatisticsEngine()
        self._log = CheckLogger(
            self._statistics,
            sink=sink,
            ansi_colors=self._settings.ansi_colors,
            omit_pass_log=self._settings.omit_pass_log,
        )
        self._random = RandomValueGenerator(seed=self._settings.seed)
        self._checks = Checks(self)
        self._torn_down = False
        self.environment = TestEnvironment()

    @property
    def settings(self) -> HarnessSettings:
        return self._settings

    def _require_active(self) -> None:
        if self._torn_down:
            raise HarnessStateError("Harness was torn down; call init() before using it again")

    @property
    def log(self) -> CheckLogger:
        self._require_active()
        return self._log

    @property
    def checks(self) -> Checks:
        return self._checks

    @property
    def random(self) -> RandomValueGenerator:
        self._require_active()
        return self._random

    @property
    def statistics(self) -> StatisticsEngine:
        return self._statistics

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def init(self, environment: TestEnvironment | None = None) -> Harness:
        """Start (or restart) the harness: zero counters, enable diagnostics.

        Diagnostic logging is configured only when the host program has
        not configured structlog itself.
        """
        ensure_logging(json_output=self._settings.json_logs, level=self._settings.log_level)
        self._torn_down = False
        if environment is not None:
            self.environment = environment
        self._statistics.reset()
        logger.debug(
            "Harness initialized",
            seed=self._random.seed,
            ansi_colors=self._log.ansi_colors,
            omit_pass_log=self._log.omit_pass_log,
            preset=self._settings.preset_name,
        )
        return self

    def reset(self) -> None:
        """Zero the counters between logical test groups. Output configuration is kept."""
        self.log.reset()

    def teardown(self) -> None:
        """Flush the sink and mark the harness unusable until the next ``init()``."""
        if self._torn_down:
            return
        self._log.sink.flush()
        self._torn_down = True
        logger.debug("Harness torn down", **_counts_fields(self._statistics.counts()))

    # -------------------------------------------------------------------------
    # Statistics
    # -------------------------------------------------------------------------

    def summary(self) -> int:
        """Write the summary line and return the process exit code."""
        return self.log.summary()

    def counts(self) -> Counts:
        return self._statistics.counts()

    def num_passed(self) -> int:
        return self._statistics.num_passed

    def num_fails(self) -> int:
        return self._statistics.num_fails

    def num_warnings(self) -> int:
        return self._statistics.num_warnings

    def num_checks(self) -> int:
        return self._statistics.num_checks

    # -------------------------------------------------------------------------
    # Generators and resources
    # -------------------------------------------------------------------------

    def generate(self, kind: ValueKind | ContainerOf | str | type, *args: int | float) -> Any:
        """Draw a random value; see RandomValueGenerator.generate()."""
        return self.random.generate(kind, *args)

    def make_tmpfile(self, *, suffix: str = "") -> TempFile:
        self._require_active()
        return TempFile(suffix=suffix, root=self._settings.temp_root)

    def make_tmpdir(self, *, suffix: str = "") -> TempDir:
        self._require_active()
        return TempDir(suffix=suffix, root=self._settings.temp_root)


def _counts_fields(counts: Counts) -> dict[str, int]:
    return {"passed": counts.passed, "failed": counts.failed, "warned": counts.warned}


_default_harness: Harness | None = None


def default_harness() -> Harness:
    """Return the process-wide harness, creating it from settings on first use.

    The first call loads settings from MICROTEST_* environment variables.
    """
    global _default_harness
    if _default_harness is None:
        _default_harness = Harness(load_settings()).init()
    return _default_harness


def set_default_harness(harness: Harness | None) -> Harness | None:
    """Install ``harness`` as the process-wide instance and return the previous one.

    Passing None drops the instance; the next ``default_harness()`` call
    builds a fresh one.
    """
    global _default_harness
    previous = _default_harness
    _default_harness = harness
    return previous
