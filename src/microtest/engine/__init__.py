"""Check engine: statistics, line formatting, logger, assertion facade, harness."""

from microtest.engine.assertions import Checks
from microtest.engine.harness import Harness, TestEnvironment, default_harness, set_default_harness
from microtest.engine.reporter import CheckLogger
from microtest.engine.statistics import StatisticsEngine

__all__ = [
    "CheckLogger",
    "Checks",
    "Harness",
    "StatisticsEngine",
    "TestEnvironment",
    "default_harness",
    "set_default_harness",
]
