# src/microtest/contracts/errors.py
"""Exception hierarchy for microtest.

Check failures are never exceptions: they are recorded and logged. The
types here cover programming errors and environment failures that must
reach the caller.
"""


class MicrotestError(Exception):
    """Base class for all microtest errors."""


class RandomSpecError(MicrotestError, ValueError):
    """Raised when a random value request violates its preconditions.

    Covers ``lower > upper``, bounds outside the range of the requested
    kind, negative counts and unknown kinds.
    """


class TempResourceError(MicrotestError, OSError):
    """Raised when a temporary file or directory cannot be created.

    A missing resource invalidates the premise of the test using it, so
    this is always propagated to the test body.
    """


class HarnessStateError(MicrotestError, RuntimeError):
    """Raised when a harness is used after ``teardown()``."""
