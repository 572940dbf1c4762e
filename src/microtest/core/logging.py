# src/microtest/core/logging.py
"""Structured diagnostic logging for the microtest harness.

Uses structlog routed through stdlib logging. This is NOT the check
output stream: pass/fail/warn lines go to the CheckLogger sink and must
stay byte-exact. Diagnostics (seed selection, temp resource lifecycle,
summaries) go to stderr through the ``microtest`` stdlib logger.

Architecture:
    Both structlog loggers and ``logging.getLogger("microtest...")``
    loggers pass through the same ProcessorFormatter chain, so either
    style produces the same console or JSON output.
"""

import logging
import sys
from typing import Any, TextIO

import structlog
from structlog.stdlib import ProcessorFormatter

LOGGER_NAME = "microtest"


def _remove_internal_fields(
    logger: logging.Logger | None,
    method_name: str,
    event_dict: dict[str, Any],
) -> dict[str, Any]:
    """Remove internal structlog fields from output.

    ProcessorFormatter always adds _record and _from_structlog; they are
    bookkeeping and must not be rendered.
    """
    del event_dict["_record"]
    del event_dict["_from_structlog"]
    return event_dict


def configure_logging(
    *,
    json_output: bool = False,
    level: str = "WARNING",
    stream: TextIO | None = None,
) -> None:
    """Configure structlog and the ``microtest`` stdlib logger.

    Only the ``microtest`` logger hierarchy gets a handler; the host
    program's root logger is left alone.

    Args:
        json_output: If True, output JSON. If False, human-readable.
        level: Log level (DEBUG, INFO, WARNING, ERROR).
        stream: Destination stream (default: sys.stderr).
    """
    log_level = getattr(logging, level.upper())

    shared_processors: list[Any] = [
        structlog.contextvars.merge_contextvars,
        structlog.processors.add_log_level,
        structlog.processors.TimeStamper(fmt="iso"),
        structlog.stdlib.PositionalArgumentsFormatter(),
        structlog.processors.StackInfoRenderer(),
    ]

    if json_output:
        final_processors: list[Any] = [
            _remove_internal_fields,
            structlog.processors.format_exc_info,
            structlog.processors.JSONRenderer(),
        ]
    else:
        final_processors = [
            _remove_internal_fields,
            structlog.dev.ConsoleRenderer(colors=False),
        ]

    structlog.configure(
        processors=[*shared_processors, ProcessorFormatter.wrap_for_formatter],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        # Tests reconfigure logging; cached loggers would go stale
        cache_logger_on_first_use=False,
    )

    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(
        ProcessorFormatter(
            processors=final_processors,
            foreign_pre_chain=shared_processors,
        )
    )

    harness_logger = logging.getLogger(LOGGER_NAME)
    harness_logger.handlers = [handler]
    harness_logger.setLevel(log_level)
    harness_logger.propagate = False


def ensure_logging(*, json_output: bool = False, level: str = "WARNING") -> bool:
    """Configure logging unless the host program already configured structlog.

    Returns:
        True if this call configured logging.
    """
    if structlog.is_configured():
        return False
    configure_logging(json_output=json_output, level=level)
    return True


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    """Get a bound logger for a module.

    Args:
        name: Logger name (typically __name__, inside the microtest package).

    Returns:
        Bound structlog logger.
    """
    logger: structlog.stdlib.BoundLogger = structlog.get_logger(name)
    return logger
