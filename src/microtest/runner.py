# src/microtest/runner.py
"""Process entry point for test programs.

Collects arguments and environment, runs the test body on an initialized
harness and turns the summary into an exit code. Exceptions escaping the
test body are deliberately not caught: the interpreter's non-zero exit
and traceback are the failure signal, and no summary is written that
could make a crashed run look clean.
"""

from __future__ import annotations

import importlib
import importlib.util
import os
import sys
from collections.abc import Callable, Mapping, Sequence
from pathlib import Path
from typing import Any

from microtest.core.logging import get_logger
from microtest.core.platform import environment_entries
from microtest.engine.harness import Harness, TestEnvironment, default_harness, set_default_harness

logger = get_logger(__name__)

DEFAULT_FUNCTION = "test"
BODY_MODULE_PREFIX = "_microtest_body_"

TestBody = Callable[[list[str]], Any]


def run_test_body(
    body: TestBody,
    argv: Sequence[str] | None = None,
    environ: Mapping[str, str] | None = None,
    harness: Harness | None = None,
) -> int:
    """Run ``body(args)`` and return the exit code from the summary.

    Args:
        body: Test function taking the argument list.
        argv: Arguments after the program name (default: sys.argv[1:]).
        environ: Environment mapping (default: os.environ).
        harness: Harness to use (default: the process-wide harness). It is
            installed as the process-wide harness while the body runs, so
            module-level checks reach it.

    Returns:
        0 if no check failed, otherwise a positive exit code.
    """
    harness = harness if harness is not None else default_harness()
    environment = TestEnvironment(
        args=list(sys.argv[1:] if argv is None else argv),
        env=environment_entries(environ),
    )
    previous = set_default_harness(harness)
    try:
        harness.init(environment)
        body(environment.args)
        return harness.summary()
    finally:
        harness.teardown()
        set_default_harness(previous)


def load_test_body(target: str, default_function: str = DEFAULT_FUNCTION) -> TestBody:
    """Resolve ``path/to/file.py[:func]`` or ``package.module[:func]`` to a callable.

    Raises:
        FileNotFoundError: If a file target does not exist.
        ModuleNotFoundError: If a module target cannot be imported.
        AttributeError: If the module has no such function.
        TypeError: If the attribute is not callable.
    """
    module_ref, sep, function_name = target.rpartition(":")
    if not sep or not function_name.isidentifier():
        module_ref, function_name = target, default_function

    if module_ref.endswith(".py") or os.sep in module_ref:
        path = Path(module_ref).resolve()
        if not path.exists():
            raise FileNotFoundError(f"Test file not found: {path}")
        # Private module name: a body file named logging.py must not replace the stdlib module
        module_name = f"{BODY_MODULE_PREFIX}{path.stem}"
        spec = importlib.util.spec_from_file_location(module_name, path)
        if spec is None or spec.loader is None:
            raise ModuleNotFoundError(f"Cannot load test file: {path}")
        module = importlib.util.module_from_spec(spec)
        sys.modules[module_name] = module
        try:
            spec.loader.exec_module(module)
        except BaseException:
            sys.modules.pop(module_name, None)
            raise
    else:
        module = importlib.import_module(module_ref)

    body = getattr(module, function_name)
    if not callable(body):
        raise TypeError(f"{target}: '{function_name}' is not callable")
    logger.debug("Test body loaded", target=target, function=function_name)
    return body
