# tests/unit/test_runner.py
"""Tests for running test bodies and loading them by reference."""

import io
import json
import sys
from pathlib import Path

import pytest

from microtest.core.config import HarnessSettings
from microtest.engine.harness import Harness
from microtest.runner import load_test_body, run_test_body
from tests.conftest import stripped
from tests.fixtures import bodies

BODIES_PATH = Path(bodies.__file__)


def fresh_harness() -> tuple[Harness, io.StringIO]:
    sink = io.StringIO()
    return Harness(HarnessSettings(omit_pass_log=True), sink=sink), sink


class TestRunTestBody:
    def test_passing_body(self) -> None:
        h, sink = fresh_harness()
        code = run_test_body(bodies.test, ["a", "b"], {"HOME": "/root"}, h)
        assert code == 0
        assert h.environment.args == ["a", "b"]
        assert h.environment.env == ["HOME=/root"]
        lines = stripped(sink.getvalue())
        assert lines.startswith("[info] Test args are: ['a', 'b']")
        assert lines.endswith("[PASS] All 1 checks passed, 1 warnings.")

    def test_failing_body_exit_code(self) -> None:
        h, sink = fresh_harness()
        assert run_test_body(bodies.failing, [], {}, h) == 2
        assert sink.getvalue().splitlines()[-1] == "[FAIL] 2 of 3 checks failed, 0 warnings."

    def test_crash_propagates_without_summary(self) -> None:
        h, sink = fresh_harness()
        with pytest.raises(RuntimeError, match="body crashed"):
            run_test_body(bodies.crashing, [], {}, h)
        assert "checks" not in sink.getvalue()

    def test_harness_torn_down_after_run(self) -> None:
        h, _ = fresh_harness()
        run_test_body(bodies.test, [], {}, h)
        assert h.counts().total == 2
        with pytest.raises(RuntimeError):
            h.summary()


class TestLoadTestBody:
    def test_module_reference_default_function(self) -> None:
        assert load_test_body("tests.fixtures.bodies") is bodies.test

    def test_module_reference_with_function(self) -> None:
        assert load_test_body("tests.fixtures.bodies:failing") is bodies.failing

    def test_file_reference(self) -> None:
        body = load_test_body(f"{BODIES_PATH}:seeded")
        assert body.__name__ == "seeded"

    def test_file_named_like_stdlib_does_not_shadow_it(self, tmp_path: Path) -> None:
        body_file = tmp_path / "json.py"
        body_file.write_text("def test(args):\n    pass\n")
        load_test_body(str(body_file))
        assert sys.modules["json"] is json
        assert sys.modules.pop("_microtest_body_json").__file__ == str(body_file.resolve())

    def test_broken_file_not_left_registered(self, tmp_path: Path) -> None:
        body_file = tmp_path / "broken_body.py"
        body_file.write_text("raise RuntimeError(\"import failed\")\n")
        with pytest.raises(RuntimeError, match="import failed"):
            load_test_body(str(body_file))
        assert "_microtest_body_broken_body" not in sys.modules

    def test_missing_file(self, tmp_path: Path) -> None:
        with pytest.raises(FileNotFoundError):
            load_test_body(str(tmp_path / "nope.py"))

    def test_missing_function(self) -> None:
        with pytest.raises(AttributeError):
            load_test_body("tests.fixtures.bodies:absent")

    def test_not_callable(self) -> None:
        with pytest.raises(TypeError, match="not callable"):
            load_test_body("tests.fixtures.bodies:NOT_CALLABLE")
