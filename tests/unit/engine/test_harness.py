# tests/unit/engine/test_harness.py
"""Tests for the Harness lifecycle and the process-wide instance."""

import io
from pathlib import Path

import pytest

from microtest.contracts.errors import HarnessStateError
from microtest.core.config import HarnessSettings
from microtest.engine import harness as harness_module
from microtest.engine.harness import Harness, TestEnvironment, default_harness, set_default_harness


class TestLifecycle:
    def test_init_zeroes_counters(self, harness: Harness) -> None:
        harness.checks.fail("x")
        harness.init()
        assert harness.counts().total == 0

    def test_init_stores_environment(self, harness: Harness) -> None:
        env = TestEnvironment(args=["-v"], env=["WINDIR=C:\\Windows"])
        harness.init(env)
        assert harness.environment.args == ["-v"]
        assert harness.environment.is_windows is True

    def test_settings_apply_to_logger(self) -> None:
        h = Harness(HarnessSettings(ansi_colors=True, omit_pass_log=True), sink=io.StringIO())
        assert h.log.ansi_colors is True
        assert h.log.omit_pass_log is True

    def test_teardown_blocks_use(self, harness: Harness) -> None:
        harness.teardown()
        with pytest.raises(HarnessStateError):
            harness.checks.pass_("after teardown")
        with pytest.raises(HarnessStateError):
            harness.generate("int8")
        with pytest.raises(HarnessStateError):
            harness.make_tmpfile()

    def test_teardown_idempotent(self, harness: Harness) -> None:
        harness.teardown()
        harness.teardown()

    def test_init_after_teardown_reactivates(self, harness: Harness) -> None:
        harness.teardown()
        harness.init()
        assert harness.checks.expect_eq(1, 1) is True

    def test_seed_from_settings_reproducible(self) -> None:
        a = Harness(HarnessSettings(seed=99), sink=io.StringIO())
        b = Harness(HarnessSettings(seed=99), sink=io.StringIO())
        assert [a.generate("uint32") for _ in range(5)] == [b.generate("uint32") for _ in range(5)]
        assert a.random.seed == 99

    def test_tmp_resources_use_temp_root(self, tmp_path: Path) -> None:
        h = Harness(HarnessSettings(temp_root=tmp_path), sink=io.StringIO()).init()
        with h.make_tmpdir(suffix="-d") as d:
            assert d.path.parent == tmp_path.resolve()
            assert d.path.name.endswith("-d")
        h.teardown()


class TestDefaultHarness:
    def test_set_default_harness_returns_previous(self, harness: Harness) -> None:
        previous = set_default_harness(harness)
        try:
            assert default_harness() is harness
        finally:
            assert set_default_harness(previous) is harness

    def test_default_harness_created_lazily(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setattr(harness_module, "_default_harness", None)
        monkeypatch.setenv("MICROTEST_SEED", "7")
        first = default_harness()
        assert first is default_harness()
        assert first.random.seed == 7
