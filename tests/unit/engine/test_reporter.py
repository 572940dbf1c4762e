# tests/unit/engine/test_reporter.py
"""Tests for CheckLogger output.

Expected strings are byte-exact after ``stripped()``; downstream
consumers compare check output this way.
"""

import io

import pytest

from microtest.contracts.enums import EventKind
from microtest.engine.reporter import CheckLogger
from microtest.engine.statistics import StatisticsEngine
from tests.conftest import loc, stripped


def make_logger(**kwargs) -> tuple[CheckLogger, io.StringIO]:
    sink = io.StringIO()
    return CheckLogger(StatisticsEngine(), sink=sink, **kwargs), sink


class TestCheckLoggerOutput:
    def test_plain_lines_and_summary(self) -> None:
        log, sink = make_logger()
        log.warning(loc("F", 1), "W")
        log.pass_(loc("F", 2), "P")
        assert log.summary() == 0
        assert stripped(sink.getvalue()) == "[warn] [@F:1] W[pass] [@F:2] P[PASS] All 1 checks passed, 1 warnings."

    def test_one_line_per_event(self) -> None:
        log, sink = make_logger()
        log.fail(loc("F", 1), "a")
        log.info("b")
        assert sink.getvalue() == "[fail] [@F:1] a\n[info] b\n"

    def test_omit_pass_counts_but_hides_passes(self) -> None:
        log, sink = make_logger(omit_pass_log=True)
        log.warning(loc("F", 1), "W")
        for line in range(2, 8):
            if line == 3:
                log.fail(loc("F", 3), "F")
            log.pass_(loc("F", line), "P")
        assert stripped(sink.getvalue()) == "[warn] [@F:1] W[fail] [@F:3] F"
        assert log.statistics.num_passed == 6
        assert log.statistics.num_fails == 1

    def test_omit_pass_with_commits(self) -> None:
        """Committed passes are hidden like explicit ones; silent commits still count."""
        log, sink = make_logger()
        log.ansi_colors = True
        log.warning(loc("F", 1), "W")
        log.pass_(loc("F", 2), "P")
        log.fail(loc("F", 3), "F")
        log.reset()
        log.ansi_colors = False
        log.warning(loc("F", 1), "W")
        log.pass_(loc("F", 2), "P")
        log.fail(loc("F", 3), "F")
        log.reset()

        sink.seek(0)
        sink.truncate()
        log.omit_pass_log = True
        log.warning(loc("F", 1), "W")
        log.commit(True, loc("F", 2), "P")
        log.commit(True)
        log.commit(False)
        log.pass_(loc("F", 2), "P")
        log.fail(loc("F", 3), "F")
        log.pass_(loc("F", 4), "P")
        log.pass_(loc("F", 5), "P")
        log.pass_(loc("F", 6), "P")

        assert stripped(sink.getvalue()) == "[warn] [:1] W[fail] [:3] F"
        assert log.statistics.num_passed == 6
        assert log.statistics.num_fails == 2

    def test_silent_events_counted_not_written(self) -> None:
        log, sink = make_logger()
        log.commit(True)
        log.commit(True)
        log.commit(False)
        log.fail()
        log.warning()
        assert sink.getvalue() == ""
        assert log.summary() == 2
        assert stripped(sink.getvalue()) == "[FAIL] 2 of 4 checks failed, 1 warnings."

    def test_ansi_warning(self) -> None:
        log, sink = make_logger(ansi_colors=True)
        log.warning(loc("FILE", 1), "warn-msg")
        assert sink.getvalue() == "\x1b[0;33m[warn]\x1b[0m \x1b[0;36m[@FILE:1]\x1b[0m warn-msg\x1b[0m\n"

    def test_summary_without_events(self) -> None:
        log, sink = make_logger()
        assert log.summary() == 0
        assert stripped(sink.getvalue()) == "[DONE] No checks"

    def test_commit_returns_outcome(self) -> None:
        log, _ = make_logger()
        assert log.commit(True, loc(), "ok") is True
        assert log.commit(False, loc(), "bad") is False

    def test_info_and_note_not_counted(self) -> None:
        log, sink = make_logger(ansi_colors=True)
        log.info("i")
        log.note("n")
        assert log.statistics.counts().total == 0
        assert stripped(sink.getvalue()) == "[info] i[0m[note] n[0m"

    def test_write_does_not_count(self) -> None:
        log, sink = make_logger()
        log.write(EventKind.FAIL, loc(), "rendered only")
        assert log.statistics.num_fails == 0
        assert sink.getvalue() == "[fail] [@FILE:1] rendered only\n"

    def test_reset_keeps_configuration(self) -> None:
        log, sink = make_logger(ansi_colors=True, omit_pass_log=True)
        log.fail(loc(), "x")
        log.reset()
        assert log.statistics.counts().total == 0
        assert log.ansi_colors is True
        assert log.omit_pass_log is True
        assert log.sink is sink


class TestRedirect:
    def test_redirect_restores_previous_sink(self) -> None:
        log, outer = make_logger()
        inner = io.StringIO()
        with log.redirect(inner, ansi_colors=True, omit_pass_log=True):
            log.fail(loc(), "inside")
            assert log.ansi_colors is True
        log.fail(loc(), "outside")
        assert "inside" in inner.getvalue()
        assert outer.getvalue() == "[fail] [@FILE:1] outside\n"
        assert log.ansi_colors is False
        assert log.omit_pass_log is False

    def test_redirect_restores_on_exception(self) -> None:
        log, outer = make_logger()
        with pytest.raises(RuntimeError), log.redirect(io.StringIO(), ansi_colors=True):
            raise RuntimeError("boom")
        assert log.sink is outer
        assert log.ansi_colors is False

    def test_counters_shared_across_redirect(self) -> None:
        log, _ = make_logger()
        with log.redirect(io.StringIO()):
            log.pass_(loc(), "p")
        assert log.statistics.num_passed == 1

    def test_unset_sink_is_stdout(self, capsys: pytest.CaptureFixture[str]) -> None:
        log = CheckLogger(StatisticsEngine())
        log.info("to stdout")
        assert capsys.readouterr().out == "[info] to stdout\n"
