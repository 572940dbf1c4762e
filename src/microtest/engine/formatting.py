# src/microtest/engine/formatting.py
"""Line formatting for check output.

Grammar (no trailing newline, the logger appends one per line):

    plain:  [tag] [@file:line] message
    color:  <tag color>[tag]<reset> <cyan>[@file:line]<reset> message<reset>

The location segment is dropped when there is no location. Consumers
capture this text byte for byte, so every separator is significant.
"""

from __future__ import annotations

from microtest.contracts.enums import EventKind, SummaryStatus
from microtest.contracts.events import Counts, SourceLocation

RESET = "\x1b[0m"
YELLOW = "\x1b[0;33m"
GREEN = "\x1b[0;32m"
RED = "\x1b[0;31m"
CYAN = "\x1b[0;36m"

TAG_COLORS: dict[str, str] = {
    EventKind.WARN.value: YELLOW,
    EventKind.PASS.value: GREEN,
    EventKind.FAIL.value: RED,
    SummaryStatus.PASS.value: GREEN,
    SummaryStatus.FAIL.value: RED,
}


def format_line(
    tag: str,
    message: str,
    location: SourceLocation | None = None,
    *,
    ansi: bool = False,
) -> str:
    """Render one output line.

    Tags without an entry in TAG_COLORS (info, note, DONE) are never
    colored, but the message reset still follows in color mode.
    """
    tag_segment = f"[{tag}]"
    location_segment = f"[@{location.file}:{location.line}]" if location is not None else ""

    if ansi:
        color = TAG_COLORS.get(tag)
        if color is not None:
            tag_segment = f"{color}{tag_segment}{RESET}"
        if location_segment:
            location_segment = f"{CYAN}{location_segment}{RESET}"
        message = f"{message}{RESET}"

    if location_segment:
        return f"{tag_segment} {location_segment} {message}"
    return f"{tag_segment} {message}"


def summary_status(counts: Counts) -> SummaryStatus:
    """Pick the summary line form for a counter snapshot."""
    if counts.total == 0:
        return SummaryStatus.DONE
    if counts.failed == 0:
        return SummaryStatus.PASS
    return SummaryStatus.FAIL


def summary_message(counts: Counts) -> str:
    """Text of the summary line after its tag."""
    status = summary_status(counts)
    if status is SummaryStatus.DONE:
        return "No checks"
    if status is SummaryStatus.PASS:
        return f"All {counts.checks} checks passed, {counts.warned} warnings."
    return f"{counts.failed} of {counts.checks} checks failed, {counts.warned} warnings."


def exit_code(counts: Counts) -> int:
    """Process exit code: 0 without failures, else the failure count capped at 255."""
    return min(counts.failed, 255)
