from __future__ import annotations

import sys
from typing import TextIO

from deepping.checks.results import Verdict


def _one_line(text: str) -> str:
    # "|" starts the perfdata section, so it may not appear in the text part
    return " ".join(text.split()).replace("|", "/")


def format_verdict(verdict: Verdict) -> str:
    """
    Render a verdict as one monitoring-plugin line.

    With performance data:
        CRITICAL: <message>, <target>, response time: 20.000000|time=20.000000s;10.000000s;15.000000s
    Without:
        CRITICAL: <message>
    """
    label = verdict.severity.name
    message = _one_line(verdict.message)
    if not verdict.perfdata:
        return f"{label}: {message}"

    rtime = verdict.response_time
    return (
        f"{label}: {message}, {_one_line(verdict.target)}, response time: {rtime:f}"
        f"|time={rtime:f}s;{verdict.warning:f}s;{verdict.critical:f}s"
    )


def report(verdict: Verdict, stream: TextIO | None = None) -> int:
    out = stream if stream is not None else sys.stdout
    out.write(format_verdict(verdict) + "\n")
    out.flush()
    return verdict.exit_code
