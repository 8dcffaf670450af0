from __future__ import annotations

from deepping.checks.errors import LatencyThresholdExceeded, StatusMismatch
from deepping.checks.results import ProbeResult, Severity, Verdict
from deepping.models import CheckConfig


def evaluate(result: ProbeResult, config: CheckConfig) -> Verdict:
    """
    Classify a probe result against the configured status string and thresholds.

    A wrong status is critical whatever the latency. The critical threshold is
    checked before the warning threshold, so it wins when warning >= critical.
    Non-OK outcomes are raised as CheckError subclasses.
    """
    rtime = result.response_time
    context = {
        "target": config.path,
        "response_time": rtime,
        "warning": config.warning,
        "critical": config.critical,
    }

    if result.status_value.upper() != config.checkstr.upper():
        raise StatusMismatch(result.description, **context)

    if rtime >= config.critical:
        raise LatencyThresholdExceeded(
            f"Too long response time (>= {int(config.critical)}s), "
            f"(desc: {result.description})",
            severity=Severity.CRITICAL,
            **context,
        )

    if rtime >= config.warning:
        raise LatencyThresholdExceeded(
            f"Too long response time (>= {int(config.warning)}s), "
            f"(desc: {result.description})",
            severity=Severity.WARNING,
            **context,
        )

    return Verdict(severity=Severity.OK, message=result.description, **context)
