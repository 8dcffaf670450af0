from __future__ import annotations

import logging
import queue
import threading

from deepping.checks.errors import CheckError, TimeoutExceeded
from deepping.checks.evaluate import evaluate
from deepping.checks.http_check import fetch
from deepping.checks.results import ProbeResult, Severity, Verdict
from deepping.checks.xml_status import parse_status
from deepping.models import CheckConfig

logger = logging.getLogger(__name__)

Outcome = ProbeResult | Exception


def probe(url: str, timeout: float | None = None) -> ProbeResult:
    # Only the request is timed, not the parse.
    resp, elapsed = fetch(url, timeout=timeout)
    status_value, description = parse_status(resp.content, target=url)
    return ProbeResult(
        status_value=status_value,
        description=description,
        response_time=elapsed,
    )


def _probe_into(url: str, timeout: float, out: queue.Queue) -> None:
    try:
        outcome: Outcome = probe(url, timeout=timeout)
    except Exception as exc:
        outcome = exc
    out.put(outcome)


def _verdict_from(
    outcome: Outcome, config: CheckConfig, log: logging.Logger
) -> Verdict:
    if isinstance(outcome, CheckError):
        log.debug("Got done signal. Bye.")
        return outcome.to_verdict()

    if isinstance(outcome, Exception):
        log.error("Probe of %s failed unexpectedly", config.url, exc_info=outcome)
        return Verdict(
            severity=Severity.UNKNOWN,
            message=f"{outcome.__class__.__name__}: {outcome}",
            target=config.url,
            perfdata=False,
        )

    log.debug("Status Value:  %s", outcome.status_value)
    log.debug("Description:   %s", outcome.description)
    log.debug("Response time: %f", outcome.response_time)
    try:
        return evaluate(outcome, config)
    except CheckError as exc:
        return exc.to_verdict()


def run_check(config: CheckConfig, log: logging.Logger | None = None) -> Verdict:
    """
    Probe the configured endpoint and race it against config.timeout.

    The probe runs on a daemon thread and hands back exactly one outcome. If the
    deadline passes first the thread is abandoned and a timeout verdict is
    returned.
    """
    log = log or logger
    url = config.url
    for name, value in config.model_dump().items():
        log.debug("%-13s: %r", name.capitalize(), value)
    log.debug("DP URL: %s", url)

    out: queue.Queue = queue.Queue(maxsize=1)
    worker = threading.Thread(
        target=_probe_into,
        args=(url, config.timeout, out),
        name="deep-ping-probe",
        daemon=True,
    )
    worker.start()

    try:
        outcome = out.get(timeout=config.timeout)
    except queue.Empty:
        log.debug("No outcome from %s within %ss", url, config.timeout)
        return TimeoutExceeded(url, config.timeout).to_verdict()

    return _verdict_from(outcome, config, log)
