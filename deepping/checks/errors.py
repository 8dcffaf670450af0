from __future__ import annotations

from deepping.checks.results import Severity, Verdict


class CheckError(RuntimeError):
    """A terminal check outcome. Every subclass ends the run with one verdict."""

    severity = Severity.CRITICAL

    def __init__(
        self,
        message: str,
        *,
        target: str = "",
        response_time: float = 0.0,
        warning: float = 0.0,
        critical: float = 0.0,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.target = target
        self.response_time = response_time
        self.warning = warning
        self.critical = critical

    def to_verdict(self) -> Verdict:
        return Verdict(
            severity=self.severity,
            message=self.message,
            target=self.target,
            response_time=self.response_time,
            warning=self.warning,
            critical=self.critical,
        )


class RequestConstructionError(CheckError):
    pass


class ProbeConnectionError(CheckError):
    pass


class ParseError(CheckError):
    pass


class StatusMismatch(CheckError):
    pass


class LatencyThresholdExceeded(CheckError):
    def __init__(self, message: str, *, severity: Severity, **kwargs) -> None:
        super().__init__(message, **kwargs)
        self.severity = severity


class TimeoutExceeded(CheckError):
    def __init__(self, url: str, timeout: float) -> None:
        super().__init__(
            f'DP "{url}" timed out after {int(timeout)} seconds.', target=url
        )
        self.timeout = timeout

    def to_verdict(self) -> Verdict:
        return Verdict(
            severity=self.severity,
            message=self.message,
            target=self.target,
            perfdata=False,
        )
