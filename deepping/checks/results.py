from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum


class Severity(IntEnum):
    """Monitoring plugin states; the value is the process exit code."""

    OK = 0
    WARNING = 1
    CRITICAL = 2
    UNKNOWN = 3

    @property
    def exit_code(self) -> int:
        return int(self)


@dataclass
class ProbeResult:
    status_value: str
    description: str
    response_time: float


@dataclass(frozen=True)
class Verdict:
    severity: Severity
    message: str
    target: str = ""
    response_time: float = 0.0
    warning: float = 0.0
    critical: float = 0.0
    perfdata: bool = True

    @property
    def exit_code(self) -> int:
        return self.severity.exit_code
