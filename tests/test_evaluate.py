import unittest

from deepping.checks.errors import LatencyThresholdExceeded, StatusMismatch
from deepping.checks.evaluate import evaluate
from deepping.checks.results import ProbeResult, Severity
from deepping.models import CheckConfig


def _config(**overrides) -> CheckConfig:
    values = {
        "host": "dp.example.local",
        "path": "/portal/deepping",
        "warning": 10.0,
        "critical": 15.0,
        "checkstr": "Ok",
    }
    values.update(overrides)
    return CheckConfig(**values)


def _severity(status: str, rtime: float, **overrides) -> Severity:
    result = ProbeResult(status_value=status, description="Looking good", response_time=rtime)
    try:
        return evaluate(result, _config(**overrides)).severity
    except (StatusMismatch, LatencyThresholdExceeded) as exc:
        return exc.severity


class EvaluateTests(unittest.TestCase):
    def test_latency_bands(self) -> None:
        cases = [
            (0.0, Severity.OK),
            (1.0, Severity.OK),
            (9.999, Severity.OK),
            (10.0, Severity.WARNING),
            (12.0, Severity.WARNING),
            (14.999, Severity.WARNING),
            (15.0, Severity.CRITICAL),
            (20.0, Severity.CRITICAL),
        ]
        for rtime, expected in cases:
            with self.subTest(rtime=rtime):
                self.assertEqual(_severity("Ok", rtime), expected)

    def test_status_comparison_ignores_case(self) -> None:
        for status in ("Ok", "OK", "ok", "oK"):
            with self.subTest(status=status):
                self.assertEqual(_severity(status, 1.0), Severity.OK)

    def test_wrong_status_is_critical_regardless_of_latency(self) -> None:
        for rtime in (0.0, 1.0, 12.0, 20.0):
            with self.subTest(rtime=rtime):
                self.assertEqual(_severity("Fail", rtime), Severity.CRITICAL)
        self.assertEqual(_severity("", 1.0), Severity.CRITICAL)

    def test_ok_verdict_carries_description_and_perfdata(self) -> None:
        result = ProbeResult(status_value="Ok", description="Looking good", response_time=1.0)
        verdict = evaluate(result, _config())

        self.assertEqual(verdict.severity, Severity.OK)
        self.assertEqual(verdict.exit_code, 0)
        self.assertEqual(verdict.message, "Looking good")
        self.assertEqual(verdict.target, "/portal/deepping")
        self.assertEqual((verdict.response_time, verdict.warning, verdict.critical), (1.0, 10.0, 15.0))
        self.assertTrue(verdict.perfdata)

    def test_status_mismatch_uses_description(self) -> None:
        result = ProbeResult(status_value="Fail", description="DB down", response_time=20.0)
        with self.assertRaises(StatusMismatch) as cm:
            evaluate(result, _config())

        verdict = cm.exception.to_verdict()
        self.assertEqual(verdict.exit_code, 2)
        self.assertEqual(verdict.message, "DB down")
        self.assertEqual(verdict.response_time, 20.0)

    def test_latency_messages_name_the_threshold(self) -> None:
        result = ProbeResult(status_value="Ok", description="Looking good", response_time=12.0)
        with self.assertRaises(LatencyThresholdExceeded) as cm:
            evaluate(result, _config())
        self.assertEqual(cm.exception.severity, Severity.WARNING)
        self.assertEqual(
            cm.exception.message, "Too long response time (>= 10s), (desc: Looking good)"
        )

        result.response_time = 20.0
        with self.assertRaises(LatencyThresholdExceeded) as cm:
            evaluate(result, _config())
        self.assertEqual(cm.exception.severity, Severity.CRITICAL)
        self.assertEqual(
            cm.exception.message, "Too long response time (>= 15s), (desc: Looking good)"
        )

    def test_critical_wins_when_thresholds_are_inverted(self) -> None:
        cases = [
            (4.0, Severity.OK),
            (5.0, Severity.CRITICAL),
            (7.0, Severity.CRITICAL),
            (12.0, Severity.CRITICAL),
        ]
        for rtime, expected in cases:
            with self.subTest(rtime=rtime):
                self.assertEqual(_severity("Ok", rtime, warning=10.0, critical=5.0), expected)

    def test_equal_thresholds_are_critical(self) -> None:
        self.assertEqual(_severity("Ok", 10.0, warning=10.0, critical=10.0), Severity.CRITICAL)


if __name__ == "__main__":
    unittest.main()
