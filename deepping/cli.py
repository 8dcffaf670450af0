from __future__ import annotations

import argparse
import logging
import sys
from typing import Sequence

from pydantic import ValidationError

from deepping.checks.results import Severity, Verdict
from deepping.config import VERSION, settings
from deepping.models import CheckConfig
from deepping.reporting import report
from deepping.runner import run_check

logger = logging.getLogger(__name__)

PROG = "check_deep_ping"

# logrus level names on top of the stdlib ones
LOG_LEVELS = {
    "debug": logging.DEBUG,
    "info": logging.INFO,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "error": logging.ERROR,
    "fatal": logging.CRITICAL,
    "critical": logging.CRITICAL,
    "panic": logging.CRITICAL,
}


class UsageError(ValueError):
    pass


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> None:
        # Bad arguments are UNKNOWN for the monitoring side, not argparse's 2.
        self.print_usage(sys.stderr)
        self.exit(Severity.UNKNOWN.exit_code, f"{self.prog}: error: {message}\n")


def build_parser() -> argparse.ArgumentParser:
    parser = _ArgumentParser(
        prog=PROG,
        description="XML Rest API parser for deep ping health checks",
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {VERSION}")
    parser.add_argument(
        "-H", "--hostname",
        default=settings.HOST,
        help="Hostname or IP to check (env DEEP_PING_HOST)",
    )
    parser.add_argument("-p", "--port", type=int, default=settings.PORT, help="TCP port")
    parser.add_argument(
        "-P", "--protocol",
        default=settings.PROTOCOL,
        help="Protocol to use (http or https)",
    )
    parser.add_argument(
        "-u", "--urlpath",
        default=settings.PATH,
        help="The path part of the url",
    )
    parser.add_argument(
        "-w", "--warning",
        type=float,
        default=settings.WARNING_SECONDS,
        help="Response time to result in WARNING status, in seconds",
    )
    parser.add_argument(
        "-c", "--critical",
        type=float,
        default=settings.CRITICAL_SECONDS,
        help="Response time to result in CRITICAL status, in seconds",
    )
    parser.add_argument(
        "-t", "--timeout",
        type=float,
        default=settings.TIMEOUT_SECONDS,
        help="Number of seconds before connection times out",
    )
    parser.add_argument(
        "-s", "--checkstr",
        default=settings.CHECKSTR,
        help="Search string to check for in the status result",
    )
    parser.add_argument(
        "-l", "--log-level",
        default=None,
        help=f"Log level (options: {', '.join(LOG_LEVELS)}; default {settings.LOG_LEVEL})",
    )
    parser.add_argument(
        "-d", "--debug",
        action="store_true",
        default=settings.DEBUG,
        help="Run in debug mode (env DEBUG)",
    )
    return parser


def resolve_log_level(log_level: str | None, debug: bool) -> int:
    """An explicit --log-level wins over --debug."""
    if log_level is None:
        if debug:
            return logging.DEBUG
        log_level = settings.LOG_LEVEL

    try:
        return LOG_LEVELS[log_level.strip().lower()]
    except KeyError:
        raise UsageError(f"not a valid log level: {log_level!r}") from None


def configure_logging(level: int) -> None:
    # stdout belongs to the result line
    logging.basicConfig(
        level=level,
        stream=sys.stderr,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        force=True,
    )


def config_from_args(args: argparse.Namespace) -> CheckConfig:
    if not args.hostname:
        raise UsageError("no hostname given (use -H or DEEP_PING_HOST)")

    try:
        return CheckConfig(
            protocol=args.protocol,
            host=args.hostname,
            port=args.port,
            path=args.urlpath,
            warning=args.warning,
            critical=args.critical,
            timeout=args.timeout,
            checkstr=args.checkstr,
        )
    except ValidationError as exc:
        problems = "; ".join(
            f"{'.'.join(str(p) for p in err['loc'])}: {err['msg']}"
            for err in exc.errors()
        )
        raise UsageError(f"invalid configuration: {problems}") from exc


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        configure_logging(resolve_log_level(args.log_level, args.debug))
        config = config_from_args(args)
    except UsageError as exc:
        parser.print_usage(sys.stderr)
        return report(Verdict(severity=Severity.UNKNOWN, message=str(exc), perfdata=False))

    return report(run_check(config, log=logger))


if __name__ == "__main__":
    sys.exit(main())
