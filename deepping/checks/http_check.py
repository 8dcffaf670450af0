from __future__ import annotations

import logging
import time

import requests
import urllib3
from urllib3.exceptions import InsecureRequestWarning

from deepping.checks.errors import ProbeConnectionError, RequestConstructionError
from deepping.config import USER_AGENT

logger = logging.getLogger(__name__)

# Certificates are never verified, so the per-request warning is noise.
urllib3.disable_warnings(InsecureRequestWarning)


def build_url(protocol: str, host: str, port: int, path: str) -> str:
    if not path.startswith("/"):
        path = f"/{path}"
    return f"{protocol}://{host}:{port}{path}"


def _prepare(url: str) -> requests.PreparedRequest:
    req = requests.Request(
        "GET",
        url,
        headers={"User-Agent": USER_AGENT, "Connection": "close"},
    )
    try:
        return req.prepare()
    except (requests.RequestException, ValueError) as exc:
        logger.debug("Unable to create request for %s: %s", url, exc)
        raise RequestConstructionError("Unable to create request", target=url) from exc


def fetch(url: str, timeout: float | None = None) -> tuple[requests.Response, float]:
    """
    Issue one GET against url on a throwaway session.

    Returns the response and the seconds spent on the request alone.
    """
    prepared = _prepare(url)
    session = requests.Session()
    try:
        start = time.perf_counter()
        try:
            resp = session.send(prepared, verify=False, timeout=timeout)
        except requests.RequestException as exc:
            logger.debug(
                "Problem retrieving URL %s: %s: %s", url, exc.__class__.__name__, exc
            )
            raise ProbeConnectionError("Connection refused", target=url) from exc
        elapsed = time.perf_counter() - start
    finally:
        session.close()

    logger.debug("HTTP %s from %s in %.3fs", resp.status_code, url, elapsed)
    return resp, elapsed
