"""Shared live-site helpers for the browser suites."""

from __future__ import annotations

import logging
import time
from collections.abc import Generator

import pytest
import requests

logger = logging.getLogger(__name__)


def is_site_reachable(url: str, timeout: int = 5) -> bool:
    """Return True when the site answers with a non-error status code."""
    try:
        response = requests.get(url, timeout=timeout)
    except requests.RequestException as exc:
        logger.debug("Site %s unreachable: %s", url, exc)
        return False
    return response.status_code < 400


def wait_for_site_reachable(url: str, timeout: int = 60, interval: int = 1) -> None:
    """Poll the site until it answers or the timeout elapses."""
    deadline = time.time() + timeout
    while time.time() < deadline:
        if is_site_reachable(url):
            return
        time.sleep(interval)
    raise RuntimeError(f"Site at {url} not reachable after {timeout}s")


def live_site_url(
    *,
    base_url: str,
    url_env: str,
    suite_name: str,
    timeout: int = 60,
) -> Generator[str, None, None]:
    """
    Yield a reachable base URL for a public demo site.

    `base_url` comes from configuration; `url_env` is only named in the
    skip message as the way to point the suite elsewhere. When the site does not
    answer within `timeout` seconds the dependent tests are skipped, since
    nothing in this repository can bring a public demo site back up.
    """
    try:
        wait_for_site_reachable(base_url, timeout=timeout)
    except RuntimeError as exc:
        pytest.skip(f"{exc}; set {url_env} to run {suite_name} tests")
    logger.info("Running %s tests against %s", suite_name, base_url)
    yield base_url.rstrip("/")
