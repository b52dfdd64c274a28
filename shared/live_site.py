"""Shared live-site helpers for smoke and E2E test suites."""

from __future__ import annotations

import logging
import time
from collections.abc import Generator

import pytest
import requests
from bs4 import BeautifulSoup

logger = logging.getLogger(__name__)


def is_site_reachable(url: str, timeout: int = 5) -> bool:
    """Return True when the site root answers with a non-error status."""
    try:
        response = requests.get(url, timeout=timeout)
    except requests.RequestException:
        return False
    return response.status_code < 400


def wait_for_site(url: str, timeout: int = 30, interval: int = 1) -> None:
    """Poll the site root until it responds or the timeout expires."""
    deadline = time.time() + timeout
    while time.time() < deadline:
        if is_site_reachable(url, timeout=min(5, timeout)):
            return
        time.sleep(interval)
    raise RuntimeError(f"Site at {url} not reachable after {timeout}s")


def live_site_url(
    *,
    base_url: str,
    suite_name: str,
    timeout: int = 30,
) -> Generator[str, None, None]:
    """
    Yield a reachable base URL for a live-site suite.

    The site under test is external, so an unreachable site (offline
    sandbox, DNS failure, outage) skips the suite instead of failing
    every browser test with a navigation timeout.
    """
    try:
        wait_for_site(base_url, timeout=timeout)
    except RuntimeError as exc:
        pytest.skip(f"{exc}; set BASE_URL to run {suite_name} tests")

    logger.info("Running %s tests against %s", suite_name, base_url)
    yield base_url


def document_title(html: str) -> str | None:
    """
    Return the text of the document ``<title>``.

    ``<title>`` elements inside inline SVG label icons, not the page,
    so they are skipped.

    Returns:
        The stripped title text, or None when the page has no title.
    """
    soup = BeautifulSoup(html, "html.parser")
    for title in soup.find_all("title"):
        if title.find_parent("svg") is None:
            return title.get_text(strip=True)
    return None
