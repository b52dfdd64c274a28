"""
Helper utilities for the homepage E2E suite.

Keeps budget loading and timing in one place so the performance
checks only express what they measure.
"""

from __future__ import annotations

import time
from pathlib import Path

import yaml

REQUIRED_THRESHOLDS = (
    "page_load_ms",
    "critical_elements_ms",
    "navigation_ms",
    "multiple_interactions_ms",
    "search_open_ms",
    "max_requests",
)


def load_thresholds(path: Path) -> dict[str, float]:
    """
    Read performance budgets from a YAML file.

    Args:
        path: Path to a YAML file defining every key in
            ``REQUIRED_THRESHOLDS``.

    Returns:
        A dictionary of threshold name to numeric limit.

    Raises:
        ValueError: If any key is missing or non-numeric.
    """
    with path.open("r", encoding="utf-8") as handle:
        data = yaml.safe_load(handle) or {}

    thresholds: dict[str, float] = {}
    for key in REQUIRED_THRESHOLDS:
        try:
            thresholds[key] = float(data[key])
        except (KeyError, TypeError, ValueError) as exc:
            raise ValueError(f"Thresholds file must define numeric {key}") from exc
    return thresholds


def start_timer() -> float:
    """Return a monotonic start mark for :func:`elapsed_ms`."""
    return time.monotonic()


def elapsed_ms(start: float) -> float:
    """Milliseconds elapsed since ``start``."""
    return (time.monotonic() - start) * 1000
