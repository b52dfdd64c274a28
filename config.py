"""
Suite run configuration.

This module defines configuration classes for the two execution
environments the suite knows about: an interactive local run and a
continuous-integration run. The CI flag, the target base URL and the
browser list are read from environment variables (or a ``.env`` file
at the project root) with sensible defaults.

The configuration is resolved once per process by :func:`get_config`
and consumed read-only by ``tests/conftest.py``.
"""

import os
from collections.abc import Mapping
from pathlib import Path

from dotenv import load_dotenv

# Base directory of the project
BASE_DIR = Path(__file__).resolve().parent

# Variables already present in the environment win over the .env file
load_dotenv(BASE_DIR / ".env", override=False)

DEFAULT_BASE_URL = "https://playwright.dev/"
DEFAULT_BROWSERS = ("chromium", "firefox", "webkit")

_FALSY = {"", "0", "false", "no", "off"}


class Config:
    """Base configuration shared by every environment."""

    # Global per-test timeout (seconds) and per-assertion timeout (ms)
    TEST_TIMEOUT_S: int = 60
    EXPECT_TIMEOUT_MS: int = 10_000

    VIEWPORT: dict = {"width": 1280, "height": 720}

    # Capture policy
    SCREENSHOT: str = "only-on-failure"
    VIDEO: str = "retain-on-failure"
    TRACING: str = "off"

    RETRIES: int = 0
    WORKERS: int | str = "auto"
    FORBID_ONLY: bool = False


class LocalConfig(Config):
    """Interactive run on a developer machine."""


class CIConfig(Config):
    """Run on shared continuous-integration infrastructure."""

    RETRIES: int = 2
    # Serialized
    WORKERS: int | str = 1
    TRACING: str = "retain-on-failure"
    FORBID_ONLY: bool = True


# Configuration mapping for easy access
config = {
    "local": LocalConfig,
    "ci": CIConfig,
    "default": LocalConfig,
}


def is_truthy(value: str | None) -> bool:
    """Interpret an environment flag such as ``CI=true`` or ``CI=1``."""
    if value is None:
        return False
    return value.strip().lower() not in _FALSY


def is_ci(environ: Mapping[str, str] | None = None) -> bool:
    """Return True when the CI detection flag is set."""
    env = os.environ if environ is None else environ
    return is_truthy(env.get("CI"))


def get_config(env: str | None = None) -> type[Config]:
    """
    Get the configuration class for the specified environment.

    Args:
        env: Environment name (local, ci). If None, the ``CI``
             environment variable decides.

    Returns:
        Configuration class for the specified environment.
    """
    if env is None:
        env = "ci" if is_ci() else "local"
    return config.get(env, config["default"])


def get_base_url(environ: Mapping[str, str] | None = None) -> str:
    """Return the site under test, honouring the ``BASE_URL`` override."""
    env = os.environ if environ is None else environ
    return env.get("BASE_URL") or DEFAULT_BASE_URL


def get_browsers(environ: Mapping[str, str] | None = None) -> list[str]:
    """
    Return the browser engines to run against.

    ``BROWSERS`` may hold a comma-separated subset, e.g. ``chromium,webkit``.
    Unknown names are rejected so a typo never silently drops an engine.
    """
    env = os.environ if environ is None else environ
    raw = env.get("BROWSERS")
    if not raw:
        return list(DEFAULT_BROWSERS)

    browsers = [name.strip().lower() for name in raw.split(",") if name.strip()]
    unknown = sorted(set(browsers) - set(DEFAULT_BROWSERS))
    if unknown:
        raise ValueError(
            f"Unknown browser(s) in BROWSERS: {', '.join(unknown)}; "
            f"expected a subset of {', '.join(DEFAULT_BROWSERS)}"
        )
    return browsers
