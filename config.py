"""
Suite configuration module.

This module defines configuration classes for the environments the
end-to-end suite runs in (local workstation, CI). Values are loaded
from environment variables with sensible defaults, so a run can be
pointed at a different deployment of the demo sites without code
changes.
"""

import os
from pathlib import Path

# Base directory of the project
BASE_DIR = Path(__file__).resolve().parent


class Config:
    """Base configuration with default settings."""

    # Applications under test
    TODO_APP_URL: str = os.environ.get(
        "TODO_APP_URL", "https://demo.playwright.dev/todomvc"
    )
    SAUCE_DEMO_URL: str = os.environ.get(
        "SAUCE_DEMO_URL", "https://www.saucedemo.com"
    )

    # Local-storage key the TodoMVC app persists its items under
    TODO_STORAGE_KEY: str = "react-todos"

    # Every Swag Labs demo account shares this password
    SAUCE_DEMO_PASSWORD: str = os.environ.get("SAUCE_DEMO_PASSWORD", "secret_sauce")

    # Playwright timeouts (milliseconds)
    DEFAULT_TIMEOUT_MS: int = int(os.environ.get("E2E_DEFAULT_TIMEOUT_MS", "10000"))
    NAVIGATION_TIMEOUT_MS: int = int(os.environ.get("E2E_NAVIGATION_TIMEOUT_MS", "30000"))
    EXPECT_TIMEOUT_MS: int = int(os.environ.get("E2E_EXPECT_TIMEOUT_MS", "10000"))

    # How long to wait for a target site to answer before skipping (seconds)
    SITE_CHECK_TIMEOUT: int = int(os.environ.get("E2E_SITE_CHECK_TIMEOUT", "15"))

    VIEWPORT: dict = {"width": 1280, "height": 720}

    SCREENSHOT_DIR: str = os.environ.get(
        "E2E_SCREENSHOT_DIR",
        str(BASE_DIR / "test-results" / "screenshots"),
    )

    LOG_LEVEL: str = os.environ.get("E2E_LOG_LEVEL", "INFO")


class LocalConfig(Config):
    """Local workstation configuration."""


class CIConfig(Config):
    """Continuous integration configuration."""

    # Shared CI runners are slower and the demo sites are remote
    DEFAULT_TIMEOUT_MS: int = int(os.environ.get("E2E_DEFAULT_TIMEOUT_MS", "20000"))
    NAVIGATION_TIMEOUT_MS: int = int(os.environ.get("E2E_NAVIGATION_TIMEOUT_MS", "60000"))
    EXPECT_TIMEOUT_MS: int = int(os.environ.get("E2E_EXPECT_TIMEOUT_MS", "20000"))
    SITE_CHECK_TIMEOUT: int = int(os.environ.get("E2E_SITE_CHECK_TIMEOUT", "60"))


# Configuration mapping for easy access
config = {
    "local": LocalConfig,
    "ci": CIConfig,
    "default": LocalConfig,
}


def get_config(env: str | None = None) -> type[Config]:
    """
    Get the configuration class for the specified environment.

    Args:
        env: Environment name (local, ci).
             If None, uses the E2E_ENV environment variable.

    Returns:
        Configuration class for the specified environment.
    """
    if env is None:
        env = os.environ.get("E2E_ENV", "default")
    return config.get(env.lower(), config["default"])
