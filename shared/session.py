"""Session-wide setup applied from the pytest hooks and fixtures."""

from __future__ import annotations

import logging

import pytest
from playwright.sync_api import BrowserContext

from config import Config

logger = logging.getLogger(__name__)


def configure_logging(pytest_config: pytest.Config, settings: type[Config]) -> str:
    """
    Apply E2E_LOG_LEVEL to the root logger and to pytest's log capture.

    An explicit --log-level on the command line wins over the configured
    level. Returns the level that is now in effect.
    """
    level = pytest_config.getoption("log_level") or settings.LOG_LEVEL.upper()
    pytest_config.option.log_level = level
    logging.getLogger().setLevel(level)
    logger.debug("Log level set to %s", level)
    return level


def configure_context_timeouts(context: BrowserContext, settings: type[Config]) -> BrowserContext:
    """Apply the configured action and navigation timeouts to a browser context."""
    context.set_default_timeout(settings.DEFAULT_TIMEOUT_MS)
    context.set_default_navigation_timeout(settings.NAVIGATION_TIMEOUT_MS)
    return context
