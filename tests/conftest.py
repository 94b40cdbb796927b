"""Test configuration and fixtures.

Validators are pure functions, so most tests need no setup. The fixtures here
isolate the two pieces of process-wide state the library touches: the cached
settings and the package logger.
"""

import logging
from collections.abc import Generator

import pytest

from isitvalid.config.settings import PACKAGE_LOGGER, get_settings


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> Generator[pytest.MonkeyPatch]:
    """Drop ISITVALID_* variables and run from an empty directory (no .env file)."""
    for name in ("ISITVALID_LOG_LEVEL", "ISITVALID_LOG_FORMAT"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()


@pytest.fixture
def package_logger() -> Generator[logging.Logger]:
    """Yield the package logger and restore its handlers and level afterwards."""
    logger = logging.getLogger(PACKAGE_LOGGER)
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    logger.handlers = handlers
    logger.setLevel(level)


@pytest.fixture
def debug_logs(caplog: pytest.LogCaptureFixture) -> pytest.LogCaptureFixture:
    """Capture DEBUG records from the package logger."""
    caplog.set_level(logging.DEBUG, logger=PACKAGE_LOGGER)
    return caplog
