"""Pytest configuration and fixtures."""

import logging

import pytest

from tinysuite.config import ColorMode, SuiteConfig


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Clean up tinysuite loggers after each test to prevent name collisions."""
    yield

    loggers_to_remove = [
        name
        for name in logging.Logger.manager.loggerDict.keys()
        if name.startswith("tinysuite")
    ]

    for name in loggers_to_remove:
        logger = logging.getLogger(name)
        for handler in logger.handlers:
            handler.close()
        logger.handlers.clear()
        del logging.Logger.manager.loggerDict[name]


@pytest.fixture
def plain_config() -> SuiteConfig:
    """Config that never emits ANSI color codes."""
    return SuiteConfig(color=ColorMode.NEVER)
