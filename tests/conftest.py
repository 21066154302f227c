"""Pytest configuration and fixtures."""

import logging
from datetime import datetime

import pytest

from chronassert.execution import CollectingReporter


@pytest.fixture(autouse=True)
def cleanup_loggers():
    """Clean up chronassert loggers after each test to prevent name collisions."""
    yield

    loggers_to_remove = [
        name
        for name in logging.Logger.manager.loggerDict.keys()
        if name.startswith("chronassert")
    ]

    for name in loggers_to_remove:
        logger = logging.getLogger(name)
        logger.handlers.clear()
        del logging.Logger.manager.loggerDict[name]


@pytest.fixture
def t0() -> datetime:
    return datetime(2024, 5, 1, 12, 0, 0)


@pytest.fixture
def collector() -> CollectingReporter:
    return CollectingReporter()


@pytest.fixture
def quiet_logger():
    logger = logging.getLogger("chronassert_test")
    logger.setLevel(logging.DEBUG)
    return logger
