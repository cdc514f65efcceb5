"""
Shared pytest fixtures.
"""

import logging
import os

import pytest

from kmlmodel.core.config import get_settings
from kmlmodel.values.coordinate import Coordinate


@pytest.fixture(autouse=True)
def fresh_settings(monkeypatch: pytest.MonkeyPatch):
    """Reload settings for every test and keep KMLMODEL_* out of the environment."""
    for key in list(os.environ):
        if key.startswith("KMLMODEL_"):
            monkeypatch.delenv(key)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def package_logger():
    """Restore the kmlmodel logger after a test reconfigures it."""
    logger = logging.getLogger("kmlmodel")
    handlers = list(logger.handlers)
    level = logger.level
    yield logger
    for handler in logger.handlers:
        if handler not in handlers:
            handler.close()
    logger.handlers[:] = handlers
    logger.setLevel(level)


@pytest.fixture
def sample_coordinates() -> list:
    """Three coordinates from an altitude mode fixture."""
    return [
        Coordinate(146.825, 12.233, 400.0),
        Coordinate(146.82, 12.222, 400.0),
        Coordinate(146.812, 12.212, 400.0),
    ]
