"""Fixtures for cmdparser.logging tests."""

import logging

import pytest
import structlog
from unittest.mock import Mock

from cmdparser.configuration import Settings


@pytest.fixture
def mock_settings():
    """Mock Settings instance for testing."""
    settings = Mock(spec=Settings)
    settings.LOG_LEVEL = "INFO"
    settings.is_production = False
    return settings


@pytest.fixture(autouse=True)
def restore_logging_state():
    """Undo global logging configuration made by a test."""
    root_level = logging.root.level
    root_handlers = list(logging.root.handlers)
    yield
    structlog.reset_defaults()
    logging.root.handlers[:] = root_handlers
    logging.root.setLevel(root_level)
