import sys
from pathlib import Path

# Ensure the application package root is on sys.path so importing application
# modules (e.g. `cmdparser.parsing`) works during pytest collection without an
# editable install.
project_root = str(Path(__file__).resolve().parents[1])
if project_root not in sys.path:
    sys.path.insert(0, project_root)

import pytest

from cmdparser.services.providers import get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Drop the cached settings singleton around each test."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
