"""Shared fixtures for the whole test suite."""

import pytest

from infrastructure.logging import clear_request_context
from infrastructure.services.providers import get_settings


@pytest.fixture(autouse=True)
def reset_request_context():
    """Start every test without request-scoped logging context."""
    clear_request_context()
    yield
    clear_request_context()


@pytest.fixture(autouse=True)
def reset_settings_cache():
    """Keep the cached settings from leaking between tests."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
