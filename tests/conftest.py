"""Pytest configuration.

Async tests run under pytest-asyncio in auto mode (see pyproject.toml), so
test coroutines need no marker. HTTP is mocked with pytest-httpx's
``httpx_mock`` fixture.
"""

import pytest

from fortnite_api_io.core.config import get_settings


@pytest.fixture(autouse=True)
def clear_settings_cache():
    """Keep cached settings from leaking between tests."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
