"""Shared test fixtures and configuration for the Recipes API tests."""

from __future__ import annotations

import os


# Must be set before any recipes_api import reads configuration
os.environ.setdefault("APP_ENV", "test")

from typing import TYPE_CHECKING  # noqa: E402

import pytest  # noqa: E402

from recipes_api.core.config import Settings, get_settings  # noqa: E402
from tests.factories.settings import SettingsFactory  # noqa: E402


if TYPE_CHECKING:
    from collections.abc import Generator


@pytest.fixture
def test_settings() -> Settings:
    """Settings for the test environment."""
    return SettingsFactory.build()


@pytest.fixture(autouse=True)
def reset_settings_cache() -> Generator[None]:
    """Keep the cached settings from leaking between tests."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
