"""Pytest configuration and fixtures for allrecipes-finder tests."""

import os

import pytest

from allrecipes_finder.config import get_settings

SETTINGS_ENV_VARS = ("CHROME_PATH",)
SETTINGS_ENV_PREFIXES = ("RECIPE_",)


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "e2e: End-to-end tests requiring real API keys, npx and a browser")


@pytest.fixture(autouse=True)
def clean_settings(monkeypatch):
    """Strip settings env vars and drop cached settings around each test."""
    for var in list(os.environ.keys()):
        if var in SETTINGS_ENV_VARS or var.startswith(SETTINGS_ENV_PREFIXES):
            monkeypatch.delenv(var, raising=False)
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()
