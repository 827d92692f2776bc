"""Shared test fixtures and configuration."""

from __future__ import annotations

import pytest
from fastapi.testclient import TestClient

from tests.helpers import FIXED_TIMESTAMP
from weather_service.api.app import create_app
from weather_service.config import Settings
from weather_service.weather import WeatherStore


@pytest.fixture
def settings():
    """Settings that ignore the process environment and any .env file."""
    return Settings(_env_file=None)


@pytest.fixture
def store():
    """Empty store whose clock always reads FIXED_TIMESTAMP."""
    return WeatherStore(clock=lambda: FIXED_TIMESTAMP)


@pytest.fixture
def client(settings, store):
    """Test client for an app wired to the fixed-clock store."""
    app = create_app(settings=settings, store=store)
    with TestClient(app) as test_client:
        yield test_client
