"""FastAPI dependencies shared by the route modules."""

from __future__ import annotations

from fastapi import Request

from ..config import Settings
from ..weather import WeatherService


def get_store(request: Request) -> WeatherService:
    """Return the weather store attached to the running app."""
    return request.app.state.store


def get_app_settings(request: Request) -> Settings:
    """Return the settings the running app was built with."""
    return request.app.state.settings
