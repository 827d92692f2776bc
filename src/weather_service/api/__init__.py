"""HTTP API for the weather service."""

from .app import create_app

__all__ = ["create_app"]
