"""FastAPI application setup."""

from __future__ import annotations

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from ..config import Settings, get_settings
from ..weather import WeatherService, WeatherStore
from .routes import cities, reports

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Application lifespan events."""
    logger.info("Weather service starting...")

    yield

    logger.info("Weather service shutting down with %d cities stored", len(app.state.store.cities()))


async def validation_exception_handler(request: Request, exc: RequestValidationError):
    """Report malformed requests as 400 rather than FastAPI's default 422."""
    logger.info("Rejected malformed request to %s", request.url.path)
    return JSONResponse(status_code=400, content={"detail": jsonable_encoder(exc.errors())})


def create_app(settings: Settings | None = None, store: WeatherService | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or get_settings()

    app = FastAPI(
        title="Weather Service",
        description="Latest temperature reports per city",
        version="1.0.0",
        lifespan=lifespan,
        debug=settings.debug,
    )
    app.state.settings = settings
    app.state.store = store if store is not None else WeatherStore()

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, validation_exception_handler)

    # Include routers
    app.include_router(cities.router, prefix="/city", tags=["cities"])
    app.include_router(reports.router, prefix="/report", tags=["reports"])

    @app.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "healthy"}

    return app
