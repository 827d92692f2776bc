"""API routes for querying stored cities and their temperatures."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException, Query
from pydantic import BaseModel

from ...config import Settings
from ...exceptions import CityNotFoundError, UnknownUnitError
from ...weather import WeatherService, normalize_city, parse_unit
from ..dependencies import get_app_settings, get_store

logger = logging.getLogger(__name__)

router = APIRouter()


class TemperatureResponse(BaseModel):
    """Latest temperature for a city in the requested unit."""

    city: str
    temperature: float
    unit: str
    timestamp: int


@router.get("", response_model=list[str])
async def list_cities(store: WeatherService = Depends(get_store)):
    """List every city with at least one report."""
    return store.cities()


@router.get("/{city}", response_model=TemperatureResponse)
async def show_temperature(
    city: str,
    unit: str | None = Query(default=None),
    store: WeatherService = Depends(get_store),
    settings: Settings = Depends(get_app_settings),
):
    """Get the latest temperature reported for a city."""
    try:
        requested_unit = parse_unit(unit) if unit is not None else settings.default_unit
    except UnknownUnitError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

    try:
        observation = store.temperature_in(city, requested_unit)
    except CityNotFoundError as e:
        logger.info("Temperature requested for unknown city %r", e.city)
        raise HTTPException(status_code=404, detail=str(e)) from e

    return TemperatureResponse(
        city=normalize_city(city),
        temperature=observation.temperature,
        unit=requested_unit.value,
        timestamp=observation.timestamp,
    )
