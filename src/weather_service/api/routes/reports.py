"""API routes for submitting temperature reports."""

from __future__ import annotations

import logging

from fastapi import APIRouter, Depends, HTTPException
from pydantic import BaseModel, Field

from ...exceptions import InvalidTemperatureError, UnknownUnitError
from ...weather import WeatherService, normalize_city, parse_unit
from ..dependencies import get_store

logger = logging.getLogger(__name__)

router = APIRouter()


class ReportRequest(BaseModel):
    """Request body for submitting a temperature report."""

    city: str
    temperature: float
    unit: str = Field(..., min_length=1)


class ReportResponse(BaseModel):
    """Response body for an accepted report."""

    city: str
    timestamp: int
    location: str


@router.post("", response_model=ReportResponse)
async def send_report(request: ReportRequest, store: WeatherService = Depends(get_store)):
    """Record the current temperature for a city."""
    try:
        unit = parse_unit(request.unit)
    except UnknownUnitError as e:
        raise HTTPException(status_code=400, detail=str(e)) from e

    city = normalize_city(request.city)
    if not city:
        raise HTTPException(status_code=400, detail="City name must contain at least one letter")

    try:
        timestamp = store.report(city, request.temperature, unit)
    except InvalidTemperatureError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e

    logger.info("Accepted report for %s", city)
    return ReportResponse(city=city, timestamp=timestamp, location=f"/city/{city}")
