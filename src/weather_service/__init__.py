"""In-memory weather reporting service."""

from .exceptions import (
    CityNotFoundError,
    InvalidTemperatureError,
    UnknownUnitError,
    WeatherServiceError,
)
from .weather import Observation, Unit, WeatherStore, convert_temperature, normalize_city, parse_unit

__all__ = [
    "CityNotFoundError",
    "InvalidTemperatureError",
    "Observation",
    "Unit",
    "UnknownUnitError",
    "WeatherServiceError",
    "WeatherStore",
    "convert_temperature",
    "normalize_city",
    "parse_unit",
]
