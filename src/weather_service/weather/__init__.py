"""Weather store and temperature units."""

from .store import Observation, WeatherService, WeatherStore, normalize_city
from .units import Unit, convert_temperature, from_kelvin, parse_unit, to_kelvin

__all__ = [
    "Observation",
    "Unit",
    "WeatherService",
    "WeatherStore",
    "convert_temperature",
    "from_kelvin",
    "normalize_city",
    "parse_unit",
    "to_kelvin",
]
