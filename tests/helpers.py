"""Shared test helpers."""

from __future__ import annotations

from weather_service.exceptions import CityNotFoundError
from weather_service.weather import Observation, Unit

TOLERANCE = 1e-5
FIXED_TIMESTAMP = 1_700_000_000


def close(a: float, b: float) -> bool:
    return abs(a - b) < TOLERANCE


class StubWeatherService:
    """Fake backend that knows only Munich at 21 °C, reported at timestamp 1."""

    def __init__(self) -> None:
        self.reports: list[tuple[str, float, Unit]] = []

    def cities(self) -> list[str]:
        return ["munich"]

    def report(self, city: str, temperature: float, unit: Unit) -> int:
        self.reports.append((city, temperature, unit))
        return 1

    def temperature_in(self, city: str, unit: Unit) -> Observation:
        if city != "munich":
            raise CityNotFoundError(city)
        values = {Unit.KELVIN: 294.15, Unit.CELSIUS: 21.0, Unit.FAHRENHEIT: 69.8}
        return Observation(temperature=values[unit], timestamp=1)
