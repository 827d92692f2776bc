"""Exception hierarchy for the weather service."""

from __future__ import annotations


class WeatherServiceError(Exception):
    """Base exception for all weather service errors."""


class InvalidTemperatureError(WeatherServiceError, ValueError):
    """Temperature is below absolute zero (or not a finite number) once converted to Kelvin."""

    def __init__(self, temperature: float, unit: str) -> None:
        self.temperature = temperature
        self.unit = unit
        super().__init__(f"Invalid temperature {temperature} {unit}: below absolute zero or not finite")


class CityNotFoundError(WeatherServiceError, KeyError):
    """No observation has been reported for the city yet."""

    def __init__(self, city: str) -> None:
        self.city = city
        super().__init__(city)

    def __str__(self) -> str:
        return f"No weather report for city '{self.city}'"


class UnknownUnitError(WeatherServiceError, ValueError):
    """Unit name is not one of kelvin, celsius or fahrenheit."""

    def __init__(self, unit: str) -> None:
        self.unit = unit
        super().__init__(f"Unknown unit of measurement: {unit!r}")
