"""Temperature units and conversion between them."""

from __future__ import annotations

from enum import Enum

from ..exceptions import UnknownUnitError

ABSOLUTE_ZERO_CELSIUS = 273.15
ABSOLUTE_ZERO_FAHRENHEIT = 459.67


class Unit(str, Enum):
    """Temperature unit of measurement."""

    KELVIN = "kelvin"
    CELSIUS = "celsius"
    FAHRENHEIT = "fahrenheit"


def parse_unit(raw: str) -> Unit:
    """Parse a unit name, ignoring case and surrounding whitespace.

    Raises:
        UnknownUnitError: If the name is not a known unit.
    """
    try:
        return Unit(raw.strip().lower())
    except ValueError:
        raise UnknownUnitError(raw) from None


def to_kelvin(temperature: float, unit: Unit) -> float:
    if unit == Unit.CELSIUS:
        return temperature + ABSOLUTE_ZERO_CELSIUS
    if unit == Unit.FAHRENHEIT:
        return (temperature + ABSOLUTE_ZERO_FAHRENHEIT) * 5.0 / 9.0
    return temperature


def from_kelvin(kelvin: float, unit: Unit) -> float:
    if unit == Unit.CELSIUS:
        return kelvin - ABSOLUTE_ZERO_CELSIUS
    if unit == Unit.FAHRENHEIT:
        return kelvin * 9.0 / 5.0 - ABSOLUTE_ZERO_FAHRENHEIT
    return kelvin


def convert_temperature(temperature: float, source: Unit, target: Unit) -> float:
    """Convert a temperature between units.

    Same-unit conversion returns the value untouched so it never drifts
    through a Kelvin round trip.
    """
    if source == target:
        return temperature
    return from_kelvin(to_kelvin(temperature, source), target)
