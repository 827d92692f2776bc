"""Tests for temperature units and conversion."""

from __future__ import annotations

import pytest

from tests.helpers import close
from weather_service.exceptions import UnknownUnitError
from weather_service.weather.units import Unit, convert_temperature, parse_unit

ALL_UNITS = [Unit.KELVIN, Unit.CELSIUS, Unit.FAHRENHEIT]


class TestConvertTemperature:
    """Tests for convert_temperature."""

    @pytest.mark.parametrize(
        "value,source,target,expected",
        [
            (0.0, Unit.CELSIUS, Unit.KELVIN, 273.15),
            (0.0, Unit.CELSIUS, Unit.FAHRENHEIT, 32.0),
            (0.0, Unit.FAHRENHEIT, Unit.KELVIN, 255.3722222),
            (0.0, Unit.FAHRENHEIT, Unit.CELSIUS, -17.777777),
            (0.0, Unit.KELVIN, Unit.FAHRENHEIT, -459.67),
            (0.0, Unit.KELVIN, Unit.CELSIUS, -273.15),
            (21.0, Unit.CELSIUS, Unit.KELVIN, 294.15),
            (21.0, Unit.CELSIUS, Unit.FAHRENHEIT, 69.8),
            (69.8, Unit.FAHRENHEIT, Unit.KELVIN, 294.15),
            (69.8, Unit.FAHRENHEIT, Unit.CELSIUS, 21.0),
            (294.15, Unit.KELVIN, Unit.FAHRENHEIT, 69.8),
            (294.15, Unit.KELVIN, Unit.CELSIUS, 21.0),
            (-10.0, Unit.CELSIUS, Unit.FAHRENHEIT, 14.0),
            (14.0, Unit.FAHRENHEIT, Unit.KELVIN, 263.15),
            (263.15, Unit.KELVIN, Unit.CELSIUS, -10.0),
        ],
    )
    def test_known_values(self, value, source, target, expected):
        """Should match reference conversions within tolerance."""
        assert close(convert_temperature(value, source, target), expected)

    @pytest.mark.parametrize("unit", ALL_UNITS)
    @pytest.mark.parametrize("value", [0.0, 21.0, -10.0, 69.8, 0.1 + 0.2])
    def test_same_unit_is_exact(self, value, unit):
        """Same-unit conversion should return the input unchanged."""
        assert convert_temperature(value, unit, unit) == value

    @pytest.mark.parametrize("unit", ALL_UNITS)
    def test_round_trip_through_kelvin(self, unit):
        """Converting to Kelvin and back should recover the original value."""
        for value in (-40.0, 0.0, 12.345, 1000.0):
            kelvin = convert_temperature(value, unit, Unit.KELVIN)
            assert close(convert_temperature(kelvin, Unit.KELVIN, unit), value)

    def test_fahrenheit_and_celsius_meet_at_minus_forty(self):
        """-40 should be the same in both scales."""
        assert close(convert_temperature(-40.0, Unit.CELSIUS, Unit.FAHRENHEIT), -40.0)


class TestParseUnit:
    """Tests for parse_unit."""

    @pytest.mark.parametrize(
        "raw,expected",
        [
            ("kelvin", Unit.KELVIN),
            ("Celsius", Unit.CELSIUS),
            ("FAHRENHEIT", Unit.FAHRENHEIT),
            ("  KeLvIn ", Unit.KELVIN),
        ],
    )
    def test_parses_case_insensitively(self, raw, expected):
        """Should accept any casing and surrounding whitespace."""
        assert parse_unit(raw) is expected

    @pytest.mark.parametrize("raw", ["rankine", "", "c", "useless"])
    def test_rejects_unknown_units(self, raw):
        """Should raise UnknownUnitError for unsupported names."""
        with pytest.raises(UnknownUnitError) as exc_info:
            parse_unit(raw)

        assert exc_info.value.unit == raw
        assert isinstance(exc_info.value, ValueError)
