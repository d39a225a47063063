from __future__ import annotations

import pytest

from thermocouple.units import (
    Celsius,
    Fahrenheit,
    Kelvin,
    Millivolts,
    Rankine,
    Reaumur,
    Temperature,
    as_celsius,
    celsius,
    convert,
    millivolts,
    temperature_unit,
)


@pytest.mark.parametrize("unit", [Kelvin, Fahrenheit, Rankine, Reaumur])
@pytest.mark.parametrize("value", [-273.15, -40.0, 0.0, 25.0, 100.0, 1768.1])
def test_celsius_round_trip(unit, value: float) -> None:
    converted = convert(Celsius(value), unit)
    assert isinstance(converted, unit)
    assert abs(convert(converted, Celsius).value - value) <= 1e-9


def test_known_conversions() -> None:
    assert convert(Celsius(0.0), Kelvin).value == pytest.approx(273.15)
    assert convert(Celsius(100.0), Fahrenheit).value == pytest.approx(212.0)
    assert convert(Celsius(0.0), Rankine).value == pytest.approx(491.67)
    assert convert(Celsius(100.0), Reaumur).value == pytest.approx(80.0)
    assert convert(Fahrenheit(-40.0), Celsius).value == pytest.approx(-40.0)


def test_non_celsius_conversion_routes_through_celsius() -> None:
    assert convert(Fahrenheit(212.0), Kelvin).value == pytest.approx(373.15)
    assert convert(Rankine(491.67), Reaumur).value == pytest.approx(0.0, abs=1e-12)


def test_arithmetic_requires_identical_units() -> None:
    assert Millivolts(1.0) + Millivolts(0.5) == Millivolts(1.5)
    assert Celsius(30.0) - Celsius(5.0) == Celsius(25.0)
    with pytest.raises(TypeError):
        Celsius(1.0) + Kelvin(1.0)
    with pytest.raises(TypeError):
        Millivolts(1.0) - Celsius(1.0)


def test_values_are_immutable_and_ordered() -> None:
    value = Celsius(10.0)
    with pytest.raises(AttributeError):
        value.value = 20.0  # type: ignore[misc]
    assert Celsius(10.0) < Celsius(20.0)
    assert Celsius(10.0) != Kelvin(10.0)


def test_display_format() -> None:
    assert str(Millivolts(1.1)) == "1.100mV"
    assert str(Kelvin(298.15)) == "298.15K"
    assert str(Celsius(51.87)) == "51.9°C"
    assert str(Fahrenheit(32.0)) == "32.0°F"
    assert str(Rankine(491.67)) == "491.7°Ra"
    assert str(Reaumur(20.0)) == "20.0°Ré"


def test_literal_helpers_and_parsing() -> None:
    assert millivolts(2) == Millivolts(2.0)
    assert celsius(25) == Celsius(25.0)
    assert as_celsius(25) == Celsius(25.0)
    assert as_celsius(Kelvin(273.15)).value == pytest.approx(0.0)
    with pytest.raises(TypeError):
        as_celsius(Millivolts(1.0))
    assert temperature_unit("f") is Fahrenheit
    assert temperature_unit("°C") is Celsius
    assert temperature_unit("Ra") is Rankine
    assert temperature_unit("Re") is Reaumur
    with pytest.raises(ValueError):
        temperature_unit("X")


def test_temperature_base_is_abstract() -> None:
    with pytest.raises(TypeError):
        Temperature(1.0)  # type: ignore[abstract]
    assert isinstance(Kelvin(1.0), Temperature)
