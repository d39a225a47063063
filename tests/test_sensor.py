from __future__ import annotations

from dataclasses import replace

import numpy as np
import pytest

from thermocouple import (
    BType,
    Celsius,
    DomainError,
    EngineConfig,
    EType,
    Fahrenheit,
    JType,
    Kelvin,
    KType,
    Millivolts,
    NType,
    Rankine,
    Reaumur,
    RType,
    SType,
    TType,
    thermocouple,
)
from thermocouple.calibration import resolve
from thermocouple.tables import J_TYPE, K_TYPE


@pytest.mark.parametrize(
    "cls, expected",
    [
        (KType, 51.870),
        (BType, 470.511),
        (EType, 42.808),
        (JType, 46.058),
        (NType, 64.953),
        (RType, 173.779),
        (SType, 176.278),
        (TType, 51.312),
    ],
)
def test_sense_temperature_default_reference(cls, expected: float) -> None:
    temperature = cls.new().sense_temperature(Millivolts(1.1))
    assert isinstance(temperature, Celsius)
    assert abs(temperature.value - expected) < 0.05


def test_default_reference_is_25_celsius() -> None:
    sensor = KType.new()
    assert sensor.reference_potential == Millivolts(resolve(sensor.calibration.table).forward(25.0))


def test_type_b_default_reference_below_inverse_range() -> None:
    # E(25 °C) for type B lies below the published inverse range
    sensor = BType.new()
    assert sensor.reference_potential.value == pytest.approx(-0.0025, abs=1e-4)
    assert sensor.sense_voltage(Celsius(25.0)) == Millivolts(0.0)
    assert sensor.sense_temperature(sensor.sense_voltage(Celsius(600.0))).value == pytest.approx(600.0, abs=0.05)


def test_calibration_must_match_alloy_type() -> None:
    with pytest.raises(ValueError, match="type K"):
        KType(calibration=resolve(J_TYPE), reference_potential=Millivolts(0.0))
    with pytest.raises(ValueError):
        replace(KType.new(), calibration=resolve(J_TYPE))
    assert replace(KType.new(), calibration=resolve(K_TYPE, "single")).calibration.precision == "single"


def test_zero_reference_adds_no_compensation() -> None:
    sensor = JType.new().with_reference_temperature(Celsius(0.0))
    assert sensor.reference_potential == Millivolts(0.0)
    assert sensor.sense_temperature(Millivolts(1.1)).value == resolve(J_TYPE).inverse(1.1)


def test_with_reference_temperature_returns_new_instance() -> None:
    original = KType.new()
    shifted = original.with_reference_temperature(Fahrenheit(32.0))
    assert isinstance(shifted, KType)
    assert shifted is not original
    assert original.reference_potential.value == pytest.approx(1.000, abs=5e-4)
    assert shifted.reference_potential.value == pytest.approx(0.0, abs=1e-12)


def test_reference_accepts_any_unit() -> None:
    by_celsius = TType.new().with_reference_temperature(Celsius(20.0))
    by_kelvin = TType.new().with_reference_temperature(Kelvin(293.15))
    by_number = TType.new().with_reference_temperature(20)
    assert by_kelvin.reference_potential.value == pytest.approx(by_celsius.reference_potential.value)
    assert by_number.reference_potential == by_celsius.reference_potential


@pytest.mark.parametrize("unit", [Celsius, Kelvin, Fahrenheit, Rankine, Reaumur])
def test_sense_temperature_in_requested_unit(unit) -> None:
    sensor = KType.new()
    celsius_value = sensor.sense_temperature(Millivolts(1.1)).value
    result = sensor.sense_temperature(Millivolts(1.1), unit)
    assert isinstance(result, unit)
    assert result.to_celsius().value == pytest.approx(celsius_value)


def test_sense_voltage_inverts_compensation() -> None:
    sensor = KType.new()
    assert sensor.sense_voltage(Celsius(25.0)) == Millivolts(0.0)
    assert sensor.sense_voltage(Kelvin(298.15)).value == pytest.approx(0.0, abs=1e-12)
    voltage = sensor.sense_voltage(Celsius(300.0))
    assert voltage.value == pytest.approx(12.209 - 1.000, abs=1e-3)
    assert sensor.sense_temperature(voltage).value == pytest.approx(300.0, abs=0.05)


def test_sense_temperature_out_of_range_fails() -> None:
    sensor = BType.new()
    with pytest.raises(DomainError):
        sensor.sense_temperature(Millivolts(20.0))
    with pytest.raises(DomainError):
        sensor.sense_voltage(Celsius(-5.0))


def test_extrapolate_config_allows_out_of_range() -> None:
    config = EngineConfig(domain_check="extrapolate")
    sensor = KType.new(config)
    assert np.isfinite(sensor.sense_voltage(Celsius(1400.0)).value)


def test_disabled_type_is_rejected() -> None:
    config = EngineConfig(types=("K",))
    KType.new(config)
    with pytest.raises(ValueError):
        JType.new(config)


def test_single_precision_sensor() -> None:
    sensor = KType.new(EngineConfig(precision="single"))
    assert sensor.calibration.precision == "single"
    assert abs(sensor.sense_temperature(Millivolts(1.1)).value - 51.870) < 0.25


def test_thermocouple_factory() -> None:
    sensor = thermocouple("j", reference=Celsius(0.0))
    assert isinstance(sensor, JType)
    assert sensor.name == "J"
    assert sensor == JType.new().with_reference_temperature(0.0)
    with pytest.raises(ValueError):
        thermocouple("X")


def test_instances_are_immutable() -> None:
    sensor = KType.new()
    with pytest.raises(AttributeError):
        sensor.reference_potential = Millivolts(0.0)  # type: ignore[misc]
