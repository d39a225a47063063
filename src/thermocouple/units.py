"""Unit value types for thermoelectric potential and temperature."""
from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Dict, Type, TypeVar, Union

Q = TypeVar("Q", bound="Quantity")
T = TypeVar("T", bound="Temperature")

KELVIN_OFFSET = 273.15
RANKINE_OFFSET = 491.67
FAHRENHEIT_OFFSET = 32.0
FAHRENHEIT_SCALE = 1.8
REAUMUR_SCALE = 0.8


@dataclass(frozen=True, order=True)
class Quantity:
    """Scalar tagged with a physical unit.

    Arithmetic is only defined between values of the same unit; anything else
    has to be converted explicitly first.
    """

    value: float

    _format = "{:.3f}"

    def __add__(self: Q, other: Q) -> Q:
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(self.value + other.value)

    def __sub__(self: Q, other: Q) -> Q:
        if type(other) is not type(self):
            return NotImplemented
        return type(self)(self.value - other.value)

    def __neg__(self: Q) -> Q:
        return type(self)(-self.value)

    def __float__(self) -> float:
        return float(self.value)

    def __str__(self) -> str:
        return self._format.format(self.value)


class Millivolts(Quantity):
    """Electric potential in 1/1000 of a volt."""

    _format = "{:.3f}mV"


class Temperature(Quantity, ABC):
    """Base class for temperature scales; Celsius is the canonical scale."""

    symbol = ""

    @abstractmethod
    def to_celsius(self) -> "Celsius":
        ...

    @classmethod
    @abstractmethod
    def from_celsius(cls: Type[T], celsius: "Celsius") -> T:
        ...


class Celsius(Temperature):
    symbol = "C"
    _format = "{:.1f}°C"

    def to_celsius(self) -> "Celsius":
        return self

    @classmethod
    def from_celsius(cls, celsius: "Celsius") -> "Celsius":
        return cls(celsius.value)


class Kelvin(Temperature):
    """Thermodynamic temperature, 1/273.16 of the triple point of water."""

    symbol = "K"
    _format = "{:.2f}K"

    def to_celsius(self) -> Celsius:
        return Celsius(self.value - KELVIN_OFFSET)

    @classmethod
    def from_celsius(cls, celsius: Celsius) -> "Kelvin":
        return cls(celsius.value + KELVIN_OFFSET)


class Fahrenheit(Temperature):
    symbol = "F"
    _format = "{:.1f}°F"

    def to_celsius(self) -> Celsius:
        return Celsius((self.value - FAHRENHEIT_OFFSET) / FAHRENHEIT_SCALE)

    @classmethod
    def from_celsius(cls, celsius: Celsius) -> "Fahrenheit":
        return cls(celsius.value * FAHRENHEIT_SCALE + FAHRENHEIT_OFFSET)


class Rankine(Temperature):
    symbol = "Ra"
    _format = "{:.1f}°Ra"

    def to_celsius(self) -> Celsius:
        return Celsius((self.value - RANKINE_OFFSET) / FAHRENHEIT_SCALE)

    @classmethod
    def from_celsius(cls, celsius: Celsius) -> "Rankine":
        return cls(celsius.value * FAHRENHEIT_SCALE + RANKINE_OFFSET)


class Reaumur(Temperature):
    symbol = "Re"
    _format = "{:.1f}°Ré"

    def to_celsius(self) -> Celsius:
        return Celsius(self.value * 1.25)

    @classmethod
    def from_celsius(cls, celsius: Celsius) -> "Reaumur":
        return cls(celsius.value * REAUMUR_SCALE)


TEMPERATURE_UNITS: Dict[str, Type[Temperature]] = {
    "C": Celsius,
    "K": Kelvin,
    "F": Fahrenheit,
    "R": Rankine,
    "RA": Rankine,
    "RE": Reaumur,
}


def convert(temperature: Temperature, unit: Type[T]) -> T:
    """Convert *temperature* into *unit*, always going through Celsius."""

    if not isinstance(temperature, Temperature):
        raise TypeError(f"Expected a temperature, got {type(temperature).__name__}")
    return unit.from_celsius(temperature.to_celsius())


def as_celsius(temperature: Union[Temperature, float, int]) -> Celsius:
    """Normalise a temperature value; bare numbers are taken as Celsius."""

    if isinstance(temperature, Temperature):
        return temperature.to_celsius()
    if isinstance(temperature, Quantity):
        raise TypeError(f"Expected a temperature, got {type(temperature).__name__}")
    return Celsius(float(temperature))


def as_millivolts(voltage: Union[Millivolts, float, int]) -> Millivolts:
    if isinstance(voltage, Millivolts):
        return voltage
    if isinstance(voltage, Quantity):
        raise TypeError(f"Expected a voltage, got {type(voltage).__name__}")
    return Millivolts(float(voltage))


def temperature_unit(symbol: str) -> Type[Temperature]:
    """Resolve a unit symbol such as ``"F"`` or ``"Re"`` to its class."""

    key = symbol.strip().lstrip("°º").upper()
    try:
        return TEMPERATURE_UNITS[key]
    except KeyError as exc:
        raise ValueError(
            f"Unknown temperature unit '{symbol}'. Expected one of C, K, F, R, Re"
        ) from exc


def millivolts(value: float) -> Millivolts:
    return Millivolts(float(value))


def celsius(value: float) -> Celsius:
    return Celsius(float(value))


def kelvin(value: float) -> Kelvin:
    return Kelvin(float(value))


def fahrenheit(value: float) -> Fahrenheit:
    return Fahrenheit(float(value))


def rankine(value: float) -> Rankine:
    return Rankine(float(value))


def reaumur(value: float) -> Reaumur:
    return Reaumur(float(value))
