"""Thermocouple facades with reference-junction compensation.

The measured voltage of a thermocouple is the difference between the hot
junction and the reference junction. Adding the reference junction's own
E(T) gives the voltage against a 0 °C reference, which is what the inverse
polynomials expect (law of intermediate temperatures).
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import ClassVar, Dict, Optional, Type, TypeVar, Union

from .calibration import Calibration
from .config import DEFAULT_CONFIG, EngineConfig
from .tables import get_table
from .units import Celsius, Millivolts, Temperature, as_celsius, as_millivolts, convert

DEFAULT_REFERENCE_CELSIUS = 25.0

TC = TypeVar("TC", bound="Thermocouple")
U = TypeVar("U", bound=Temperature)


@dataclass(frozen=True)
class Thermocouple:
    """One sensor assembly: an alloy type and its reference junction."""

    calibration: Calibration
    reference_potential: Millivolts

    type_name: ClassVar[str] = ""

    def __post_init__(self) -> None:
        if self.type_name and self.calibration.name != self.type_name:
            raise ValueError(
                f"{type(self).__name__} requires a type {self.type_name} calibration, "
                f"got type {self.calibration.name}"
            )

    @classmethod
    def new(cls: Type[TC], config: Optional[EngineConfig] = None) -> TC:
        """Instance with the reference junction at 25 °C."""

        calibration = (config or DEFAULT_CONFIG).calibration(cls.type_name)
        return cls(
            calibration=calibration,
            reference_potential=Millivolts(calibration.forward(DEFAULT_REFERENCE_CELSIUS)),
        )

    @property
    def name(self) -> str:
        return self.calibration.name

    def with_reference_temperature(self: TC, temperature: Union[Temperature, float]) -> TC:
        """Copy of this thermocouple with the reference junction at *temperature*."""

        reference = as_celsius(temperature)
        return replace(
            self,
            reference_potential=Millivolts(self.calibration.forward(reference.value)),
        )

    def sense_temperature(
        self,
        voltage: Union[Millivolts, float],
        unit: Type[U] = Celsius,  # type: ignore[assignment]
    ) -> U:
        """Hot junction temperature for a measured *voltage*, in *unit*."""

        compensated = as_millivolts(voltage) + self.reference_potential
        return convert(Celsius(self.calibration.inverse(compensated.value)), unit)

    def sense_voltage(self, temperature: Union[Temperature, float]) -> Millivolts:
        """Voltage the instrument reads with the hot junction at *temperature*."""

        hot = Millivolts(self.calibration.forward(as_celsius(temperature).value))
        return hot - self.reference_potential


class BType(Thermocouple):
    """Type B thermocouple (platinum/rhodium alloy)"""

    type_name = "B"


class EType(Thermocouple):
    """Type E thermocouple (chromel-constantan)"""

    type_name = "E"


class JType(Thermocouple):
    """Type J thermocouple (iron-constantan)"""

    type_name = "J"


class KType(Thermocouple):
    """Type K thermocouple (chromel-alumel)"""

    type_name = "K"


class NType(Thermocouple):
    """Type N thermocouple (nicrosil-nisil)"""

    type_name = "N"


class RType(Thermocouple):
    """Type R thermocouple (platinum/rhodium alloy)"""

    type_name = "R"


class SType(Thermocouple):
    """Type S thermocouple (platinum/rhodium alloy)"""

    type_name = "S"


class TType(Thermocouple):
    """Type T thermocouple (copper-constantan)"""

    type_name = "T"


THERMOCOUPLES: Dict[str, Type[Thermocouple]] = {
    cls.type_name: cls for cls in (BType, EType, JType, KType, NType, RType, SType, TType)
}


def thermocouple(
    type_name: str,
    *,
    reference: Union[Temperature, float, None] = None,
    config: Optional[EngineConfig] = None,
) -> Thermocouple:
    """Build a thermocouple by type letter, optionally with a reference junction."""

    cls = THERMOCOUPLES[get_table(type_name).name]
    instance = cls.new(config)
    if reference is not None:
        instance = instance.with_reference_temperature(reference)
    return instance
