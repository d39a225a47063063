"""NIST ITS-90 thermocouple routines.

Convert thermoelectric potential to temperature (and back) for the
nickel-alloy types E, J, K, N, T and the platinum/rhodium types B, R, S,
with reference-junction compensation::

    from thermocouple import KType, Millivolts, Celsius

    # reference junction at 25 °C
    KType.new().sense_temperature(Millivolts(1.1))

    # reference junction at 0 °C
    KType.new().with_reference_temperature(Celsius(0.0)).sense_temperature(Millivolts(2.0))
"""

from importlib.metadata import PackageNotFoundError, version

from .calibration import Calibration, CalibrationTable, DomainError, resolve
from .config import DEFAULT_CONFIG, EngineConfig, load_config
from .polyval import polyval
from .sensor import (
    BType,
    EType,
    JType,
    KType,
    NType,
    RType,
    SType,
    Thermocouple,
    TType,
    thermocouple,
)
from .tables import TABLES, get_table
from .units import (
    Celsius,
    Fahrenheit,
    Kelvin,
    Millivolts,
    Rankine,
    Reaumur,
    Temperature,
    celsius,
    convert,
    fahrenheit,
    kelvin,
    millivolts,
    rankine,
    reaumur,
)

try:  # pragma: no cover - fallback when package metadata missing
    __version__ = version("thermocouple")
except PackageNotFoundError:  # pragma: no cover
    __version__ = "0.0.0"

__all__ = [
    "__version__",
    "Calibration",
    "CalibrationTable",
    "DomainError",
    "resolve",
    "DEFAULT_CONFIG",
    "EngineConfig",
    "load_config",
    "polyval",
    "Thermocouple",
    "thermocouple",
    "BType",
    "EType",
    "JType",
    "KType",
    "NType",
    "RType",
    "SType",
    "TType",
    "TABLES",
    "get_table",
    "Celsius",
    "Fahrenheit",
    "Kelvin",
    "Millivolts",
    "Rankine",
    "Reaumur",
    "Temperature",
    "celsius",
    "convert",
    "fahrenheit",
    "kelvin",
    "millivolts",
    "rankine",
    "reaumur",
]
