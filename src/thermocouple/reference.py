"""Reference tables: generation from the ITS-90 functions and tolerance checks."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path

import numpy as np
import pandas as pd

from .calibration import Calibration

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = {"temperature_c", "voltage_mv"}
OPTIONAL_COLUMNS = {"type"}


@dataclass(frozen=True)
class ReferenceTable:
    """Published (temperature, voltage) pairs for one thermocouple type."""

    dataframe: pd.DataFrame
    temperature: np.ndarray
    voltage: np.ndarray


@dataclass(frozen=True)
class ToleranceReport:
    """Outcome of comparing a calibration against a reference table."""

    type_name: str
    precision: str
    e_tolerance: float
    t_tolerance: float
    max_forward_error: float
    max_inverse_error: float
    forward_failures: int
    inverse_failures: int
    residuals: pd.DataFrame

    @property
    def passed(self) -> bool:
        return self.forward_failures == 0 and self.inverse_failures == 0


def generate_table(
    calibration: Calibration,
    start: float | None = None,
    stop: float | None = None,
    step: float = 1.0,
) -> pd.DataFrame:
    """Tabulate E(T) over ``[start, stop]`` together with the inverse round trip.

    ``inverse_c`` and ``roundtrip_error_c`` are NaN where the inverse
    function is not published.
    """

    if step <= 0:
        raise ValueError("step must be positive")
    low, high = calibration.temperature_range
    start = low if start is None else start
    stop = high if stop is None else stop
    if stop < start:
        raise ValueError("stop must not be below start")

    count = int(np.floor((stop - start) / step + 1e-9)) + 1
    temperature = start + step * np.arange(count, dtype=float)
    voltage = np.asarray(calibration.forward(temperature), dtype=float)

    defined = np.asarray(calibration.table.inverse_defined(temperature), dtype=bool)
    inverse = np.full(temperature.shape, np.nan)
    if np.any(defined):
        inverse[defined] = calibration.inverse(voltage[defined])

    return pd.DataFrame(
        {
            "temperature_c": temperature,
            "voltage_mv": voltage,
            "inverse_c": inverse,
            "roundtrip_error_c": inverse - temperature,
        }
    )


def load_reference_csv(path: str | Path, type_name: str | None = None) -> ReferenceTable:
    """Load reference pairs from *path*.

    Parameters
    ----------
    path:
        CSV with `temperature_c` and `voltage_mv` columns and an optional
        `type` column when several thermocouple types share one file.
    type_name:
        Keep only rows of this type. Required when the file has a `type`
        column.
    """

    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(path)

    df = pd.read_csv(path, comment="#")
    missing = REQUIRED_COLUMNS - set(df.columns)
    if missing:
        raise ValueError(f"Missing required columns: {sorted(missing)}")

    if "type" in df.columns:
        if type_name is None:
            raise ValueError("Reference file covers several types; select one with type_name")
        df = df[df["type"].astype(str).str.upper() == type_name.upper()]
    df = df.dropna(subset=sorted(REQUIRED_COLUMNS))
    if df.empty:
        raise ValueError(f"No reference rows found in {path}")

    df = df.sort_values("temperature_c", kind="mergesort").reset_index(drop=True)
    return ReferenceTable(
        dataframe=df,
        temperature=df["temperature_c"].to_numpy(dtype=float),
        voltage=df["voltage_mv"].to_numpy(dtype=float),
    )


def check_reference(calibration: Calibration, reference: ReferenceTable) -> ToleranceReport:
    """Compare *calibration* with *reference* under its precision's tolerances.

    Forward values are compared against the tabulated voltage. The inverse is
    evaluated on the computed E(T) rather than the tabulated voltage, which is
    rounded to 1 µV, and only where the inverse function is published.
    """

    e_tol, t_tol = calibration.tolerances
    temperature = reference.temperature
    forward = np.asarray(calibration.forward(temperature), dtype=float)
    forward_error = forward - reference.voltage

    defined = np.asarray(calibration.table.inverse_defined(temperature), dtype=bool)
    inverse = np.full(temperature.shape, np.nan)
    if np.any(defined):
        inverse[defined] = calibration.inverse(forward[defined])
    inverse_error = inverse - temperature

    forward_failures = int(np.count_nonzero(np.abs(forward_error) > e_tol))
    inverse_failures = int(np.count_nonzero(np.abs(inverse_error[defined]) > t_tol))

    residuals = pd.DataFrame(
        {
            "temperature_c": temperature,
            "voltage_mv": reference.voltage,
            "forward_mv": forward,
            "forward_error_mv": forward_error,
            "inverse_c": inverse,
            "inverse_error_c": inverse_error,
        }
    )
    report = ToleranceReport(
        type_name=calibration.name,
        precision=calibration.precision,
        e_tolerance=e_tol,
        t_tolerance=t_tol,
        max_forward_error=_max_abs(forward_error),
        max_inverse_error=_max_abs(inverse_error[defined]),
        forward_failures=forward_failures,
        inverse_failures=inverse_failures,
        residuals=residuals,
    )
    level = logging.INFO if report.passed else logging.WARNING
    logger.log(
        level,
        "Type %s reference check: %d forward / %d inverse points out of tolerance",
        report.type_name,
        forward_failures,
        inverse_failures,
    )
    return report


def _max_abs(values: np.ndarray) -> float:
    if values.size == 0:
        return 0.0
    return float(np.max(np.abs(values)))
