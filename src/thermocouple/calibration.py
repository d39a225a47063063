"""Generic piecewise calibration engine shared by every thermocouple type.

A :class:`CalibrationTable` is static data: the published coefficient sets,
breakpoints and valid ranges of one alloy type. A :class:`Calibration` is a
table resolved for one storage precision and one domain policy. Resolution
happens once; the evaluation path carries no configuration branches.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from functools import lru_cache
from typing import Optional, Tuple, Union

import numpy as np

from .polyval import polyval

logger = logging.getLogger(__name__)

ArrayLike = Union[float, np.ndarray]

PRECISIONS = {"double": np.float64, "single": np.float32}
DOMAIN_MODES = {"strict", "extrapolate"}

# Tolerance applied to the published inverse voltage range.
SINGLE_RANGE_TOLERANCE_MV = 0.005
DOUBLE_RANGE_TOLERANCE_MV = 0.0005

# Acceptance thresholds against the ITS-90 tables: (E_tol mV, T_tol °C).
TOLERANCES = {
    "double": (0.0005, 0.05),
    "single": (0.1, 0.25),
}


class DomainError(ValueError):
    """Input lies outside the published range of a calibration function."""


@dataclass(frozen=True)
class Exponential:
    """Additive term ``a0 * exp(a1 * (x - a2)**2)``."""

    a0: float
    a1: float
    a2: float


@dataclass(frozen=True)
class Segment:
    """One polynomial piece; ``upper`` is the breakpoint to the next piece."""

    coefficients: Tuple[float, ...]
    upper: Optional[float] = None
    exponential: Optional[Exponential] = None


@dataclass(frozen=True)
class PiecewiseFunction:
    """Mutually exclusive segments covering ``[lower, upper]``.

    With ``owns_breakpoint`` a segment includes its upper breakpoint
    (``x > breakpoint`` selects the next one); otherwise it excludes it
    (``x < breakpoint`` stays in the segment).
    """

    lower: float
    upper: float
    segments: Tuple[Segment, ...]
    owns_breakpoint: bool = True

    def __post_init__(self) -> None:
        if not self.segments:
            raise ValueError("A piecewise function needs at least one segment")
        breakpoints = self.breakpoints
        if any(b is None for b in breakpoints):
            raise ValueError("Every segment but the last requires an upper breakpoint")
        if list(breakpoints) != sorted(breakpoints):
            raise ValueError("Segment breakpoints must be ascending")

    @property
    def breakpoints(self) -> Tuple[float, ...]:
        return tuple(segment.upper for segment in self.segments[:-1])  # type: ignore[misc]

    def select(self, x: ArrayLike) -> Union[int, np.ndarray]:
        side = "left" if self.owns_breakpoint else "right"
        index = np.searchsorted(np.asarray(self.breakpoints, dtype=float), x, side=side)
        if np.ndim(index) == 0:
            return int(index)
        return index


@dataclass(frozen=True)
class CalibrationTable:
    """Published ITS-90 data for one thermocouple type."""

    name: str
    description: str
    forward: PiecewiseFunction
    inverse: PiecewiseFunction
    inverse_temperature_range: Tuple[float, float]
    inverse_range_tolerance: float = DOUBLE_RANGE_TOLERANCE_MV
    inverse_includes_upper: bool = True

    def inverse_defined(self, temperature: ArrayLike) -> ArrayLike:
        """Whether the inverse function is published at *temperature* (°C)."""

        low, high = self.inverse_temperature_range
        above = np.greater_equal(temperature, low)
        below = (
            np.less_equal(temperature, high)
            if self.inverse_includes_upper
            else np.less(temperature, high)
        )
        return np.logical_and(above, below)


@dataclass(frozen=True)
class _ResolvedSegment:
    coefficients: np.ndarray
    exponential: Optional[Tuple[np.floating, np.floating, np.floating]]


def _resolve_segments(function: PiecewiseFunction, dtype) -> Tuple[_ResolvedSegment, ...]:
    resolved = []
    for segment in function.segments:
        exponential = None
        if segment.exponential is not None:
            term = segment.exponential
            exponential = (dtype(term.a0), dtype(term.a1), dtype(term.a2))
        resolved.append(
            _ResolvedSegment(
                coefficients=np.asarray(segment.coefficients, dtype=dtype),
                exponential=exponential,
            )
        )
    return tuple(resolved)


@dataclass(frozen=True)
class Calibration:
    """A :class:`CalibrationTable` bound to a precision and domain policy."""

    table: CalibrationTable
    precision: str = "double"
    extrapolate: bool = False
    _dtype: type = field(init=False, repr=False, compare=False)
    _forward: Tuple[_ResolvedSegment, ...] = field(init=False, repr=False, compare=False)
    _inverse: Tuple[_ResolvedSegment, ...] = field(init=False, repr=False, compare=False)
    _inverse_bounds: Tuple[float, float] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        if self.precision not in PRECISIONS:
            raise ValueError(
                f"Unsupported precision '{self.precision}'. Expected one of {sorted(PRECISIONS)}"
            )
        dtype = PRECISIONS[self.precision]
        tolerance = (
            self.table.inverse_range_tolerance
            if self.precision == "double"
            else SINGLE_RANGE_TOLERANCE_MV
        )
        object.__setattr__(self, "_dtype", dtype)
        object.__setattr__(self, "_forward", _resolve_segments(self.table.forward, dtype))
        object.__setattr__(self, "_inverse", _resolve_segments(self.table.inverse, dtype))
        object.__setattr__(
            self,
            "_inverse_bounds",
            (self.table.inverse.lower - tolerance, self.table.inverse.upper + tolerance),
        )

    @property
    def name(self) -> str:
        return self.table.name

    @property
    def tolerances(self) -> Tuple[float, float]:
        """Acceptance thresholds ``(E_tol mV, T_tol °C)`` for this precision."""

        return TOLERANCES[self.precision]

    @property
    def temperature_range(self) -> Tuple[float, float]:
        return self.table.forward.lower, self.table.forward.upper

    @property
    def voltage_range(self) -> Tuple[float, float]:
        return self._inverse_bounds

    def forward(self, temperature: ArrayLike) -> ArrayLike:
        """E(T): temperature in °C to thermoelectric potential in mV."""

        if not self.extrapolate:
            self._check(temperature, self.temperature_range, "temperature", "°C")
        return self._evaluate(self.table.forward, self._forward, temperature)

    def inverse(self, voltage: ArrayLike) -> ArrayLike:
        """T(E): thermoelectric potential in mV to temperature in °C."""

        if not self.extrapolate:
            self._check(voltage, self._inverse_bounds, "voltage", "mV")
        return self._evaluate(self.table.inverse, self._inverse, voltage)

    def _check(self, x: ArrayLike, bounds: Tuple[float, float], quantity: str, unit: str) -> None:
        low, high = bounds
        values = np.asarray(x, dtype=float)
        inside = (values >= low) & (values <= high)
        if np.all(inside):
            return
        offending = values[~inside] if values.ndim else values
        raise DomainError(
            f"Type {self.table.name} {quantity} {np.ravel(offending)[0]:g}{unit} "
            f"outside valid range [{low:g}, {high:g}]{unit}"
        )

    def _evaluate(
        self,
        function: PiecewiseFunction,
        segments: Tuple[_ResolvedSegment, ...],
        x: ArrayLike,
    ) -> ArrayLike:
        values = np.asarray(x, dtype=self._dtype)
        index = function.select(values)
        if values.ndim == 0:
            return float(self._segment_value(segments[index], values[()]))
        result = np.empty_like(values)
        for position, segment in enumerate(segments):
            mask = index == position
            if np.any(mask):
                result[mask] = self._segment_value(segment, values[mask])
        return result

    @staticmethod
    def _segment_value(segment: _ResolvedSegment, x):
        value = polyval(segment.coefficients, x)
        if segment.exponential is not None:
            a0, a1, a2 = segment.exponential
            value = value + a0 * np.exp(a1 * (x - a2) * (x - a2))
        return value


@lru_cache(maxsize=None)
def resolve(table: CalibrationTable, precision: str = "double", domain_check: str = "strict") -> Calibration:
    """Return the cached evaluator for *table* under one configuration."""

    if domain_check not in DOMAIN_MODES:
        raise ValueError(
            f"Unsupported domain_check '{domain_check}'. Expected one of {sorted(DOMAIN_MODES)}"
        )
    extrapolate = domain_check == "extrapolate"
    calibration = Calibration(table=table, precision=precision, extrapolate=extrapolate)
    if extrapolate:
        logger.warning(
            "Type %s resolved in extrapolate mode; results outside %s °C carry no accuracy guarantee",
            table.name,
            calibration.temperature_range,
        )
    else:
        logger.debug("Resolved type %s calibration (precision=%s)", table.name, precision)
    return calibration
