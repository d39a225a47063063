"""Type N thermocouple (nicrosil-nisil)."""
from __future__ import annotations

from ..calibration import CalibrationTable, PiecewiseFunction, Segment

E_BELOW_0 = (
    0.000000000000e00,
    0.261591059620e-01,
    0.109574842280e-04,
    -0.938411115540e-07,
    -0.464120397590e-10,
    -0.263033577160e-11,
    -0.226534380030e-13,
    -0.760893007910e-16,
    -0.934196678350e-19,
)
E_ABOVE_0 = (
    0.000000000000e00,
    0.259293946010e-01,
    0.157101418800e-04,
    0.438256272370e-07,
    -0.252611697940e-09,
    0.643118193390e-12,
    -0.100634715190e-14,
    0.997453389920e-18,
    -0.608632456070e-21,
    0.208492293390e-24,
    -0.306821961510e-28,
)

T_BELOW_0 = (
    0.0000000e00,
    3.8436847e01,
    1.1010485e00,
    5.2229312e00,
    7.2060525e00,
    5.8488586e00,
    2.7754916e00,
    7.7075166e-01,
    1.1582665e-01,
    7.3138868e-03,
)
T_BELOW_20_613 = (
    0.00000e00,
    3.86896e01,
    -1.08267e00,
    4.70205e-02,
    -2.12169e-06,
    -1.17272e-04,
    5.39280e-06,
    -7.98156e-08,
)
T_ABOVE_20_613 = (
    1.972485e01,
    3.300943e01,
    -3.915159e-01,
    9.855391e-03,
    -1.274371e-04,
    7.767022e-07,
)

N_TYPE = CalibrationTable(
    name="N",
    description="Type N thermocouple (nicrosil-nisil)",
    forward=PiecewiseFunction(
        lower=-270.0,
        upper=1300.0,
        segments=(Segment(E_BELOW_0, upper=0.0), Segment(E_ABOVE_0)),
    ),
    inverse=PiecewiseFunction(
        lower=-3.990,
        upper=47.513,
        segments=(
            Segment(T_BELOW_0, upper=0.0),
            Segment(T_BELOW_20_613, upper=20.613),
            Segment(T_ABOVE_20_613),
        ),
        owns_breakpoint=False,
    ),
    inverse_temperature_range=(-200.0, 1300.0),
)
