"""Type K thermocouple (chromel-alumel).

The only type whose forward function carries a non-polynomial term: above
0 °C a Gaussian correction ``a0 * exp(a1 * (t - a2)**2)`` is added to the
polynomial.
"""
from __future__ import annotations

from ..calibration import CalibrationTable, Exponential, PiecewiseFunction, Segment

E_BELOW_0 = (
    0.000000000000e00,
    0.394501280250e-01,
    0.236223735980e-04,
    -0.328589067840e-06,
    -0.499048287770e-08,
    -0.675090591730e-10,
    -0.574103274280e-12,
    -0.310888728940e-14,
    -0.104516093650e-16,
    -0.198892668780e-19,
    -0.163226974860e-22,
)
E_ABOVE_0 = (
    -0.176004136860e-01,
    0.389212049750e-01,
    0.185587700320e-04,
    -0.994575928740e-07,
    0.318409457190e-09,
    -0.560728448890e-12,
    0.560750590590e-15,
    -0.320207200030e-18,
    0.971511471520e-22,
    -0.121047212750e-25,
)
E_ABOVE_0_EXPONENTIAL = Exponential(
    a0=0.118597600000e00,
    a1=-0.118343200000e-03,
    a2=0.126968600000e03,
)

T_BELOW_0 = (
    0.0000000e00,
    2.5173462e01,
    -1.1662878e00,
    -1.0833638e00,
    -8.9773540e-01,
    -3.7342377e-01,
    -8.6632643e-02,
    -1.0450598e-02,
    -5.1920577e-04,
)
T_BELOW_20_644 = (
    0.000000e00,
    2.508355e01,
    7.860106e-02,
    -2.503131e-01,
    8.315270e-02,
    -1.228034e-02,
    9.804036e-04,
    -4.413030e-05,
    1.057734e-06,
    -1.052755e-08,
)
T_ABOVE_20_644 = (
    -1.318058e02,
    4.830222e01,
    -1.646031e00,
    5.464731e-02,
    -9.650715e-04,
    8.802193e-06,
    -3.110810e-08,
)

K_TYPE = CalibrationTable(
    name="K",
    description="Type K thermocouple (chromel-alumel)",
    forward=PiecewiseFunction(
        lower=-270.0,
        upper=1372.0,
        segments=(
            Segment(E_BELOW_0, upper=0.0),
            Segment(E_ABOVE_0, exponential=E_ABOVE_0_EXPONENTIAL),
        ),
    ),
    inverse=PiecewiseFunction(
        lower=-5.891,
        upper=54.886,
        segments=(
            Segment(T_BELOW_0, upper=0.0),
            Segment(T_BELOW_20_644, upper=20.644),
            Segment(T_ABOVE_20_644),
        ),
        owns_breakpoint=False,
    ),
    inverse_temperature_range=(-200.0, 1372.0),
    inverse_includes_upper=False,
)
