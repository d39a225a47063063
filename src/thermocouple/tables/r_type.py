"""Type R thermocouple (platinum-13% rhodium / platinum)."""
from __future__ import annotations

from ..calibration import CalibrationTable, PiecewiseFunction, Segment

E_BELOW_1064_18 = (
    0.000000000000e00,
    0.528961729765e-02,
    0.139166589782e-04,
    -0.238855693017e-07,
    0.356916001063e-10,
    -0.462347666298e-13,
    0.500777441034e-16,
    -0.373105886191e-19,
    0.157716482367e-22,
    -0.281038625251e-26,
)
E_BELOW_1664_5 = (
    0.295157925316e01,
    -0.252061251332e-02,
    0.159564501865e-04,
    -0.764085947576e-08,
    0.205305291024e-11,
    -0.293359668173e-15,
)
E_ABOVE_1664_5 = (
    0.152232118209e03,
    -0.268819888545e00,
    0.171280280471e-03,
    -0.345895706453e-07,
    -0.934633971046e-14,
)

T_BELOW_1_923 = (
    0.0000000e00,
    1.8891380e02,
    -9.3835290e01,
    1.3068619e02,
    -2.2703580e02,
    3.5145659e02,
    -3.8953900e02,
    2.8239471e02,
    -1.2607281e02,
    3.1353611e01,
    -3.3187769e00,
)
T_BELOW_13_228 = (
    1.334584505e01,
    1.472644573e02,
    -1.844024844e01,
    4.031129726e00,
    -6.249428360e-01,
    6.468412046e-02,
    -4.458750426e-03,
    1.994710149e-04,
    -5.313401790e-06,
    6.481976217e-08,
)
T_BELOW_19_739 = (
    -8.199599416e01,
    1.553962042e02,
    -8.342197663e00,
    4.279433549e-01,
    -1.191577910e-02,
    1.492290091e-04,
)
T_ABOVE_19_739 = (
    3.406177836e04,
    -7.023729171e03,
    5.582903813e02,
    -1.952394635e01,
    2.560740231e-01,
)

R_TYPE = CalibrationTable(
    name="R",
    description="Type R thermocouple (platinum/rhodium alloy)",
    forward=PiecewiseFunction(
        lower=-50.0,
        upper=1768.1,
        segments=(
            Segment(E_BELOW_1064_18, upper=1064.18),
            Segment(E_BELOW_1664_5, upper=1664.5),
            Segment(E_ABOVE_1664_5),
        ),
    ),
    inverse=PiecewiseFunction(
        lower=-0.226,
        upper=21.103,
        segments=(
            Segment(T_BELOW_1_923, upper=1.923),
            Segment(T_BELOW_13_228, upper=13.228),
            Segment(T_BELOW_19_739, upper=19.739),
            Segment(T_ABOVE_19_739),
        ),
        owns_breakpoint=False,
    ),
    inverse_temperature_range=(-50.0, 1768.1),
)
