"""Type S thermocouple (platinum-10% rhodium / platinum)."""
from __future__ import annotations

from ..calibration import CalibrationTable, PiecewiseFunction, Segment

E_BELOW_1064_18 = (
    0.000000000000e00,
    0.540313308631e-02,
    0.125934289740e-04,
    -0.232477968689e-07,
    0.322028823036e-10,
    -0.331465196389e-13,
    0.255744251786e-16,
    -0.125068871393e-19,
    0.271443176145e-23,
)
E_BELOW_1664_5 = (
    0.132900444085e01,
    0.334509311344e-02,
    0.654805192818e-05,
    -0.164856259209e-08,
    0.129989605174e-13,
)
E_ABOVE_1664_5 = (
    0.146628232636e03,
    -0.258430516752e00,
    0.163693574641e-03,
    -0.330439046987e-07,
    -0.943223690612e-14,
)

T_BELOW_1_874 = (
    0.00000000e00,
    1.84949460e02,
    -8.00504062e01,
    1.02237430e02,
    -1.52248592e02,
    1.88821343e02,
    -1.59085941e02,
    8.23027880e01,
    -2.34181944e01,
    2.79786260e00,
)
T_BELOW_11_950 = (
    1.291507177e01,
    1.466298863e02,
    -1.534713402e01,
    3.145945973e00,
    -4.163257839e-01,
    3.187963771e-02,
    -1.291637500e-03,
    2.183475087e-05,
    -1.447379511e-07,
    8.211272125e-09,
)
T_BELOW_17_536 = (
    -8.087801117e01,
    1.621573104e02,
    -8.536869453e00,
    4.719686976e-01,
    -1.441693666e-02,
    2.081618890e-04,
)
T_ABOVE_17_536 = (
    5.333875126e04,
    -1.235892298e04,
    1.092657613e03,
    -4.265693686e01,
    6.247205420e-01,
)

S_TYPE = CalibrationTable(
    name="S",
    description="Type S thermocouple (platinum/rhodium alloy)",
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
        lower=-0.235,
        upper=18.693,
        segments=(
            Segment(T_BELOW_1_874, upper=1.874),
            Segment(T_BELOW_11_950, upper=11.950),
            Segment(T_BELOW_17_536, upper=17.536),
            Segment(T_ABOVE_17_536),
        ),
        owns_breakpoint=False,
    ),
    inverse_temperature_range=(-50.0, 1768.1),
    # the published inverse range starts just above forward(-50 °C)
    inverse_range_tolerance=0.00056,
)
