"""Type B thermocouple (platinum-30% rhodium / platinum-6% rhodium)."""
from __future__ import annotations

from ..calibration import CalibrationTable, PiecewiseFunction, Segment

E_BELOW_630_615 = (
    0.000000000000e00,
    -0.246508183460e-03,
    0.590404211710e-05,
    -0.132579316360e-08,
    0.156682919010e-11,
    -0.169445292400e-14,
    0.629903470940e-18,
)
E_ABOVE_630_615 = (
    -0.389381686210e01,
    0.285717474700e-01,
    -0.848851047850e-04,
    0.157852801640e-06,
    -0.168353448640e-09,
    0.111097940130e-12,
    -0.445154310330e-16,
    0.989756408210e-20,
    -0.937913302890e-24,
)

# 0.291 mV to 2.431 mV (250 °C to 700 °C)
T_BELOW_2_431 = (
    9.8423321e01,
    6.9971500e02,
    -8.4765304e02,
    1.0052644e03,
    -8.3345952e02,
    4.5508542e02,
    -1.5523037e02,
    2.9886750e01,
    -2.4742860e00,
)
# 2.431 mV to 13.820 mV (700 °C to 1820 °C)
T_ABOVE_2_431 = (
    2.1315071e02,
    2.8510504e02,
    -5.2742887e01,
    9.9160804e00,
    -1.2965303e00,
    1.1195870e-01,
    -6.0625199e-03,
    1.8661696e-04,
    -2.4878585e-06,
)

B_TYPE = CalibrationTable(
    name="B",
    description="Type B thermocouple (platinum/rhodium alloy)",
    forward=PiecewiseFunction(
        lower=0.0,
        upper=1820.0,
        segments=(
            Segment(E_BELOW_630_615, upper=630.615),
            Segment(E_ABOVE_630_615),
        ),
    ),
    inverse=PiecewiseFunction(
        lower=0.291,
        upper=13.82,
        segments=(
            Segment(T_BELOW_2_431, upper=2.431),
            Segment(T_ABOVE_2_431),
        ),
        owns_breakpoint=False,
    ),
    inverse_temperature_range=(250.0, 1820.0),
    inverse_includes_upper=False,
)
