"""Type J thermocouple (iron-constantan)."""
from __future__ import annotations

from ..calibration import CalibrationTable, PiecewiseFunction, Segment

E_BELOW_760 = (
    0.000000000000e00,
    0.503811878150e-01,
    0.304758369300e-04,
    -0.856810657200e-07,
    0.132281952950e-09,
    -0.170529583370e-12,
    0.209480906970e-15,
    -0.125383953360e-18,
    0.156317256970e-22,
)
E_ABOVE_760 = (
    0.296456256810e03,
    -0.149761277860e01,
    0.317871039240e-02,
    -0.318476867010e-05,
    0.157208190040e-08,
    -0.306913690560e-12,
)

T_BELOW_0 = (
    0.0000000e00,
    1.9528268e01,
    -1.2286185e00,
    -1.0752178e00,
    -5.9086933e-01,
    -1.7256713e-01,
    -2.8131513e-02,
    -2.3963370e-03,
    -8.3823321e-05,
)
T_BELOW_42_919 = (
    0.000000e00,
    1.978425e01,
    -2.001204e-01,
    1.036969e-02,
    -2.549687e-04,
    3.585153e-06,
    -5.344285e-08,
    5.099890e-10,
)
T_ABOVE_42_919 = (
    -3.11358187e03,
    3.00543684e02,
    -9.94773230e00,
    1.70276630e-01,
    -1.43033468e-03,
    4.73886084e-06,
)

J_TYPE = CalibrationTable(
    name="J",
    description="Type J thermocouple (iron-constantan)",
    forward=PiecewiseFunction(
        lower=-210.0,
        upper=1200.0,
        segments=(Segment(E_BELOW_760, upper=760.0), Segment(E_ABOVE_760)),
    ),
    inverse=PiecewiseFunction(
        lower=-8.095,
        upper=69.553,
        segments=(
            Segment(T_BELOW_0, upper=0.0),
            Segment(T_BELOW_42_919, upper=42.919),
            Segment(T_ABOVE_42_919),
        ),
        owns_breakpoint=False,
    ),
    inverse_temperature_range=(-210.0, 1200.0),
)
