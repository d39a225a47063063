"""Horner evaluation of ascending-power polynomials."""
from __future__ import annotations

from typing import Sequence, TypeVar

import numpy as np

X = TypeVar("X", float, np.floating, np.ndarray)


def polyval(coefficients: Sequence[float] | np.ndarray, x: X) -> X:
    """Return ``sum(c[i] * x**i)`` for ascending-power *coefficients*.

    Accumulates from the highest power down (``acc = acc * x + c[i]``), which
    is the evaluation order of the NIST ITS-90 routines. numpy scalars
    keep their dtype and arrays are evaluated element-wise.
    """

    if len(coefficients) == 0:
        raise ValueError("polyval requires at least one coefficient")
    acc = coefficients[-1] * np.ones_like(x) if isinstance(x, np.ndarray) else coefficients[-1]
    for coefficient in coefficients[-2::-1]:
        acc = acc * x + coefficient
    return acc
