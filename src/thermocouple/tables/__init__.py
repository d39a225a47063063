"""Published NIST ITS-90 coefficient tables, one module per alloy type."""
from __future__ import annotations

from typing import Dict

from ..calibration import CalibrationTable
from .b_type import B_TYPE
from .e_type import E_TYPE
from .j_type import J_TYPE
from .k_type import K_TYPE
from .n_type import N_TYPE
from .r_type import R_TYPE
from .s_type import S_TYPE
from .t_type import T_TYPE

TABLES: Dict[str, CalibrationTable] = {
    table.name: table
    for table in (B_TYPE, E_TYPE, J_TYPE, K_TYPE, N_TYPE, R_TYPE, S_TYPE, T_TYPE)
}


def get_table(name: str) -> CalibrationTable:
    """Look up a table by its type letter (case-insensitive)."""

    key = name.strip().upper()
    if key.endswith("TYPE"):
        key = key[: -len("TYPE")].rstrip("-_ ")
    try:
        return TABLES[key]
    except KeyError as exc:
        raise ValueError(f"Unknown thermocouple type '{name}'. Expected one of {sorted(TABLES)}") from exc


__all__ = [
    "TABLES",
    "get_table",
    "B_TYPE",
    "E_TYPE",
    "J_TYPE",
    "K_TYPE",
    "N_TYPE",
    "R_TYPE",
    "S_TYPE",
    "T_TYPE",
]
