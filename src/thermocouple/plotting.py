"""Plotting helpers for calibration curves."""
from __future__ import annotations

from pathlib import Path
from typing import Any

import numpy as np
import pandas as pd


def generate_plots(table: pd.DataFrame, type_name: str, output_dir: Path) -> Path:
    """Plot E(T) and the inverse round-trip error of a generated *table*."""

    plt = _require_matplotlib()
    output_dir.mkdir(parents=True, exist_ok=True)
    fig, axes = plt.subplots(1, 2, figsize=(12, 5))

    _plot_forward(table, type_name, axes[0])
    _plot_roundtrip(table, type_name, axes[1])

    fig.tight_layout()
    out_path = output_dir / f"type_{type_name.lower()}.png"
    fig.savefig(out_path, dpi=200)
    plt.close(fig)
    return out_path


def _plot_forward(table: pd.DataFrame, type_name: str, ax) -> None:
    ax.plot(table["temperature_c"], table["voltage_mv"], color="black")
    ax.axhline(0.0, color="gray", linewidth=0.8, linestyle="--")
    ax.set_title(f"Type {type_name} E(T)")
    ax.set_xlabel("Temperature [°C]")
    ax.set_ylabel("Thermoelectric potential [mV]")


def _plot_roundtrip(table: pd.DataFrame, type_name: str, ax) -> None:
    defined = table.dropna(subset=["roundtrip_error_c"])
    ax.plot(defined["temperature_c"], defined["roundtrip_error_c"], color="tab:blue")
    if not defined.empty:
        worst = float(np.max(np.abs(defined["roundtrip_error_c"].to_numpy(dtype=float))))
        ax.axhline(worst, color="tab:red", linewidth=0.8, linestyle=":", label=f"±{worst:.3g} °C")
        ax.axhline(-worst, color="tab:red", linewidth=0.8, linestyle=":")
        ax.legend(loc="best")
    ax.set_title(f"Type {type_name} T(E(T)) - T")
    ax.set_xlabel("Temperature [°C]")
    ax.set_ylabel("Round-trip error [°C]")


def _require_matplotlib() -> Any:
    home_cache = Path.home() / ".cache" / "fontconfig"
    try:
        home_cache.mkdir(parents=True, exist_ok=True)
    except OSError as exc:
        raise RuntimeError("matplotlib cannot write font cache in this environment") from exc

    try:
        import matplotlib
        matplotlib.use("Agg", force=True)
        import matplotlib.pyplot as plt  # type: ignore
    except ImportError as exc:  # pragma: no cover - optional dependency
        raise RuntimeError("matplotlib is required for plotting; install thermocouple[plot]") from exc
    except Exception as exc:  # pragma: no cover - environment issues
        raise RuntimeError(f"matplotlib initialisation failed: {exc}") from exc
    return plt
