from __future__ import annotations

from pathlib import Path

import numpy as np
import pandas as pd
import pytest

from thermocouple.calibration import DomainError, resolve
from thermocouple.reference import check_reference, generate_table, load_reference_csv
from thermocouple.reporting import export_report
from thermocouple.tables import B_TYPE, K_TYPE, TABLES


def test_generate_table_covers_range() -> None:
    df = generate_table(resolve(K_TYPE), step=1.0)
    assert list(df.columns) == ["temperature_c", "voltage_mv", "inverse_c", "roundtrip_error_c"]
    assert len(df) == 1372 + 270 + 1
    assert df["temperature_c"].iloc[0] == -270.0
    assert df["temperature_c"].iloc[-1] == 1372.0

    # inverse is published from -200 °C and excludes 1372 °C
    defined = df.dropna(subset=["inverse_c"])
    assert defined["temperature_c"].min() == -200.0
    assert defined["temperature_c"].max() == 1371.0
    assert defined["roundtrip_error_c"].abs().max() <= 0.05


def test_generate_table_marks_undefined_inverse() -> None:
    df = generate_table(resolve(B_TYPE), start=200.0, stop=300.0, step=10.0)
    assert len(df) == 11
    below = df[df["temperature_c"] < 250.0]
    assert below["inverse_c"].isna().all()
    assert df[df["temperature_c"] >= 250.0]["inverse_c"].notna().all()


def test_generate_table_validates_arguments() -> None:
    calibration = resolve(K_TYPE)
    with pytest.raises(ValueError):
        generate_table(calibration, step=0.0)
    with pytest.raises(ValueError):
        generate_table(calibration, start=100.0, stop=50.0)
    with pytest.raises(DomainError):
        generate_table(calibration, start=1300.0, stop=1400.0)


def test_load_reference_csv_filters_by_type(its90_csv: Path) -> None:
    reference = load_reference_csv(its90_csv, type_name="k")
    assert set(reference.dataframe["type"]) == {"K"}
    assert np.all(np.diff(reference.temperature) > 0)
    assert reference.voltage[reference.temperature == 100.0][0] == pytest.approx(4.096)


def test_load_reference_csv_requires_type_for_mixed_file(its90_csv: Path) -> None:
    with pytest.raises(ValueError, match="type_name"):
        load_reference_csv(its90_csv)


def test_load_reference_csv_errors(tmp_path: Path) -> None:
    bad = tmp_path / "bad.csv"
    pd.DataFrame({"temperature_c": [0.0], "millivolts": [0.0]}).to_csv(bad, index=False)
    with pytest.raises(ValueError, match="Missing required columns"):
        load_reference_csv(bad)

    other = tmp_path / "other.csv"
    pd.DataFrame({"type": ["J"], "temperature_c": [0.0], "voltage_mv": [0.0]}).to_csv(other, index=False)
    with pytest.raises(ValueError, match="No reference rows"):
        load_reference_csv(other, type_name="K")

    with pytest.raises(FileNotFoundError):
        load_reference_csv(tmp_path / "missing.csv")


@pytest.mark.parametrize("name", sorted(TABLES))
def test_check_reference_passes(name: str, its90_csv: Path) -> None:
    calibration = resolve(TABLES[name])
    report = check_reference(calibration, load_reference_csv(its90_csv, type_name=name))
    assert report.passed
    assert report.type_name == name
    assert report.max_forward_error <= report.e_tolerance
    assert len(report.residuals) >= 3


def test_check_reference_flags_wrong_table(tmp_path: Path) -> None:
    path = tmp_path / "shifted.csv"
    pd.DataFrame({"temperature_c": [100.0, 200.0], "voltage_mv": [4.106, 8.148]}).to_csv(path, index=False)
    report = check_reference(resolve(K_TYPE), load_reference_csv(path))
    assert not report.passed
    assert report.forward_failures == 2
    assert report.inverse_failures == 0


def test_export_report_writes_files(tmp_path: Path, its90_csv: Path) -> None:
    report = check_reference(resolve(K_TYPE), load_reference_csv(its90_csv, type_name="K"))
    out = tmp_path / "report"
    export_report(report, out, input_path=its90_csv)

    summary = pd.read_csv(out / "summary.csv")
    assert list(summary["function"]) == ["forward", "inverse"]
    assert (summary["failures"] == 0).all()
    residuals = pd.read_csv(out / "residuals.csv")
    assert len(residuals) == len(report.residuals)
    text = (out / "report.md").read_text(encoding="utf-8")
    assert "# Type K ITS-90 Reference Check" in text
    assert "PASS" in text
