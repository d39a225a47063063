from __future__ import annotations

from pathlib import Path

import pandas as pd
import pytest
from typer.testing import CliRunner

from thermocouple.cli import app

runner = CliRunner()


def test_temperature_command() -> None:
    result = runner.invoke(app, ["temperature", "K", "1.1"])
    assert result.exit_code == 0, result.output
    output = result.output.strip()
    assert output.endswith("°C")
    assert abs(float(output[:-2]) - 51.9) < 0.1


def test_temperature_command_in_kelvin_with_reference() -> None:
    result = runner.invoke(app, ["temperature", "J", "1.1", "--ref", "0", "--unit", "K"])
    assert result.exit_code == 0, result.output
    output = result.output.strip()
    assert output.endswith("K")
    assert abs(float(output[:-1]) - (21.54 + 273.15)) < 0.1


def test_voltage_command() -> None:
    result = runner.invoke(app, ["voltage", "K", "100", "--ref", "0"])
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "4.096mV"

    result = runner.invoke(app, ["voltage", "K", "212", "--unit", "F", "--ref", "32", "--ref-unit", "F"])
    assert result.exit_code == 0, result.output
    assert result.output.strip() == "4.096mV"


def test_out_of_range_exits_with_error() -> None:
    result = runner.invoke(app, ["temperature", "B", "20"])
    assert result.exit_code == 1
    assert "Out of range" in result.output

    result = runner.invoke(app, ["voltage", "T", "500"])
    assert result.exit_code == 1


def test_unknown_type_and_unit_are_usage_errors() -> None:
    assert runner.invoke(app, ["temperature", "Q", "1.0"]).exit_code == 2
    assert runner.invoke(app, ["temperature", "K", "1.0", "--unit", "X"]).exit_code == 2


def test_disabled_type_is_usage_error() -> None:
    result = runner.invoke(app, ["--set", "types=K", "temperature", "J", "1.1"])
    assert result.exit_code == 2
    assert runner.invoke(app, ["--set", "types=K", "temperature", "K", "1.1"]).exit_code == 0


def test_check_command(tmp_path: Path) -> None:
    data = Path(__file__).parent / "data" / "its90_points.csv"
    report_dir = tmp_path / "report"
    result = runner.invoke(app, ["check", "K", "--in", str(data), "--report", str(report_dir)])
    assert result.exit_code == 0, result.output
    assert "PASS" in result.output
    assert (report_dir / "report.md").exists()


def test_check_command_single_precision() -> None:
    data = Path(__file__).parent / "data" / "its90_points.csv"
    result = runner.invoke(app, ["--set", "precision=single", "check", "N", "--in", str(data)])
    assert result.exit_code == 0, result.output
    assert "PASS" in result.output


def test_table_command(tmp_path: Path) -> None:
    out = tmp_path / "tables" / "type_t.csv"
    result = runner.invoke(app, ["table", "T", "--out", str(out), "--start", "0", "--stop", "100", "--step", "10"])
    assert result.exit_code == 0, result.output
    df = pd.read_csv(out)
    assert len(df) == 11
    assert df["voltage_mv"].iloc[-1] == pytest.approx(4.279, abs=5e-4)


def test_table_and_plot_reject_non_positive_step(tmp_path: Path) -> None:
    result = runner.invoke(app, ["plot", "K", "--out", str(tmp_path), "--step", "0"])
    assert result.exit_code == 2
    assert not isinstance(result.exception, ValueError)

    result = runner.invoke(app, ["table", "K", "--out", str(tmp_path / "k.csv"), "--step", "0"])
    assert result.exit_code == 2


def test_types_command() -> None:
    result = runner.invoke(app, ["types"])
    assert result.exit_code == 0, result.output
    lines = result.output.strip().splitlines()
    assert len(lines) == 8
    assert lines[0].startswith("B:")

    result = runner.invoke(app, ["--set", "types=K,T", "types"])
    assert [line.split(":")[0] for line in result.output.strip().splitlines()] == ["K", "T"]


def test_config_file_option(tmp_path: Path) -> None:
    path = tmp_path / "engine.json"
    path.write_text('{"domain_check": "extrapolate"}', encoding="utf-8")
    result = runner.invoke(app, ["--config", str(path), "voltage", "T", "450", "--ref", "0"])
    assert result.exit_code == 0, result.output
    assert result.output.strip().endswith("mV")
