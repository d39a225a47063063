"""Command line interface for the thermocouple package."""
from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Optional, Type

import typer

from .calibration import Calibration, DomainError
from .config import EngineConfig, load_config
from .plotting import generate_plots
from .reference import check_reference, generate_table, load_reference_csv
from .reporting import export_report
from .sensor import Thermocouple, thermocouple
from .tables import get_table
from .units import Millivolts, Temperature, temperature_unit

app = typer.Typer(
    add_completion=False,
    context_settings={"help_option_names": ["-h", "--help"]},
    help="NIST ITS-90 thermocouple conversions.",
)

TYPE_HELP = "Thermocouple type (B, E, J, K, N, R, S, T)."


@app.callback()
def main(
    ctx: typer.Context,
    config_path: Optional[Path] = typer.Option(
        None, "--config", "-c", help="Path to an engine config JSON file."
    ),
    override: Optional[List[str]] = typer.Option(
        None,
        "--set",
        help="Override config keys, e.g. --set precision=single --set domain_check=extrapolate",
    ),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Enable debug logging."),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    ctx.obj = {"config_path": config_path, "overrides": list(override or [])}


def _config(ctx: typer.Context) -> EngineConfig:
    options = ctx.obj or {}
    try:
        return load_config(options.get("config_path"), options.get("overrides") or None)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--config/--set") from exc


def _calibration(ctx: typer.Context, type_name: str) -> Calibration:
    try:
        return _config(ctx).calibration(get_table(type_name).name)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="TYPE") from exc


def _sensor(ctx: typer.Context, type_name: str, reference: Temperature) -> Thermocouple:
    config = _config(ctx)
    try:
        return thermocouple(type_name, reference=reference, config=config)
    except DomainError as exc:
        raise typer.BadParameter(str(exc), param_hint="--ref") from exc
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="TYPE") from exc


def _unit(symbol: str, hint: str) -> Type[Temperature]:
    try:
        return temperature_unit(symbol)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint=hint) from exc


@app.command()
def temperature(
    ctx: typer.Context,
    type_name: str = typer.Argument(..., metavar="TYPE", help=TYPE_HELP),
    voltage: float = typer.Argument(..., help="Measured thermoelectric potential in mV."),
    reference: float = typer.Option(25.0, "--ref", help="Reference junction temperature."),
    reference_unit: str = typer.Option("C", "--ref-unit", help="Unit of --ref (C, K, F, R, Re)."),
    unit: str = typer.Option("C", "--unit", "-u", help="Output unit (C, K, F, R, Re)."),
) -> None:
    """Convert a measured voltage to the hot junction temperature."""

    ref = _unit(reference_unit, "--ref-unit")(reference)
    out_unit = _unit(unit, "--unit")
    sensor = _sensor(ctx, type_name, ref)
    try:
        result = sensor.sense_temperature(Millivolts(voltage), out_unit)
    except DomainError as exc:
        typer.echo(f"Out of range: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    typer.echo(str(result))


@app.command()
def voltage(
    ctx: typer.Context,
    type_name: str = typer.Argument(..., metavar="TYPE", help=TYPE_HELP),
    value: float = typer.Argument(..., metavar="TEMPERATURE", help="Hot junction temperature."),
    unit: str = typer.Option("C", "--unit", "-u", help="Unit of TEMPERATURE (C, K, F, R, Re)."),
    reference: float = typer.Option(25.0, "--ref", help="Reference junction temperature."),
    reference_unit: str = typer.Option("C", "--ref-unit", help="Unit of --ref (C, K, F, R, Re)."),
) -> None:
    """Predict the instrument voltage for a hot junction temperature."""

    hot = _unit(unit, "--unit")(value)
    ref = _unit(reference_unit, "--ref-unit")(reference)
    sensor = _sensor(ctx, type_name, ref)
    try:
        result = sensor.sense_voltage(hot)
    except DomainError as exc:
        typer.echo(f"Out of range: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    typer.echo(str(result))


@app.command()
def table(
    ctx: typer.Context,
    type_name: str = typer.Argument(..., metavar="TYPE", help=TYPE_HELP),
    out: Path = typer.Option(..., "--out", help="Destination CSV."),
    start: Optional[float] = typer.Option(None, "--start", help="First temperature in °C (default: range start)."),
    stop: Optional[float] = typer.Option(None, "--stop", help="Last temperature in °C (default: range end)."),
    step: float = typer.Option(1.0, "--step", help="Temperature step in °C."),
) -> None:
    """Tabulate E(T) and the inverse round trip."""

    calibration = _calibration(ctx, type_name)
    try:
        df = generate_table(calibration, start=start, stop=stop, step=step)
    except DomainError as exc:
        raise typer.BadParameter(str(exc), param_hint="--start/--stop") from exc
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--start/--stop/--step") from exc
    out.parent.mkdir(parents=True, exist_ok=True)
    df.to_csv(out, index=False)
    typer.echo(f"Wrote {len(df)} rows to {out}")


@app.command()
def check(
    ctx: typer.Context,
    type_name: str = typer.Argument(..., metavar="TYPE", help=TYPE_HELP),
    input_path: Path = typer.Option(
        ..., "--in", help="Reference CSV (temperature_c, voltage_mv[, type]).", exists=True, readable=True
    ),
    report_dir: Optional[Path] = typer.Option(None, "--report", help="Output directory for reports."),
) -> None:
    """Check the conversions against a published reference table."""

    calibration = _calibration(ctx, type_name)
    try:
        reference = load_reference_csv(input_path, type_name=calibration.name)
        report = check_reference(calibration, reference)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--in") from exc

    if report_dir is not None:
        export_report(report, report_dir, input_path=input_path)
        typer.echo(f"Report written to {report_dir}")

    typer.echo(
        f"Type {report.type_name}: max E error {report.max_forward_error:.6f} mV "
        f"(±{report.e_tolerance:g}), max T error {report.max_inverse_error:.4f} °C (±{report.t_tolerance:g})"
    )
    if not report.passed:
        typer.echo("FAIL", err=True)
        raise typer.Exit(code=1)
    typer.echo("PASS")


@app.command()
def plot(
    ctx: typer.Context,
    type_name: str = typer.Argument(..., metavar="TYPE", help=TYPE_HELP),
    out_dir: Path = typer.Option(Path("plots"), "--out", help="Target directory for the figure."),
    step: float = typer.Option(1.0, "--step", help="Temperature step in °C."),
) -> None:
    """Plot E(T) and the inverse round-trip error."""

    calibration = _calibration(ctx, type_name)
    try:
        df = generate_table(calibration, step=step)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--step") from exc
    try:
        figure_path = generate_plots(df, calibration.name, out_dir)
    except RuntimeError as exc:
        typer.echo(f"[warning] plotting skipped: {exc}")
        raise typer.Exit(code=1) from exc
    typer.echo(f"Figure written to {figure_path}")


@app.command("types")
def list_types(ctx: typer.Context) -> None:
    """List the enabled thermocouple types and their ranges."""

    config = _config(ctx)
    for name in config.types:
        calibration = config.calibration(name)
        t_low, t_high = calibration.temperature_range
        e_low, e_high = calibration.table.inverse.lower, calibration.table.inverse.upper
        typer.echo(
            f"{name}: {calibration.table.description}; "
            f"E(T) {t_low:g}..{t_high:g} °C, T(E) {e_low:g}..{e_high:g} mV"
        )


def run() -> None:
    app()


if __name__ == "__main__":  # pragma: no cover
    run()
