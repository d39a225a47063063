"""Report writers for reference-table checks."""
from __future__ import annotations

import logging
from pathlib import Path

import pandas as pd

from .reference import ToleranceReport

logger = logging.getLogger(__name__)


def export_report(
    report: ToleranceReport,
    output_dir: Path,
    *,
    figure_path: Path | None = None,
    input_path: Path | None = None,
) -> None:
    """Persist residuals, summary and markdown report to *output_dir*."""

    output_dir.mkdir(parents=True, exist_ok=True)
    _write_summary_csv(report, output_dir)
    _write_residuals_csv(report, output_dir)
    _write_report_md(report, output_dir, figure_path=figure_path, input_path=input_path)
    logger.info("Reference report for type %s written to %s", report.type_name, output_dir)


def _write_summary_csv(report: ToleranceReport, output_dir: Path) -> None:
    rows = [
        {
            "function": "forward",
            "unit": "mV",
            "max_abs_error": report.max_forward_error,
            "tolerance": report.e_tolerance,
            "failures": report.forward_failures,
        },
        {
            "function": "inverse",
            "unit": "C",
            "max_abs_error": report.max_inverse_error,
            "tolerance": report.t_tolerance,
            "failures": report.inverse_failures,
        },
    ]
    pd.DataFrame(rows).to_csv(output_dir / "summary.csv", index=False)


def _write_residuals_csv(report: ToleranceReport, output_dir: Path) -> None:
    report.residuals.to_csv(output_dir / "residuals.csv", index=False)


def _write_report_md(
    report: ToleranceReport,
    output_dir: Path,
    *,
    figure_path: Path | None,
    input_path: Path | None,
) -> None:
    lines: list[str] = []
    lines.append(f"# Type {report.type_name} ITS-90 Reference Check")
    if input_path is not None:
        lines.append(f"*Reference file:* `{input_path}`  ")
    lines.append(f"*Points:* {len(report.residuals)}  ")
    lines.append(f"*Precision:* {report.precision}  ")
    lines.append(f"*Result:* {'PASS' if report.passed else 'FAIL'}  ")
    lines.append("")

    lines.append("## Deviations")
    lines.append("| Function | Max error | Tolerance | Failures |")
    lines.append("| --- | ---: | ---: | ---: |")
    lines.append(
        f"| E(T) | {report.max_forward_error:.6g} mV | ±{report.e_tolerance:g} mV | {report.forward_failures} |"
    )
    lines.append(
        f"| T(E) | {report.max_inverse_error:.6g} °C | ±{report.t_tolerance:g} °C | {report.inverse_failures} |"
    )
    lines.append("")

    if figure_path is not None:
        lines.append(f"![Reference plots]({figure_path.name})")
        lines.append("")

    lines.append("### Notes")
    lines.append("- E(T) is compared against the tabulated voltage.")
    lines.append(
        "- T(E) is evaluated on the computed E(T), only where the inverse function is published."
    )

    (output_dir / "report.md").write_text("\n".join(lines), encoding="utf-8")
