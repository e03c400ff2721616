"""Plain-data report export."""

from __future__ import annotations

from dataclasses import asdict
import json
from pathlib import Path
from typing import Any

from .projection import Report


def _by_year(mapping: dict[int, Any]) -> dict[str, Any]:
    return {str(year): value for year, value in mapping.items()}


def report_to_dict(report: Report) -> dict[str, Any]:
    """JSON-compatible view of ``report``; year keys become strings."""
    return {
        "inputs": asdict(report.inputs),
        "expense_schedule": _by_year(report.expense_schedule),
        "expense_at_fire": report.expense_at_fire,
        "targets": report.targets.as_dict(),
        "accumulation": {name: _by_year(series) for name, series in report.accumulation.items()},
        "first_achieved_year": {name: dict(years) for name, years in report.first_achieved_year.items()},
        "status": {
            name: {
                str(year): {
                    "achieved": list(row.achieved),
                    "newly_achieved": list(row.newly_achieved),
                    "fully_achieved": row.fully_achieved,
                }
                for year, row in rows.items()
            }
            for name, rows in report.status.items()
        },
        "drawdown": {
            name: {milestone: asdict(result) for milestone, result in results.items()}
            for name, results in report.drawdown.items()
        },
        "progress": {milestone: asdict(row) for milestone, row in report.progress.items()},
    }


def render_report(report: Report) -> str:
    return json.dumps(report_to_dict(report), indent=2)


def write_report(path: str | Path, content: str) -> None:
    target = Path(path)
    target.parent.mkdir(parents=True, exist_ok=True)
    target.write_text(content, encoding="utf-8")


def summary_lines(report: Report) -> list[str]:
    """Short plain-text summary for the command line."""
    lines = [
        f"Years: {report.years[0]}-{report.years[-1]}",
        f"Expense at FIRE ({report.inputs.fire_year}): {report.expense_at_fire:,.0f}",
    ]
    for milestone, value in report.targets.as_dict().items():
        lines.append(f"Target {milestone}: {value:,.0f}")
    for name, reached in report.first_achieved_year.items():
        cells = ", ".join(f"{m}={year if year is not None else 'unreached'}" for m, year in reached.items())
        lines.append(f"First achieved ({name}): {cells}")
    for name, results in report.drawdown.items():
        for milestone, result in results.items():
            verdict = "sustainable" if result.sustainable else f"depleted at age {result.end_age}"
            lines.append(f"Drawdown ({name}, {milestone}): {result.years_lasted} years, {verdict}")
    return lines
