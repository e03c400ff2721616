"""CLI entry point for fitrack."""

from __future__ import annotations

import argparse
from dataclasses import replace
import logging
from pathlib import Path
import sys

from .projection import run_projection
from .report import render_report, summary_lines, write_report
from .schema import SchemaError, load_inputs
from .validate import check_input_sanity

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Financial independence milestone tracker")
    parser.add_argument("inputs", help="Path to projection inputs JSON file")
    parser.add_argument("-o", "--output", default="report.json", help="Output JSON path")
    parser.add_argument("--conservative", type=float, help="Override conservative CAGR (percent)")
    parser.add_argument("--aggressive", type=float, help="Override aggressive CAGR (percent)")
    parser.add_argument("--years", type=int, help="Override projection years")
    parser.add_argument("--validate", action="store_true", help="Validate inputs only")
    parser.add_argument("--summary", action="store_true", help="Print text summary to stdout")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    return parser


def _print_validation(errors: list[str], warnings: list[str]) -> None:
    for warning in warnings:
        print(f"WARNING: {warning}")
    for error in errors:
        print(f"ERROR: {error}", file=sys.stderr)


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        inputs = load_inputs(args.inputs)
    except (SchemaError, OSError, ValueError) as exc:
        print(f"Failed to load inputs: {exc}", file=sys.stderr)
        return 2

    overrides: dict[str, float | int] = {}
    if args.conservative is not None:
        overrides["conservative_cagr_pct"] = args.conservative
    if args.aggressive is not None:
        overrides["aggressive_cagr_pct"] = args.aggressive
    if args.years is not None:
        overrides["projection_years"] = args.years
    if overrides:
        logger.debug("applying overrides %s", overrides)
        inputs = replace(inputs, **overrides)

    outcome = run_projection(inputs)
    sanity = check_input_sanity(inputs)
    _print_validation(outcome.validation.errors, sanity.warnings)
    if outcome.not_computable is not None:
        print(f"ERROR: not computable: {outcome.not_computable}", file=sys.stderr)
        return 1
    if outcome.report is None:
        return 1

    if args.validate:
        print("Inputs are valid.")
        return 0

    write_report(args.output, render_report(outcome.report))
    if args.summary:
        for line in summary_lines(outcome.report):
            print(line)
    print(f"Wrote report to {Path(args.output)}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
