"""Month-by-month corpus accumulation for one growth scenario."""

from __future__ import annotations

import math

from .errors import ArithmeticDegenerateError, InvalidInputError


def months_to_simulate(start_month: int, projection_years: int) -> int:
    """Months from ``start_month`` of the first year to December of the last."""
    return (12 - start_month + 1) + 12 * (projection_years - 1)


def simulate_accumulation(
    starting_corpus: float,
    monthly_contribution: float,
    annual_growth_rate_pct: float,
    start_year: int,
    start_month: int,
    projection_years: int,
    current_age: int,
    contribution_cutoff_age: int,
) -> dict[int, float]:
    """Year-end corpus values, one per projected calendar year.

    Each month the corpus grows by ``annual_growth_rate_pct / 12 / 100`` and
    then receives the contribution. Contributions stop from the month in
    which the simulated age reaches ``contribution_cutoff_age``. The first
    year runs from ``start_month`` to December and is recorded like any
    other year.
    """
    if not 1 <= start_month <= 12:
        raise InvalidInputError("start_month: must be between 1 and 12")
    if projection_years < 1:
        raise InvalidInputError("projection_years: must be >= 1")

    monthly_rate = annual_growth_rate_pct / 12 / 100
    contribution_months = (contribution_cutoff_age - current_age) * 12

    corpus = float(starting_corpus)
    year, month = start_year, start_month
    series: dict[int, float] = {}
    for elapsed in range(months_to_simulate(start_month, projection_years)):
        contribution = monthly_contribution if elapsed < contribution_months else 0.0
        corpus = corpus * (1 + monthly_rate) + contribution
        if month == 12:
            if not math.isfinite(corpus):
                raise ArithmeticDegenerateError(
                    f"corpus overflows by {year} at annual_growth_rate_pct={annual_growth_rate_pct:g}"
                )
            series[year] = corpus
            year += 1
            month = 1
        else:
            month += 1
    return series
