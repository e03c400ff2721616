"""Yearly nominal expense projection."""

from __future__ import annotations

import math

from .errors import ArithmeticDegenerateError, InvalidInputError


def project_expenses(
    monthly_expense: float,
    inflation_rate_pct: float,
    start_year: int,
    horizon_years: int,
) -> dict[int, float]:
    """Annual expense for ``start_year`` through ``start_year + horizon_years``.

    Each year is computed directly from the base amount rather than by
    repeated multiplication, so every entry is exactly
    ``monthly_expense * 12 * (1 + inflation/100) ** i``.
    """
    if monthly_expense <= 0:
        raise InvalidInputError("monthly_expense: must be > 0")
    if inflation_rate_pct < 0:
        raise InvalidInputError("inflation_rate_pct: must be >= 0")
    if horizon_years < 1:
        raise InvalidInputError("horizon_years: must be >= 1")

    base = monthly_expense * 12
    growth = 1.0 + inflation_rate_pct / 100.0
    try:
        schedule = {start_year + i: base * growth**i for i in range(horizon_years + 1)}
    except OverflowError as exc:
        raise ArithmeticDegenerateError(f"expense schedule overflows at inflation_rate_pct={inflation_rate_pct:g}") from exc
    if not math.isfinite(schedule[start_year + horizon_years]):
        raise ArithmeticDegenerateError(f"expense schedule overflows at inflation_rate_pct={inflation_rate_pct:g}")
    return schedule


def expense_at(schedule: dict[int, float], year: int) -> float:
    if year not in schedule:
        first, last = min(schedule), max(schedule)
        raise InvalidInputError(f"year {year} is outside the expense schedule {first}-{last}")
    return schedule[year]
