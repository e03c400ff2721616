"""Post-retirement drawdown sustainability."""

from __future__ import annotations

from dataclasses import dataclass
import math

from .errors import ArithmeticDegenerateError, InvalidInputError

DEFAULT_MAX_YEARS = 60


@dataclass(frozen=True, slots=True)
class DrawdownResult:
    years_lasted: int
    end_age: int
    sustainable: bool


def _check_tax_rate(annual_tax_rate_pct: float) -> None:
    if not 0 <= annual_tax_rate_pct < 100:
        raise ArithmeticDegenerateError(
            f"annual_tax_rate_pct={annual_tax_rate_pct:g} leaves no net withdrawal; must be >= 0 and < 100"
        )


def gross_up(net_amount: float, annual_tax_rate_pct: float) -> float:
    """Pre-tax withdrawal that leaves ``net_amount`` after a flat tax."""
    _check_tax_rate(annual_tax_rate_pct)
    return net_amount / (1 - annual_tax_rate_pct / 100)


def simulate_drawdown(
    starting_corpus: float,
    retirement_start_age: int,
    inflation_rate_pct: float,
    annual_growth_rate_pct: float,
    annual_tax_rate_pct: float,
    initial_annual_expense: float,
    max_years: int = DEFAULT_MAX_YEARS,
) -> DrawdownResult:
    """Years a corpus lasts under inflating, tax-grossed yearly withdrawals.

    Each year the corpus grows first, then the grossed-up expense is
    withdrawn. Depletion (corpus <= 0) ends the run; the depleting year
    does not count as lasted. Surviving ``max_years`` is sustainable.
    """
    _check_tax_rate(annual_tax_rate_pct)
    if max_years < 1:
        raise InvalidInputError("max_years: must be >= 1")

    corpus = float(starting_corpus)
    expense = float(initial_annual_expense)
    age = retirement_start_age
    years_lasted = 0
    for _ in range(max_years):
        corpus *= 1 + annual_growth_rate_pct / 100
        corpus -= gross_up(expense, annual_tax_rate_pct)
        if not math.isfinite(corpus):
            raise ArithmeticDegenerateError(
                f"drawdown corpus is not finite by age {age} at annual_growth_rate_pct={annual_growth_rate_pct:g}"
            )
        if corpus <= 0:
            return DrawdownResult(years_lasted=years_lasted, end_age=age, sustainable=False)
        expense *= 1 + inflation_rate_pct / 100
        age += 1
        years_lasted += 1

    return DrawdownResult(years_lasted=max_years, end_age=retirement_start_age + max_years, sustainable=True)
