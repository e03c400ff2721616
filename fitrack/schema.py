"""Projection input dataclasses and JSON loading."""

from __future__ import annotations

from dataclasses import dataclass
import json
import math
from pathlib import Path
from typing import Any

CONSERVATIVE = "conservative"
AGGRESSIVE = "aggressive"
SCENARIO_NAMES = (CONSERVATIVE, AGGRESSIVE)

DEFAULT_DRAWDOWN_MAX_YEARS = 60
DEFAULT_CURRENCY = "INR"


class SchemaError(ValueError):
    """Raised when raw JSON cannot be parsed into schema objects."""


def _expect_dict(value: Any, path: str) -> dict[str, Any]:
    if not isinstance(value, dict):
        raise SchemaError(f"{path}: expected object")
    return value


def _require(data: dict[str, Any], key: str, path: str) -> Any:
    if key not in data:
        raise SchemaError(f"{path}.{key}: missing required field")
    return data[key]


def _optional(data: dict[str, Any], key: str, default: Any = None) -> Any:
    return data.get(key, default)


def _number(value: Any, path: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise SchemaError(f"{path}: expected number")
    return float(value)


def _integer(value: Any, path: str) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise SchemaError(f"{path}: expected integer")
    if not math.isfinite(value) or int(value) != value:
        raise SchemaError(f"{path}: expected integer")
    return int(value)


@dataclass(frozen=True, slots=True)
class GrowthScenario:
    name: str
    cagr_pct: float


@dataclass(frozen=True, slots=True)
class ProjectionInputs:
    current_age: int
    fire_age: int
    coast_age: int
    monthly_expense: float
    inflation_rate_pct: float
    start_month: int
    start_year: int
    current_net_worth: float
    monthly_contribution: float
    projection_years: int
    conservative_cagr_pct: float
    aggressive_cagr_pct: float
    retirement_tax_rate_pct: float
    drawdown_max_years: int = DEFAULT_DRAWDOWN_MAX_YEARS
    currency: str = DEFAULT_CURRENCY

    @property
    def years_to_fire(self) -> int:
        return self.fire_age - self.current_age

    @property
    def fire_year(self) -> int:
        return self.start_year + self.years_to_fire

    def scenarios(self) -> tuple[GrowthScenario, ...]:
        return (
            GrowthScenario(CONSERVATIVE, self.conservative_cagr_pct),
            GrowthScenario(AGGRESSIVE, self.aggressive_cagr_pct),
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any], path: str = "inputs") -> "ProjectionInputs":
        def _num(key: str) -> float:
            return _number(_require(data, key, path), f"{path}.{key}")

        def _int(key: str) -> int:
            return _integer(_require(data, key, path), f"{path}.{key}")

        currency = _optional(data, "currency", DEFAULT_CURRENCY)
        if not isinstance(currency, str):
            raise SchemaError(f"{path}.currency: expected string")
        return cls(
            current_age=_int("current_age"),
            fire_age=_int("fire_age"),
            coast_age=_int("coast_age"),
            monthly_expense=_num("monthly_expense"),
            inflation_rate_pct=_num("inflation_rate_pct"),
            start_month=_int("start_month"),
            start_year=_int("start_year"),
            current_net_worth=_num("current_net_worth"),
            monthly_contribution=_num("monthly_contribution"),
            projection_years=_int("projection_years"),
            conservative_cagr_pct=_num("conservative_cagr_pct"),
            aggressive_cagr_pct=_num("aggressive_cagr_pct"),
            retirement_tax_rate_pct=_num("retirement_tax_rate_pct"),
            drawdown_max_years=_integer(
                _optional(data, "drawdown_max_years", DEFAULT_DRAWDOWN_MAX_YEARS),
                f"{path}.drawdown_max_years",
            ),
            currency=currency,
        )


def load_inputs(path: str | Path) -> ProjectionInputs:
    """Load projection inputs JSON into an immutable record."""
    source = Path(path)
    raw = json.loads(source.read_text(encoding="utf-8"))
    return ProjectionInputs.from_dict(_expect_dict(raw, "inputs"))
