"""Consolidated validation and sanity checks for projection inputs."""

from __future__ import annotations

from dataclasses import dataclass, field
import math

from .schema import ProjectionInputs


@dataclass(slots=True)
class ValidationResult:
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)
    field_errors: dict[str, list[str]] = field(default_factory=dict)

    @property
    def is_valid(self) -> bool:
        return not self.errors

    def add_error(self, path: str, message: str) -> None:
        self.errors.append(f"{path}: {message}")
        self.field_errors.setdefault(path, []).append(message)


NUMERIC_FIELDS = (
    "current_age",
    "fire_age",
    "coast_age",
    "monthly_expense",
    "inflation_rate_pct",
    "start_month",
    "start_year",
    "current_net_worth",
    "monthly_contribution",
    "projection_years",
    "conservative_cagr_pct",
    "aggressive_cagr_pct",
    "retirement_tax_rate_pct",
    "drawdown_max_years",
)


def _check_finite(result: ValidationResult, inputs: ProjectionInputs) -> set[str]:
    bad: set[str] = set()
    for name in NUMERIC_FIELDS:
        if not math.isfinite(getattr(inputs, name)):
            result.add_error(name, "must be a finite number")
            bad.add(name)
    return bad


def validate_inputs(inputs: ProjectionInputs) -> ValidationResult:
    """Run every input rule once and collect field-level errors."""
    result = ValidationResult()
    bad = _check_finite(result, inputs)

    if not bad & {"current_age", "fire_age", "coast_age"}:
        if inputs.fire_age <= inputs.current_age:
            result.add_error("fire_age", "must be > current_age")
        if not inputs.current_age < inputs.coast_age < inputs.fire_age:
            result.add_error("coast_age", "must be strictly between current_age and fire_age")

    if "monthly_expense" not in bad and inputs.monthly_expense <= 0:
        result.add_error("monthly_expense", "must be > 0")
    if "inflation_rate_pct" not in bad and inputs.inflation_rate_pct < 0:
        result.add_error("inflation_rate_pct", "must be >= 0")
    if "start_month" not in bad and not 1 <= inputs.start_month <= 12:
        result.add_error("start_month", "must be between 1 and 12")
    if "monthly_contribution" not in bad and inputs.monthly_contribution < 0:
        result.add_error("monthly_contribution", "must be >= 0")
    if "projection_years" not in bad and inputs.projection_years <= 0:
        result.add_error("projection_years", "must be >= 1")
    if "drawdown_max_years" not in bad and inputs.drawdown_max_years <= 0:
        result.add_error("drawdown_max_years", "must be >= 1")
    if "retirement_tax_rate_pct" not in bad and not 0 <= inputs.retirement_tax_rate_pct < 100:
        result.add_error("retirement_tax_rate_pct", "must be >= 0 and < 100")
    for name in ("conservative_cagr_pct", "aggressive_cagr_pct"):
        if name not in bad and getattr(inputs, name) <= -100:
            result.add_error(name, "must be > -100")

    return result


def check_input_sanity(inputs: ProjectionInputs) -> ValidationResult:
    """Warn about assumptions that are valid but unusual."""
    result = ValidationResult()

    if inputs.inflation_rate_pct > 10:
        result.warnings.append(f"inflation_rate_pct: {inputs.inflation_rate_pct:g}% is unusually high")
    for name in ("conservative_cagr_pct", "aggressive_cagr_pct"):
        value = getattr(inputs, name)
        if value > 30:
            result.warnings.append(f"{name}: {value:g}% is unusually high for a long-run growth rate")
        elif value < 0:
            result.warnings.append(f"{name}: {value:g}% means the corpus shrinks every year")
    if inputs.conservative_cagr_pct > inputs.aggressive_cagr_pct:
        result.warnings.append("conservative_cagr_pct: is greater than aggressive_cagr_pct")
    if inputs.projection_years < inputs.years_to_fire:
        result.warnings.append(
            f"projection_years: horizon ends before the FIRE year {inputs.fire_year}; "
            "later milestones will show as unreached"
        )
    if inputs.current_net_worth <= 0:
        result.warnings.append("current_net_worth: required growth rates are not computable for a non-positive corpus")
    if inputs.retirement_tax_rate_pct > 50:
        result.warnings.append(f"retirement_tax_rate_pct: {inputs.retirement_tax_rate_pct:g}% is unusually high")

    return result
