"""Distance from today's corpus to each milestone."""

from __future__ import annotations

from dataclasses import dataclass
import math

from .errors import ArithmeticDegenerateError
from .schema import ProjectionInputs
from .targets import COAST, MILESTONES, TargetSet

ACHIEVED = "achieved"
REQUIRED = "required"
NOT_COMPUTABLE = "not_computable"


@dataclass(frozen=True, slots=True)
class RequiredGrowth:
    status: str
    rate_pct: float | None = None
    reason: str | None = None


@dataclass(frozen=True, slots=True)
class MilestoneProgress:
    milestone: str
    target: float
    target_age: int
    target_year: int
    gap: float
    required_growth: RequiredGrowth


def required_cagr_pct(current: float, target: float, years: int) -> float:
    """Annual growth rate (percent) that turns ``current`` into ``target`` in ``years``."""
    if current <= 0:
        raise ArithmeticDegenerateError(f"current corpus {current:g} must be > 0")
    if target <= 0:
        raise ArithmeticDegenerateError(f"target {target:g} must be > 0")
    if years <= 0:
        raise ArithmeticDegenerateError(f"years to target {years} must be > 0")
    rate = ((target / current) ** (1 / years) - 1) * 100
    if not math.isfinite(rate):
        raise ArithmeticDegenerateError(f"required growth from {current:g} to {target:g} is not finite")
    return rate


def _required_growth(current: float, target: float, years: int) -> RequiredGrowth:
    if current - target >= 0:
        return RequiredGrowth(status=ACHIEVED)
    try:
        rate = required_cagr_pct(current, target, years)
    except ArithmeticDegenerateError as exc:
        return RequiredGrowth(status=NOT_COMPUTABLE, reason=str(exc))
    return RequiredGrowth(status=REQUIRED, rate_pct=rate)


def milestone_progress(inputs: ProjectionInputs, targets: TargetSet) -> dict[str, MilestoneProgress]:
    out: dict[str, MilestoneProgress] = {}
    for milestone in MILESTONES:
        target = targets.value(milestone)
        target_age = inputs.coast_age if milestone == COAST else inputs.fire_age
        out[milestone] = MilestoneProgress(
            milestone=milestone,
            target=target,
            target_age=target_age,
            target_year=inputs.start_year + (target_age - inputs.current_age),
            gap=inputs.current_net_worth - target,
            required_growth=_required_growth(inputs.current_net_worth, target, target_age - inputs.current_age),
        )
    return out
