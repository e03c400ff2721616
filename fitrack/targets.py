"""Corpus thresholds for the four financial independence milestones."""

from __future__ import annotations

from dataclasses import dataclass
import math
from typing import Final

from .errors import ArithmeticDegenerateError, InvalidInputError

LEAN = "lean"
COAST = "coast"
FIRE = "fire"
FAT = "fat"

# Escalating order, used for folds and reporting.
MILESTONES: Final[tuple[str, ...]] = (LEAN, COAST, FIRE, FAT)

# Annual-expense multiples (safe withdrawal rates of ~6.7%, 4% and 2.5%).
LEAN_MULTIPLE: Final[float] = 15.0
FIRE_MULTIPLE: Final[float] = 25.0
FAT_MULTIPLE: Final[float] = 40.0


@dataclass(frozen=True, slots=True)
class TargetSet:
    lean: float
    coast: float
    fire: float
    fat: float

    def value(self, milestone: str) -> float:
        if milestone not in MILESTONES:
            raise KeyError(milestone)
        return getattr(self, milestone)

    def as_dict(self) -> dict[str, float]:
        return {milestone: getattr(self, milestone) for milestone in MILESTONES}


def coast_target(fire_target: float, conservative_cagr_pct: float, fire_age: int, coast_age: int) -> float:
    """Corpus at ``coast_age`` that grows into ``fire_target`` by ``fire_age`` with no contributions."""
    if fire_age <= coast_age:
        return fire_target
    base = 1.0 + conservative_cagr_pct / 100.0
    if base <= 0:
        raise ArithmeticDegenerateError(f"growth base {base:g} is not positive for conservative_cagr_pct={conservative_cagr_pct:g}")
    try:
        discount = base ** (fire_age - coast_age)
    except OverflowError as exc:
        raise ArithmeticDegenerateError(f"coast discount overflows at conservative_cagr_pct={conservative_cagr_pct:g}") from exc
    return fire_target / discount


def compute_targets(
    expense_at_fire: float,
    conservative_cagr_pct: float,
    current_age: int,
    fire_age: int,
    coast_age: int,
) -> TargetSet:
    if fire_age <= coast_age:
        raise InvalidInputError("coast_age: must be < fire_age")
    if fire_age <= current_age:
        raise InvalidInputError("fire_age: must be > current_age")

    fire = expense_at_fire * FIRE_MULTIPLE
    targets = TargetSet(
        lean=expense_at_fire * LEAN_MULTIPLE,
        coast=coast_target(fire, conservative_cagr_pct, fire_age, coast_age),
        fire=fire,
        fat=expense_at_fire * FAT_MULTIPLE,
    )
    if not all(math.isfinite(value) for value in targets.as_dict().values()):
        raise ArithmeticDegenerateError(f"targets are not finite for expense_at_fire={expense_at_fire:g}")
    return targets


def classify(value: float, targets: TargetSet) -> str | None:
    """Highest milestone ``value`` meets, checked fat, fire, coast, lean."""
    for milestone in (FAT, FIRE, COAST, LEAN):
        if value >= targets.value(milestone):
            return milestone
    return None
