"""Projection orchestration."""

from __future__ import annotations

from dataclasses import dataclass
import logging

from .accumulation import simulate_accumulation
from .drawdown import DrawdownResult, simulate_drawdown
from .errors import ArithmeticDegenerateError, InvalidInputError
from .expenses import expense_at, project_expenses
from .milestones import MilestoneStatus, first_achieved_years, status_timeline
from .progress import MilestoneProgress, milestone_progress
from .schema import ProjectionInputs
from .targets import MILESTONES, TargetSet, compute_targets
from .validate import ValidationResult, validate_inputs

logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class Report:
    inputs: ProjectionInputs
    expense_schedule: dict[int, float]
    expense_at_fire: float
    targets: TargetSet
    accumulation: dict[str, dict[int, float]]
    first_achieved_year: dict[str, dict[str, int | None]]
    status: dict[str, dict[int, MilestoneStatus]]
    drawdown: dict[str, dict[str, DrawdownResult]]
    progress: dict[str, MilestoneProgress]

    @property
    def years(self) -> list[int]:
        first = next(iter(self.accumulation.values()))
        return list(first)


@dataclass(frozen=True, slots=True)
class ProjectionOutcome:
    validation: ValidationResult
    report: Report | None = None
    not_computable: str | None = None

    @property
    def ok(self) -> bool:
        return self.report is not None


def _expense_horizon(inputs: ProjectionInputs) -> int:
    # Long enough for both the projection table and the FIRE year lookup.
    return max(inputs.projection_years, inputs.years_to_fire)


def _compute(inputs: ProjectionInputs) -> Report:
    """Run every stage once for the validated ``inputs``.

    Each drawdown starts from the milestone's own target at ``fire_age``;
    for coast this is the corpus needed at ``coast_age``, not the corpus
    that coast grows into by retirement.
    """
    schedule = project_expenses(
        inputs.monthly_expense,
        inputs.inflation_rate_pct,
        inputs.start_year,
        _expense_horizon(inputs),
    )
    expense_at_fire = expense_at(schedule, inputs.fire_year)
    targets = compute_targets(
        expense_at_fire,
        inputs.conservative_cagr_pct,
        inputs.current_age,
        inputs.fire_age,
        inputs.coast_age,
    )
    logger.debug("targets for FIRE year %s: %s", inputs.fire_year, targets)

    accumulation: dict[str, dict[int, float]] = {}
    first_achieved: dict[str, dict[str, int | None]] = {}
    status: dict[str, dict[int, MilestoneStatus]] = {}
    drawdown: dict[str, dict[str, DrawdownResult]] = {}
    for scenario in inputs.scenarios():
        series = simulate_accumulation(
            starting_corpus=inputs.current_net_worth,
            monthly_contribution=inputs.monthly_contribution,
            annual_growth_rate_pct=scenario.cagr_pct,
            start_year=inputs.start_year,
            start_month=inputs.start_month,
            projection_years=inputs.projection_years,
            current_age=inputs.current_age,
            contribution_cutoff_age=inputs.fire_age,
        )
        reached = first_achieved_years(series, targets)
        accumulation[scenario.name] = series
        first_achieved[scenario.name] = reached
        status[scenario.name] = status_timeline(series, reached)
        drawdown[scenario.name] = {
            milestone: simulate_drawdown(
                starting_corpus=targets.value(milestone),
                retirement_start_age=inputs.fire_age,
                inflation_rate_pct=inputs.inflation_rate_pct,
                annual_growth_rate_pct=scenario.cagr_pct,
                annual_tax_rate_pct=inputs.retirement_tax_rate_pct,
                initial_annual_expense=expense_at_fire,
                max_years=inputs.drawdown_max_years,
            )
            for milestone in MILESTONES
        }
        logger.debug("scenario %s at %.2f%%: first achieved %s", scenario.name, scenario.cagr_pct, reached)

    return Report(
        inputs=inputs,
        expense_schedule=schedule,
        expense_at_fire=expense_at_fire,
        targets=targets,
        accumulation=accumulation,
        first_achieved_year=first_achieved,
        status=status,
        drawdown=drawdown,
        progress=milestone_progress(inputs, targets),
    )


def run_projection(inputs: ProjectionInputs) -> ProjectionOutcome:
    """Validate ``inputs`` and build the report, or return the field errors."""
    validation = validate_inputs(inputs)
    if not validation.is_valid:
        logger.warning("refusing to project: %s", "; ".join(validation.errors))
        return ProjectionOutcome(validation=validation)
    try:
        report = _compute(inputs)
    except ArithmeticDegenerateError as exc:
        logger.warning("projection not computable: %s", exc)
        return ProjectionOutcome(validation=validation, not_computable=str(exc))
    return ProjectionOutcome(validation=validation, report=report)


def build_report(inputs: ProjectionInputs) -> Report:
    outcome = run_projection(inputs)
    if outcome.not_computable is not None:
        raise ArithmeticDegenerateError(outcome.not_computable)
    if outcome.report is None:
        raise InvalidInputError("; ".join(outcome.validation.errors), outcome.validation)
    return outcome.report
