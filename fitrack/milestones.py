"""First-crossing detection and per-year milestone status."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .targets import FAT, MILESTONES, TargetSet


@dataclass(frozen=True, slots=True)
class MilestoneStatus:
    year: int
    achieved: tuple[str, ...]
    newly_achieved: tuple[str, ...]
    fully_achieved: bool


def first_achieved_year(series: dict[int, float], target: float) -> int | None:
    for year in sorted(series):
        if series[year] >= target:
            return year
    return None


def first_achieved_years(series: dict[int, float], targets: TargetSet) -> dict[str, int | None]:
    return {milestone: first_achieved_year(series, targets.value(milestone)) for milestone in MILESTONES}


def status_as_of(year: int, first_achieved: dict[str, int | None]) -> MilestoneStatus:
    """Status at ``year`` derived only from the first-achieved map.

    Milestones stay achieved once reached; ``newly_achieved`` holds those
    first reached in exactly this year. The terminal ``fully_achieved``
    flag follows the fat milestone alone.
    """
    achieved: list[str] = []
    newly: list[str] = []
    for milestone in MILESTONES:
        reached = first_achieved.get(milestone)
        if reached is None or reached > year:
            continue
        achieved.append(milestone)
        if reached == year:
            newly.append(milestone)

    fat_year = first_achieved.get(FAT)
    return MilestoneStatus(
        year=year,
        achieved=tuple(achieved),
        newly_achieved=tuple(newly),
        fully_achieved=fat_year is not None and fat_year <= year,
    )


def status_timeline(years: Iterable[int], first_achieved: dict[str, int | None]) -> dict[int, MilestoneStatus]:
    return {year: status_as_of(year, first_achieved) for year in years}
