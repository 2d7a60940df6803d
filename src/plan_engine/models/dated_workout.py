"""Dated workout and plan window — the engine's output records."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date

from plan_engine.models.enums import WorkoutType


@dataclass(frozen=True)
class PlanWindow:
    """Inclusive calendar span of a plan: first day through race/last day."""

    start_date: date
    end_date: date

    @property
    def total_days(self) -> int:
        return (self.end_date - self.start_date).days + 1

    def contains(self, on_date: date) -> bool:
        return self.start_date <= on_date <= self.end_date


@dataclass(frozen=True)
class DatedWorkout:
    """One calendar day's resolved workout plus its position in the plan."""

    date: date
    workout: str
    day_of_plan: int  # 1-indexed
    week_of_plan: int  # 1-indexed
    workout_type: WorkoutType
    is_rest_day: bool = False
    is_race_day: bool = False
