"""Plan calendar arithmetic: plan window, day/week of plan, race countdown.

All dates are plain calendar dates; there is no time-of-day component, so
day differences are exact and daylight-saving changes cannot shift them.
"""

from __future__ import annotations

from datetime import date, timedelta
from typing import Iterator

from plan_engine.exceptions import InvalidPlanWindowError
from plan_engine.models.catalog import TrainingPlanCatalogEntry
from plan_engine.models.dated_workout import PlanWindow
from plan_engine.models.enums import Weekday


def resolve_plan_window(
    start_date: date,
    entry: TrainingPlanCatalogEntry,
    race_date: date | None = None,
) -> PlanWindow:
    """Determine the inclusive first and last day of a plan.

    With a race date the plan ends on race day; otherwise it runs for the
    catalog's nominal duration.

    Raises:
        InvalidPlanWindowError: If race_date is before start_date.
    """
    if race_date is not None:
        if race_date < start_date:
            raise InvalidPlanWindowError(start_date, race_date)
        return PlanWindow(start_date=start_date, end_date=race_date)
    end_date = start_date + timedelta(days=entry.duration_days - 1)
    return PlanWindow(start_date=start_date, end_date=end_date)


def derive_plan_start_date(race_date: date, entry: TrainingPlanCatalogEntry) -> date:
    """Start date that makes a plan of nominal length finish on race day."""
    return race_date - timedelta(days=entry.duration_days - 1)


def day_of_plan(start_date: date, on_date: date) -> int:
    """1-indexed plan day; zero or negative before the plan starts."""
    return (on_date - start_date).days + 1


def week_of_plan(day: int) -> int:
    """1-indexed plan week for a 1-indexed plan day."""
    return (day - 1) // 7 + 1


def days_until(target: date | None, on_date: date) -> int | None:
    """Calendar days from *on_date* to *target*, or None without a target."""
    if target is None:
        return None
    return (target - on_date).days


def weekday_index(on_date: date) -> Weekday:
    """Weekday of *on_date* in Sunday-first numbering."""
    # date.weekday() is Monday-first (0=Monday)
    return Weekday((on_date.weekday() + 1) % 7)


def iter_dates(window: PlanWindow) -> Iterator[date]:
    """Yield every calendar day of *window*, inclusive, in order."""
    for offset in range(window.total_days):
        yield window.start_date + timedelta(days=offset)
