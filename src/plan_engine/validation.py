"""Profile validation — the problems a profile form should report."""

from __future__ import annotations

from plan_engine.models.catalog import DEFAULT_CATALOG, PlanCatalog
from plan_engine.models.enums import (
    LONG_RUN_DAYS,
    MAX_RUNNING_DAYS,
    MIN_RUNNING_DAYS,
    Weekday,
)
from plan_engine.models.profile import UserProfile


def validate_profile(
    profile: UserProfile, catalog: PlanCatalog | None = None
) -> list[str]:
    """List human-readable problems with *profile*; empty when valid."""
    if catalog is None:
        catalog = DEFAULT_CATALOG
    problems: list[str] = []

    if not profile.training_plan:
        problems.append("Please select a training plan.")
    elif catalog.get(profile.training_plan) is None:
        problems.append(f"Unknown training plan: {profile.training_plan}.")
    if profile.running_level is None:
        problems.append("Please select your running level.")
    if profile.plan_start_date is None:
        problems.append("Plan start date is required.")

    if (
        profile.plan_start_date is not None
        and profile.race_date is not None
        and profile.plan_start_date >= profile.race_date
    ):
        problems.append("Plan start date must be before the race date.")

    if not MIN_RUNNING_DAYS <= profile.running_days_per_week <= MAX_RUNNING_DAYS:
        problems.append(
            f"Running days per week must be between {MIN_RUNNING_DAYS} "
            f"and {MAX_RUNNING_DAYS}."
        )
    if _long_run_weekday(profile.long_run_day) not in LONG_RUN_DAYS:
        problems.append("Long run day must be Saturday or Sunday.")

    return problems


def _long_run_weekday(value: Weekday | str) -> Weekday | None:
    # Profiles built in code may carry a weekday name instead of a Weekday
    if isinstance(value, str):
        try:
            return Weekday.from_name(value)
        except ValueError:
            return None
    return value
