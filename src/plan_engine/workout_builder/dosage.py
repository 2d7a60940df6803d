"""Workout dosage — durations and rep counts by level, week and taper state.

Each workout type starts from a level-indexed base. Long runs grow by a
level-dependent increment every plan week up to a plan-family ceiling.
During the taper every dose is cut by a fixed percentage (rounded down) and
held at a floor.
"""

from __future__ import annotations

from dataclasses import dataclass

from plan_engine.models.enums import (
    EASY_RUN_MIN,
    EASY_RUN_RACE_WEEK_PCT,
    EASY_RUN_RACE_WEEK_FLOOR_MIN,
    EASY_RUN_TAPER_PCT,
    EASY_RUN_TAPER_FLOOR_MIN,
    INTERVAL_REPS,
    INTERVAL_TAPER_PCT,
    INTERVAL_TAPER_FLOOR_REPS,
    LONG_RUN_BASE_MIN,
    LONG_RUN_CEILING_DEFAULT_MIN,
    LONG_RUN_CEILING_HALF_MIN,
    LONG_RUN_CEILING_MARATHON_MIN,
    LONG_RUN_CEILING_ULTRA_MIN,
    LONG_RUN_TAPER_PCT,
    LONG_RUN_TAPER_FLOOR_MIN,
    LONG_RUN_WEEKLY_INCREMENT_MIN,
    TAPER_LONG_PLAN_WEEKS,
    TAPER_LONG_PLAN_WINDOW_DAYS,
    TAPER_RACE_WEEK_DAYS,
    TAPER_SHORT_PLAN_WEEKS,
    TAPER_SHORT_PLAN_WINDOW_DAYS,
    TEMPO_MIN,
    TEMPO_TAPER_PCT,
    TEMPO_TAPER_FLOOR_MIN,
    PlanId,
    RunningLevel,
    WorkoutType,
)


@dataclass(frozen=True)
class WorkoutDose:
    """Numeric prescription for one day: minutes or 400 m reps."""

    workout_type: WorkoutType
    minutes: int | None = None
    reps: int | None = None
    tapered: bool = False


def is_tapering(plan_duration_weeks: int, days_until_race: int | None) -> bool:
    """Whether the taper is active for a day.

    Long plans (12+ weeks) taper over the final two weeks, plans of 8+
    weeks over the final week. Without a race date there is no taper.
    """
    if days_until_race is None:
        return False
    if (
        plan_duration_weeks >= TAPER_LONG_PLAN_WEEKS
        and days_until_race <= TAPER_LONG_PLAN_WINDOW_DAYS
    ):
        return True
    return (
        plan_duration_weeks >= TAPER_SHORT_PLAN_WEEKS
        and days_until_race <= TAPER_SHORT_PLAN_WINDOW_DAYS
    )


_CEILING_BY_PLAN: dict[PlanId, int] = {
    PlanId.HALF_MARATHON: LONG_RUN_CEILING_HALF_MIN,
    PlanId.MARATHON: LONG_RUN_CEILING_MARATHON_MIN,
    PlanId.ULTRA: LONG_RUN_CEILING_ULTRA_MIN,
}


def long_run_ceiling(plan: PlanId | str) -> int:
    """Long-run cap in minutes for a plan identifier or label.

    A ``PlanId`` is looked up directly; a free-text label falls back to
    matching the plan family by name.
    """
    if isinstance(plan, PlanId):
        return _CEILING_BY_PLAN.get(plan, LONG_RUN_CEILING_DEFAULT_MIN)
    name = plan.lower()
    # "Ultra Marathon" and "Half Marathon" both contain "marathon"
    if "ultra" in name:
        return LONG_RUN_CEILING_ULTRA_MIN
    if "half" in name:
        return LONG_RUN_CEILING_HALF_MIN
    if "marathon" in name:
        return LONG_RUN_CEILING_MARATHON_MIN
    return LONG_RUN_CEILING_DEFAULT_MIN


def long_run_minutes(
    level: RunningLevel, week_of_plan: int, plan: PlanId | str
) -> int:
    """Untapered long-run duration for a plan week."""
    minutes = LONG_RUN_BASE_MIN[level] + week_of_plan * LONG_RUN_WEEKLY_INCREMENT_MIN[level]
    return min(minutes, long_run_ceiling(plan))


def _reduce(value: int, pct: int, floor: int) -> int:
    # Integer percent keeps the round-down exact
    return max(floor, value * pct // 100)


def compute_dose(
    workout_type: WorkoutType,
    level: RunningLevel,
    week_of_plan: int,
    plan: PlanId | str,
    tapering: bool = False,
    days_until_race: int | None = None,
) -> WorkoutDose:
    """Compute the numeric dose for a workout type.

    Args:
        workout_type: The day's workout tag.
        level: Athlete running level.
        week_of_plan: 1-indexed plan week.
        plan: Plan identifier or label, used to pick the long-run ceiling.
        tapering: Whether the taper is active for this day.
        days_until_race: Days left to the race; easy runs are cut harder
            in the last few days.

    Returns:
        A WorkoutDose. REST and RACE carry no numbers.
    """
    if workout_type is WorkoutType.LONG_RUN:
        minutes = long_run_minutes(level, week_of_plan, plan)
        if tapering:
            minutes = _reduce(minutes, LONG_RUN_TAPER_PCT, LONG_RUN_TAPER_FLOOR_MIN)
        return WorkoutDose(workout_type, minutes=minutes, tapered=tapering)

    if workout_type is WorkoutType.INTERVAL:
        reps = INTERVAL_REPS[level]
        if tapering:
            reps = _reduce(reps, INTERVAL_TAPER_PCT, INTERVAL_TAPER_FLOOR_REPS)
        return WorkoutDose(workout_type, reps=reps, tapered=tapering)

    if workout_type is WorkoutType.TEMPO:
        minutes = TEMPO_MIN[level]
        if tapering:
            minutes = _reduce(minutes, TEMPO_TAPER_PCT, TEMPO_TAPER_FLOOR_MIN)
        return WorkoutDose(workout_type, minutes=minutes, tapered=tapering)

    if workout_type is WorkoutType.EASY_RUN:
        minutes = EASY_RUN_MIN[level]
        if tapering:
            if days_until_race is not None and days_until_race <= TAPER_RACE_WEEK_DAYS:
                minutes = _reduce(
                    minutes, EASY_RUN_RACE_WEEK_PCT, EASY_RUN_RACE_WEEK_FLOOR_MIN
                )
            else:
                minutes = _reduce(minutes, EASY_RUN_TAPER_PCT, EASY_RUN_TAPER_FLOOR_MIN)
        return WorkoutDose(workout_type, minutes=minutes, tapered=tapering)

    return WorkoutDose(workout_type)
