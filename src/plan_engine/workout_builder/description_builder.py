"""Description builder — renders a day's workout as coaching text.

Every line is prefixed with the plan position ("Week 3, Day 17 of your
Marathon Plan: ") so it reads standalone in a newsletter or a calendar
cell. Race day gets a fixed message instead.
"""

from __future__ import annotations

from plan_engine.models.enums import (
    INTERVAL_DISTANCE_M,
    INTERVAL_PACE,
    PlanId,
    RunningLevel,
    WorkoutType,
)
from plan_engine.workout_builder.dosage import WorkoutDose, compute_dose, is_tapering

TAPER_NOTE = " (Tapering: reduced volume to keep your legs fresh for race day.)"

_SESSION_LABELS: dict[WorkoutType, str] = {
    WorkoutType.REST: "Rest Day",
    WorkoutType.EASY_RUN: "Easy Run",
    WorkoutType.LONG_RUN: "Long Run",
    WorkoutType.INTERVAL: "Interval Training",
    WorkoutType.TEMPO: "Tempo Run",
    WorkoutType.RACE: "Race Day",
}


def session_label(workout_type: WorkoutType) -> str:
    """Short display label for a workout type, e.g. ``"Long Run"``."""
    return _SESSION_LABELS.get(workout_type, "Workout")


def build_race_day_message(plan_label: str) -> str:
    return (
        f"RACE DAY! Today is the day your {plan_label} has been building toward. "
        "Trust your training, start easy, and enjoy every step. Congratulations!"
    )


def _session_sentence(dose: WorkoutDose, level: RunningLevel) -> str:
    if dose.workout_type is WorkoutType.LONG_RUN:
        return f"Long run: {dose.minutes} minutes at an easy, sustainable pace."
    if dose.workout_type is WorkoutType.INTERVAL:
        return (
            f"Interval training: {dose.reps}x{INTERVAL_DISTANCE_M}m at "
            f"{INTERVAL_PACE[level]} pace with equal recovery jogs. "
            "Warm up and cool down properly."
        )
    if dose.workout_type is WorkoutType.TEMPO:
        return f"Tempo run: {dose.minutes} minutes at a comfortably hard pace."
    if dose.workout_type is WorkoutType.EASY_RUN:
        return f"Easy run: {dose.minutes} minutes at a conversational pace."
    return "Rest day or light cross-training. Focus on recovery."


def describe(
    workout_type: WorkoutType,
    week_of_plan: int,
    running_level: RunningLevel,
    plan_label: str,
    day_of_plan: int,
    plan_duration_weeks: int,
    is_race_day: bool = False,
    days_until_race: int | None = None,
    plan_id: PlanId | None = None,
) -> str:
    """Render the workout text for one plan day.

    Args:
        workout_type: Tag from the week shape.
        week_of_plan: 1-indexed plan week (drives long-run growth).
        running_level: Athlete running level.
        plan_label: Display name of the plan, e.g. "Marathon Plan".
        day_of_plan: 1-indexed plan day.
        plan_duration_weeks: Nominal catalog duration, used for the taper.
        is_race_day: True on the race date itself.
        days_until_race: Days left to the race, None without a race date.
        plan_id: Catalog identifier; picks the long-run ceiling when given,
            otherwise the label is matched by plan family.

    Returns:
        Human-readable workout description.
    """
    if is_race_day:
        return build_race_day_message(plan_label)

    tapering = is_tapering(plan_duration_weeks, days_until_race)
    dose = compute_dose(
        workout_type,
        running_level,
        week_of_plan,
        plan_id if plan_id is not None else plan_label,
        tapering=tapering,
        days_until_race=days_until_race,
    )

    text = (
        f"Week {week_of_plan}, Day {day_of_plan} of your {plan_label}: "
        f"{_session_sentence(dose, running_level)}"
    )
    if tapering and workout_type is not WorkoutType.REST:
        text += TAPER_NOTE
    return text
