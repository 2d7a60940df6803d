"""Tabular export of an expanded plan for list and calendar views."""

from __future__ import annotations

from typing import Iterable

import pandas as pd

from plan_engine.models.dated_workout import DatedWorkout
from plan_engine.workout_builder.description_builder import session_label

PLAN_COLUMNS = (
    "date",
    "week",
    "day",
    "weekday",
    "workout_type",
    "session",
    "is_rest_day",
    "is_race_day",
    "workout",
)


def plan_to_dataframe(workouts: Iterable[DatedWorkout]) -> pd.DataFrame:
    """One row per plan day, in plan order, with a datetime ``date`` column."""
    rows = [
        {
            "date": w.date,
            "week": w.week_of_plan,
            "day": w.day_of_plan,
            "weekday": w.date.strftime("%A"),
            "workout_type": w.workout_type.value,
            "session": session_label(w.workout_type),
            "is_rest_day": w.is_rest_day,
            "is_race_day": w.is_race_day,
            "workout": w.workout,
        }
        for w in workouts
    ]
    frame = pd.DataFrame(rows, columns=list(PLAN_COLUMNS))
    frame["date"] = pd.to_datetime(frame["date"])
    return frame


def weekly_summary(workouts: Iterable[DatedWorkout]) -> pd.DataFrame:
    """Per-week counts of running and rest days, indexed by plan week."""
    frame = plan_to_dataframe(workouts)
    if frame.empty:
        return pd.DataFrame(columns=["run_days", "rest_days"])
    frame["is_run_day"] = ~frame["is_rest_day"]
    return (
        frame.groupby("week")
        .agg(run_days=("is_run_day", "sum"), rest_days=("is_rest_day", "sum"))
        .astype(int)
    )


def workouts_by_date(workouts: Iterable[DatedWorkout]) -> dict[str, DatedWorkout]:
    """Map ISO date strings to workouts, for calendar-cell lookups."""
    return {w.date.isoformat(): w for w in workouts}
