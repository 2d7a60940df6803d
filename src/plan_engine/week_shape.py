"""Week shaping: assign a workout type to each weekday of a training week.

Fixed-priority slot assignment, not a scheduler. The long run goes on the
preferred weekend day, then the key sessions are tried on their candidate
weekdays in rule-table order, then easy runs fill the remaining target.
"""

from __future__ import annotations

from plan_engine.models.enums import (
    DAYS_PER_WEEK,
    LONG_RUN_DAYS,
    Weekday,
    WorkoutType,
)

WeekShape = tuple[WorkoutType, ...]

# Key sessions and the weekdays they may occupy, in evaluation order.
_KEY_SESSION_RULES: tuple[tuple[WorkoutType, tuple[Weekday, ...]], ...] = (
    (WorkoutType.INTERVAL, (Weekday.TUESDAY, Weekday.WEDNESDAY)),
    (WorkoutType.TEMPO, (Weekday.THURSDAY, Weekday.WEDNESDAY, Weekday.FRIDAY)),
)

_EASY_RUN_PRIORITY: tuple[Weekday, ...] = (
    Weekday.MONDAY,
    Weekday.WEDNESDAY,
    Weekday.FRIDAY,
    Weekday.SUNDAY,
    Weekday.TUESDAY,
    Weekday.THURSDAY,
    Weekday.SATURDAY,
)


def assign_week(running_days: int, long_run_day: Weekday | str) -> WeekShape:
    """Build the 7-slot week shape for a weekly run count.

    Args:
        running_days: Target number of running days (normally 3-7). Values
            outside 0-7 are clamped.
        long_run_day: Preferred long-run weekday, a ``Weekday`` or a name
            such as ``"sunday"``. Anything other than Saturday/Sunday falls
            back to Saturday.

    Returns:
        A tuple of 7 WorkoutType tags indexed 0=Sunday .. 6=Saturday.
    """
    if isinstance(long_run_day, str):
        try:
            long_run_day = Weekday.from_name(long_run_day)
        except ValueError:
            long_run_day = Weekday.SATURDAY
    if long_run_day not in LONG_RUN_DAYS:
        long_run_day = Weekday.SATURDAY

    target = max(0, min(running_days, DAYS_PER_WEEK))
    slots = [WorkoutType.REST] * DAYS_PER_WEEK
    placed = 0

    if target >= 1:
        slots[long_run_day] = WorkoutType.LONG_RUN
        placed = 1

    for workout_type, candidates in _KEY_SESSION_RULES:
        if placed >= target:
            break
        for day in candidates:
            if slots[day] is WorkoutType.REST:
                slots[day] = workout_type
                placed += 1
                break

    for day in _EASY_RUN_PRIORITY:
        if placed >= target:
            break
        if slots[day] is WorkoutType.REST:
            slots[day] = WorkoutType.EASY_RUN
            placed += 1

    # Top up any remaining rest days in calendar order
    for day in range(DAYS_PER_WEEK):
        if placed >= target:
            break
        if slots[day] is WorkoutType.REST:
            slots[day] = WorkoutType.EASY_RUN
            placed += 1

    return tuple(slots)


def running_day_count(shape: WeekShape) -> int:
    """Number of non-rest slots in a week shape."""
    return sum(1 for slot in shape if slot is not WorkoutType.REST)
