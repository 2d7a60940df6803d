"""Tests for plan calendar arithmetic."""

from __future__ import annotations

from datetime import date

import pytest

from plan_engine.exceptions import InvalidPlanWindowError
from plan_engine.math.plan_dates import (
    day_of_plan,
    days_until,
    derive_plan_start_date,
    iter_dates,
    resolve_plan_window,
    week_of_plan,
    weekday_index,
)
from plan_engine.models.catalog import DEFAULT_CATALOG
from plan_engine.models.dated_workout import PlanWindow
from plan_engine.models.enums import Weekday


class TestResolvePlanWindow:
    def test_nominal_duration_without_race(self) -> None:
        window = resolve_plan_window(date(2024, 1, 1), DEFAULT_CATALOG.get("5k"))
        assert window.end_date == date(2024, 2, 25)
        assert window.total_days == 56

    def test_race_date_ends_plan(self) -> None:
        window = resolve_plan_window(
            date(2024, 1, 1), DEFAULT_CATALOG.get("5k"), race_date=date(2024, 1, 20)
        )
        assert window.end_date == date(2024, 1, 20)
        assert window.total_days == 20

    def test_race_on_start_date_is_single_day(self) -> None:
        window = resolve_plan_window(
            date(2024, 1, 1), DEFAULT_CATALOG.get("5k"), race_date=date(2024, 1, 1)
        )
        assert window.total_days == 1

    def test_race_before_start_raises(self) -> None:
        with pytest.raises(InvalidPlanWindowError) as excinfo:
            resolve_plan_window(
                date(2024, 1, 10), DEFAULT_CATALOG.get("5k"), race_date=date(2024, 1, 1)
            )
        assert excinfo.value.race_date == date(2024, 1, 1)

    def test_ultra_spans_140_days(self) -> None:
        window = resolve_plan_window(date(2026, 1, 5), DEFAULT_CATALOG.get("ultra"))
        assert window.total_days == 140


class TestDerivePlanStartDate:
    def test_plan_ends_on_race_day(self) -> None:
        entry = DEFAULT_CATALOG.get("marathon")
        start = derive_plan_start_date(date(2026, 10, 18), entry)
        assert start == date(2026, 6, 29)
        assert resolve_plan_window(start, entry).end_date == date(2026, 10, 18)


class TestPlanPosition:
    @pytest.mark.parametrize(
        "on_date, expected",
        [
            (date(2024, 1, 1), 1),
            (date(2024, 1, 7), 7),
            (date(2024, 1, 8), 8),
            (date(2023, 12, 31), 0),
        ],
    )
    def test_day_of_plan(self, on_date: date, expected: int) -> None:
        assert day_of_plan(date(2024, 1, 1), on_date) == expected

    @pytest.mark.parametrize(
        "day, expected", [(1, 1), (7, 1), (8, 2), (14, 2), (15, 3), (56, 8)]
    )
    def test_week_of_plan(self, day: int, expected: int) -> None:
        assert week_of_plan(day) == expected

    def test_days_until(self) -> None:
        assert days_until(date(2024, 1, 11), date(2024, 1, 1)) == 10
        assert days_until(None, date(2024, 1, 1)) is None


class TestCalendarHelpers:
    def test_weekday_index_is_sunday_first(self) -> None:
        assert weekday_index(date(2024, 1, 7)) == Weekday.SUNDAY
        assert weekday_index(date(2024, 1, 1)) == Weekday.MONDAY
        assert weekday_index(date(2024, 1, 6)) == Weekday.SATURDAY

    def test_iter_dates_inclusive(self) -> None:
        window = PlanWindow(date(2024, 2, 27), date(2024, 3, 1))
        days = list(iter_dates(window))
        # Leap year: Feb 29 included
        assert days == [
            date(2024, 2, 27),
            date(2024, 2, 28),
            date(2024, 2, 29),
            date(2024, 3, 1),
        ]
