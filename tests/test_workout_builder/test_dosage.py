"""Tests for workout dosage: base tables, long-run growth, ceilings, taper."""

from __future__ import annotations

import pytest

from plan_engine.models.enums import PlanId, RunningLevel, WorkoutType
from plan_engine.workout_builder.dosage import (
    compute_dose,
    is_tapering,
    long_run_ceiling,
    long_run_minutes,
)

BEG = RunningLevel.BEGINNER
INT = RunningLevel.INTERMEDIATE
ADV = RunningLevel.ADVANCED


class TestIsTapering:
    @pytest.mark.parametrize(
        "weeks, days, expected",
        [
            (16, 14, True),
            (16, 15, False),
            (12, 10, True),
            (10, 10, False),
            (10, 7, True),
            (8, 7, True),
            (8, 8, False),
            (6, 2, False),
            (16, 0, True),
        ],
    )
    def test_windows(self, weeks: int, days: int, expected: bool) -> None:
        assert is_tapering(weeks, days) is expected

    def test_no_race_never_tapers(self) -> None:
        assert is_tapering(20, None) is False


class TestLongRun:
    @pytest.mark.parametrize(
        "level, week, expected",
        [(BEG, 1, 35), (INT, 1, 52), (ADV, 1, 70), (BEG, 4, 50), (ADV, 3, 90)],
    )
    def test_weekly_growth(self, level: RunningLevel, week: int, expected: int) -> None:
        assert long_run_minutes(level, week, "Marathon Plan") == expected

    @pytest.mark.parametrize(
        "plan, ceiling",
        [
            ("5K Race Plan", 90),
            ("10k", 90),
            ("Half Marathon Plan", 120),
            ("half-marathon", 120),
            ("Marathon Plan", 180),
            ("Ultra Marathon (50k+) Plan", 240),
        ],
    )
    def test_ceiling_by_plan_family(self, plan: str, ceiling: int) -> None:
        assert long_run_ceiling(plan) == ceiling

    @pytest.mark.parametrize(
        "plan_id, ceiling",
        [
            (PlanId.FIVE_K, 90),
            (PlanId.TEN_K, 90),
            (PlanId.HALF_MARATHON, 120),
            (PlanId.MARATHON, 180),
            (PlanId.ULTRA, 240),
        ],
    )
    def test_ceiling_by_plan_id(self, plan_id: PlanId, ceiling: int) -> None:
        assert long_run_ceiling(plan_id) == ceiling

    def test_long_run_capped_by_plan_id(self) -> None:
        dose = compute_dose(WorkoutType.LONG_RUN, ADV, 12, PlanId.MARATHON)
        assert dose.minutes == 180

    def test_capped_at_ceiling(self) -> None:
        # 60 + 20 * 10 = 260 minutes, above every ceiling
        assert long_run_minutes(ADV, 20, "Ultra Marathon (50k+) Plan") == 240
        assert long_run_minutes(ADV, 20, "5K Race Plan") == 90

    def test_taper_halves_with_floor(self) -> None:
        untapered = compute_dose(WorkoutType.LONG_RUN, INT, 15, "Marathon Plan")
        tapered = compute_dose(WorkoutType.LONG_RUN, INT, 15, "Marathon Plan", tapering=True)
        assert untapered.minutes == 150
        assert tapered.minutes == 75
        assert tapered.tapered

    def test_taper_rounds_down(self) -> None:
        # 30 + 7 * 5 = 65 -> 32.5 -> 32
        dose = compute_dose(WorkoutType.LONG_RUN, BEG, 7, "Marathon Plan", tapering=True)
        assert dose.minutes == 32

    def test_taper_floor(self) -> None:
        dose = compute_dose(WorkoutType.LONG_RUN, BEG, 1, "5K Race Plan", tapering=True)
        assert dose.minutes == 30


class TestShortSessions:
    @pytest.mark.parametrize("level, reps", [(BEG, 4), (INT, 6), (ADV, 8)])
    def test_interval_reps(self, level: RunningLevel, reps: int) -> None:
        assert compute_dose(WorkoutType.INTERVAL, level, 5, "5k").reps == reps

    @pytest.mark.parametrize("level, reps", [(BEG, 2), (INT, 3), (ADV, 4)])
    def test_interval_taper(self, level: RunningLevel, reps: int) -> None:
        assert compute_dose(WorkoutType.INTERVAL, level, 5, "5k", tapering=True).reps == reps

    @pytest.mark.parametrize("level, minutes", [(BEG, 15), (INT, 20), (ADV, 30)])
    def test_tempo_minutes_do_not_grow(self, level: RunningLevel, minutes: int) -> None:
        assert compute_dose(WorkoutType.TEMPO, level, 1, "5k").minutes == minutes
        assert compute_dose(WorkoutType.TEMPO, level, 9, "5k").minutes == minutes

    @pytest.mark.parametrize("level, minutes", [(BEG, 10), (INT, 12), (ADV, 18)])
    def test_tempo_taper(self, level: RunningLevel, minutes: int) -> None:
        assert compute_dose(WorkoutType.TEMPO, level, 9, "5k", tapering=True).minutes == minutes

    @pytest.mark.parametrize("level, minutes", [(BEG, 20), (INT, 30), (ADV, 40)])
    def test_easy_minutes(self, level: RunningLevel, minutes: int) -> None:
        assert compute_dose(WorkoutType.EASY_RUN, level, 3, "5k").minutes == minutes

    @pytest.mark.parametrize("level, minutes", [(BEG, 20), (INT, 21), (ADV, 28)])
    def test_easy_taper(self, level: RunningLevel, minutes: int) -> None:
        dose = compute_dose(
            WorkoutType.EASY_RUN, level, 3, "5k", tapering=True, days_until_race=6
        )
        assert dose.minutes == minutes

    @pytest.mark.parametrize("level, minutes", [(BEG, 15), (INT, 15), (ADV, 20)])
    def test_easy_race_week_taper(self, level: RunningLevel, minutes: int) -> None:
        dose = compute_dose(
            WorkoutType.EASY_RUN, level, 3, "5k", tapering=True, days_until_race=3
        )
        assert dose.minutes == minutes

    def test_rest_has_no_numbers(self) -> None:
        dose = compute_dose(WorkoutType.REST, ADV, 3, "5k", tapering=True)
        assert dose.minutes is None
        assert dose.reps is None
