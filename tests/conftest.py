"""Shared test fixtures: sample profiles and engines."""

from __future__ import annotations

from datetime import date
from typing import Callable

import pytest

from plan_engine.engine import PlanEngine
from plan_engine.models.enums import RunningLevel, Weekday
from plan_engine.models.profile import UserProfile


@pytest.fixture
def engine() -> PlanEngine:
    return PlanEngine()


@pytest.fixture
def beginner_5k_profile() -> UserProfile:
    """Beginner on the 8-week 5K plan, starting Monday 2024-01-01, no race."""
    return UserProfile(
        running_level=RunningLevel.BEGINNER,
        training_plan="5k",
        plan_start_date=date(2024, 1, 1),
        running_days_per_week=3,
        long_run_day=Weekday.SATURDAY,
    )


@pytest.fixture
def marathon_profile() -> UserProfile:
    """Intermediate on the 16-week marathon plan, racing on day 112."""
    return UserProfile(
        running_level=RunningLevel.INTERMEDIATE,
        training_plan="marathon",
        plan_start_date=date(2026, 6, 29),
        race_date=date(2026, 10, 18),  # 2026-06-29 + 111 days, a Sunday
        running_days_per_week=5,
        long_run_day=Weekday.SUNDAY,
    )


@pytest.fixture
def profile_factory() -> Callable[..., UserProfile]:
    """Factory fixture for UserProfile with sensible defaults.

    Usage:
        profile = profile_factory(training_plan="10k", running_days_per_week=4)
    """

    def factory(**overrides) -> UserProfile:
        defaults = dict(
            running_level=RunningLevel.INTERMEDIATE,
            training_plan="10k",
            plan_start_date=date(2026, 3, 2),
            running_days_per_week=4,
            long_run_day=Weekday.SATURDAY,
        )
        defaults.update(overrides)
        return UserProfile(**defaults)

    return factory
