"""PlanEngine — expands a user profile into a full calendar of dated workouts."""

from __future__ import annotations

import logging
from datetime import date

from plan_engine.exceptions import (
    InvalidPlanWindowError,
    PlanEngineError,
    ProfileError,
    UnknownPlanError,
)
from plan_engine.math.plan_dates import (
    day_of_plan,
    days_until,
    iter_dates,
    resolve_plan_window,
    week_of_plan,
    weekday_index,
)
from plan_engine.models.catalog import (
    DEFAULT_CATALOG,
    PlanCatalog,
    TrainingPlanCatalogEntry,
)
from plan_engine.models.dated_workout import DatedWorkout, PlanWindow
from plan_engine.models.enums import ENDING_SOON_WINDOW_DAYS, WorkoutType
from plan_engine.models.profile import UserProfile
from plan_engine.week_shape import WeekShape, assign_week
from plan_engine.workout_builder.description_builder import describe

logger = logging.getLogger(__name__)

MISSING_PROFILE_MESSAGE = (
    "Set your training plan, running level, and ensure plan start date is set "
    "in your profile to see today's workout."
)
PLAN_NOT_FOUND_MESSAGE = (
    "Training plan details not found. Please re-select your training plan "
    "in your profile."
)
INVALID_WINDOW_MESSAGE = (
    "Plan start date must be before the race date. Please update your profile."
)
ENDING_SOON_NOTICE = (
    "Your current training plan is about to end. Head to your profile to set "
    "up a new one and keep crushing your goals!"
)


class PlanEngine:
    """Expands profiles into dated workouts and answers "today" queries.

    The engine holds only the read-only plan catalog, so one instance can
    be shared freely. No operation raises: missing or inconsistent profile
    data yields an empty plan, a placeholder message or False.

    Usage:
        engine = PlanEngine()
        workouts = engine.expand(profile)
        text = engine.todays_workout(profile)
    """

    def __init__(self, catalog: PlanCatalog | None = None) -> None:
        self.catalog = DEFAULT_CATALOG if catalog is None else catalog

    # -- Full plan --------------------------------------------------------

    def expand(self, profile: UserProfile | None) -> tuple[DatedWorkout, ...]:
        """Produce one DatedWorkout per calendar day of the plan.

        Args:
            profile: Frozen user profile.

        Returns:
            Chronological tuple from start date to end date inclusive, or an
            empty tuple when the profile is incomplete or inconsistent.
        """
        try:
            entry, window = self._resolve(profile)
        except PlanEngineError as exc:
            self._log_resolution_error(exc)
            return ()

        # Shape depends only on the weekly config; computed once per week
        shapes: dict[int, WeekShape] = {}
        workouts: list[DatedWorkout] = []
        for on_date in iter_dates(window):
            week = week_of_plan(day_of_plan(window.start_date, on_date))
            if week not in shapes:
                shapes[week] = assign_week(
                    profile.running_days_per_week, profile.long_run_day
                )
            workouts.append(self._build_day(profile, entry, window, on_date, shapes[week]))

        logger.debug(
            "Expanded %s plan: %d days, %s to %s",
            entry.plan_id.value,
            len(workouts),
            window.start_date.isoformat(),
            window.end_date.isoformat(),
        )
        return tuple(workouts)

    def plan_window(self, profile: UserProfile | None) -> PlanWindow | None:
        """Inclusive plan span, or None if it cannot be resolved."""
        try:
            _, window = self._resolve(profile)
        except PlanEngineError as exc:
            self._log_resolution_error(exc)
            return None
        return window

    # -- Today ------------------------------------------------------------

    def workout_on(
        self, profile: UserProfile | None, on_date: date
    ) -> DatedWorkout | None:
        """The DatedWorkout for a single date, or None outside the plan."""
        try:
            entry, window = self._resolve(profile)
        except PlanEngineError as exc:
            self._log_resolution_error(exc)
            return None
        if not window.contains(on_date):
            return None
        shape = assign_week(profile.running_days_per_week, profile.long_run_day)
        return self._build_day(profile, entry, window, on_date, shape)

    def todays_workout(
        self, profile: UserProfile | None, today: date | None = None
    ) -> str:
        """Workout text for *today*, or a message explaining why there is none.

        Args:
            profile: Frozen user profile.
            today: Local calendar day; defaults to ``date.today()``.
        """
        today = today or date.today()
        try:
            entry, window = self._resolve(profile)
        except ProfileError:
            return MISSING_PROFILE_MESSAGE
        except UnknownPlanError as exc:
            self._log_resolution_error(exc)
            return PLAN_NOT_FOUND_MESSAGE
        except InvalidPlanWindowError as exc:
            self._log_resolution_error(exc)
            return INVALID_WINDOW_MESSAGE

        if today < window.start_date:
            start = window.start_date
            return (
                f"Your {entry.label} starts on {start:%B} {start.day}, {start.year}. "
                "Get ready!"
            )
        if today > window.end_date:
            return f"Your {entry.label} has finished! Congratulations!"

        shape = assign_week(profile.running_days_per_week, profile.long_run_day)
        return self._build_day(profile, entry, window, today, shape).workout

    def is_ending_soon(
        self, profile: UserProfile | None, today: date | None = None
    ) -> bool:
        """True when the plan ends within the next week (today included)."""
        window = self.plan_window(profile)
        if window is None:
            return False
        remaining = (window.end_date - (today or date.today())).days
        return 0 <= remaining <= ENDING_SOON_WINDOW_DAYS

    def is_ended(self, profile: UserProfile | None, today: date | None = None) -> bool:
        """True once *today* is past the plan's last day."""
        window = self.plan_window(profile)
        if window is None:
            return False
        return (today or date.today()) > window.end_date

    def plan_status_notice(
        self, profile: UserProfile | None, today: date | None = None
    ) -> str | None:
        """Alert text for a plan that is ending or has ended, else None."""
        today = today or date.today()
        if self.is_ended(profile, today):
            entry = self.catalog.get(profile.training_plan)
            return (
                f"Your {entry.label} has ended. Consider updating your profile "
                "with a new training goal!"
            )
        if self.is_ending_soon(profile, today):
            return ENDING_SOON_NOTICE
        return None

    # -- Internals --------------------------------------------------------

    def _resolve(
        self, profile: UserProfile | None
    ) -> tuple[TrainingPlanCatalogEntry, PlanWindow]:
        if profile is None or not profile.is_complete:
            raise ProfileError(
                "Profile is missing training plan, running level or plan start date"
            )
        entry = self.catalog.get(profile.training_plan)
        if entry is None:
            raise UnknownPlanError(profile.training_plan)
        window = resolve_plan_window(
            profile.plan_start_date, entry, profile.race_date
        )
        return entry, window

    @staticmethod
    def _build_day(
        profile: UserProfile,
        entry: TrainingPlanCatalogEntry,
        window: PlanWindow,
        on_date: date,
        shape: WeekShape,
    ) -> DatedWorkout:
        day = day_of_plan(window.start_date, on_date)
        week = week_of_plan(day)
        race_day = profile.race_date is not None and on_date == profile.race_date
        workout_type = WorkoutType.RACE if race_day else shape[weekday_index(on_date)]

        text = describe(
            workout_type,
            week,
            profile.running_level,
            entry.label,
            day,
            entry.duration_weeks,
            is_race_day=race_day,
            days_until_race=days_until(profile.race_date, on_date),
            plan_id=entry.plan_id,
        )
        return DatedWorkout(
            date=on_date,
            workout=text,
            day_of_plan=day,
            week_of_plan=week,
            workout_type=workout_type,
            is_rest_day=workout_type is WorkoutType.REST,
            is_race_day=race_day,
        )

    @staticmethod
    def _log_resolution_error(exc: PlanEngineError) -> None:
        if isinstance(exc, ProfileError):
            logger.debug("Skipping plan: %s", exc)
        else:
            logger.warning("Cannot build training plan: %s", exc)


_default_engine = PlanEngine()


def expand(profile: UserProfile | None) -> tuple[DatedWorkout, ...]:
    return _default_engine.expand(profile)


def todays_workout(profile: UserProfile | None, today: date | None = None) -> str:
    return _default_engine.todays_workout(profile, today)


def is_ending_soon(profile: UserProfile | None, today: date | None = None) -> bool:
    return _default_engine.is_ending_soon(profile, today)


def is_ended(profile: UserProfile | None, today: date | None = None) -> bool:
    return _default_engine.is_ended(profile, today)
