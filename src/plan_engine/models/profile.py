"""Frozen user profile — the subset of the profile document the engine reads."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Any, Mapping

from plan_engine.exceptions import ProfileError
from plan_engine.models.enums import (
    DEFAULT_LONG_RUN_DAY,
    DEFAULT_RUNNING_DAYS,
    RunningLevel,
    Weekday,
)

# Document-store (camelCase) keys -> UserProfile field names
_DOCUMENT_KEYS: dict[str, str] = {
    "runningLevel": "running_level",
    "trainingPlan": "training_plan",
    "planStartDate": "plan_start_date",
    "raceDate": "race_date",
    "runningDaysPerWeek": "running_days_per_week",
    "longRunDay": "long_run_day",
}


@dataclass(frozen=True)
class UserProfile:
    """Immutable snapshot of the profile fields that drive plan generation.

    ``training_plan`` is kept as a raw identifier string so that unknown
    plans can be reported by the engine instead of failing at parse time.
    Name, location and delivery preferences live elsewhere and are ignored.
    """

    running_level: RunningLevel | None = None
    training_plan: str | None = None
    plan_start_date: date | None = None
    race_date: date | None = None
    running_days_per_week: int = DEFAULT_RUNNING_DAYS
    long_run_day: Weekday = DEFAULT_LONG_RUN_DAY

    @property
    def is_complete(self) -> bool:
        """True when plan, level and start date are all set."""
        return (
            bool(self.training_plan)
            and self.running_level is not None
            and self.plan_start_date is not None
        )

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> UserProfile:
        """Build a profile from a stored profile document.

        Accepts camelCase document keys or snake_case field names. Empty
        strings and None mean "not set".

        Raises:
            ProfileError: If a value is present but cannot be parsed.
        """
        fields: dict[str, Any] = {}
        for key, value in data.items():
            name = _DOCUMENT_KEYS.get(key, key)
            if name in _PARSERS and value not in (None, ""):
                fields[name] = _PARSERS[name](value)
        return cls(**fields)


def _parse_level(value: Any) -> RunningLevel:
    if isinstance(value, RunningLevel):
        return value
    try:
        return RunningLevel(str(value).strip().lower())
    except ValueError:
        raise ProfileError(f"Unknown running level: {value!r}") from None


def _parse_plan(value: Any) -> str:
    # PlanId is a str subclass; normalise to the plain identifier
    return getattr(value, "value", str(value)).strip()


def _parse_date(value: Any) -> date:
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    text = str(value).strip()
    try:
        return date.fromisoformat(text)
    except ValueError:
        pass
    try:
        return datetime.fromisoformat(text.replace("Z", "+00:00")).date()
    except ValueError:
        raise ProfileError(f"Invalid calendar date: {value!r}") from None


def _parse_running_days(value: Any) -> int:
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ProfileError(f"Invalid running days per week: {value!r}") from None


def _parse_weekday(value: Any) -> Weekday:
    if isinstance(value, Weekday):
        return value
    if isinstance(value, int):
        try:
            return Weekday(value)
        except ValueError:
            raise ProfileError(f"Invalid long run day: {value!r}") from None
    try:
        return Weekday.from_name(str(value))
    except ValueError as exc:
        raise ProfileError(str(exc)) from None


_PARSERS = {
    "running_level": _parse_level,
    "training_plan": _parse_plan,
    "plan_start_date": _parse_date,
    "race_date": _parse_date,
    "running_days_per_week": _parse_running_days,
    "long_run_day": _parse_weekday,
}
