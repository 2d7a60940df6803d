"""Enumerations and dosage constants for the training-plan engine.

All numbers here are fixed heuristics for a recreational coaching app,
not periodization science.
"""

from enum import Enum, IntEnum


class RunningLevel(str, Enum):
    """Self-reported running experience of the athlete."""

    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"

    @property
    def label(self) -> str:
        return self.value.capitalize()


class PlanId(str, Enum):
    """Identifiers of the selectable training plans."""

    FIVE_K = "5k"
    TEN_K = "10k"
    HALF_MARATHON = "half-marathon"
    MARATHON = "marathon"
    ULTRA = "ultra"


class WorkoutType(str, Enum):
    """Workout-type tag assigned to a single day."""

    REST = "Rest"
    EASY_RUN = "EasyRun"
    LONG_RUN = "LongRun"
    INTERVAL = "Interval"
    TEMPO = "Tempo"
    RACE = "Race"  # Only ever set on the race-day entry, never by week shaping


class Weekday(IntEnum):
    """Weekday number as used by week shapes: 0=Sunday .. 6=Saturday."""

    SUNDAY = 0
    MONDAY = 1
    TUESDAY = 2
    WEDNESDAY = 3
    THURSDAY = 4
    FRIDAY = 5
    SATURDAY = 6

    @classmethod
    def from_name(cls, name: str) -> "Weekday":
        """Parse a weekday name case-insensitively, e.g. ``"saturday"``."""
        try:
            return cls[name.strip().upper()]
        except KeyError:
            raise ValueError(f"Unknown weekday name: {name!r}") from None


# ---------------------------------------------------------------------------
# Week shaping
# ---------------------------------------------------------------------------
DAYS_PER_WEEK = 7
MIN_RUNNING_DAYS = 3
MAX_RUNNING_DAYS = 7
DEFAULT_RUNNING_DAYS = 3
LONG_RUN_DAYS = (Weekday.SATURDAY, Weekday.SUNDAY)
DEFAULT_LONG_RUN_DAY = Weekday.SATURDAY

# ---------------------------------------------------------------------------
# Dosage tables (indexed by RunningLevel)
# ---------------------------------------------------------------------------
LONG_RUN_BASE_MIN: dict[RunningLevel, int] = {
    RunningLevel.BEGINNER: 30,
    RunningLevel.INTERMEDIATE: 45,
    RunningLevel.ADVANCED: 60,
}
LONG_RUN_WEEKLY_INCREMENT_MIN: dict[RunningLevel, int] = {
    RunningLevel.BEGINNER: 5,
    RunningLevel.INTERMEDIATE: 7,
    RunningLevel.ADVANCED: 10,
}
INTERVAL_REPS: dict[RunningLevel, int] = {
    RunningLevel.BEGINNER: 4,
    RunningLevel.INTERMEDIATE: 6,
    RunningLevel.ADVANCED: 8,
}
INTERVAL_DISTANCE_M = 400
TEMPO_MIN: dict[RunningLevel, int] = {
    RunningLevel.BEGINNER: 15,
    RunningLevel.INTERMEDIATE: 20,
    RunningLevel.ADVANCED: 30,
}
EASY_RUN_MIN: dict[RunningLevel, int] = {
    RunningLevel.BEGINNER: 20,
    RunningLevel.INTERMEDIATE: 30,
    RunningLevel.ADVANCED: 40,
}
INTERVAL_PACE: dict[RunningLevel, str] = {
    RunningLevel.BEGINNER: "easy",
    RunningLevel.INTERMEDIATE: "moderate",
    RunningLevel.ADVANCED: "hard",
}

# Long-run ceilings by plan family (minutes)
LONG_RUN_CEILING_DEFAULT_MIN = 90
LONG_RUN_CEILING_HALF_MIN = 120
LONG_RUN_CEILING_MARATHON_MIN = 180
LONG_RUN_CEILING_ULTRA_MIN = 240

# ---------------------------------------------------------------------------
# Taper
# ---------------------------------------------------------------------------
TAPER_LONG_PLAN_WEEKS = 12
TAPER_LONG_PLAN_WINDOW_DAYS = 14
TAPER_SHORT_PLAN_WEEKS = 8
TAPER_SHORT_PLAN_WINDOW_DAYS = 7
TAPER_RACE_WEEK_DAYS = 3  # Easy runs drop harder in the last few days

LONG_RUN_TAPER_PCT = 50
LONG_RUN_TAPER_FLOOR_MIN = 30
INTERVAL_TAPER_PCT = 60
INTERVAL_TAPER_FLOOR_REPS = 2
TEMPO_TAPER_PCT = 60
TEMPO_TAPER_FLOOR_MIN = 10
EASY_RUN_TAPER_PCT = 70
EASY_RUN_TAPER_FLOOR_MIN = 20
EASY_RUN_RACE_WEEK_PCT = 50
EASY_RUN_RACE_WEEK_FLOOR_MIN = 15

# ---------------------------------------------------------------------------
# Plan status
# ---------------------------------------------------------------------------
ENDING_SOON_WINDOW_DAYS = 7
