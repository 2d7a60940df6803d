"""Data models for the training-plan engine."""

from plan_engine.models.catalog import (
    DEFAULT_CATALOG,
    PlanCatalog,
    TrainingPlanCatalogEntry,
)
from plan_engine.models.dated_workout import DatedWorkout, PlanWindow
from plan_engine.models.enums import PlanId, RunningLevel, Weekday, WorkoutType
from plan_engine.models.profile import UserProfile

__all__ = [
    "DEFAULT_CATALOG",
    "DatedWorkout",
    "PlanCatalog",
    "PlanId",
    "PlanWindow",
    "RunningLevel",
    "TrainingPlanCatalogEntry",
    "UserProfile",
    "Weekday",
    "WorkoutType",
]
