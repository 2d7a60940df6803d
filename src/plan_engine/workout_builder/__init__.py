"""Workout builder — turns week-shape tags into dosed workout descriptions."""

from plan_engine.workout_builder.description_builder import describe

__all__ = ["describe"]
