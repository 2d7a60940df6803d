"""Exception hierarchy for the training-plan engine.

The public engine operations never let these escape; they are raised by
internal helpers and by the profile document adapter.
"""

from __future__ import annotations

from datetime import date


class PlanEngineError(Exception):
    """Base exception for all plan_engine errors."""


class ProfileError(PlanEngineError):
    """The profile is missing required fields or holds malformed values."""


class UnknownPlanError(PlanEngineError):
    """The profile references a plan identifier absent from the catalog."""

    def __init__(self, plan_id: str) -> None:
        super().__init__(f"Training plan details not found for {plan_id!r}")
        self.plan_id = plan_id


class InvalidPlanWindowError(PlanEngineError):
    """The race date falls before the plan start date."""

    def __init__(self, start_date: date, race_date: date) -> None:
        super().__init__(
            f"Race date {race_date.isoformat()} is before plan start date "
            f"{start_date.isoformat()}"
        )
        self.start_date = start_date
        self.race_date = race_date
