"""Training-plan catalog — the fixed table of selectable plans.

The catalog is read-only configuration injected into the engine. Use
``PlanCatalog.from_entries()`` to build a custom one (e.g. in tests).
"""

from __future__ import annotations

from dataclasses import dataclass, field

from plan_engine.models.enums import PlanId


@dataclass(frozen=True)
class TrainingPlanCatalogEntry:
    """A single selectable training plan."""

    plan_id: PlanId
    label: str
    duration_weeks: int

    @property
    def duration_days(self) -> int:
        return self.duration_weeks * 7


@dataclass(frozen=True)
class PlanCatalog:
    """Frozen lookup table of training plans keyed by plan identifier."""

    entries: tuple[TrainingPlanCatalogEntry, ...] = field(default_factory=tuple)

    @classmethod
    def from_entries(cls, *entries: TrainingPlanCatalogEntry) -> PlanCatalog:
        return cls(entries=tuple(entries))

    def get(self, plan_id: str | PlanId | None) -> TrainingPlanCatalogEntry | None:
        """Return the entry for *plan_id*, or None if unknown or unset."""
        if not plan_id:
            return None
        key = plan_id.value if isinstance(plan_id, PlanId) else str(plan_id)
        for entry in self.entries:
            if entry.plan_id.value == key:
                return entry
        return None

    def __contains__(self, plan_id: object) -> bool:
        return isinstance(plan_id, (str, PlanId)) and self.get(plan_id) is not None

    def __iter__(self):
        return iter(self.entries)

    def __len__(self) -> int:
        return len(self.entries)


DEFAULT_CATALOG = PlanCatalog.from_entries(
    TrainingPlanCatalogEntry(PlanId.FIVE_K, "5K Race Plan", 8),
    TrainingPlanCatalogEntry(PlanId.TEN_K, "10K Race Plan", 10),
    TrainingPlanCatalogEntry(PlanId.HALF_MARATHON, "Half Marathon Plan", 12),
    TrainingPlanCatalogEntry(PlanId.MARATHON, "Marathon Plan", 16),
    TrainingPlanCatalogEntry(PlanId.ULTRA, "Ultra Marathon (50k+) Plan", 20),
)
