"""Results of drilling-only filtering."""

from dataclasses import dataclass, field
from typing import Generic, TypeVar

from pydantic import Field

from offshore_activity.models.base import OffshoreModel
from offshore_activity.models.bulk_action import BulkAction
from offshore_activity.models.cost_allocation import CostAllocation
from offshore_activity.models.manifest import Manifest
from offshore_activity.models.voyage_event import VoyageEvent


R = TypeVar("R")


class FilterStats(OffshoreModel):
    """Record counts before and after a filter."""

    original: int = Field(0, ge=0)
    drilling_only: int = Field(0, ge=0)
    removed: int = Field(0, ge=0)
    fallback: bool = Field(
        default=False, description="True when the input was returned unfiltered"
    )

    @classmethod
    def from_counts(cls, original: int, kept: int, fallback: bool = False) -> "FilterStats":
        return cls(
            original=original,
            drilling_only=kept,
            removed=original - kept,
            fallback=fallback,
        )


@dataclass
class FilterResult(Generic[R]):
    """Filtered records together with their counts."""

    records: list[R]
    stats: FilterStats = field(default_factory=FilterStats)


class DrillingOnlyFilterResult(OffshoreModel):
    """All four drilling-only collections for one location filter."""

    location_filter: str
    drilling_voyage_ids: list[str] = Field(default_factory=list)
    manifests: list[Manifest] = Field(default_factory=list)
    voyage_events: list[VoyageEvent] = Field(default_factory=list)
    bulk_actions: list[BulkAction] = Field(default_factory=list)
    cost_allocations: list[CostAllocation] = Field(default_factory=list)
    manifests_stats: FilterStats = Field(default_factory=FilterStats)
    voyage_events_stats: FilterStats = Field(default_factory=FilterStats)
    bulk_actions_stats: FilterStats = Field(default_factory=FilterStats)
    cost_allocations_stats: FilterStats = Field(default_factory=FilterStats)
