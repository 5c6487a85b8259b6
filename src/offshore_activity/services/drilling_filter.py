"""Drilling Filter Cascade - narrows datasets to drilling-only records.

Only active for a "Thunder Horse (Drilling)" or "Mad Dog (Drilling)"
location filter; every other filter passes data through untouched. When no
voyage to the asset classifies as Drilling, each filter returns its input
unfiltered rather than an empty collection.

Linkage rules per dataset:
- Manifests: linked (2 days) to a drilling voyage
- Voyage events: linked (7 days, voyage number when present) to a drilling voyage
- Bulk actions: bound for the asset, and either a drilling fluid or linked
  (3 days) to a drilling voyage
- Cost allocations: text only, asset reference plus a drilling project
  type, department or location text
"""

from typing import Any, Callable, Iterable, Optional, TypeVar

from offshore_activity.config import Settings
from offshore_activity.models import (
    BulkAction,
    CostAllocation,
    DrillingOnlyFilterResult,
    FilterResult,
    FilterStats,
    Manifest,
    Voyage,
    VoyageEvent,
)
from offshore_activity.services.location_classifier import (
    any_references_asset,
    is_drilling_scope,
    resolve_asset,
)
from offshore_activity.services.record_linker import RecordLinker
from offshore_activity.services.voyage_classifier import VoyageClassifier
from offshore_activity.utils.log import get_logger
from offshore_activity.utils.text import contains_any, normalize_text


R = TypeVar("R")

DRILLING_FLUID_MARKERS = ("drilling", "mud", "brine")
DRILLING_PROJECT_TYPES = ("drilling", "completions")
DRILLING_DEPARTMENTS = ("drilling",)


class DrillingFilterCascade:
    """Filters manifests, events, bulk actions and cost lines to drilling only."""

    def __init__(
        self,
        classifier: Optional[VoyageClassifier] = None,
        linker: Optional[RecordLinker] = None,
        settings: Optional[Settings] = None,
        logger: Optional[Any] = None,
    ):
        """Initialize the cascade.

        Args:
            classifier: Voyage classifier (built from the linker if not provided)
            linker: Record linker (built from settings if not provided)
            settings: Configuration for the default linker
            logger: Structured logger (module logger if not provided)
        """
        self.log = logger or get_logger(__name__)
        if classifier is not None:
            self.classifier = classifier
            self.linker = linker or classifier.linker
        else:
            self.linker = linker or RecordLinker(settings)
            self.classifier = VoyageClassifier(self.linker, logger=self.log)

    def apply(
        self,
        manifests: list[Manifest],
        voyage_events: list[VoyageEvent],
        bulk_actions: list[BulkAction],
        cost_allocations: list[CostAllocation],
        voyages: list[Voyage],
        location_filter: Optional[str],
    ) -> DrillingOnlyFilterResult:
        """Filter all four datasets for one location filter.

        The drilling-voyage set is computed once and shared by every filter.

        Args:
            manifests: Vessel manifests
            voyage_events: Voyage events
            bulk_actions: Bulk actions
            cost_allocations: Cost allocation rows
            voyages: Voyage list used for classification and linkage
            location_filter: Active location filter string

        Returns:
            DrillingOnlyFilterResult with the filtered collections and counts
        """
        drilling_ids: set[str] = set()
        if is_drilling_scope(location_filter):
            drilling_ids = self.classifier.get_drilling_voyage_ids(
                voyages, manifests, location_filter
            )

        m = self.filter_manifests(manifests, voyages, drilling_ids, location_filter)
        e = self.filter_voyage_events(voyage_events, voyages, drilling_ids, location_filter)
        b = self.filter_bulk_actions(bulk_actions, voyages, drilling_ids, location_filter)
        c = self.filter_cost_allocations(cost_allocations, drilling_ids, location_filter)

        return DrillingOnlyFilterResult(
            location_filter=location_filter or "",
            drilling_voyage_ids=sorted(drilling_ids),
            manifests=m.records,
            voyage_events=e.records,
            bulk_actions=b.records,
            cost_allocations=c.records,
            manifests_stats=m.stats,
            voyage_events_stats=e.stats,
            bulk_actions_stats=b.stats,
            cost_allocations_stats=c.stats,
        )

    def filter_manifests(
        self,
        manifests: list[Manifest],
        voyages: list[Voyage],
        drilling_voyage_ids: set[str],
        location_filter: Optional[str],
    ) -> FilterResult[Manifest]:
        """Keep manifests linked to a drilling voyage."""
        def keep(manifest: Manifest) -> bool:
            linked = self.linker.voyages_for_manifest(manifest, voyages)
            return self._any_drilling(linked, drilling_voyage_ids)

        return self._run("manifests", manifests, drilling_voyage_ids, location_filter, keep)

    def filter_voyage_events(
        self,
        voyage_events: list[VoyageEvent],
        voyages: list[Voyage],
        drilling_voyage_ids: set[str],
        location_filter: Optional[str],
    ) -> FilterResult[VoyageEvent]:
        """Keep voyage events linked to a drilling voyage."""
        def keep(event: VoyageEvent) -> bool:
            linked = self.linker.voyages_for_event(event, voyages)
            return self._any_drilling(linked, drilling_voyage_ids)

        return self._run("voyage_events", voyage_events, drilling_voyage_ids, location_filter, keep)

    def filter_bulk_actions(
        self,
        bulk_actions: list[BulkAction],
        voyages: list[Voyage],
        drilling_voyage_ids: set[str],
        location_filter: Optional[str],
    ) -> FilterResult[BulkAction]:
        """Keep bulk actions bound for the asset that are drilling related.

        Drilling fluids (flagged, or mud/brine/drilling by type) are kept
        without linkage; anything else must link to a drilling voyage.
        """
        asset = resolve_asset(location_filter)

        def keep(action: BulkAction) -> bool:
            if not any_references_asset((action.destination_port, action.at_port), asset):
                return False
            if self.is_drilling_fluid(action):
                return True
            linked = self.linker.voyages_for_bulk_action(action, voyages)
            return self._any_drilling(linked, drilling_voyage_ids)

        return self._run("bulk_actions", bulk_actions, drilling_voyage_ids, location_filter, keep)

    def filter_cost_allocations(
        self,
        cost_allocations: list[CostAllocation],
        drilling_voyage_ids: set[str],
        location_filter: Optional[str],
    ) -> FilterResult[CostAllocation]:
        """Keep cost lines for the asset whose project or location is drilling."""
        asset = resolve_asset(location_filter)

        def keep(allocation: CostAllocation) -> bool:
            texts = (
                allocation.location_reference,
                allocation.rig_location,
                allocation.description,
            )
            if not any_references_asset(texts, asset):
                return False
            if normalize_text(allocation.project_type) in DRILLING_PROJECT_TYPES:
                return True
            if normalize_text(allocation.department) in DRILLING_DEPARTMENTS:
                return True
            return any("drilling" in normalize_text(text) for text in texts)

        return self._run(
            "cost_allocations", cost_allocations, drilling_voyage_ids, location_filter, keep
        )

    @staticmethod
    def is_drilling_fluid(action: BulkAction) -> bool:
        """Flagged as drilling fluid, or a drilling/mud/brine bulk type."""
        if action.is_drilling_fluid:
            return True
        return contains_any(normalize_text(action.bulk_type), DRILLING_FLUID_MARKERS)

    @staticmethod
    def _any_drilling(voyages: Iterable[Voyage], drilling_voyage_ids: set[str]) -> bool:
        return any(v.standardized_voyage_id in drilling_voyage_ids for v in voyages)

    def _run(
        self,
        dataset: str,
        records: list[R],
        drilling_voyage_ids: set[str],
        location_filter: Optional[str],
        keep: Callable[[R], bool],
    ) -> FilterResult[R]:
        """Apply the scope guard and fallback, then a stable filter."""
        records = list(records)
        original = len(records)

        if not is_drilling_scope(location_filter):
            return FilterResult(records, FilterStats.from_counts(original, original))

        if not drilling_voyage_ids:
            self.log.warning(
                "No drilling voyages identified, returning unfiltered data",
                dataset=dataset,
                location_filter=location_filter,
                records=original,
            )
            return FilterResult(records, FilterStats.from_counts(original, original, fallback=True))

        kept = [record for record in records if keep(record)]
        stats = FilterStats.from_counts(original, len(kept))
        self.log.info(
            "Drilling-only filter applied",
            dataset=dataset,
            location_filter=location_filter,
            original=stats.original,
            drilling_only=stats.drilling_only,
            removed=stats.removed,
        )
        return FilterResult(kept, stats)
