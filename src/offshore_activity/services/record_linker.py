"""Record Linker - ties voyages to records of other kinds.

Datasets share no common key, so linkage uses exact (normalized) vessel-name
equality plus a per-kind time window around the voyage start:

- manifests: 2 days
- voyage events: 7 days, plus voyage-number equality when both sides have one
- bulk actions: 3 days
"""

from datetime import datetime
from typing import Callable, Iterable, Optional, TypeVar

from offshore_activity.config import Settings, get_settings
from offshore_activity.models import BulkAction, Manifest, Voyage, VoyageEvent
from offshore_activity.utils.text import clean_voyage_number, normalize_vessel_name
from offshore_activity.utils.time_utils import days_to_ms, within_window


C = TypeVar("C")


class RecordLinker:
    """Matches records to voyages by vessel name and time window."""

    def __init__(self, settings: Optional[Settings] = None):
        """Initialize the linker.

        Args:
            settings: Window configuration (global settings if not provided)
        """
        settings = settings or get_settings()
        self.manifest_tolerance_ms = days_to_ms(settings.manifest_window_days)
        self.voyage_event_tolerance_ms = days_to_ms(settings.voyage_event_window_days)
        self.bulk_action_tolerance_ms = days_to_ms(settings.bulk_action_window_days)

    def find_matches(
        self,
        anchor_vessel: Optional[str],
        anchor_time: Optional[datetime],
        candidates: Iterable[C],
        tolerance_ms: int,
        *,
        vessel_of: Callable[[C], Optional[str]],
        time_of: Callable[[C], Optional[datetime]],
    ) -> list[C]:
        """Find candidates on the same vessel within the time tolerance.

        Args:
            anchor_vessel: Vessel name of the record being linked from
            anchor_time: Timestamp of the record being linked from
            candidates: Records to search, in order
            tolerance_ms: Max absolute time difference in milliseconds
            vessel_of: Extracts a candidate's vessel name
            time_of: Extracts a candidate's timestamp

        Returns:
            Matching candidates in input order. Candidates without a
            timestamp never match; nothing matches an anchor with no vessel
            name or no time.
        """
        vessel = normalize_vessel_name(anchor_vessel)
        if not vessel or anchor_time is None:
            return []

        return [
            candidate
            for candidate in candidates
            if normalize_vessel_name(vessel_of(candidate)) == vessel
            and within_window(time_of(candidate), anchor_time, tolerance_ms)
        ]

    # Voyage -> records

    def link_manifests(self, voyage: Voyage, manifests: Iterable[Manifest]) -> list[Manifest]:
        """Manifests belonging to a voyage."""
        return self.find_matches(
            voyage.vessel,
            voyage.start_date,
            manifests,
            self.manifest_tolerance_ms,
            vessel_of=lambda m: m.transporter,
            time_of=lambda m: m.manifest_date,
        )

    # Record -> voyage

    def voyages_for_manifest(self, manifest: Manifest, voyages: Iterable[Voyage]) -> list[Voyage]:
        """Voyages a manifest links to."""
        return self.find_matches(
            manifest.transporter,
            manifest.manifest_date,
            voyages,
            self.manifest_tolerance_ms,
            vessel_of=lambda v: v.vessel,
            time_of=lambda v: v.start_date,
        )

    def voyages_for_event(self, event: VoyageEvent, voyages: Iterable[Voyage]) -> list[Voyage]:
        """Voyages an event links to."""
        matches = self.find_matches(
            event.vessel,
            event.event_date,
            voyages,
            self.voyage_event_tolerance_ms,
            vessel_of=lambda v: v.vessel,
            time_of=lambda v: v.start_date,
        )
        return [v for v in matches if self.voyage_numbers_agree(v, event)]

    def voyages_for_bulk_action(self, action: BulkAction, voyages: Iterable[Voyage]) -> list[Voyage]:
        """Voyages a bulk action links to."""
        return self.find_matches(
            action.vessel_name,
            action.start_date,
            voyages,
            self.bulk_action_tolerance_ms,
            vessel_of=lambda v: v.vessel,
            time_of=lambda v: v.start_date,
        )

    @staticmethod
    def voyage_numbers_agree(voyage: Voyage, event: VoyageEvent) -> bool:
        """Voyage numbers must be equal when both sides carry one."""
        voyage_number = clean_voyage_number(voyage.voyage_number)
        event_number = clean_voyage_number(event.voyage_number)
        if voyage_number is None or event_number is None:
            return True
        return voyage_number == event_number
