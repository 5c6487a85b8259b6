"""Duplicate Detector - finds repeated voyage-event records.

Responsible for:
- Building a normalized signature per event
- Grouping events with identical signatures
- Scoring each group's severity and explaining its likely cause
- Analysing events recorded without a voyage number
"""

from typing import Any, Optional

from offshore_activity.config import Settings, get_settings
from offshore_activity.models import (
    NO_DATE,
    NO_VOYAGE,
    DuplicateDetectionResult,
    DuplicateGroup,
    DuplicateRecord,
    NoVoyageEventType,
    NoVoyageSample,
    SeverityLevel,
    VoyageEvent,
    VoyageNumberAnalysis,
)
from offshore_activity.utils.log import get_logger
from offshore_activity.utils.text import clean_voyage_number, contains_any, normalize_text
from offshore_activity.utils.time_utils import date_key


SEVERITY_RANK = {
    SeverityLevel.HIGH: 3,
    SeverityLevel.MEDIUM: 2,
    SeverityLevel.LOW: 1,
}

EXPLANATION_NO_VOYAGE = (
    "Records without voyage numbers - may be legitimate maintenance or port activities"
)
EXPLANATION_IDENTICAL = (
    "Identical records detected - likely true duplicates that should be investigated"
)
EXPLANATION_HOURS_VARY = (
    "Same event on same date with different hours - possible data entry variations"
)
EXPLANATION_SIMILAR = "Similar records detected - review for potential consolidation"


def build_signature(event: VoyageEvent) -> str:
    """Normalized identity of an event.

    Format: vessel|voyageNumber|event|parentEvent|YYYY-MM-DD|location|hours
    """
    voyage_number = clean_voyage_number(event.voyage_number)
    parts = [
        normalize_text(event.vessel),
        normalize_text(voyage_number) if voyage_number else NO_VOYAGE,
        normalize_text(event.event),
        normalize_text(event.parent_event),
        date_key(event.event_date, NO_DATE),
        normalize_text(event.location),
        format_hours(event),
    ]
    return "|".join(parts)


def format_hours(event: VoyageEvent) -> str:
    """Event hours (falling back to final hours) with two decimals."""
    return f"{event.effective_hours:.2f}"


def classify_no_voyage_event(event: VoyageEvent) -> NoVoyageEventType:
    """Likely cause of an event without a voyage number.

    Checked in order: maintenance, port activity, off-hire.
    """
    mission = normalize_text(event.mission)
    parent = normalize_text(event.parent_event)
    name = normalize_text(event.event)
    location = normalize_text(event.location)

    if (
        "maintenance" in mission
        or contains_any(parent, ("maintenance", "repair"))
        or contains_any(name, ("maintenance", "repair", "service"))
    ):
        return NoVoyageEventType.MAINTENANCE

    if (
        contains_any(location, ("fourchon", "port", "base"))
        or "port" in parent
        or contains_any(name, ("fuel", "provisioning"))
        or normalize_text(event.port_type) == "base"
    ):
        return NoVoyageEventType.PORT_ACTIVITY

    if (
        contains_any(mission, ("offhire", "off-hire"))
        or "offhire" in parent
        or contains_any(name, ("offhire", "standby"))
    ):
        return NoVoyageEventType.OFF_HIRE

    return NoVoyageEventType.UNKNOWN


def determine_severity(records: list[DuplicateRecord]) -> SeverityLevel:
    """Severity of a duplicate group.

    High needs a real voyage number, uniform hours and date, and more than
    two records. Medium only needs a uniform date.
    """
    has_voyage_numbers = any(r.has_voyage_number for r in records)
    same_hours = len({r.hours for r in records}) == 1
    same_date = len({r.event_date for r in records}) == 1

    if has_voyage_numbers and same_hours and same_date and len(records) > 2:
        return SeverityLevel.HIGH
    if len(records) > 1 and same_date:
        return SeverityLevel.MEDIUM
    return SeverityLevel.LOW


def explain_group(records: list[DuplicateRecord]) -> str:
    """Human-readable likely cause of a duplicate group."""
    unique_hours = {r.hours for r in records}
    unique_dates = {r.event_date for r in records}

    if not any(r.has_voyage_number for r in records):
        return EXPLANATION_NO_VOYAGE
    if len(unique_hours) == 1 and len(unique_dates) == 1:
        return EXPLANATION_IDENTICAL
    if len(unique_dates) == 1 and len(unique_hours) > 1:
        return EXPLANATION_HOURS_VARY
    return EXPLANATION_SIMILAR


def _percentage(part: int, whole: int) -> float:
    if whole == 0:
        return 0.0
    return part / whole * 100


class DuplicateDetector:
    """Detects duplicate voyage events by normalized signature."""

    def __init__(
        self,
        sample_limit: Optional[int] = None,
        settings: Optional[Settings] = None,
        logger: Optional[Any] = None,
    ):
        """Initialize the detector.

        Args:
            sample_limit: Max events without voyage numbers to sample
                (defaults to settings.no_voyage_sample_limit)
            settings: Configuration (global settings if not provided)
            logger: Structured logger (module logger if not provided)
        """
        settings = settings or get_settings()
        self.sample_limit = (
            sample_limit if sample_limit is not None else settings.no_voyage_sample_limit
        )
        self.log = logger or get_logger(__name__)

    def detect_duplicates(self, events: list[VoyageEvent]) -> DuplicateDetectionResult:
        """Group events by signature and report duplicate groups.

        Args:
            events: Voyage events to analyse

        Returns:
            DuplicateDetectionResult with groups sorted by severity, then size
        """
        buckets: dict[str, list[DuplicateRecord]] = {}
        without_voyage: list[VoyageEvent] = []

        for index, event in enumerate(events):
            if clean_voyage_number(event.voyage_number) is None:
                without_voyage.append(event)
            signature = build_signature(event)
            buckets.setdefault(signature, []).append(self._to_record(index, event))

        groups: list[DuplicateGroup] = []
        total_duplicates = 0
        for signature, records in buckets.items():
            if len(records) < 2:
                continue
            total_duplicates += len(records) - 1
            groups.append(
                DuplicateGroup(
                    signature=signature,
                    count=len(records),
                    records=records,
                    severity_level=determine_severity(records),
                    explanation=explain_group(records),
                )
            )

        groups.sort(key=lambda g: (-SEVERITY_RANK[SeverityLevel(g.severity_level)], -g.count))

        analysis = VoyageNumberAnalysis(
            total_records=len(events),
            records_with_voyage_numbers=len(events) - len(without_voyage),
            records_without_voyage_numbers=len(without_voyage),
            percentage_without_voyage=_percentage(len(without_voyage), len(events)),
            sample_records_without_voyage=[
                self._to_sample(event) for event in without_voyage[: self.sample_limit]
            ],
        )

        result = DuplicateDetectionResult(
            total_duplicates=total_duplicates,
            duplicate_groups=groups,
            records_without_voyage_numbers=len(without_voyage),
            voyage_number_analysis=analysis,
            summary=self._summarize(len(events), total_duplicates, groups, analysis),
        )

        self.log.info(
            "Duplicate detection complete",
            events=len(events),
            duplicates=total_duplicates,
            groups=len(groups),
            without_voyage_number=len(without_voyage),
        )
        return result

    @staticmethod
    def _to_record(index: int, event: VoyageEvent) -> DuplicateRecord:
        return DuplicateRecord(
            index=index,
            vessel=(event.vessel or "").strip(),
            voyage_number=clean_voyage_number(event.voyage_number),
            event=(event.event or "").strip(),
            parent_event=(event.parent_event or "").strip(),
            location=(event.location or "").strip(),
            event_date=date_key(event.event_date, NO_DATE),
            hours=format_hours(event),
            mission=event.mission or "",
        )

    @staticmethod
    def _to_sample(event: VoyageEvent) -> NoVoyageSample:
        return NoVoyageSample(
            vessel=event.vessel or "",
            event=event.event or "",
            parent_event=event.parent_event or "",
            location=event.location or "",
            mission=event.mission or "",
            event_type=classify_no_voyage_event(event),
        )

    @staticmethod
    def _summarize(
        total_events: int,
        total_duplicates: int,
        groups: list[DuplicateGroup],
        analysis: VoyageNumberAnalysis,
    ) -> list[str]:
        by_severity = {level: 0 for level in SeverityLevel}
        for group in groups:
            by_severity[SeverityLevel(group.severity_level)] += 1

        return [
            f"Total voyage events analyzed: {total_events:,}",
            f"Duplicate records found: {total_duplicates} "
            f"({_percentage(total_duplicates, total_events):.2f}%)",
            f"Duplicate groups identified: {len(groups)}",
            f"High severity duplicates: {by_severity[SeverityLevel.HIGH]}",
            f"Medium severity duplicates: {by_severity[SeverityLevel.MEDIUM]}",
            f"Low severity duplicates: {by_severity[SeverityLevel.LOW]}",
            f"Records without voyage numbers: {analysis.records_without_voyage_numbers} "
            f"({analysis.percentage_without_voyage:.1f}%)",
        ]
