"""Duplicate detection report entities."""

from enum import Enum
from typing import Optional

from pydantic import Field

from offshore_activity.models.base import OffshoreModel


NO_VOYAGE = "NO_VOYAGE"
NO_DATE = "NO_DATE"


class SeverityLevel(str, Enum):
    """How likely a duplicate group is a real data problem."""
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class NoVoyageEventType(str, Enum):
    """Likely cause of an event recorded without a voyage number."""
    MAINTENANCE = "maintenance"
    PORT_ACTIVITY = "port_activity"
    OFF_HIRE = "off_hire"
    UNKNOWN = "unknown"


class DuplicateRecord(OffshoreModel):
    """One member of a duplicate group, with trimmed display values."""

    index: int = Field(..., ge=0, description="Position in the input collection")
    vessel: str = ""
    voyage_number: Optional[str] = None
    event: str = ""
    parent_event: str = ""
    location: str = ""
    event_date: str = NO_DATE
    hours: str = "0.00"
    mission: str = ""

    @property
    def has_voyage_number(self) -> bool:
        return self.voyage_number is not None


class DuplicateGroup(OffshoreModel):
    """Records sharing one normalized signature."""

    signature: str
    count: int = Field(..., ge=2)
    records: list[DuplicateRecord]
    severity_level: SeverityLevel
    explanation: str


class NoVoyageSample(OffshoreModel):
    """A sampled event without a voyage number and its likely cause."""

    vessel: str = ""
    event: str = ""
    parent_event: str = ""
    location: str = ""
    mission: str = ""
    event_type: NoVoyageEventType = NoVoyageEventType.UNKNOWN


class VoyageNumberAnalysis(OffshoreModel):
    """Voyage-number coverage of the analysed events."""

    total_records: int = 0
    records_with_voyage_numbers: int = 0
    records_without_voyage_numbers: int = 0
    percentage_without_voyage: float = 0.0
    sample_records_without_voyage: list[NoVoyageSample] = Field(default_factory=list)


class DuplicateDetectionResult(OffshoreModel):
    """Full duplicate detection report for a voyage-event collection."""

    total_duplicates: int = 0
    duplicate_groups: list[DuplicateGroup] = Field(default_factory=list)
    records_without_voyage_numbers: int = 0
    voyage_number_analysis: VoyageNumberAnalysis = Field(default_factory=VoyageNumberAnalysis)
    summary: list[str] = Field(default_factory=list)
