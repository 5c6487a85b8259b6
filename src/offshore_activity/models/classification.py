"""Classification outcomes for locations and voyages."""

from datetime import datetime
from enum import Enum
from typing import Optional

from pydantic import Field

from offshore_activity.models.base import OffshoreModel


class Asset(str, Enum):
    """Oil-field assets with split drilling/production activity."""
    THUNDER_HORSE = "Thunder Horse"
    MAD_DOG = "Mad Dog"

    @property
    def pattern(self) -> str:
        """Lowercase text used to detect references to the asset."""
        return self.value.lower()

    @property
    def drilling_scope(self) -> str:
        """Location filter string that activates drilling-only filtering."""
        return f"{self.value} (Drilling)"


class LocationActivity(str, Enum):
    """Activity implied by a single location string."""
    DRILLING = "Drilling"
    PRODUCTION = "Production"
    UNKNOWN = "Unknown"


class VoyageClassification(str, Enum):
    """Per-voyage verdict.

    MIXED only appears as a raw verdict; it is always resolved to DRILLING
    or PRODUCTION. UNKNOWN means no asset-matching manifest was linked;
    NO_EVIDENCE means manifests were linked but none of them said anything.
    """
    DRILLING = "Drilling"
    PRODUCTION = "Production"
    MIXED = "Mixed"
    UNKNOWN = "Unknown"
    NO_EVIDENCE = "NoEvidence"


class Confidence(str, Enum):
    """Confidence grade for a voyage verdict."""
    HIGH = "High"
    MEDIUM = "Medium"
    LOW = "Low"


class ManifestEvidence(OffshoreModel):
    """One linked manifest and what its location says."""

    offshore_location: str = ""
    manifest_date: Optional[datetime] = None
    classification: LocationActivity


class VoyageClassificationResult(OffshoreModel):
    """Classification of one voyage against one asset."""

    voyage_id: str
    vessel: str = ""
    asset: Asset
    classification: VoyageClassification = Field(
        ..., description="Raw verdict, may be Mixed"
    )
    resolved: VoyageClassification = Field(
        ..., description="Verdict after Mixed resolution, never Mixed"
    )
    confidence: Confidence = Confidence.LOW
    linked_manifests: int = Field(0, ge=0, description="Manifests linked by vessel and time")
    manifest_count: int = Field(0, ge=0, description="Linked manifests referencing the asset")
    drilling_manifests: int = Field(0, ge=0)
    production_manifests: int = Field(0, ge=0)
    unknown_manifests: int = Field(0, ge=0)
    manifest_details: list[ManifestEvidence] = Field(default_factory=list)

    @property
    def is_mixed(self) -> bool:
        return self.classification == VoyageClassification.MIXED


class ClassificationSummary(OffshoreModel):
    """Aggregate verdict counts for one asset.

    ``total`` only counts voyages with a Drilling or Production verdict.
    """

    asset: Optional[Asset] = None
    drilling: int = 0
    production: int = 0
    mixed: int = 0
    unknown: int = 0
    no_evidence: int = 0

    @property
    def total(self) -> int:
        return self.drilling + self.production

    @property
    def drilling_percentage(self) -> float:
        if self.total == 0:
            return 0.0
        return self.drilling / self.total * 100
