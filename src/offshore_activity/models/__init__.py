"""Data models for the Offshore Activity Classification System.

All entities use Pydantic for validation and serialization. Input records
(voyages, manifests, voyage events, bulk actions, cost allocations) are
frozen; result models are plain and serializable for reporting layers.
"""

from offshore_activity.models.base import OffshoreModel, RecordModel
from offshore_activity.models.voyage import Voyage
from offshore_activity.models.manifest import Manifest
from offshore_activity.models.voyage_event import VoyageEvent
from offshore_activity.models.bulk_action import BulkAction
from offshore_activity.models.cost_allocation import CostAllocation
from offshore_activity.models.classification import (
    Asset,
    ClassificationSummary,
    Confidence,
    LocationActivity,
    ManifestEvidence,
    VoyageClassification,
    VoyageClassificationResult,
)
from offshore_activity.models.filtering import (
    DrillingOnlyFilterResult,
    FilterResult,
    FilterStats,
)
from offshore_activity.models.duplicate import (
    NO_DATE,
    NO_VOYAGE,
    DuplicateDetectionResult,
    DuplicateGroup,
    DuplicateRecord,
    NoVoyageEventType,
    NoVoyageSample,
    SeverityLevel,
    VoyageNumberAnalysis,
)

__all__ = [
    # Base
    "OffshoreModel",
    "RecordModel",
    # Records
    "Voyage",
    "Manifest",
    "VoyageEvent",
    "BulkAction",
    "CostAllocation",
    # Classification
    "Asset",
    "ClassificationSummary",
    "Confidence",
    "LocationActivity",
    "ManifestEvidence",
    "VoyageClassification",
    "VoyageClassificationResult",
    # Filtering
    "DrillingOnlyFilterResult",
    "FilterResult",
    "FilterStats",
    # Duplicates
    "NO_DATE",
    "NO_VOYAGE",
    "DuplicateDetectionResult",
    "DuplicateGroup",
    "DuplicateRecord",
    "NoVoyageEventType",
    "NoVoyageSample",
    "SeverityLevel",
    "VoyageNumberAnalysis",
]
