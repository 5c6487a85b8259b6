"""Services for the Offshore Activity Classification System.

Components:
- location_classifier: Keyword classification of location strings
- RecordLinker: Vessel + time-window linkage between record kinds
- VoyageClassifier: Manifest-based Drilling/Production voyage verdicts
- DrillingFilterCascade: Drilling-only filtering of four datasets
- DuplicateDetector: Signature-based duplicate voyage-event detection
"""

from offshore_activity.services.location_classifier import (
    classify_location,
    is_drilling_scope,
    references_asset,
    resolve_asset,
)
from offshore_activity.services.record_linker import RecordLinker
from offshore_activity.services.voyage_classifier import VoyageClassifier
from offshore_activity.services.drilling_filter import DrillingFilterCascade
from offshore_activity.services.duplicate_detector import DuplicateDetector

__all__ = [
    "classify_location",
    "is_drilling_scope",
    "references_asset",
    "resolve_asset",
    "RecordLinker",
    "VoyageClassifier",
    "DrillingFilterCascade",
    "DuplicateDetector",
]
