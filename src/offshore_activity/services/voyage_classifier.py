"""Voyage Classifier - decides whether a voyage served drilling or production.

Responsible for:
- Selecting voyages that visit the target asset
- Linking each voyage to its manifests (vessel + 2-day window)
- Aggregating manifest location verdicts into one voyage verdict
- Resolving Mixed evidence by strict majority (ties go to Production)
- Summarizing verdicts, keeping voyages without evidence out of totals
"""

from typing import Any, Iterable, Optional

from offshore_activity.config import Settings
from offshore_activity.models import (
    Asset,
    ClassificationSummary,
    Confidence,
    LocationActivity,
    Manifest,
    ManifestEvidence,
    Voyage,
    VoyageClassification,
    VoyageClassificationResult,
)
from offshore_activity.services.location_classifier import (
    any_references_asset,
    classify_location,
    references_asset,
    resolve_asset,
)
from offshore_activity.services.record_linker import RecordLinker
from offshore_activity.utils.log import get_logger


class VoyageClassifier:
    """Classifies voyages to one asset as Drilling or Production from manifests."""

    def __init__(
        self,
        linker: Optional[RecordLinker] = None,
        settings: Optional[Settings] = None,
        logger: Optional[Any] = None,
    ):
        """Initialize the classifier.

        Args:
            linker: Record linker to use (built from settings if not provided)
            settings: Configuration for the default linker
            logger: Structured logger (module logger if not provided)
        """
        self.linker = linker or RecordLinker(settings)
        self.log = logger or get_logger(__name__)

    def classify_voyages(
        self,
        voyages: Iterable[Voyage],
        manifests: list[Manifest],
        asset_filter: Optional[str],
    ) -> dict[str, VoyageClassification]:
        """Classify every voyage that visits the filter's asset.

        Args:
            voyages: Voyages to classify
            manifests: All manifests available for linkage
            asset_filter: Location filter naming Thunder Horse or Mad Dog

        Returns:
            Map of voyage ID to resolved verdict (Drilling, Production,
            Unknown or NoEvidence). Empty when the filter names neither asset.
        """
        return {
            result.voyage_id: VoyageClassification(result.resolved)
            for result in self.classify_voyage_details(voyages, manifests, asset_filter)
        }

    def classify_voyage_details(
        self,
        voyages: Iterable[Voyage],
        manifests: list[Manifest],
        asset_filter: Optional[str],
    ) -> list[VoyageClassificationResult]:
        """Classify voyages and keep the supporting evidence.

        Returns:
            One result per in-scope voyage, in input order
        """
        asset = resolve_asset(asset_filter)
        if asset is None:
            return []

        results = [
            self.classify_voyage(voyage, manifests, asset)
            for voyage in voyages
            if self.visits_asset(voyage, asset)
        ]

        summary = self.summarize(results, asset)
        self.log.info(
            "Voyage classification complete",
            asset=asset.value,
            voyages=len(results),
            drilling=summary.drilling,
            production=summary.production,
            mixed=summary.mixed,
            unknown=summary.unknown,
            no_evidence=summary.no_evidence,
        )
        return results

    def classify_voyage(
        self,
        voyage: Voyage,
        manifests: list[Manifest],
        asset: Asset,
    ) -> VoyageClassificationResult:
        """Classify a single voyage against an asset.

        Args:
            voyage: The voyage to classify
            manifests: Manifests to link from
            asset: Target asset

        Returns:
            VoyageClassificationResult with raw and resolved verdicts
        """
        linked = self.linker.link_manifests(voyage, manifests)
        target = [m for m in linked if references_asset(m.offshore_location, asset)]

        details = [
            ManifestEvidence(
                offshore_location=m.offshore_location or "",
                manifest_date=m.manifest_date,
                classification=classify_location(m.offshore_location),
            )
            for m in target
        ]
        drilling = sum(1 for d in details if d.classification == LocationActivity.DRILLING)
        production = sum(1 for d in details if d.classification == LocationActivity.PRODUCTION)
        unknown = len(details) - drilling - production

        classification = self.verdict_from_counts(len(details), drilling, production)
        resolved = self.resolve(classification, drilling, production)
        confidence = self.grade_confidence(classification, drilling, production, unknown)

        if resolved == VoyageClassification.NO_EVIDENCE:
            self.log.debug(
                "Voyage excluded, no manifest evidence",
                voyage_id=voyage.standardized_voyage_id,
                manifests=len(details),
            )
        elif classification == VoyageClassification.MIXED:
            self.log.debug(
                "Mixed voyage resolved",
                voyage_id=voyage.standardized_voyage_id,
                drilling=drilling,
                production=production,
                resolved=resolved.value,
            )

        return VoyageClassificationResult(
            voyage_id=voyage.standardized_voyage_id,
            vessel=voyage.vessel or "",
            asset=asset,
            classification=classification,
            resolved=resolved,
            confidence=confidence,
            linked_manifests=len(linked),
            manifest_count=len(details),
            drilling_manifests=drilling,
            production_manifests=production,
            unknown_manifests=unknown,
            manifest_details=details,
        )

    @staticmethod
    def visits_asset(voyage: Voyage, asset: Asset) -> bool:
        """Whether the voyage route mentions the asset."""
        return references_asset(voyage.locations, asset) or any_references_asset(
            voyage.location_list, asset
        )

    @staticmethod
    def verdict_from_counts(
        manifest_count: int, drilling: int, production: int
    ) -> VoyageClassification:
        """Raw verdict from manifest location counts."""
        if manifest_count == 0:
            return VoyageClassification.UNKNOWN
        if drilling > 0 and production > 0:
            return VoyageClassification.MIXED
        if drilling > 0:
            return VoyageClassification.DRILLING
        if production > 0:
            return VoyageClassification.PRODUCTION
        return VoyageClassification.NO_EVIDENCE

    @staticmethod
    def resolve(
        classification: VoyageClassification, drilling: int, production: int
    ) -> VoyageClassification:
        """Resolve Mixed by strict majority; ties go to Production."""
        if classification != VoyageClassification.MIXED:
            return classification
        if drilling > production:
            return VoyageClassification.DRILLING
        return VoyageClassification.PRODUCTION

    @staticmethod
    def grade_confidence(
        classification: VoyageClassification,
        drilling: int,
        production: int,
        unknown: int,
    ) -> Confidence:
        """Confidence grade for a verdict."""
        if classification in (VoyageClassification.UNKNOWN, VoyageClassification.NO_EVIDENCE):
            return Confidence.LOW
        if classification == VoyageClassification.MIXED:
            return Confidence.MEDIUM
        winning = max(drilling, production)
        if unknown == 0:
            return Confidence.HIGH
        if unknown < winning:
            return Confidence.MEDIUM
        return Confidence.LOW

    def summarize(
        self,
        results: Iterable[VoyageClassificationResult],
        asset: Optional[Asset] = None,
    ) -> ClassificationSummary:
        """Aggregate verdicts.

        Mixed voyages count toward their resolved side and toward ``mixed``.
        NoEvidence voyages only count toward ``no_evidence``.
        """
        summary = ClassificationSummary(asset=asset)
        for result in results:
            if result.classification == VoyageClassification.MIXED:
                summary.mixed += 1
            match VoyageClassification(result.resolved):
                case VoyageClassification.DRILLING:
                    summary.drilling += 1
                case VoyageClassification.PRODUCTION:
                    summary.production += 1
                case VoyageClassification.UNKNOWN:
                    summary.unknown += 1
                case VoyageClassification.NO_EVIDENCE:
                    summary.no_evidence += 1
        return summary

    def get_drilling_voyage_ids(
        self,
        voyages: Iterable[Voyage],
        manifests: list[Manifest],
        asset_filter: Optional[str],
    ) -> set[str]:
        """IDs of voyages whose resolved verdict is Drilling."""
        classifications = self.classify_voyages(voyages, manifests, asset_filter)
        return {
            voyage_id
            for voyage_id, classification in classifications.items()
            if classification == VoyageClassification.DRILLING
        }

    def filter_voyages_by_activity(
        self,
        voyages: list[Voyage],
        manifests: list[Manifest],
        asset_filter: Optional[str],
        activity: VoyageClassification,
        high_confidence_only: bool = False,
    ) -> list[Voyage]:
        """Voyages to the filter's asset whose resolved verdict is ``activity``.

        Args:
            voyages: Candidate voyages
            manifests: Manifests for linkage
            asset_filter: Location filter naming Thunder Horse or Mad Dog
            activity: Resolved verdict to keep, usually Drilling or Production
            high_confidence_only: Only keep High-confidence verdicts

        Returns:
            Matching voyages in input order
        """
        selected = {
            result.voyage_id
            for result in self.classify_voyage_details(voyages, manifests, asset_filter)
            if result.resolved == activity
            and (not high_confidence_only or result.confidence == Confidence.HIGH)
        }
        return [v for v in voyages if v.standardized_voyage_id in selected]
