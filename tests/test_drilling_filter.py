"""Tests for the DrillingFilterCascade service.

Tests cover:
- Pass-through for non-drilling location filters
- Fallback to unfiltered data when no drilling voyage exists
- Per-dataset linkage rules (manifests, events, bulk actions, cost lines)
- One-shot apply() with counts
"""

from datetime import datetime, timedelta
from unittest.mock import MagicMock

import pytest

from offshore_activity.config import Settings
from offshore_activity.models import (
    BulkAction,
    CostAllocation,
    Manifest,
    Voyage,
    VoyageEvent,
)
from offshore_activity.services import DrillingFilterCascade, RecordLinker, VoyageClassifier


START = datetime(2024, 1, 10)
TH_DRILLING = "Thunder Horse (Drilling)"


@pytest.fixture
def logger():
    return MagicMock()


@pytest.fixture
def cascade(logger):
    linker = RecordLinker(Settings(_env_file=None))
    return DrillingFilterCascade(VoyageClassifier(linker, logger=logger), logger=logger)


@pytest.fixture
def voyages():
    """A drilling voyage (Vessel A) and a production voyage (Vessel B)."""
    return [
        Voyage(
            standardized_voyage_id="drill-1",
            vessel="Vessel A",
            start_date=START,
            locations="Fourchon -> Thunder Horse",
            voyage_number="11",
        ),
        Voyage(
            standardized_voyage_id="prod-1",
            vessel="Vessel B",
            start_date=START,
            locations="Fourchon -> Thunder Horse PDQ",
            voyage_number="22",
        ),
    ]


@pytest.fixture
def manifests():
    return [
        Manifest(transporter="vessel a", manifest_date=START + timedelta(days=1), offshore_location="Thunder Horse Drilling"),
        Manifest(transporter="Vessel B", manifest_date=START, offshore_location="Thunder Horse Prod"),
        Manifest(transporter="Vessel C", manifest_date=START, offshore_location="Thunder Horse Drilling"),
    ]


@pytest.fixture
def drilling_ids(cascade, voyages, manifests):
    return cascade.classifier.get_drilling_voyage_ids(voyages, manifests, TH_DRILLING)


class TestScopeGuardAndFallback:
    """Tests for pass-through and fallback behaviour."""

    @pytest.mark.parametrize("location_filter", ["Thunder Horse", "All Locations", "Mad Dog (Production)", None])
    def test_non_drilling_filter_passes_through(self, cascade, voyages, manifests, location_filter):
        result = cascade.filter_manifests(manifests, voyages, {"drill-1"}, location_filter)
        assert result.records == manifests
        assert result.stats.removed == 0
        assert result.stats.fallback is False

    def test_empty_drilling_set_falls_back(self, cascade, voyages, manifests, logger):
        """Every filter returns its input unchanged when no drilling voyage exists."""
        events = [VoyageEvent(vessel="Vessel B", event_date=START)]
        actions = [BulkAction(vessel_name="Vessel B", start_date=START, destination_port="Fourchon")]
        costs = [CostAllocation(location_reference="Mad Dog Prod")]

        m = cascade.filter_manifests(manifests, voyages, set(), TH_DRILLING)
        e = cascade.filter_voyage_events(events, voyages, set(), TH_DRILLING)
        b = cascade.filter_bulk_actions(actions, voyages, set(), TH_DRILLING)
        c = cascade.filter_cost_allocations(costs, set(), TH_DRILLING)

        assert m.records == manifests
        assert e.records == events
        assert b.records == actions
        assert c.records == costs
        assert all(r.stats.fallback for r in (m, e, b, c))
        assert logger.warning.call_count == 4

    def test_fallback_returns_copy(self, cascade, voyages, manifests):
        """The caller's list is never mutated."""
        result = cascade.filter_manifests(manifests, voyages, set(), TH_DRILLING)
        assert result.records is not manifests
        assert len(manifests) == 3


class TestManifestFilter:
    """Tests for filter_manifests()."""

    def test_worked_example(self, cascade):
        """A single drilling manifest survives the filter."""
        voyage = Voyage(
            standardized_voyage_id="v1",
            vessel="Vessel A",
            start_date=datetime(2024, 1, 10),
            locations="Thunder Horse",
        )
        manifest = Manifest(
            transporter="vessel a",
            manifest_date=datetime(2024, 1, 11),
            offshore_location="Thunder Horse Drilling",
        )
        ids = cascade.classifier.get_drilling_voyage_ids([voyage], [manifest], TH_DRILLING)
        assert ids == {"v1"}
        result = cascade.filter_manifests([manifest], [voyage], ids, TH_DRILLING)
        assert result.records == [manifest]

    def test_keeps_only_drilling_voyage_manifests(self, cascade, voyages, manifests, drilling_ids):
        assert drilling_ids == {"drill-1"}
        result = cascade.filter_manifests(manifests, voyages, drilling_ids, TH_DRILLING)
        assert result.records == [manifests[0]]
        assert result.stats.original == 3
        assert result.stats.drilling_only == 1
        assert result.stats.removed == 2


class TestVoyageEventFilter:
    """Tests for filter_voyage_events()."""

    def test_seven_day_window_and_voyage_number(self, cascade, voyages, drilling_ids):
        events = [
            VoyageEvent(vessel="Vessel A", voyage_number="11", event_date=START + timedelta(days=6)),
            VoyageEvent(vessel="Vessel A", voyage_number="12", event_date=START),
            VoyageEvent(vessel="Vessel A", event_date=START - timedelta(days=7)),
            VoyageEvent(vessel="Vessel A", event_date=START + timedelta(days=8)),
            VoyageEvent(vessel="Vessel B", voyage_number="22", event_date=START),
        ]
        result = cascade.filter_voyage_events(events, voyages, drilling_ids, TH_DRILLING)
        assert result.records == [events[0], events[2]]


class TestBulkActionFilter:
    """Tests for filter_bulk_actions()."""

    def test_rules(self, cascade, voyages, drilling_ids):
        actions = [
            # drilling fluid flag short-circuits linkage
            BulkAction(vessel_name="Vessel Z", destination_port="Thunder Horse", is_drilling_fluid=True),
            # mud by type, bound via at-port text
            BulkAction(vessel_name="Vessel Z", at_port="THUNDER HORSE", bulk_type="Synthetic Based Mud"),
            # linked to the drilling voyage within 3 days
            BulkAction(vessel_name="Vessel A", start_date=START + timedelta(days=3), destination_port="Thunder Horse", bulk_type="Fuel"),
            # linked to the production voyage
            BulkAction(vessel_name="Vessel B", start_date=START, destination_port="Thunder Horse", bulk_type="Fuel"),
            # drilling fluid bound elsewhere
            BulkAction(vessel_name="Vessel A", start_date=START, destination_port="Mad Dog", bulk_type="Brine"),
            # outside the 3-day window
            BulkAction(vessel_name="Vessel A", start_date=START + timedelta(days=4), destination_port="Thunder Horse", bulk_type="Water"),
        ]
        result = cascade.filter_bulk_actions(actions, voyages, drilling_ids, TH_DRILLING)
        assert result.records == actions[:3]

    @pytest.mark.parametrize("bulk_type", ["Drilling Water", "OBM mud", "CaCl2 Brine"])
    def test_is_drilling_fluid_by_type(self, bulk_type):
        assert DrillingFilterCascade.is_drilling_fluid(BulkAction(bulk_type=bulk_type))

    def test_is_not_drilling_fluid(self):
        assert not DrillingFilterCascade.is_drilling_fluid(BulkAction(bulk_type="Diesel"))
        assert not DrillingFilterCascade.is_drilling_fluid(BulkAction())


class TestCostAllocationFilter:
    """Tests for filter_cost_allocations()."""

    def test_rules(self, cascade, drilling_ids):
        costs = [
            CostAllocation(location_reference="Thunder Horse", project_type="Drilling"),
            CostAllocation(rig_location="Thunder Horse", project_type="Completions"),
            CostAllocation(description="thunder horse support", department="Drilling"),
            CostAllocation(location_reference="Thunder Horse Drilling", project_type="Production"),
            CostAllocation(location_reference="Thunder Horse Prod", project_type="Production"),
            CostAllocation(location_reference="Mad Dog Drilling", project_type="Drilling"),
            CostAllocation(project_type="Drilling"),
        ]
        result = cascade.filter_cost_allocations(costs, drilling_ids, TH_DRILLING)
        assert result.records == costs[:4]
        assert result.stats.removed == 3

    def test_mad_dog_scope(self, cascade):
        costs = [
            CostAllocation(location_reference="Mad Dog Drilling"),
            CostAllocation(location_reference="Thunder Horse Drilling"),
        ]
        result = cascade.filter_cost_allocations(costs, {"any"}, "Mad Dog (Drilling)")
        assert result.records == costs[:1]


class TestApply:
    """Tests for apply()."""

    def test_apply_all_datasets(self, cascade, voyages, manifests):
        events = [
            VoyageEvent(vessel="Vessel A", voyage_number="11", event_date=START),
            VoyageEvent(vessel="Vessel B", voyage_number="22", event_date=START),
        ]
        actions = [BulkAction(vessel_name="Vessel A", start_date=START, destination_port="Thunder Horse")]
        costs = [
            CostAllocation(location_reference="Thunder Horse", project_type="Drilling"),
            CostAllocation(location_reference="Thunder Horse", project_type="Production"),
        ]

        result = cascade.apply(manifests, events, actions, costs, voyages, TH_DRILLING)

        assert result.location_filter == TH_DRILLING
        assert result.drilling_voyage_ids == ["drill-1"]
        assert result.manifests == [manifests[0]]
        assert result.voyage_events == [events[0]]
        assert result.bulk_actions == actions
        assert result.cost_allocations == [costs[0]]
        assert result.manifests_stats.removed == 2
        assert result.voyage_events_stats.drilling_only == 1
        assert result.cost_allocations_stats.original == 2

    def test_apply_pass_through(self, cascade, voyages, manifests):
        """Non-drilling filters leave everything untouched."""
        result = cascade.apply(manifests, [], [], [], voyages, "Thunder Horse")
        assert result.drilling_voyage_ids == []
        assert result.manifests == manifests
        assert result.manifests_stats.removed == 0

    def test_apply_fallback_when_nothing_drilling(self, cascade, voyages):
        manifests = [Manifest(transporter="Vessel B", manifest_date=START, offshore_location="Thunder Horse Prod")]
        costs = [CostAllocation(location_reference="Fourchon")]
        result = cascade.apply(manifests, [], [], costs, voyages, TH_DRILLING)
        assert result.manifests == manifests
        assert result.cost_allocations == costs
        assert result.cost_allocations_stats.fallback is True
