import pytest

from evac_app.errors import DuplicateVehicleError, DuplicateZoneError, InvalidVehicleError
from evac_app.models.domain import VehicleStatus, ZoneStatus
from evac_app.services import registry
from evac_app.state.snapshot import StateSnapshot

from helpers import _vehicle, _zone


def test_add_zone_initialises_status():
    snapshot = StateSnapshot()

    zone, status, total = registry.add_zone(snapshot, _zone("Z1", people=120))

    assert zone.zone_id == "Z1"
    assert status == ZoneStatus(zone_id="Z1", total_people=120, evacuated=0, remaining=120)
    assert total == 1
    assert snapshot.dirty == {"zones", "zone_status"}


def test_add_vehicle_marks_available():
    snapshot = StateSnapshot()
    registry.add_vehicle(snapshot, _vehicle("V1"))

    _, status, total = registry.add_vehicle(snapshot, _vehicle("V2"))

    assert status is VehicleStatus.AVAILABLE
    assert total == 2
    assert snapshot.vehicle_status == {"V1": VehicleStatus.AVAILABLE, "V2": VehicleStatus.AVAILABLE}


def test_fleet_summary_counts_missing_status_as_available():
    snapshot = StateSnapshot(vehicles=[_vehicle("V1"), _vehicle("V2"), _vehicle("V3")])
    snapshot.vehicle_status["V2"] = VehicleStatus.IN_USE

    summary = registry.list_vehicles_with_status(snapshot)

    assert [view.status for view in summary.vehicles] == [
        VehicleStatus.AVAILABLE,
        VehicleStatus.IN_USE,
        VehicleStatus.AVAILABLE,
    ]
    assert (summary.total_count, summary.available_count, summary.in_use_count) == (3, 2, 1)


def test_status_creates_missing_entries_and_marks_them_for_saving():
    snapshot = StateSnapshot(zones=[_zone("Z1", people=50), _zone("Z2", people=30)])
    snapshot.zone_status["Z1"] = ZoneStatus(zone_id="Z1", total_people=50, evacuated=20, remaining=30)

    summary = registry.evacuation_status(snapshot)

    assert [s.zone_id for s in summary.zones] == ["Z1", "Z2"]
    assert summary.created_statuses == 1
    assert (summary.total_people, summary.total_evacuated, summary.total_remaining) == (80, 20, 60)
    assert snapshot.zone_status["Z2"].remaining == 30
    assert "zone_status" in snapshot.dirty


def test_status_without_new_entries_changes_nothing():
    snapshot = StateSnapshot()
    registry.add_zone(snapshot, _zone("Z1"))
    snapshot.dirty.clear()

    summary = registry.evacuation_status(snapshot)

    assert summary.created_statuses == 0
    assert not snapshot.dirty


def test_duplicate_vehicle_is_rejected_and_in_use_status_kept():
    snapshot = StateSnapshot()
    registry.add_vehicle(snapshot, _vehicle("V1"))
    snapshot.vehicle_status["V1"] = VehicleStatus.IN_USE
    snapshot.dirty.clear()

    with pytest.raises(DuplicateVehicleError) as excinfo:
        registry.add_vehicle(snapshot, _vehicle("V1", capacity=99))

    assert excinfo.value.payload["vehicle_id"] == "V1"
    assert [v.vehicle_id for v in snapshot.vehicles] == ["V1"]
    assert snapshot.vehicle_status["V1"] is VehicleStatus.IN_USE
    assert not snapshot.dirty


def test_duplicate_zone_keeps_reported_progress():
    snapshot = StateSnapshot()
    registry.add_zone(snapshot, _zone("Z1", people=100))
    progress = ZoneStatus(zone_id="Z1", total_people=100, evacuated=20, remaining=80, last_vehicle_used="V1")
    snapshot.zone_status["Z1"] = progress

    with pytest.raises(DuplicateZoneError):
        registry.add_zone(snapshot, _zone("Z1", people=100))

    assert len(snapshot.zones) == 1
    assert snapshot.zone_status["Z1"] == progress


@pytest.mark.parametrize("capacity", [0, -5])
def test_vehicle_without_capacity_is_rejected(capacity):
    snapshot = StateSnapshot()

    with pytest.raises(InvalidVehicleError):
        registry.add_vehicle(snapshot, _vehicle("V1", capacity=capacity))

    assert snapshot.vehicles == []
    assert snapshot.vehicle_status == {}
