from evac_app.models.domain import ZoneStatus
from evac_app.services.geospatial import haversine_km
from evac_app.services.planning.candidates import build_candidates
from evac_app.services.planning.policy import PriorityPolicy

from helpers import _vehicle, _zone


def test_pairs_every_vehicle_with_every_zone_in_range():
    zones = [_zone("Z1"), _zone("Z2", lat=0.05)]
    vehicles = [_vehicle("V1"), _vehicle("V2", lon=-0.1)]

    result = build_candidates(vehicles, zones, {}, PriorityPolicy())

    assert {(p.vehicle.vehicle_id, p.zone.zone_id) for p in result.pairs} == {
        ("V1", "Z1"),
        ("V1", "Z2"),
        ("V2", "Z1"),
        ("V2", "Z2"),
    }
    assert not result.rejections


def test_far_pairs_are_reported_as_rejections():
    zones = [_zone("NEAR"), _zone("FAR", lat=1.0)]  # ~111 km away
    vehicles = [_vehicle("V1")]

    result = build_candidates(vehicles, zones, {}, PriorityPolicy())

    assert [p.zone.zone_id for p in result.pairs] == ["NEAR"]
    assert len(result.rejections) == 1
    rejection = result.rejections[0]
    assert rejection.vehicle_id == "V1"
    assert rejection.zone_id == "FAR"
    assert rejection.distance_km > 50
    assert rejection.max_allowed_km == 50.0
    assert rejection.reason == "Vehicle too far from evacuation zone"


def test_custom_distance_threshold():
    result = build_candidates([_vehicle("V1")], [_zone("Z1")], {}, PriorityPolicy(max_distance_km=5.0))

    assert not result.pairs
    assert result.rejections[0].max_allowed_km == 5.0


def test_zones_without_remaining_people_are_skipped():
    done = _zone("DONE", people=10)
    fresh = _zone("FRESH", people=10)
    statuses = {"DONE": ZoneStatus(zone_id="DONE", total_people=10, evacuated=10, remaining=0)}

    result = build_candidates([_vehicle("V1")], [done, fresh], statuses, PriorityPolicy())

    assert [p.zone.zone_id for p in result.pairs] == ["FRESH"]
    assert result.pairs[0].remaining_people == 10


def test_remaining_falls_back_to_population_without_status():
    result = build_candidates([_vehicle("V1")], [_zone("Z1", people=42)], {}, PriorityPolicy())

    assert result.pairs[0].remaining_people == 42


def test_empty_zone_is_never_a_candidate():
    result = build_candidates([_vehicle("V1")], [_zone("EMPTY", people=0)], {}, PriorityPolicy())

    assert not result.pairs
    assert not result.rejections


def test_vehicles_without_usable_speed_are_excluded():
    vehicles = [_vehicle("STOPPED", speed=0.0), _vehicle("MOVING")]

    result = build_candidates(vehicles, [_zone("Z1")], {}, PriorityPolicy())

    assert [p.vehicle.vehicle_id for p in result.pairs] == ["MOVING"]
    assert result.unschedulable == ["STOPPED"]


def test_pair_exactly_at_threshold_is_kept():
    vehicle = _vehicle("V1", lon=0.2)
    zone = _zone("Z1")
    distance = haversine_km(vehicle.latitude, vehicle.longitude, zone.latitude, zone.longitude)

    result = build_candidates([vehicle], [zone], {}, PriorityPolicy(max_distance_km=distance))

    assert [p.zone.zone_id for p in result.pairs] == ["Z1"]
    assert not result.rejections


def test_vehicles_without_capacity_are_excluded():
    vehicles = [_vehicle("EMPTY", capacity=0), _vehicle("BUS")]

    result = build_candidates(vehicles, [_zone("Z1")], {}, PriorityPolicy())

    assert [p.vehicle.vehicle_id for p in result.pairs] == ["BUS"]
    assert result.unschedulable == ["EMPTY"]
