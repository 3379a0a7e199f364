from datetime import datetime

from evac_app.models.domain import ActiveAssignment, Vehicle, VehicleStatus, Zone, ZoneStatus
from evac_app.state.snapshot import StateSnapshot

FIXED_NOW = datetime(2024, 3, 1, 9, 30, 0)


def fixed_clock() -> datetime:
    return FIXED_NOW


def _zone(zid: str, people: int = 100, urgency: int = 5, lat: float = 0.0, lon: float = 0.0) -> Zone:
    return Zone(zone_id=zid, latitude=lat, longitude=lon, number_of_people=people, urgency_level=urgency)


def _vehicle(
    vid: str,
    capacity: int = 20,
    lat: float = 0.0,
    lon: float = 0.1,
    speed: float = 60.0,
    vtype: str = "bus",
) -> Vehicle:
    return Vehicle(vehicle_id=vid, capacity=capacity, type=vtype, latitude=lat, longitude=lon, speed=speed)


def _snapshot(zones=(), vehicles=(), **statuses) -> StateSnapshot:
    snapshot = StateSnapshot(zones=list(zones), vehicles=list(vehicles))
    for zone in snapshot.zones:
        snapshot.zone_status[zone.zone_id] = ZoneStatus.initial(zone)
    for vehicle in snapshot.vehicles:
        snapshot.vehicle_status[vehicle.vehicle_id] = VehicleStatus.AVAILABLE
    snapshot.zone_status.update(statuses.get("zone_status", {}))
    snapshot.vehicle_status.update(statuses.get("vehicle_status", {}))
    return snapshot


def _assignment(zone_id: str, vehicle_id: str) -> ActiveAssignment:
    return ActiveAssignment(zone_id=zone_id, vehicle_id=vehicle_id, assigned_at=FIXED_NOW)
