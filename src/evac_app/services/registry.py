"""Registration and read-side views of zones and vehicles."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Tuple

from ..errors import DuplicateVehicleError, DuplicateZoneError, InvalidVehicleError
from ..models.domain import Vehicle, VehicleStatus, Zone, ZoneStatus
from ..state.snapshot import VEHICLE_STATUS, VEHICLES, ZONE_STATUS, ZONES, StateSnapshot

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class VehicleView:
    vehicle: Vehicle
    status: VehicleStatus


@dataclass(slots=True)
class FleetSummary:
    vehicles: List[VehicleView]
    available_count: int
    in_use_count: int

    @property
    def total_count(self) -> int:
        return len(self.vehicles)


@dataclass(slots=True)
class EvacuationSummary:
    zones: List[ZoneStatus]
    total_people: int
    total_evacuated: int
    total_remaining: int
    created_statuses: int = 0


def add_zone(snapshot: StateSnapshot, zone: Zone) -> Tuple[Zone, ZoneStatus, int]:
    logger.info(
        "Adding evacuation zone: %s with %d people, urgency level %d",
        zone.zone_id,
        zone.number_of_people,
        zone.urgency_level,
    )
    if any(z.zone_id == zone.zone_id for z in snapshot.zones) or zone.zone_id in snapshot.zone_status:
        logger.warning("Zone %s is already registered", zone.zone_id)
        raise DuplicateZoneError(zone.zone_id)
    snapshot.zones.append(zone)
    status = ZoneStatus.initial(zone)
    snapshot.zone_status[zone.zone_id] = status
    snapshot.mark_dirty(ZONES, ZONE_STATUS)
    logger.info("Zone %s added. Total zones: %d", zone.zone_id, len(snapshot.zones))
    return zone, status, len(snapshot.zones)


def add_vehicle(snapshot: StateSnapshot, vehicle: Vehicle) -> Tuple[Vehicle, VehicleStatus, int]:
    logger.info("Adding vehicle: %s (%s) with capacity %d", vehicle.vehicle_id, vehicle.type, vehicle.capacity)
    if vehicle.capacity <= 0:
        logger.warning("Vehicle %s has capacity %s", vehicle.vehicle_id, vehicle.capacity)
        raise InvalidVehicleError(vehicle.vehicle_id, vehicle.capacity)
    if snapshot.find_vehicle(vehicle.vehicle_id) is not None or vehicle.vehicle_id in snapshot.vehicle_status:
        logger.warning("Vehicle %s is already registered", vehicle.vehicle_id)
        raise DuplicateVehicleError(vehicle.vehicle_id)
    snapshot.vehicles.append(vehicle)
    snapshot.vehicle_status[vehicle.vehicle_id] = VehicleStatus.AVAILABLE
    snapshot.mark_dirty(VEHICLES, VEHICLE_STATUS)
    logger.info("Vehicle %s added. Total vehicles: %d", vehicle.vehicle_id, len(snapshot.vehicles))
    return vehicle, VehicleStatus.AVAILABLE, len(snapshot.vehicles)


def list_vehicles_with_status(snapshot: StateSnapshot) -> FleetSummary:
    views = [VehicleView(vehicle=v, status=snapshot.status_of(v.vehicle_id)) for v in snapshot.vehicles]
    available = sum(1 for view in views if view.status is VehicleStatus.AVAILABLE)
    return FleetSummary(vehicles=views, available_count=available, in_use_count=len(views) - available)


def evacuation_status(snapshot: StateSnapshot) -> EvacuationSummary:
    """Status for every registered zone, creating missing statuses on the way.

    Newly created statuses mark the zone status collection dirty so they
    are always written back.
    """

    statuses: List[ZoneStatus] = []
    created = 0
    for zone in snapshot.zones:
        status = snapshot.zone_status.get(zone.zone_id)
        if status is None:
            status = ZoneStatus.initial(zone)
            snapshot.zone_status[zone.zone_id] = status
            created += 1
        statuses.append(status)

    if created:
        snapshot.mark_dirty(ZONE_STATUS)
        logger.info("Initialised %d missing zone statuses", created)

    summary = EvacuationSummary(
        zones=statuses,
        total_people=sum(s.total_people for s in statuses),
        total_evacuated=sum(s.evacuated for s in statuses),
        total_remaining=sum(s.remaining for s in statuses),
        created_statuses=created,
    )
    logger.info(
        "Status - Total people: %d, Evacuated: %d, Remaining: %d",
        summary.total_people,
        summary.total_evacuated,
        summary.total_remaining,
    )
    return summary
