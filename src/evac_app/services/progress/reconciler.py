"""Apply reported evacuation trips to the zone and vehicle state."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import List

from ...errors import InvalidEvacuationCountError, VehicleNotAssignedError, ZoneNotFoundError
from ...models.domain import VehicleStatus, ZoneStatus
from ...state.snapshot import ACTIVE_ASSIGNMENTS, VEHICLE_STATUS, ZONE_STATUS, StateSnapshot

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class ProgressOutcome:
    requested: int
    actual_evacuated: int
    updated_status: ZoneStatus
    vehicle_status: str
    completion_percentage: float
    adjustment_reasons: List[str] = field(default_factory=list)


def completion_percentage(status: ZoneStatus) -> float:
    if status.total_people <= 0:
        return 100.0
    return round(status.evacuated / status.total_people * 100, 1)


def apply_progress(
    snapshot: StateSnapshot,
    zone_id: str,
    vehicle_id: str,
    number_evacuated: int,
) -> ProgressOutcome:
    """Record that ``vehicle_id`` moved ``number_evacuated`` people out of ``zone_id``.

    The reported count is clamped to the vehicle's capacity and then to the
    people still in the zone. Validation errors leave ``snapshot`` untouched.
    """

    current = snapshot.zone_status.get(zone_id)
    if current is None:
        logger.warning("Zone %s not found", zone_id)
        raise ZoneNotFoundError(zone_id, list(snapshot.zone_status))

    if number_evacuated <= 0:
        logger.warning("Invalid evacuation count: %s", number_evacuated)
        raise InvalidEvacuationCountError(number_evacuated)

    if not snapshot.assignments_for(zone_id, vehicle_id):
        logger.warning("Vehicle %s not assigned to zone %s", vehicle_id, zone_id)
        raise VehicleNotAssignedError(
            zone_id,
            vehicle_id,
            [a.vehicle_id for a in snapshot.assignments_for(zone_id)],
        )

    actual = number_evacuated
    reasons: List[str] = []

    vehicle = snapshot.find_vehicle(vehicle_id)
    if vehicle is not None and actual > vehicle.capacity:
        actual = vehicle.capacity
        reasons.append(f"Limited by vehicle capacity ({vehicle.capacity})")

    if actual > current.remaining:
        actual = current.remaining
        reasons.append(f"Limited by remaining people ({current.remaining})")

    updated = ZoneStatus(
        zone_id=zone_id,
        total_people=current.total_people,
        evacuated=current.evacuated + actual,
        remaining=current.remaining - actual,
        last_vehicle_used=vehicle_id,
    )
    snapshot.zone_status[zone_id] = updated
    snapshot.vehicle_status[vehicle_id] = VehicleStatus.AVAILABLE
    snapshot.active_assignments[:] = [
        a for a in snapshot.active_assignments if not (a.zone_id == zone_id and a.vehicle_id == vehicle_id)
    ]
    snapshot.mark_dirty(ZONE_STATUS, VEHICLE_STATUS, ACTIVE_ASSIGNMENTS)

    percentage = completion_percentage(updated)
    logger.info(
        "Zone %s: %d/%d people (%s%%), vehicle %s now available",
        zone_id,
        updated.evacuated,
        updated.total_people,
        percentage,
        vehicle_id,
    )
    if reasons:
        logger.info("Adjustments applied: %s", ", ".join(reasons))

    return ProgressOutcome(
        requested=number_evacuated,
        actual_evacuated=actual,
        updated_status=updated,
        vehicle_status=f"Vehicle {vehicle_id} is now Available",
        completion_percentage=percentage,
        adjustment_reasons=reasons,
    )
