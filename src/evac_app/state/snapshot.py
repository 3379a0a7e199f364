"""In-memory view of the evacuation collections for one operation."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, List, Optional

from ..models.domain import ActiveAssignment, Vehicle, VehicleStatus, Zone, ZoneStatus

ZONES = "zones"
VEHICLES = "vehicles"
ZONE_STATUS = "zone_status"
VEHICLE_STATUS = "vehicle_status"
ACTIVE_ASSIGNMENTS = "active_assignments"

COLLECTIONS: tuple[str, ...] = (ZONES, VEHICLES, ZONE_STATUS, VEHICLE_STATUS, ACTIVE_ASSIGNMENTS)


@dataclass(slots=True)
class StateSnapshot:
    """The collections an operation reads and mutates.

    Operations record which collections they changed in ``dirty`` so the
    repository writes back only those.
    """

    zones: List[Zone] = field(default_factory=list)
    vehicles: List[Vehicle] = field(default_factory=list)
    zone_status: Dict[str, ZoneStatus] = field(default_factory=dict)
    vehicle_status: Dict[str, VehicleStatus] = field(default_factory=dict)
    active_assignments: List[ActiveAssignment] = field(default_factory=list)
    dirty: set[str] = field(default_factory=set)

    def mark_dirty(self, *collections: str) -> None:
        unknown = set(collections) - set(COLLECTIONS)
        if unknown:
            raise ValueError(f"Unknown collections: {', '.join(sorted(unknown))}")
        self.dirty.update(collections)

    def status_of(self, vehicle_id: str) -> VehicleStatus:
        return self.vehicle_status.get(vehicle_id, VehicleStatus.AVAILABLE)

    def available_vehicles(self) -> List[Vehicle]:
        return [v for v in self.vehicles if self.status_of(v.vehicle_id) is VehicleStatus.AVAILABLE]

    def in_use_count(self) -> int:
        return sum(1 for v in self.vehicles if self.vehicle_status.get(v.vehicle_id) is VehicleStatus.IN_USE)

    def find_vehicle(self, vehicle_id: str) -> Optional[Vehicle]:
        return next((v for v in self.vehicles if v.vehicle_id == vehicle_id), None)

    def assignments_for(self, zone_id: str, vehicle_id: str | None = None) -> List[ActiveAssignment]:
        return [
            a
            for a in self.active_assignments
            if a.zone_id == zone_id and (vehicle_id is None or a.vehicle_id == vehicle_id)
        ]

    def clear(self) -> None:
        self.zones.clear()
        self.vehicles.clear()
        self.zone_status.clear()
        self.vehicle_status.clear()
        self.active_assignments.clear()
        self.mark_dirty(*COLLECTIONS)
