"""Exceptions raised by the evacuation engine and its storage layer."""

from __future__ import annotations

from typing import Any, Dict, List, Optional


class EvacuationError(Exception):
    """Base class for failures that leave the evacuation state untouched."""

    def __init__(self, message: str, payload: Optional[Dict[str, Any]] = None) -> None:
        super().__init__(message)
        self.message = message
        self.payload = payload or {}

    def to_dict(self) -> Dict[str, Any]:
        return {"error": self.message, **self.payload}


class NoVehiclesAvailableError(EvacuationError):
    def __init__(self, total_vehicles: int, in_use_vehicles: int) -> None:
        super().__init__(
            "No available vehicles for evacuation",
            {
                "total_vehicles": total_vehicles,
                "in_use_vehicles": in_use_vehicles,
                "suggestion": "Wait for vehicles to complete current assignments or add more vehicles",
            },
        )


class ZoneNotFoundError(EvacuationError):
    def __init__(self, zone_id: str, available_zones: List[str]) -> None:
        super().__init__(
            "Zone not found",
            {
                "zone_id": zone_id,
                "available_zones": available_zones,
                "suggestion": "Check zone ID or add the zone first",
            },
        )
        self.zone_id = zone_id


class InvalidEvacuationCountError(EvacuationError):
    def __init__(self, requested: int) -> None:
        super().__init__(
            "Invalid evacuation count",
            {
                "requested": requested,
                "suggestion": "Number of evacuated people must be greater than 0",
            },
        )
        self.requested = requested


class VehicleNotAssignedError(EvacuationError):
    def __init__(self, zone_id: str, vehicle_id: str, active_vehicle_ids: List[str]) -> None:
        super().__init__(
            "Vehicle not assigned to this zone",
            {
                "vehicle_id": vehicle_id,
                "zone_id": zone_id,
                "active_assignments": active_vehicle_ids,
                "suggestion": "Check if vehicle ID is correct or if assignment exists",
            },
        )
        self.zone_id = zone_id
        self.vehicle_id = vehicle_id


class DuplicateZoneError(EvacuationError):
    def __init__(self, zone_id: str) -> None:
        super().__init__(
            "Zone already registered",
            {
                "zone_id": zone_id,
                "suggestion": "Use a new zone ID; report progress through the update endpoint",
            },
        )
        self.zone_id = zone_id


class DuplicateVehicleError(EvacuationError):
    def __init__(self, vehicle_id: str) -> None:
        super().__init__(
            "Vehicle already registered",
            {
                "vehicle_id": vehicle_id,
                "suggestion": "Use a new vehicle ID; vehicles are released by reporting trip progress",
            },
        )
        self.vehicle_id = vehicle_id


class InvalidVehicleError(EvacuationError):
    def __init__(self, vehicle_id: str, capacity: int) -> None:
        super().__init__(
            "Invalid vehicle capacity",
            {
                "vehicle_id": vehicle_id,
                "capacity": capacity,
                "suggestion": "Vehicle capacity must be greater than 0",
            },
        )
        self.vehicle_id = vehicle_id


class StoreUnavailableError(RuntimeError):
    """The backing store could not be read or written."""

    def __init__(self, key: str, reason: str) -> None:
        super().__init__(f"State store unavailable while accessing '{key}': {reason}")
        self.key = key
        self.reason = reason
