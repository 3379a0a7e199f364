"""Domain models for zones, vehicles and their evacuation state."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum
from typing import List, Optional


class VehicleStatus(str, Enum):
    AVAILABLE = "Available"
    IN_USE = "InUse"


@dataclass(slots=True, frozen=True)
class Zone:
    """An area with a fixed population awaiting evacuation."""

    zone_id: str
    latitude: float
    longitude: float
    number_of_people: int
    urgency_level: int


@dataclass(slots=True, frozen=True)
class Vehicle:
    """A rescue asset; speed is in km/h."""

    vehicle_id: str
    capacity: int
    type: str
    latitude: float
    longitude: float
    speed: float


@dataclass(slots=True)
class ZoneStatus:
    """Evacuation progress for one zone.

    ``evacuated + remaining`` always equals ``total_people``.
    """

    zone_id: str
    total_people: int
    evacuated: int
    remaining: int
    last_vehicle_used: Optional[str] = None

    @classmethod
    def initial(cls, zone: Zone) -> "ZoneStatus":
        return cls(
            zone_id=zone.zone_id,
            total_people=zone.number_of_people,
            evacuated=0,
            remaining=zone.number_of_people,
        )


@dataclass(slots=True, frozen=True)
class ActiveAssignment:
    zone_id: str
    vehicle_id: str
    assigned_at: datetime


@dataclass(slots=True)
class CandidatePair:
    vehicle: Vehicle
    zone: Zone
    distance_km: float
    eta_minutes: float
    remaining_people: int


@dataclass(slots=True)
class DistanceRejection:
    vehicle_id: str
    zone_id: str
    distance_km: float
    max_allowed_km: float
    reason: str = "Vehicle too far from evacuation zone"


@dataclass(slots=True)
class CapacityWarning:
    zone_id: str
    vehicle_id: str
    remaining_people: int
    vehicle_capacity: int
    estimated_trips: int
    severity: str
    recommendation: str


@dataclass(slots=True, frozen=True)
class EvacuationAssignment:
    zone_id: str
    vehicle_id: str
    eta_minutes: float
    number_of_people: int


@dataclass(slots=True)
class EvacuationPlan:
    assignments: List[EvacuationAssignment] = field(default_factory=list)
    created_at: datetime = field(default_factory=datetime.now)
