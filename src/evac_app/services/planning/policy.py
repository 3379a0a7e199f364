"""Priority policy used to rank vehicle/zone pairs."""

from __future__ import annotations

import math
from dataclasses import dataclass

from ...config import Settings
from ...models.domain import CandidatePair

ALGORITHM_LABEL = "Priority Hierarchy: Distance > Urgency > Capacity"

MAX_REASONABLE_DISTANCE_KM = 50.0
CAPACITY_WARNING_TRIPS = 5
MAX_REASONABLE_TRIPS = 10

WARNING = "Warning"
CRITICAL = "Critical"

_RECOMMENDATIONS = {
    WARNING: "Consider sending additional vehicles to reduce trip count",
    CRITICAL: "Request additional large vehicles or helicopter support",
}


@dataclass(slots=True, frozen=True)
class PriorityPolicy:
    """Nearest first, then most urgent, then largest capacity."""

    max_distance_km: float = MAX_REASONABLE_DISTANCE_KM
    warning_trips: int = CAPACITY_WARNING_TRIPS
    critical_trips: int = MAX_REASONABLE_TRIPS
    eta_precision: int = 1

    @classmethod
    def from_settings(cls, settings: Settings) -> "PriorityPolicy":
        return cls(
            max_distance_km=settings.max_reasonable_distance_km,
            warning_trips=settings.capacity_warning_trips,
            critical_trips=settings.max_reasonable_trips,
        )

    def sort_key(self, pair: CandidatePair) -> tuple[float, int, int]:
        return (
            round(pair.eta_minutes, self.eta_precision),
            -pair.zone.urgency_level,
            -pair.vehicle.capacity,
        )

    def within_range(self, distance_km: float) -> bool:
        return distance_km <= self.max_distance_km

    def estimated_trips(self, remaining_people: int, capacity: int) -> int:
        return math.ceil(remaining_people / capacity)

    def trip_severity(self, estimated_trips: int) -> str | None:
        """Severity for a zone needing ``estimated_trips`` trips, or None below the warning line."""
        if estimated_trips <= self.warning_trips:
            return None
        return CRITICAL if estimated_trips > self.critical_trips else WARNING

    @staticmethod
    def recommendation(severity: str) -> str:
        return _RECOMMENDATIONS[severity]
