"""Enumerate vehicle/zone pairs that are worth ranking."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Dict, List, Sequence

from ...models.domain import CandidatePair, DistanceRejection, Vehicle, Zone, ZoneStatus
from ..geospatial import eta_minutes, haversine_km, is_schedulable_speed
from .policy import PriorityPolicy

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class CandidateSet:
    pairs: List[CandidatePair] = field(default_factory=list)
    rejections: List[DistanceRejection] = field(default_factory=list)
    unschedulable: List[str] = field(default_factory=list)


def remaining_for(zone: Zone, zone_status: Dict[str, ZoneStatus]) -> int:
    status = zone_status.get(zone.zone_id)
    return status.remaining if status is not None else zone.number_of_people


def build_candidates(
    vehicles: Sequence[Vehicle],
    zones: Sequence[Zone],
    zone_status: Dict[str, ZoneStatus],
    policy: PriorityPolicy,
) -> CandidateSet:
    """Pair every available vehicle with every zone that still has people.

    ``vehicles`` must already be restricted to available ones. Pairs beyond
    ``policy.max_distance_km`` are returned as rejections rather than pairs.
    """

    result = CandidateSet()
    for vehicle in vehicles:
        if not is_schedulable_speed(vehicle.speed) or vehicle.capacity <= 0:
            logger.warning(
                "Vehicle %s has speed %s and capacity %s and cannot be scheduled",
                vehicle.vehicle_id,
                vehicle.speed,
                vehicle.capacity,
            )
            result.unschedulable.append(vehicle.vehicle_id)
            continue

        for zone in zones:
            remaining = remaining_for(zone, zone_status)
            if remaining <= 0:
                continue

            distance = haversine_km(vehicle.latitude, vehicle.longitude, zone.latitude, zone.longitude)
            if not policy.within_range(distance):
                result.rejections.append(
                    DistanceRejection(
                        vehicle_id=vehicle.vehicle_id,
                        zone_id=zone.zone_id,
                        distance_km=round(distance, 2),
                        max_allowed_km=policy.max_distance_km,
                    )
                )
                continue

            result.pairs.append(
                CandidatePair(
                    vehicle=vehicle,
                    zone=zone,
                    distance_km=distance,
                    eta_minutes=eta_minutes(distance, vehicle.speed),
                    remaining_people=remaining,
                )
            )

    logger.info(
        "Found %d valid vehicle-zone pairs after distance filtering (%d rejected)",
        len(result.pairs),
        len(result.rejections),
    )
    return result
