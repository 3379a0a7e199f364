"""Greedy priority assignment of vehicles to zones."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from datetime import datetime
from typing import Dict, List, Sequence

from ...models.domain import (
    ActiveAssignment,
    CandidatePair,
    CapacityWarning,
    EvacuationAssignment,
    EvacuationPlan,
    VehicleStatus,
    ZoneStatus,
)
from .candidates import remaining_for
from .policy import PriorityPolicy

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class AssignmentResult:
    plan: EvacuationPlan
    vehicle_updates: Dict[str, VehicleStatus] = field(default_factory=dict)
    new_assignments: List[ActiveAssignment] = field(default_factory=list)
    warnings: List[CapacityWarning] = field(default_factory=list)


def assign(
    pairs: Sequence[CandidatePair],
    zone_status: Dict[str, ZoneStatus],
    policy: PriorityPolicy,
    now: datetime,
) -> AssignmentResult:
    """Walk the ranked pairs once, committing each vehicle to at most one zone.

    The remaining demand of a zone is re-read from ``zone_status`` and reduced
    by whatever earlier assignments in this pass already planned for it.
    """

    ranked = sorted(pairs, key=policy.sort_key)
    result = AssignmentResult(plan=EvacuationPlan(created_at=now))
    planned: Dict[str, int] = {}

    for pair in ranked:
        vehicle = pair.vehicle
        zone = pair.zone
        if vehicle.vehicle_id in result.vehicle_updates:
            continue

        remaining = remaining_for(zone, zone_status) - planned.get(zone.zone_id, 0)
        if remaining <= 0:
            continue

        people = min(remaining, vehicle.capacity)

        trips = policy.estimated_trips(remaining, vehicle.capacity)
        severity = policy.trip_severity(trips)
        if severity is not None:
            result.warnings.append(
                CapacityWarning(
                    zone_id=zone.zone_id,
                    vehicle_id=vehicle.vehicle_id,
                    remaining_people=remaining,
                    vehicle_capacity=vehicle.capacity,
                    estimated_trips=trips,
                    severity=severity,
                    recommendation=policy.recommendation(severity),
                )
            )

        result.plan.assignments.append(
            EvacuationAssignment(
                zone_id=zone.zone_id,
                vehicle_id=vehicle.vehicle_id,
                eta_minutes=round(pair.eta_minutes, 2),
                number_of_people=people,
            )
        )
        result.new_assignments.append(
            ActiveAssignment(zone_id=zone.zone_id, vehicle_id=vehicle.vehicle_id, assigned_at=now)
        )
        result.vehicle_updates[vehicle.vehicle_id] = VehicleStatus.IN_USE
        planned[zone.zone_id] = planned.get(zone.zone_id, 0) + people

        logger.info(
            "Assigned vehicle %s to zone %s - ETA: %.1f min, People: %d",
            vehicle.vehicle_id,
            zone.zone_id,
            pair.eta_minutes,
            people,
        )

    return result
