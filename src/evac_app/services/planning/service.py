"""Planning pass over a state snapshot."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from datetime import datetime
from typing import Callable, List, Optional

from ...errors import NoVehiclesAvailableError
from ...models.domain import CapacityWarning, DistanceRejection, EvacuationPlan
from ...state.snapshot import ACTIVE_ASSIGNMENTS, VEHICLE_STATUS, StateSnapshot
from .assigner import assign
from .candidates import build_candidates
from .policy import ALGORITHM_LABEL, PriorityPolicy

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class PlanOutcome:
    plan: EvacuationPlan
    capacity_warnings: List[CapacityWarning] = field(default_factory=list)
    distance_rejections: List[DistanceRejection] = field(default_factory=list)
    unschedulable_vehicles: List[str] = field(default_factory=list)
    algorithm_used: str = ALGORITHM_LABEL
    execution_time_ms: float = 0.0

    @property
    def total_assignments(self) -> int:
        return len(self.plan.assignments)


def plan_evacuation(
    snapshot: StateSnapshot,
    policy: Optional[PriorityPolicy] = None,
    clock: Callable[[], datetime] = datetime.now,
) -> PlanOutcome:
    """Produce one wave of vehicle assignments and commit it to ``snapshot``.

    Raises NoVehiclesAvailableError without touching the snapshot when every
    vehicle is busy or none are registered. Zone statuses are never changed
    here.
    """

    policy = policy or PriorityPolicy()
    started = time.perf_counter()

    available = snapshot.available_vehicles()
    logger.info("Found %d available vehicles out of %d", len(available), len(snapshot.vehicles))
    if not available:
        logger.warning("No available vehicles for evacuation planning")
        raise NoVehiclesAvailableError(
            total_vehicles=len(snapshot.vehicles),
            in_use_vehicles=snapshot.in_use_count(),
        )

    candidates = build_candidates(available, snapshot.zones, snapshot.zone_status, policy)
    result = assign(candidates.pairs, snapshot.zone_status, policy, clock())

    snapshot.vehicle_status.update(result.vehicle_updates)
    snapshot.active_assignments.extend(result.new_assignments)
    snapshot.mark_dirty(VEHICLE_STATUS, ACTIVE_ASSIGNMENTS)

    elapsed_ms = round((time.perf_counter() - started) * 1000, 2)
    logger.info(
        "Evacuation plan created. Assignments: %d, Execution time: %s ms",
        len(result.plan.assignments),
        elapsed_ms,
    )
    if result.warnings:
        logger.warning("Capacity warnings detected: %d", len(result.warnings))

    return PlanOutcome(
        plan=result.plan,
        capacity_warnings=result.warnings,
        distance_rejections=candidates.rejections,
        unschedulable_vehicles=candidates.unschedulable,
        execution_time_ms=elapsed_ms,
    )
