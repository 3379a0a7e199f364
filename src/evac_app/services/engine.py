"""Single-writer facade running each operation as load, compute, save.

All operations of one engine share a re-entrant lock, so at most one
planning or update pass is in flight at a time. Several processes pointed
at the same store are not coordinated; run one writer per store.
"""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from datetime import datetime
from functools import lru_cache
from typing import Callable, Iterator, List, Optional, Tuple

from ..config import settings
from ..models.domain import Vehicle, VehicleStatus, Zone, ZoneStatus
from ..persistence.repository import StateRepository
from ..persistence.store import BlobStore, create_store
from ..state.snapshot import StateSnapshot
from . import registry
from .planning.policy import PriorityPolicy
from .planning.service import PlanOutcome, plan_evacuation
from .progress.reconciler import ProgressOutcome, apply_progress

logger = logging.getLogger(__name__)


class EvacuationEngine:
    def __init__(
        self,
        store: BlobStore,
        policy: Optional[PriorityPolicy] = None,
        clock: Callable[[], datetime] = datetime.now,
    ) -> None:
        self.repository = StateRepository(store)
        self.policy = policy or PriorityPolicy()
        self.clock = clock
        self._lock = threading.RLock()

    @contextmanager
    def _session(self) -> Iterator[StateSnapshot]:
        """Hold the writer lock, yield a fresh snapshot and persist what changed.

        Nothing is written if the body raises.
        """
        with self._lock:
            snapshot = self.repository.load()
            yield snapshot
            if snapshot.dirty:
                self.repository.save(snapshot)

    def add_zone(self, zone: Zone) -> Tuple[Zone, ZoneStatus, int]:
        with self._session() as snapshot:
            return registry.add_zone(snapshot, zone)

    def add_vehicle(self, vehicle: Vehicle) -> Tuple[Vehicle, VehicleStatus, int]:
        with self._session() as snapshot:
            return registry.add_vehicle(snapshot, vehicle)

    def list_zones(self) -> List[Zone]:
        with self._session() as snapshot:
            logger.info("Retrieved %d evacuation zones", len(snapshot.zones))
            return list(snapshot.zones)

    def list_vehicles(self) -> registry.FleetSummary:
        with self._session() as snapshot:
            summary = registry.list_vehicles_with_status(snapshot)
            logger.info(
                "Retrieved %d vehicles. Available: %d, In Use: %d",
                summary.total_count,
                summary.available_count,
                summary.in_use_count,
            )
            return summary

    def status(self) -> registry.EvacuationSummary:
        with self._session() as snapshot:
            return registry.evacuation_status(snapshot)

    def plan(self) -> PlanOutcome:
        logger.info("Creating evacuation plan")
        with self._session() as snapshot:
            return plan_evacuation(snapshot, self.policy, self.clock)

    def update_progress(self, zone_id: str, vehicle_id: str, number_evacuated: int) -> ProgressOutcome:
        logger.info(
            "Updating evacuation status - Zone: %s, Vehicle: %s, People: %s",
            zone_id,
            vehicle_id,
            number_evacuated,
        )
        with self._session() as snapshot:
            return apply_progress(snapshot, zone_id, vehicle_id, number_evacuated)

    def clear_all(self) -> int:
        logger.info("Clearing all evacuation data")
        with self._lock:
            cleared = self.repository.clear()
        logger.info("All evacuation data cleared")
        return cleared

    def is_store_reachable(self) -> bool:
        return self.repository.is_reachable()


@lru_cache()
def get_engine() -> EvacuationEngine:
    """Process-wide engine built from settings."""
    return EvacuationEngine(create_store(settings), PriorityPolicy.from_settings(settings))
