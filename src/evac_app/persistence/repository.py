"""Load and save evacuation snapshots through a blob store."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict
from datetime import datetime
from typing import Any, Callable, Dict

from ..errors import StoreUnavailableError
from ..models.domain import ActiveAssignment, Vehicle, VehicleStatus, Zone, ZoneStatus
from ..state.snapshot import (
    ACTIVE_ASSIGNMENTS,
    COLLECTIONS,
    VEHICLE_STATUS,
    VEHICLES,
    ZONE_STATUS,
    ZONES,
    StateSnapshot,
)
from .store import BlobStore

logger = logging.getLogger(__name__)

KEY_PREFIX = "evacuation"

STORE_KEYS: Dict[str, str] = {name: f"{KEY_PREFIX}:{name}" for name in COLLECTIONS}


def _encode_assignment(assignment: ActiveAssignment) -> dict:
    return {
        "zone_id": assignment.zone_id,
        "vehicle_id": assignment.vehicle_id,
        "assigned_at": assignment.assigned_at.isoformat(),
    }


def _decode_assignment(row: dict) -> ActiveAssignment:
    return ActiveAssignment(
        zone_id=row["zone_id"],
        vehicle_id=row["vehicle_id"],
        assigned_at=datetime.fromisoformat(row["assigned_at"]),
    )


_ENCODERS: Dict[str, Callable[[StateSnapshot], Any]] = {
    ZONES: lambda s: [asdict(zone) for zone in s.zones],
    VEHICLES: lambda s: [asdict(vehicle) for vehicle in s.vehicles],
    ZONE_STATUS: lambda s: {zone_id: asdict(status) for zone_id, status in s.zone_status.items()},
    VEHICLE_STATUS: lambda s: {vehicle_id: status.value for vehicle_id, status in s.vehicle_status.items()},
    ACTIVE_ASSIGNMENTS: lambda s: [_encode_assignment(a) for a in s.active_assignments],
}

_DECODERS: Dict[str, Callable[[Any], Any]] = {
    ZONES: lambda rows: [Zone(**row) for row in rows],
    VEHICLES: lambda rows: [Vehicle(**row) for row in rows],
    ZONE_STATUS: lambda rows: {zone_id: ZoneStatus(**row) for zone_id, row in rows.items()},
    VEHICLE_STATUS: lambda rows: {vehicle_id: VehicleStatus(value) for vehicle_id, value in rows.items()},
    ACTIVE_ASSIGNMENTS: lambda rows: [_decode_assignment(row) for row in rows],
}


class StateRepository:
    """Maps snapshot collections onto fixed store keys, one JSON blob each."""

    def __init__(self, store: BlobStore) -> None:
        self.store = store

    def load(self) -> StateSnapshot:
        snapshot = StateSnapshot()
        for name in COLLECTIONS:
            key = STORE_KEYS[name]
            raw = self.store.get(key)
            if raw is None:
                continue
            try:
                decoded = _DECODERS[name](json.loads(raw))
            except (json.JSONDecodeError, KeyError, TypeError, ValueError) as exc:
                logger.error("Stored payload for %s is unreadable: %s", key, exc)
                raise StoreUnavailableError(key, f"unreadable payload: {exc}") from exc
            setattr(snapshot, name, decoded)
        return snapshot

    def save(self, snapshot: StateSnapshot) -> None:
        """Write back the collections marked dirty, then reset the dirty set."""
        for name in COLLECTIONS:
            if name not in snapshot.dirty:
                continue
            payload = json.dumps(_ENCODERS[name](snapshot), ensure_ascii=False)
            self.store.set(STORE_KEYS[name], payload)
        snapshot.dirty.clear()

    def clear(self) -> int:
        keys = [STORE_KEYS[name] for name in COLLECTIONS]
        self.store.delete(*keys)
        return len(keys)

    def is_reachable(self) -> bool:
        return self.store.ping()
