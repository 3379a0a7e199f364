"""Evacuation zone endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from ...schemas.evacuation import ZoneCreatedResponse, ZoneListResponse, ZoneModel, ZoneStatusModel
from ...services.engine import EvacuationEngine, get_engine
from ..errors import http_errors

router = APIRouter(prefix="/evacuation-zones", tags=["zones"])


@router.post("", response_model=ZoneCreatedResponse, status_code=status.HTTP_200_OK)
def add_zone(payload: ZoneModel, engine: EvacuationEngine = Depends(get_engine)) -> ZoneCreatedResponse:
    """Register a zone and initialise its evacuation status."""
    with http_errors("add_zone"):
        zone, initial_status, total = engine.add_zone(payload.to_domain())
    return ZoneCreatedResponse(
        zone=ZoneModel.model_validate(zone),
        status=ZoneStatusModel.model_validate(initial_status),
        total_zones=total,
    )


@router.get("", response_model=ZoneListResponse, status_code=status.HTTP_200_OK)
def list_zones(engine: EvacuationEngine = Depends(get_engine)) -> ZoneListResponse:
    with http_errors("list_zones"):
        zones = engine.list_zones()
    return ZoneListResponse(
        zones=[ZoneModel.model_validate(zone) for zone in zones],
        total_count=len(zones),
    )
