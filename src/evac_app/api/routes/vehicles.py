"""Vehicle endpoints."""

from __future__ import annotations

from dataclasses import asdict

from fastapi import APIRouter, Depends, status

from ...schemas.evacuation import VehicleCreatedResponse, VehicleListResponse, VehicleModel, VehicleWithStatus
from ...services.engine import EvacuationEngine, get_engine
from ..errors import http_errors

router = APIRouter(prefix="/vehicles", tags=["vehicles"])


@router.post("", response_model=VehicleCreatedResponse, status_code=status.HTTP_200_OK)
def add_vehicle(payload: VehicleModel, engine: EvacuationEngine = Depends(get_engine)) -> VehicleCreatedResponse:
    """Register a vehicle as available."""
    with http_errors("add_vehicle"):
        vehicle, vehicle_status, total = engine.add_vehicle(payload.to_domain())
    return VehicleCreatedResponse(
        vehicle=VehicleModel.model_validate(vehicle),
        status=vehicle_status.value,
        total_vehicles=total,
    )


@router.get("", response_model=VehicleListResponse, status_code=status.HTTP_200_OK)
def list_vehicles(engine: EvacuationEngine = Depends(get_engine)) -> VehicleListResponse:
    with http_errors("list_vehicles"):
        summary = engine.list_vehicles()
    return VehicleListResponse(
        vehicles=[VehicleWithStatus(**asdict(view.vehicle), status=view.status.value) for view in summary.vehicles],
        total_count=summary.total_count,
        available_count=summary.available_count,
        in_use_count=summary.in_use_count,
    )
