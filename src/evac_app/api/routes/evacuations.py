"""Planning, progress and reset endpoints."""

from __future__ import annotations

from datetime import datetime

from fastapi import APIRouter, Depends, status

from ...schemas.evacuation import (
    AssignmentModel,
    CapacityWarningModel,
    ClearResponse,
    DistanceRejectionModel,
    EvacuationStatusResponse,
    PlanModel,
    PlanResponse,
    UpdateRequest,
    UpdateResponse,
    ZoneStatusModel,
)
from ...services.engine import EvacuationEngine, get_engine
from ..errors import http_errors

router = APIRouter(prefix="/evacuations", tags=["evacuations"])


@router.get("/status", response_model=EvacuationStatusResponse, status_code=status.HTTP_200_OK)
def get_status(engine: EvacuationEngine = Depends(get_engine)) -> EvacuationStatusResponse:
    """Current status of every zone with overall totals."""
    with http_errors("status"):
        summary = engine.status()
    return EvacuationStatusResponse(
        zones=[ZoneStatusModel.model_validate(s) for s in summary.zones],
        total_zones=len(summary.zones),
        total_people=summary.total_people,
        total_evacuated=summary.total_evacuated,
        total_remaining=summary.total_remaining,
    )


@router.post("/plan", response_model=PlanResponse, status_code=status.HTTP_200_OK)
def create_plan(engine: EvacuationEngine = Depends(get_engine)) -> PlanResponse:
    """Run one planning pass over the available vehicles."""
    with http_errors("plan"):
        outcome = engine.plan()
    return PlanResponse(
        plan=PlanModel(
            assignments=[AssignmentModel.model_validate(a) for a in outcome.plan.assignments],
            created_at=outcome.plan.created_at,
        ),
        total_assignments=outcome.total_assignments,
        algorithm_used=outcome.algorithm_used,
        execution_time_ms=outcome.execution_time_ms,
        capacity_warnings=[CapacityWarningModel.model_validate(w) for w in outcome.capacity_warnings] or None,
        distance_rejections=[DistanceRejectionModel.model_validate(r) for r in outcome.distance_rejections] or None,
        unschedulable_vehicles=outcome.unschedulable_vehicles or None,
    )


@router.put("/update", response_model=UpdateResponse, status_code=status.HTTP_200_OK)
def update_progress(payload: UpdateRequest, engine: EvacuationEngine = Depends(get_engine)) -> UpdateResponse:
    """Apply a completed trip and release the vehicle."""
    with http_errors("update"):
        outcome = engine.update_progress(payload.zone_id, payload.vehicle_id, payload.number_evacuated)
    return UpdateResponse(
        requested=outcome.requested,
        actual_evacuated=outcome.actual_evacuated,
        adjustment_reasons=outcome.adjustment_reasons or None,
        updated_status=ZoneStatusModel.model_validate(outcome.updated_status),
        vehicle_status=outcome.vehicle_status,
        completion_percentage=outcome.completion_percentage,
    )


@router.delete("/clear", response_model=ClearResponse, status_code=status.HTTP_200_OK)
def clear_all(engine: EvacuationEngine = Depends(get_engine)) -> ClearResponse:
    with http_errors("clear"):
        cleared = engine.clear_all()
    return ClearResponse(cleared_at=datetime.now(), keys_cleared=cleared)
