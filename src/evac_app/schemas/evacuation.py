"""Pydantic request/response models for the evacuation endpoints."""

from __future__ import annotations

from datetime import datetime
from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

from ..models.domain import Vehicle, Zone


class ZoneModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    zone_id: str = Field(..., min_length=1)
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    number_of_people: int = Field(..., ge=0, description="People awaiting evacuation, fixed at creation.")
    urgency_level: int = Field(..., description="Higher values are more urgent.")

    def to_domain(self) -> Zone:
        return Zone(**self.model_dump())


class VehicleModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    vehicle_id: str = Field(..., min_length=1)
    capacity: int = Field(..., gt=0)
    type: str
    latitude: float = Field(..., ge=-90, le=90)
    longitude: float = Field(..., ge=-180, le=180)
    speed: float = Field(..., description="Average speed in km/h; vehicles with speed <= 0 are never scheduled.")

    def to_domain(self) -> Vehicle:
        return Vehicle(**self.model_dump())


class ZoneStatusModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    zone_id: str
    total_people: int
    evacuated: int
    remaining: int
    last_vehicle_used: Optional[str] = None


class ZoneCreatedResponse(BaseModel):
    message: str = "Evacuation zone added successfully"
    zone: ZoneModel
    status: ZoneStatusModel
    total_zones: int


class VehicleCreatedResponse(BaseModel):
    message: str = "Vehicle added successfully"
    vehicle: VehicleModel
    status: Literal["Available", "InUse"]
    total_vehicles: int


class ZoneListResponse(BaseModel):
    zones: List[ZoneModel]
    total_count: int


class VehicleWithStatus(VehicleModel):
    status: Literal["Available", "InUse"]


class VehicleListResponse(BaseModel):
    vehicles: List[VehicleWithStatus]
    total_count: int
    available_count: int
    in_use_count: int


class EvacuationStatusResponse(BaseModel):
    zones: List[ZoneStatusModel]
    total_zones: int
    total_people: int
    total_evacuated: int
    total_remaining: int


class AssignmentModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    zone_id: str
    vehicle_id: str
    eta_minutes: float
    number_of_people: int


class PlanModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    assignments: List[AssignmentModel]
    created_at: datetime


class CapacityWarningModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    zone_id: str
    vehicle_id: str
    remaining_people: int
    vehicle_capacity: int
    estimated_trips: int
    severity: Literal["Warning", "Critical"]
    recommendation: str


class DistanceRejectionModel(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    vehicle_id: str
    zone_id: str
    distance_km: float
    max_allowed_km: float
    reason: str


class PlanResponse(BaseModel):
    plan: PlanModel
    total_assignments: int
    algorithm_used: str
    execution_time_ms: float
    capacity_warnings: Optional[List[CapacityWarningModel]] = None
    distance_rejections: Optional[List[DistanceRejectionModel]] = None
    unschedulable_vehicles: Optional[List[str]] = None


class UpdateRequest(BaseModel):
    zone_id: str
    vehicle_id: str
    number_evacuated: int


class UpdateResponse(BaseModel):
    message: str = "Evacuation status updated successfully"
    requested: int
    actual_evacuated: int
    adjustment_reasons: Optional[List[str]] = None
    updated_status: ZoneStatusModel
    vehicle_status: str
    completion_percentage: float


class ClearResponse(BaseModel):
    message: str = "All evacuation data cleared successfully"
    cleared_at: datetime
    keys_cleared: int
