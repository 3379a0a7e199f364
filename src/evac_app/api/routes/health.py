"""Health endpoints."""

from __future__ import annotations

from fastapi import APIRouter, Depends, status

from ...config import settings
from ...services.engine import EvacuationEngine, get_engine

router = APIRouter(tags=["health"])


@router.get("/health", status_code=status.HTTP_200_OK)
def health_root() -> dict:
    """Simple health check endpoint that doesn't require any dependencies."""
    return {"status": "ok"}


@router.get("/health/store", status_code=status.HTTP_200_OK)
def health_store(engine: EvacuationEngine = Depends(get_engine)) -> dict:
    """Check that the state store answers."""
    return {
        "service": "store",
        "backend": settings.storage_backend,
        "healthy": engine.is_store_reachable(),
    }
