"""Geospatial helper functions."""

from __future__ import annotations

import math

EARTH_RADIUS_KM = 6371.0


def haversine_km(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    """Compute distance between two coordinates using the Haversine formula."""

    phi1, phi2 = math.radians(lat1), math.radians(lat2)
    d_phi = math.radians(lat2 - lat1)
    d_lambda = math.radians(lon2 - lon1)

    a = math.sin(d_phi / 2) ** 2 + math.cos(phi1) * math.cos(phi2) * math.sin(d_lambda / 2) ** 2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return EARTH_RADIUS_KM * c


def is_schedulable_speed(speed_kmh: float) -> bool:
    """Return True if a vehicle moving at ``speed_kmh`` has a finite ETA."""

    return math.isfinite(speed_kmh) and speed_kmh > 0


def eta_minutes(distance_km: float, speed_kmh: float) -> float:
    """Straight-line travel time in minutes; ``inf`` when the speed cannot produce an ETA."""

    if not is_schedulable_speed(speed_kmh):
        return math.inf
    return distance_km / speed_kmh * 60
