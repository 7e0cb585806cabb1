from __future__ import annotations

from dataclasses import dataclass
from math import asin, cos, radians, sin, sqrt
from typing import Any

"""
Geospatial helpers.

A tiny spherical geometry layer: the recommender only needs great-circle distance,
so we do not pull in heavier GIS dependencies.
"""

EARTH_RADIUS_KM = 6371.0


@dataclass(frozen=True)
class GeoPoint:
    """A latitude/longitude pair in decimal degrees (not range-checked)."""

    lat: float
    lng: float


def _coords(point: Any) -> tuple[float, float]:
    # Accept GeoPoint/Pydantic models as well as plain `{"lat": .., "lng": ..}` dicts.
    if isinstance(point, dict):
        return point["lat"], point["lng"]
    return point.lat, point.lng


def haversine_km(a: Any, b: Any, *, radius_km: float = EARTH_RADIUS_KM) -> float:
    """Compute great-circle distance in kilometers between two points."""
    lat1, lon1 = (radians(v) for v in _coords(a))
    lat2, lon2 = (radians(v) for v in _coords(b))

    dlat = lat2 - lat1
    dlon = lon2 - lon1

    h = sin(dlat / 2) ** 2 + cos(lat1) * cos(lat2) * sin(dlon / 2) ** 2
    # Rounding can push h just outside [0, 1] for coincident or antipodal points.
    h = max(0.0, min(1.0, h))
    return 2 * radius_km * asin(sqrt(h))


def calculate_distance(point1: Any, point2: Any) -> float:
    """Distance in kilometers between two `{lat, lng}` points (mean Earth radius)."""
    return haversine_km(point1, point2)
