from __future__ import annotations

import math

from geopath.domain.models import GeoPoint

EARTH_RADIUS_KM = 6371.0


def haversine_distance_km(a: GeoPoint, b: GeoPoint) -> float:
    """Great-circle distance in kilometers."""

    lat1 = math.radians(a.lat)
    lng1 = math.radians(a.lng)
    lat2 = math.radians(b.lat)
    lng2 = math.radians(b.lng)

    dlat = lat2 - lat1
    dlng = lng2 - lng1

    s = (
        math.sin(dlat / 2.0) ** 2
        + math.cos(lat1) * math.cos(lat2) * math.sin(dlng / 2.0) ** 2
    )
    # Rounding can push s slightly outside [0, 1] for near-antipodal points.
    s = min(1.0, max(0.0, s))
    return 2.0 * EARTH_RADIUS_KM * math.atan2(math.sqrt(s), math.sqrt(1.0 - s))


def heuristic(a: GeoPoint, b: GeoPoint) -> float:
    """A* cost estimate: straight-line distance never exceeds a real route."""

    return haversine_distance_km(a, b)
