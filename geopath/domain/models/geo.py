from __future__ import annotations

from dataclasses import dataclass

from geopath.domain.exceptions.routing import InvalidCoordinate


@dataclass(frozen=True, slots=True)
class GeoPoint:
    lat: float
    lng: float

    def __post_init__(self) -> None:
        # NaN fails both comparisons, so it is rejected here too.
        if not (-90.0 <= self.lat <= 90.0):
            raise InvalidCoordinate(f"Invalid latitude: {self.lat}")
        if not (-180.0 <= self.lng <= 180.0):
            raise InvalidCoordinate(f"Invalid longitude: {self.lng}")
