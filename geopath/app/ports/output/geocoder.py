from __future__ import annotations

from abc import ABC, abstractmethod

from geopath.domain.models import GeoPoint, Place


class IGeocoder(ABC):
    """Port for converting free-text addresses to coordinates and back."""

    @abstractmethod
    async def geocode(self, address: str) -> Place:
        """Return the best match for `address`; raise GeocodingError if none."""

    @abstractmethod
    async def reverse_geocode(self, point: GeoPoint) -> Place:
        """Return the place found at `point`; raise GeocodingError if none."""
