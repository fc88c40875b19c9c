from __future__ import annotations

from dataclasses import dataclass

from geopath.app.ports.output import IGeocoder, IIpLocator
from geopath.domain.models import GeoPoint, IpLocation, Place


@dataclass(slots=True)
class LocationService:
    geocoder: IGeocoder
    ip_locator: IIpLocator

    async def geocode(self, *, address: str) -> Place:
        return await self.geocoder.geocode(address)

    async def reverse_geocode(self, *, point: GeoPoint) -> Place:
        return await self.geocoder.reverse_geocode(point)

    async def current_location(self) -> IpLocation:
        return await self.ip_locator.current_location()
