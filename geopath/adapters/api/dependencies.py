from __future__ import annotations

from geopath.adapters.geocoding import IpApiLocator, NominatimGeocoder
from geopath.adapters.http import HttpClientConfig
from geopath.app.services.location_service import LocationService
from geopath.app.services.pathfinding_service import PathfindingService


def get_pathfinding_service() -> PathfindingService:
    return PathfindingService(geocoder=NominatimGeocoder())


def get_location_service() -> LocationService:
    config = HttpClientConfig.from_env()
    return LocationService(
        geocoder=NominatimGeocoder(config=config),
        ip_locator=IpApiLocator(config=config),
    )
