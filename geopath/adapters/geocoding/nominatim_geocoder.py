from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field
from typing import Any, Mapping

import httpx

from geopath.adapters.http import HttpClientConfig, async_client
from geopath.app.ports.output import IGeocoder
from geopath.domain.exceptions import GeocodingError
from geopath.domain.models import GeoPoint, Place

logger = logging.getLogger(__name__)

DEFAULT_NOMINATIM_BASE_URL = "https://nominatim.openstreetmap.org"


def _parse_place(data: Mapping[str, Any]) -> Place:
    address = data.get("address") or {}
    return Place(
        location=GeoPoint(lat=float(data["lat"]), lng=float(data["lon"])),
        display_name=data.get("display_name") or None,
        address={str(k): str(v) for k, v in dict(address).items()},
    )


@dataclass(slots=True)
class NominatimGeocoder(IGeocoder):
    """Forward/reverse geocoding against an OpenStreetMap Nominatim server.

    Env vars:
      - NOMINATIM_BASE_URL: server root (default https://nominatim.openstreetmap.org)
      - GEOCODER_USER_AGENT, GEOCODER_TIMEOUT_S: see HttpClientConfig

    Notes:
      - Only the best match is requested (limit=1).
      - No retries; provider failures surface as GeocodingError.
    """

    base_url: str | None = None
    config: HttpClientConfig = field(default_factory=HttpClientConfig.from_env)
    transport: httpx.AsyncBaseTransport | None = None

    def __post_init__(self) -> None:
        if self.base_url is None:
            self.base_url = (
                os.getenv("NOMINATIM_BASE_URL") or DEFAULT_NOMINATIM_BASE_URL
            )
        self.base_url = self.base_url.rstrip("/")

    async def _get(self, path: str, params: Mapping[str, Any]) -> Any:
        async with async_client(self.config, transport=self.transport) as client:
            resp = await client.get(f"{self.base_url}{path}", params=dict(params))
            resp.raise_for_status()
            return resp.json()

    async def geocode(self, address: str) -> Place:
        try:
            data = await self._get(
                "/search",
                {"q": address, "format": "json", "limit": 1, "addressdetails": 1},
            )
            if not isinstance(data, list) or not data:
                raise GeocodingError("No results found for this address")
            return _parse_place(data[0])
        except (httpx.HTTPError, KeyError, TypeError, ValueError) as exc:
            logger.warning("Geocoding failed for %r: %s", address, exc)
            raise GeocodingError(f"Geocoding failed: {exc}") from exc

    async def reverse_geocode(self, point: GeoPoint) -> Place:
        try:
            data = await self._get(
                "/reverse",
                {
                    "lat": point.lat,
                    "lon": point.lng,
                    "format": "json",
                    "addressdetails": 1,
                },
            )
            # Nominatim answers 200 with {"error": "..."} when nothing is there.
            if not isinstance(data, dict) or "error" in data:
                raise GeocodingError("No results found for these coordinates")
            return _parse_place(data)
        except (httpx.HTTPError, KeyError, TypeError, ValueError) as exc:
            logger.warning("Reverse geocoding failed for %s: %s", point, exc)
            raise GeocodingError(f"Reverse geocoding failed: {exc}") from exc
