from __future__ import annotations

import logging
import os
from dataclasses import dataclass, field

import httpx

from geopath.adapters.http import HttpClientConfig, async_client
from geopath.app.ports.output import IIpLocator
from geopath.domain.exceptions import GeocodingError
from geopath.domain.models import GeoPoint, IpLocation

logger = logging.getLogger(__name__)

DEFAULT_IP_LOCATOR_URL = "https://ipapi.co/json/"


@dataclass(slots=True)
class IpApiLocator(IIpLocator):
    """Locates the server's public IP through ipapi.co.

    Env vars:
      - IP_LOCATOR_URL: lookup endpoint (default https://ipapi.co/json/)
    """

    url: str | None = None
    config: HttpClientConfig = field(default_factory=HttpClientConfig.from_env)
    transport: httpx.AsyncBaseTransport | None = None

    def __post_init__(self) -> None:
        if self.url is None:
            self.url = os.getenv("IP_LOCATOR_URL") or DEFAULT_IP_LOCATOR_URL

    async def current_location(self) -> IpLocation:
        try:
            async with async_client(self.config, transport=self.transport) as client:
                resp = await client.get(str(self.url))
                resp.raise_for_status()
                data = resp.json()

            return IpLocation(
                location=GeoPoint(
                    lat=float(data["latitude"]), lng=float(data["longitude"])
                ),
                city=data.get("city") or None,
                country=data.get("country_name") or None,
            )
        except (httpx.HTTPError, KeyError, TypeError, ValueError) as exc:
            logger.warning("IP geolocation failed: %s", exc)
            raise GeocodingError("Unable to determine current location") from exc
