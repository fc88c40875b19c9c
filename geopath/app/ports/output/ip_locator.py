from __future__ import annotations

from abc import ABC, abstractmethod

from geopath.domain.models import IpLocation


class IIpLocator(ABC):
    """Port for locating the caller from its public IP address."""

    @abstractmethod
    async def current_location(self) -> IpLocation:
        raise NotImplementedError
