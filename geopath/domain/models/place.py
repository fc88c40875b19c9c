from __future__ import annotations

from dataclasses import dataclass, field

from .geo import GeoPoint


@dataclass(frozen=True, slots=True)
class Place:
    """Best match returned by a (reverse) geocoding lookup."""

    location: GeoPoint
    display_name: str | None = None
    address: dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True, slots=True)
class IpLocation:
    location: GeoPoint
    city: str | None = None
    country: str | None = None
