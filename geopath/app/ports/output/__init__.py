from .geocoder import IGeocoder
from .ip_locator import IIpLocator

__all__ = [
    "IGeocoder",
    "IIpLocator",
]
