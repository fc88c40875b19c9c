from .ipapi_locator import IpApiLocator
from .nominatim_geocoder import NominatimGeocoder

__all__ = [
    "IpApiLocator",
    "NominatimGeocoder",
]
