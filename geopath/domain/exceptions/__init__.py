from .geocoding import GeocodingError
from .routing import GraphConfigurationError, InvalidCoordinate, RoutingError

__all__ = [
    "GeocodingError",
    "GraphConfigurationError",
    "InvalidCoordinate",
    "RoutingError",
]
