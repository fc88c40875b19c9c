class RoutingError(Exception):
    """Base exception for path finding failures."""


class InvalidCoordinate(RoutingError, ValueError):
    """Raised when a latitude/longitude pair is out of range or not finite."""


class GraphConfigurationError(RoutingError):
    """Raised when the graph cannot be prepared for a query (e.g. it is empty)."""
