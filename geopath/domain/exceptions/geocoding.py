class GeocodingError(RuntimeError):
    """Raised when an address/coordinate lookup provider fails or has no match."""
