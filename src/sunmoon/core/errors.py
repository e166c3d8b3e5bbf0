class SunmoonError(Exception):
    """Base error."""

class InvalidCoordinatesError(SunmoonError, ValueError):
    """Raised when latitude/longitude are outside their valid ranges."""

class UnknownTimeZoneError(SunmoonError, ValueError):
    """Raised when a time zone name cannot be resolved."""
