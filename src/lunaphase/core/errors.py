class LunaphaseError(Exception):
    """Base error."""

class FractionRangeError(LunaphaseError, ValueError):
    """Raised when an illuminated fraction in thousandths is negative."""

class EphemerisUnavailableError(LunaphaseError, RuntimeError):
    """Raised when optional ephemeris/diagnostics dependencies are missing."""
