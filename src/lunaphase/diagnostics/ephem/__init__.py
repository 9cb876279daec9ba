"""Ephemeris-based diagnostics (optional).

Install with:
  pip install "lunaphase[ephemeris,diagnostics]"
"""

from lunaphase.core.errors import EphemerisUnavailableError


def require_ephemeris():
    """Raise a clear error if ephemeris extras aren't installed."""
    try:
        import jplephem  # noqa: F401
        import skyfield  # noqa: F401
    except ImportError as e:
        raise EphemerisUnavailableError('Ephemeris support requires: pip install "lunaphase[ephemeris]"') from e
