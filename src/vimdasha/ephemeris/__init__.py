"""Ephemeris adapters (optional).

Thin wrappers around external ephemeris libraries, used only to measure the
analytical lunar series. Install with:
  pip install "vimdasha[ephemeris]"
"""

from ..core.errors import EphemerisUnavailableError


def require_ephemeris():
    """Raise a clear error if ephemeris extras aren't installed."""
    try:
        import jplephem  # noqa: F401
        import skyfield  # noqa: F401
    except ImportError as e:
        raise EphemerisUnavailableError('Ephemeris support requires: pip install "vimdasha[ephemeris]"') from e
