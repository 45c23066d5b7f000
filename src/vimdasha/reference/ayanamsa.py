# reference/ayanamsa.py

from __future__ import annotations

from . import astro_args as aa
from .lunar import moon_tropical_longitude


# Lahiri (Chitra Paksha) ayanamsa at J2000.0: 23°51'25.57"
AYANAMSA_J2000_DEG = 23.85710277777778

# General precession in longitude, arcsec: 5029.0966 T + 1.11113 T^2 + 1e-7 T^3
PRECESSION_ARCSEC = (5029.0966, 1.11113, 0.0000001)

# Drift of the fixed Spica reference, arcsec per century
SPICA_DRIFT_ARCSEC = 5025.64


def precession_deg(T: float) -> float:
    """Accumulated general precession since J2000.0 (degrees)."""
    c1, c2, c3 = PRECESSION_ARCSEC
    return aa.arcsec_to_deg(c1 * T + c2 * T * T + c3 * T * T * T)


def lahiri_ayanamsa(jd: float) -> float:
    """
    Lahiri ayanamsa (degrees, [0,360)) for a Julian Day.

      ayan = 23.857102778 + precession(T) - 5025.64" T
    """
    jd = aa.require_jd(jd)
    T = aa.T_centuries(jd)
    return aa.wrap_deg(AYANAMSA_J2000_DEG + precession_deg(T) - aa.arcsec_to_deg(SPICA_DRIFT_ARCSEC) * T)


def to_sidereal(tropical_deg: float, jd: float) -> float:
    """Tropical (equinox-referenced) longitude -> sidereal (nirayana) longitude."""
    return aa.wrap_deg(tropical_deg - lahiri_ayanamsa(jd))


def moon_sidereal_longitude(jd: float) -> float:
    return to_sidereal(moon_tropical_longitude(jd), jd)
