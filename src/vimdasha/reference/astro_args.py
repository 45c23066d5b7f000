from __future__ import annotations

from dataclasses import dataclass
from math import fmod, isfinite

from ..core.errors import InvalidArgumentError


# ------------------------------------------------------------
# Units & helpers
# ------------------------------------------------------------

def wrap_deg(x_deg: float) -> float:
    """Wrap degrees to [0,360)."""
    if not isfinite(x_deg):
        raise InvalidArgumentError(f"angle must be finite, got {x_deg!r}")
    y = fmod(x_deg, 360.0)
    if y < 0:
        y += 360.0
    # fmod of a tiny negative value can round back up to exactly 360.0
    if y >= 360.0:
        y = 0.0
    return y

def wrap180(deg: float) -> float:
    """Wraps an angle in degrees to the range [-180.0, 180.0)."""
    return (deg + 180.0) % 360.0 - 180.0

def arcsec_to_deg(arcsec: float) -> float:
    return arcsec / 3600.0

def require_finite(value: float, what: str = "value") -> float:
    """Return value as float, rejecting NaN and infinities."""
    try:
        x = float(value)
    except (TypeError, ValueError) as e:
        raise InvalidArgumentError(f"{what} must be a real number, got {value!r}") from e
    if not isfinite(x):
        raise InvalidArgumentError(f"{what} must be finite, got {value!r}")
    return x


# ------------------------------------------------------------
# Time variable
# ------------------------------------------------------------

J2000 = 2451545.0  # JD at J2000.0
DAYS_PER_CENTURY = 36525.0


def T_centuries(jd: float) -> float:
    """Julian centuries from J2000.0."""
    return (jd - J2000) / DAYS_PER_CENTURY


# Polynomials are evaluated up to 100 million years either side of J2000.0;
# beyond that the quartic terms lose all meaning long before they overflow.
MAX_ABS_CENTURIES = 1.0e6


def require_jd(jd: float, what: str = "jd") -> float:
    """Finite Julian Day within MAX_ABS_CENTURIES of J2000.0."""
    x = require_finite(jd, what)
    if abs(T_centuries(x)) > MAX_ABS_CENTURIES:
        raise InvalidArgumentError(
            f"{what} = {x!r} is more than {MAX_ABS_CENTURIES:g} centuries from J2000.0"
        )
    return x


# ------------------------------------------------------------
# Fundamental arguments (Meeus / ELP2000-style; degrees)
# ------------------------------------------------------------

@dataclass(frozen=True)
class FundamentalArgs:
    """Mean lunar and solar arguments in degrees, wrapped to [0,360)."""
    Lp_deg: float  # mean longitude of the Moon
    D_deg: float   # mean elongation of the Moon
    M_deg: float   # mean anomaly of the Sun
    Mp_deg: float  # mean anomaly of the Moon
    F_deg: float   # Moon's argument of latitude


def fundamental_args(T: float) -> FundamentalArgs:
    """
    Fundamental arguments (mean elements) for T Julian centuries from J2000.0.

    Polynomials (degrees):
      L' = 218.3164477 + 481267.8812307 T - 0.0015786 T^2 + T^3/538841 - T^4/65194000
      D  = 297.8501921 + 445267.1114034 T - 0.0018819 T^2 + T^3/545868 - T^4/113065000
      M  = 357.5291092 + 35999.0502909  T - 0.0001536 T^2 + T^3/24490000
      M' = 134.9633964 + 477198.8675055 T + 0.0087414 T^2 + T^3/69699  - T^4/14712000
      F  = 93.2720950  + 483202.0175233 T - 0.0036539 T^2 - T^3/3526000 + T^4/863310000
    """
    T2 = T * T
    T3 = T2 * T
    T4 = T2 * T2

    Lp = 218.3164477 + 481267.8812307 * T - 0.0015786 * T2 + T3 / 538841.0 - T4 / 65194000.0
    D = 297.8501921 + 445267.1114034 * T - 0.0018819 * T2 + T3 / 545868.0 - T4 / 113065000.0
    M = 357.5291092 + 35999.0502909 * T - 0.0001536 * T2 + T3 / 24490000.0
    Mp = 134.9633964 + 477198.8675055 * T + 0.0087414 * T2 + T3 / 69699.0 - T4 / 14712000.0
    F = 93.2720950 + 483202.0175233 * T - 0.0036539 * T2 - T3 / 3526000.0 + T4 / 863310000.0

    return FundamentalArgs(
        Lp_deg=wrap_deg(Lp),
        D_deg=wrap_deg(D),
        M_deg=wrap_deg(M),
        Mp_deg=wrap_deg(Mp),
        F_deg=wrap_deg(F),
    )


# ------------------------------------------------------------
# Mean obliquity epsilon
# ------------------------------------------------------------

def mean_obliquity_deg(T: float) -> float:
    """
    Mean obliquity of the ecliptic (degrees), Laskar 1986.

    U = T/100 (units of 10,000 Julian years):
      eps = 23°26'21.448" - 4680.93"U - 1.55"U^2 + 1999.25"U^3 - 51.38"U^4
    """
    U = T / 100.0
    eps0 = 23.0 + 26.0 / 60.0 + 21.448 / 3600.0
    return eps0 + arcsec_to_deg(
        -4680.93 * U
        - 1.55 * U ** 2
        + 1999.25 * U ** 3
        - 51.38 * U ** 4
    )


# ============================================================
# Convenience wrappers that accept JD
# ============================================================

def fundamental_args_jd(jd: float) -> FundamentalArgs:
    return fundamental_args(T_centuries(jd))
