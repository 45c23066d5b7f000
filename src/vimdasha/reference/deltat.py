"""
vimdasha.reference.deltat

Coarse ΔT (= TT − UT) estimate in seconds.

The lunar pipeline runs on JD(UT); ΔT is reported alongside results so that a
caller who wants dynamical time can apply it. Over 1900–2100 the estimate uses
the short Espenak–Meeus polynomials, elsewhere a constant.
"""

from __future__ import annotations


DELTA_T_FALLBACK = 67.0


def _poly(u: float, coeffs: tuple) -> float:
    """Horner evaluation for Σ coeffs[k] u^k."""
    acc = 0.0
    for c in reversed(coeffs):
        acc = acc * u + c
    return acc


def estimate_delta_t(year: float) -> float:
    """
    ΔT(year) in seconds.

      2000 <= y <= 2100:  62.92 + 0.32217 t + 0.005589 t^2,          t = y - 2000
      1900 <= y <  2000: -2.79 + 1.494119 u - 0.0598939 u^2 + 0.00061966 u^3,  u = y - 1900
      otherwise:          67.0
    """
    if 2000.0 <= year <= 2100.0:
        return _poly(year - 2000.0, (62.92, 0.32217, 0.005589))
    # The 1900s cubic drifts high after ~1970 (about 98 s at 1990).
    if 1900.0 <= year < 2000.0:
        return _poly(year - 1900.0, (-2.79, 1.494119, -0.0598939, 0.0061966 / 10.0))
    return DELTA_T_FALLBACK


def jd_ut_to_jd_tt(jd_ut: float, delta_t_seconds: float) -> float:
    return jd_ut + delta_t_seconds / 86400.0
