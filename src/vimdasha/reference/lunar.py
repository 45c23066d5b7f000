# reference/lunar.py

from __future__ import annotations

import math
from dataclasses import dataclass

from . import astro_args as aa


LUNAR_SERIES_VERSION = "elp2000-82/meeus-22+2"


@dataclass(frozen=True)
class LunarLongitude:
    """Mean and perturbed (true, mean-equinox-of-date) lunar longitude (degrees)."""
    mean_deg: float
    periodic_microdeg: float
    tropical_deg: float


# (d, m, m', f, coefficient in microdegrees)
# Leading 22 terms of the ELP-2000/82 longitude series, in Meeus ch. 47 order.
# No eccentricity factor is applied to the M terms. The truncation error against a
# JPL ephemeris is of order an arcminute, far below the width of a pada (3°20').
LUNAR_LON_TERMS = (
    (0, 0, 1, 0, 6288774),
    (2, 0, -1, 0, 1274027),
    (2, 0, 0, 0, 658314),
    (0, 0, 2, 0, 213618),
    (0, 1, 0, 0, -185116),
    (0, 0, 0, 2, -114332),
    (2, 0, -2, 0, 58793),
    (2, -1, -1, 0, 57066),
    (2, 0, 1, 0, 53322),
    (2, -1, 0, 0, 45758),
    (0, 1, -1, 0, -40923),
    (1, 0, 0, 0, -34720),
    (0, 1, 1, 0, -30383),
    (2, 0, 0, -2, 15327),
    (0, 0, 1, 2, -12528),
    (0, 0, 1, -2, -10980),
    (4, 0, -1, 0, 10675),
    (0, 0, 3, 0, 10034),
    (4, 0, -2, 0, 8548),
    (2, 1, -1, 0, -7888),
    (2, 1, 0, 0, -6766),
    (1, 0, -1, 0, -5163),
)

# Planetary perturbations: (amplitude in microdegrees, angle at J2000 [deg], rate [deg/century]).
# Each auxiliary angle is linear in T; the argument is L' minus that angle.
PLANETARY_TERMS = (
    (3958, 157.71, 311013.1),  # Venus
    (1962, 34.35, 3034.9),     # Jupiter
)


def periodic_sum_microdeg(fa: aa.FundamentalArgs, T: float) -> float:
    """Sum of the periodic longitude terms (microdegrees) for the given mean arguments."""
    D_rad = math.radians(fa.D_deg)
    M_rad = math.radians(fa.M_deg)
    Mp_rad = math.radians(fa.Mp_deg)
    F_rad = math.radians(fa.F_deg)

    total = 0.0
    for d, m, mp, f, coef in LUNAR_LON_TERMS:
        arg = d * D_rad + m * M_rad + mp * Mp_rad + f * F_rad
        total += coef * math.sin(arg)

    Lp_rad = math.radians(fa.Lp_deg)
    for coef, a0, rate in PLANETARY_TERMS:
        body_rad = math.radians(a0 + rate * T)
        total += coef * math.sin(Lp_rad - body_rad)

    return total


def lunar_position(jd: float) -> LunarLongitude:
    """
    Tropical lunar longitude (mean equinox of date) for a Julian Day.
    """
    jd = aa.require_jd(jd)
    T = aa.T_centuries(jd)
    fa = aa.fundamental_args(T)

    s = periodic_sum_microdeg(fa, T)
    return LunarLongitude(
        mean_deg=fa.Lp_deg,
        periodic_microdeg=s,
        tropical_deg=aa.wrap_deg(fa.Lp_deg + s * 1e-6),
    )


def moon_tropical_longitude(jd: float) -> float:
    return lunar_position(jd).tropical_deg
