#ephemeris/jpl_moon.py
from __future__ import annotations

from dataclasses import dataclass

from . import require_ephemeris

DEFAULT_KERNEL = "de421.bsp"  # 1900-2050, ~17 MB; de440s.bsp covers 1849-2150


@dataclass
class JPLMoon:
    """
    Geocentric lunar longitude (ecliptic and equinox of date) from a JPL kernel via skyfield.

    Requires optional deps:
      pip install "vimdasha[ephemeris]"
    The kernel is downloaded by skyfield on first use into the working directory.
    """
    eph: object
    ts: object

    @classmethod
    def load(cls, kernel: str = DEFAULT_KERNEL) -> "JPLMoon":
        require_ephemeris()
        from skyfield.api import load

        return cls(eph=load(kernel), ts=load.timescale())

    def longitude_deg_ut(self, jd_ut: float) -> float:
        """
        Geometric (not light-time corrected) longitude in degrees at UT Julian day 'jd_ut'.
        skyfield applies its own ΔT to reach the kernel's time scale.
        """
        from skyfield.framelib import ecliptic_frame

        t = self.ts.ut1_jd(jd_ut)
        pos = (self.eph["moon"] - self.eph["earth"]).at(t)
        _, lon, _ = pos.frame_latlon(ecliptic_frame)
        return lon.degrees % 360.0
