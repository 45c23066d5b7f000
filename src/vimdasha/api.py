from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Tuple, Union

from .core.types import ActivePeriod, Timeline
from .dasha.active import active_chain
from .dasha.sequence import DEFAULT_DEPTH
from .dasha.tree import timeline_from_position
from .nakshatra import locate_nakshatra
from .reference.astro_args import J2000
from .reference.ayanamsa import lahiri_ayanamsa, to_sidereal
from .reference.deltat import estimate_delta_t, jd_ut_to_jd_tt
from .reference.lunar import LUNAR_SERIES_VERSION, lunar_position
from .reference.time_scales import jd_to_decimal_year, julian_day, validate_civil_datetime

LOG = logging.getLogger(__name__)

__version__ = "0.1.0"
AYANAMSA_SYSTEM = "Lahiri (Chitra Paksha)"


@dataclass(frozen=True)
class BirthProfile:
    """Astronomical context of a birth instant together with its dasha timeline."""
    civil: Dict[str, Any]
    jd_ut: float
    delta_t: float
    ayanamsa: float
    moon_tropical: float
    moon_sidereal: float
    timeline: Timeline

    @property
    def jd_tt(self) -> float:
        return jd_ut_to_jd_tt(self.jd_ut, self.delta_t)

    def to_dict(self) -> Dict[str, Any]:
        nak = self.timeline.nakshatra
        return {
            "metadata": {
                "calculated_at": datetime.now(timezone.utc).isoformat().replace("+00:00", "Z"),
                "software_version": __version__,
                "ayanamsa_system": AYANAMSA_SYSTEM,
                "lunar_series": LUNAR_SERIES_VERSION,
                "constants_used": {
                    "year_days": self.timeline.year_days,
                    "jd_epoch": J2000,
                },
            },
            "input": {
                **self.civil,
                "julian_day": self.jd_ut,
                "delta_t": self.delta_t,
            },
            "astronomy": {
                "ayanamsa": self.ayanamsa,
                "moon_tropical_longitude": self.moon_tropical,
                "moon_sidereal_longitude": self.moon_sidereal,
                "moon_nakshatra": nak.name,
                "moon_pada": nak.pada,
                "moon_lord": nak.lord,
                "balance_fraction": nak.remaining_fraction,
            },
            "dasha_timeline": [p.to_dict() for p in self.timeline.periods],
        }


def birth_profile(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: float = 0.0,
    *,
    tz_offset_hours: float = 0.0,
    depth: int = DEFAULT_DEPTH,
    year_days: Union[str, float, None] = None,
) -> BirthProfile:
    """
    Civil birth time -> Moon, nakshatra and dasha timeline.

    tz_offset_hours is east of Greenwich (IST = 5.5).
    """
    validate_civil_datetime(year, month, day, hour, minute, second)
    jd = julian_day(year, month, day, hour, minute, second, tz_offset_hours)

    ayan = lahiri_ayanamsa(jd)
    moon = lunar_position(jd)
    moon_sid = to_sidereal(moon.tropical_deg, jd)
    position = locate_nakshatra(moon_sid)
    timeline = timeline_from_position(jd, position, depth, year_days=year_days)

    LOG.debug("profile jd=%.6f moon=%.6f (%s pada %d)", jd, moon_sid, position.name, position.pada)
    return BirthProfile(
        civil={
            "year": year, "month": month, "day": day,
            "hour": hour, "minute": minute, "second": second,
            "tz_offset_hours": tz_offset_hours,
        },
        jd_ut=jd,
        delta_t=estimate_delta_t(jd_to_decimal_year(jd)),
        ayanamsa=ayan,
        moon_tropical=moon.tropical_deg,
        moon_sidereal=moon_sid,
        timeline=timeline,
    )


def current_chain(
    profile: Union[BirthProfile, Timeline],
    year: int,
    month: int,
    day: int,
    hour: int = 12,
    minute: int = 0,
    second: float = 0.0,
    *,
    tz_offset_hours: float = 0.0,
) -> Tuple[ActivePeriod, ...]:
    """Active dasha chain at a civil instant (defaults to local noon)."""
    validate_civil_datetime(year, month, day, hour, minute, second)
    jd = julian_day(year, month, day, hour, minute, second, tz_offset_hours)
    timeline = profile.timeline if isinstance(profile, BirthProfile) else profile
    return active_chain(timeline, jd)
