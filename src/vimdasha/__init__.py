"""vimdasha public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

from .api import (
    __version__,
    BirthProfile,
    birth_profile,
    current_chain,
)
from .core.errors import (
    ConfigurationError,
    EphemerisUnavailableError,
    InvalidArgumentError,
    VimdashaError,
)
from .core.types import ActivePeriod, NakshatraPosition, PeriodNode, Timeline
from .dasha.active import active_chain, active_lords
from .dasha.sequence import DEFAULT_DEPTH, MAX_DEPTH, VIMSHOTTARI_SEQUENCE
from .dasha.tree import build_periods, build_timeline, expand, timeline_from_position
from .nakshatra import NAKSHATRAS, locate_nakshatra
from .reference.ayanamsa import lahiri_ayanamsa, moon_sidereal_longitude
from .reference.lunar import moon_tropical_longitude
from .reference.time_scales import julian_day

__all__ = [
    "__version__",
    "BirthProfile",
    "birth_profile",
    "current_chain",
    "ConfigurationError",
    "EphemerisUnavailableError",
    "InvalidArgumentError",
    "VimdashaError",
    "ActivePeriod",
    "NakshatraPosition",
    "PeriodNode",
    "Timeline",
    "active_chain",
    "active_lords",
    "DEFAULT_DEPTH",
    "MAX_DEPTH",
    "VIMSHOTTARI_SEQUENCE",
    "build_periods",
    "build_timeline",
    "expand",
    "timeline_from_position",
    "NAKSHATRAS",
    "locate_nakshatra",
    "lahiri_ayanamsa",
    "moon_sidereal_longitude",
    "moon_tropical_longitude",
    "julian_day",
]
