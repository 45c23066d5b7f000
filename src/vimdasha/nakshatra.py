"""The 27 nakshatras and sidereal longitude -> nakshatra/pada lookup."""

from __future__ import annotations

import math
from typing import Tuple

from .core.types import Nakshatra, NakshatraPosition
from .dasha.sequence import VIMSHOTTARI_SEQUENCE
from .reference.astro_args import require_finite, wrap_deg


NAKSHATRA_NAMES = (
    "Ashwini", "Bharani", "Krittika", "Rohini", "Mrigashira", "Ardra",
    "Punarvasu", "Pushya", "Ashlesha", "Magha", "Purva Phalguni", "Uttara Phalguni",
    "Hasta", "Chitra", "Swati", "Vishakha", "Anuradha", "Jyeshtha",
    "Mula", "Purva Ashadha", "Uttara Ashadha", "Shravana", "Dhanishta", "Shatabhisha",
    "Purva Bhadrapada", "Uttara Bhadrapada", "Revati",
)

# Lords run through the 9-lord sequence three times, Ashwini/Ketu to Revati/Mercury.
NAKSHATRAS: Tuple[Nakshatra, ...] = tuple(
    Nakshatra(
        index=i,
        name=name,
        lord=VIMSHOTTARI_SEQUENCE[i % 9].lord,
        years=VIMSHOTTARI_SEQUENCE[i % 9].years,
    )
    for i, name in enumerate(NAKSHATRA_NAMES)
)

NAKSHATRA_SPAN = 360.0 / 27.0  # 13°20'
PADAS = 4


def locate_nakshatra(longitude: float) -> NakshatraPosition:
    """
    Nakshatra, pada and elapsed/remaining fractions for a sidereal longitude (degrees).
    """
    lon = wrap_deg(require_finite(longitude, "longitude"))

    q = lon / NAKSHATRA_SPAN
    index = min(int(math.floor(q)), len(NAKSHATRAS) - 1)
    elapsed = min(q - index, 1.0)
    pada = min(int(math.floor(elapsed * PADAS)) + 1, PADAS)

    nak = NAKSHATRAS[index]
    return NakshatraPosition(
        longitude=lon,
        index=index,
        name=nak.name,
        lord=nak.lord,
        years=nak.years,
        elapsed_fraction=elapsed,
        remaining_fraction=1.0 - elapsed,
        pada=pada,
    )
