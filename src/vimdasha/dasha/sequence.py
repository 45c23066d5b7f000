"""Vimshottari lord sequence, year lengths and depth limits."""

from __future__ import annotations

import math
from typing import Dict, Tuple, Union

from ..core.errors import ConfigurationError, InvalidArgumentError
from ..core.types import DashaLord


VIMSHOTTARI_SEQUENCE: Tuple[DashaLord, ...] = (
    DashaLord("Ketu", 7),
    DashaLord("Venus", 20),
    DashaLord("Sun", 6),
    DashaLord("Moon", 10),
    DashaLord("Mars", 7),
    DashaLord("Rahu", 18),
    DashaLord("Jupiter", 16),
    DashaLord("Saturn", 19),
    DashaLord("Mercury", 17),
)

CYCLE_YEARS = sum(d.years for d in VIMSHOTTARI_SEQUENCE)  # 120

_SEQUENCE_INDEX: Dict[str, int] = {d.lord: i for i, d in enumerate(VIMSHOTTARI_SEQUENCE)}


# ------------------------------------------------------------
# Year lengths (days per dasha year)
# ------------------------------------------------------------

SIDEREAL_YEAR_DAYS = 365.256363004

YEAR_LENGTHS: Dict[str, float] = {
    "sidereal": SIDEREAL_YEAR_DAYS,
    "tropical": 365.242190402,
    "julian": 365.25,
    "gregorian": 365.2425,
    "savana": 360.0,
}


def resolve_year_days(value: Union[str, float, None]) -> float:
    """
    Year length in days from a preset name ('sidereal', 'julian', ...) or a number.
    None selects the sidereal year.
    """
    if value is None:
        return SIDEREAL_YEAR_DAYS
    if isinstance(value, str):
        key = value.strip().lower()
        if key in YEAR_LENGTHS:
            return YEAR_LENGTHS[key]
        try:
            value = float(key)
        except ValueError:
            raise InvalidArgumentError(
                f"Unknown year length '{value}'. Available: {sorted(YEAR_LENGTHS)}"
            ) from None
    days = float(value)
    if not math.isfinite(days) or days <= 0.0:
        raise InvalidArgumentError(f"year length must be a positive number of days, got {value!r}")
    return days


# ------------------------------------------------------------
# Depth
# ------------------------------------------------------------

DEFAULT_DEPTH = 6
MAX_DEPTH = 8

LEVEL_NAMES: Dict[int, str] = {
    1: "mahadasha",
    2: "antardasha",
    3: "pratyantardasha",
    4: "sukshma",
    5: "prana",
    6: "deha",
}


def level_name(level: int) -> str:
    return LEVEL_NAMES.get(level, f"level{level}")


def check_depth(depth: int) -> int:
    if isinstance(depth, bool) or not isinstance(depth, int):
        raise InvalidArgumentError(f"depth must be an integer, got {depth!r}")
    if not (1 <= depth <= MAX_DEPTH):
        raise InvalidArgumentError(f"depth must be in 1..{MAX_DEPTH}, got {depth}")
    return depth


def node_count(depth: int) -> int:
    """Number of nodes in a full tree of the given depth: 9 + 9^2 + ... + 9^depth."""
    return sum(9 ** k for k in range(1, check_depth(depth) + 1))


# ------------------------------------------------------------
# Lookup
# ------------------------------------------------------------

def sequence_index(lord: str) -> int:
    """Position of a lord in VIMSHOTTARI_SEQUENCE."""
    try:
        return _SEQUENCE_INDEX[lord]
    except KeyError:
        raise ConfigurationError(
            f"Lord '{lord}' is not in the Vimshottari sequence {list(_SEQUENCE_INDEX)}"
        ) from None


def cycle_from(index: int) -> Tuple[DashaLord, ...]:
    """The 9 lords in sequence order starting at index (mod 9)."""
    n = len(VIMSHOTTARI_SEQUENCE)
    return tuple(VIMSHOTTARI_SEQUENCE[(index + k) % n] for k in range(n))
