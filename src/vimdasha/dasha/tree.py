"""
Recursive Vimshottari period tree.

Level 1 holds the nine mahadashas. The first one is cut down to the balance
left at birth; the other eight run their full length, so the level-1 span is
120 years minus the part of the birth period already elapsed. Every deeper
level splits its parent into nine children in the 120-year ratio, starting
from the parent's own lord.
"""

from __future__ import annotations

import logging
import math
from typing import Iterator, Optional, Sequence, Tuple, Union

from ..core.errors import ConfigurationError, InvalidArgumentError
from ..core.types import NakshatraPosition, PeriodNode, Timeline
from ..nakshatra import locate_nakshatra
from ..reference.astro_args import require_finite
from ..reference.ayanamsa import moon_sidereal_longitude
from .sequence import (
    CYCLE_YEARS,
    DEFAULT_DEPTH,
    VIMSHOTTARI_SEQUENCE,
    check_depth,
    cycle_from,
    node_count,
    resolve_year_days,
    sequence_index,
)

LOG = logging.getLogger(__name__)


# Smallest representable node: this many float steps at the node's Julian Day.
RESOLUTION_ULPS = 16

_MIN_YEARS = min(d.years for d in VIMSHOTTARI_SEQUENCE)


def _check_resolution(duration: float, levels: int, anchor: float) -> None:
    """
    Reject a span whose smallest descendant `levels` generations down (the
    shortest lord taken every time) would fall below float resolution at `anchor`.
    """
    smallest = duration * (_MIN_YEARS / CYCLE_YEARS) ** levels
    floor = RESOLUTION_ULPS * math.ulp(abs(anchor))
    if smallest < floor:
        raise InvalidArgumentError(
            f"span of {duration:.3e} d cannot be split {levels} more levels at JD {anchor:.1f}: "
            f"smallest period {smallest:.3e} d is below {floor:.1e} d; use a shallower depth"
        )


def subdivide(
    start: float,
    end: float,
    lord_index: int,
    level: int,
    depth: int,
) -> Tuple[PeriodNode, ...]:
    """
    Split [start, end) into the 9 sub-periods at `level`, cycling from lord_index.

    Children below `level` are generated while level < depth. Boundaries are
    day offsets from `start` (cumulative years / 120); the last child ends
    exactly at `end`. Raises InvalidArgumentError if the deepest periods would
    be shorter than float resolution allows.
    """
    if level > depth:
        return ()

    duration = end - start
    _check_resolution(duration, depth - level + 1, end)
    lords = cycle_from(lord_index)
    last = len(lords) - 1

    out = []
    cursor = start
    elapsed_years = 0
    for k, d in enumerate(lords):
        elapsed_years += d.years
        child_end = end if k == last else start + duration * elapsed_years / CYCLE_YEARS
        idx = (lord_index + k) % len(VIMSHOTTARI_SEQUENCE)
        grandchildren = subdivide(cursor, child_end, idx, level + 1, depth) if level < depth else ()
        out.append(PeriodNode(level=level, lord=d.lord, start=cursor, end=child_end, children=grandchildren))
        cursor = child_end
    return tuple(out)


def expand(node: PeriodNode, levels: int = 1) -> PeriodNode:
    """
    Return a copy of `node` with `levels` generations of children generated below it.

    Useful for building shallow timelines and drilling into a single period later.
    """
    if levels < 1:
        raise InvalidArgumentError(f"levels must be >= 1, got {levels}")
    depth = check_depth(node.level + levels)
    children = subdivide(node.start, node.end, sequence_index(node.lord), node.level + 1, depth)
    return PeriodNode(level=node.level, lord=node.lord, start=node.start, end=node.end, children=children)


def build_periods(
    birth_jd: float,
    lord: str,
    years: int,
    remaining_fraction: float,
    depth: int = DEFAULT_DEPTH,
    *,
    year_days: Union[str, float, None] = None,
) -> Tuple[PeriodNode, ...]:
    """
    Build the 9 level-1 periods (with subtrees down to `depth`) starting at birth.

    lord/years:          ruling lord of the birth nakshatra and its dasha years
    remaining_fraction:  part of the birth nakshatra still to be traversed, in (0, 1]
    year_days:           days per dasha year (preset name or number; default sidereal)
    """
    birth_jd = require_finite(birth_jd, "birth_jd")
    depth = check_depth(depth)
    days = resolve_year_days(year_days)
    remaining_fraction = require_finite(remaining_fraction, "remaining_fraction")
    if not (0.0 < remaining_fraction <= 1.0):
        raise InvalidArgumentError(f"remaining_fraction must be in (0, 1], got {remaining_fraction}")

    start_index = sequence_index(lord)
    if VIMSHOTTARI_SEQUENCE[start_index].years != years:
        raise ConfigurationError(
            f"{lord} carries {years} years, sequence says {VIMSHOTTARI_SEQUENCE[start_index].years}"
        )

    out = []
    cursor = birth_jd
    for k, d in enumerate(cycle_from(start_index)):
        full = d.years * days
        end = cursor + (full * remaining_fraction if k == 0 else full)
        _check_resolution(end - cursor, depth - 1, end)
        idx = (start_index + k) % len(VIMSHOTTARI_SEQUENCE)
        children = subdivide(cursor, end, idx, 2, depth)
        out.append(PeriodNode(level=1, lord=d.lord, start=cursor, end=end, children=children))
        cursor = end
    return tuple(out)


def timeline_from_position(
    birth_jd: float,
    position: NakshatraPosition,
    depth: int = DEFAULT_DEPTH,
    *,
    year_days: Union[str, float, None] = None,
) -> Timeline:
    """Timeline for an already-located birth nakshatra."""
    days = resolve_year_days(year_days)
    periods = build_periods(
        birth_jd,
        position.lord,
        position.years,
        position.remaining_fraction,
        depth,
        year_days=days,
    )
    LOG.debug(
        "timeline from %s/%s pada %d, depth %d (%d nodes), %.6f d/yr",
        position.name, position.lord, position.pada, depth, node_count(depth), days,
    )
    return Timeline(
        birth_jd=float(birth_jd),
        nakshatra=position,
        year_days=days,
        depth=depth,
        periods=periods,
    )


def build_timeline(
    birth_jd: float,
    depth: int = DEFAULT_DEPTH,
    *,
    year_days: Union[str, float, None] = None,
) -> Timeline:
    """
    Full pipeline: JD(UT) -> sidereal Moon -> birth nakshatra -> period tree.
    """
    # Reject bad arguments before running the lunar series.
    birth_jd = require_finite(birth_jd, "birth_jd")
    check_depth(depth)
    position = locate_nakshatra(moon_sidereal_longitude(birth_jd))
    return timeline_from_position(birth_jd, position, depth, year_days=year_days)


# ------------------------------------------------------------
# Walking and checking trees
# ------------------------------------------------------------

def _roots(tree: Union[Timeline, Sequence[PeriodNode]]) -> Sequence[PeriodNode]:
    return tree.periods if isinstance(tree, Timeline) else tree


def iter_periods(
    tree: Union[Timeline, Sequence[PeriodNode]],
    level: Optional[int] = None,
) -> Iterator[PeriodNode]:
    """Depth-first, chronological walk; restrict to one level if given."""
    stack = list(reversed(_roots(tree)))
    while stack:
        node = stack.pop()
        if level is None or node.level == level:
            yield node
        if level is None or node.level < level:
            stack.extend(reversed(node.children))


def max_boundary_drift(
    tree: Union[Timeline, Sequence[PeriodNode]],
    level: Optional[int] = None,
) -> float:
    """
    Largest |sum(children durations) - parent duration| in the tree (days).

    With `level`, only parents at that level are checked.
    """
    worst = 0.0
    for node in iter_periods(tree, level):
        if node.children:
            drift = abs(sum(c.duration for c in node.children) - node.duration)
            worst = max(worst, drift)
    return worst


def format_duration(days: float) -> str:
    """Days -> '{d}d {h}h {m}m {s}s', rounded to the nearest second."""
    d, rem = divmod(int(round(days * 86400.0)), 86400)
    h, rem = divmod(rem, 3600)
    m, s = divmod(rem, 60)
    return f"{d}d {h}h {m}m {s}s"
