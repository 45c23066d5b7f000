"""Point queries over a built period tree."""

from __future__ import annotations

from typing import List, Sequence, Tuple, Union

from ..core.types import ActivePeriod, PeriodNode, Timeline
from ..reference.astro_args import require_finite


def active_chain(
    tree: Union[Timeline, Sequence[PeriodNode]],
    jd: float,
) -> Tuple[ActivePeriod, ...]:
    """
    Periods containing `jd`, from level 1 down to the deepest built level.

    Intervals are half-open [start, end). A `jd` outside the tree's span
    gives an empty tuple.
    """
    jd = require_finite(jd, "jd")
    layer: Sequence[PeriodNode] = tree.periods if isinstance(tree, Timeline) else tree

    chain: List[ActivePeriod] = []
    while layer:
        node = next((n for n in layer if n.contains(jd)), None)
        if node is None:
            break
        chain.append(ActivePeriod(level=node.level, lord=node.lord, start=node.start, end=node.end))
        layer = node.children
    return tuple(chain)


def active_lords(tree: Union[Timeline, Sequence[PeriodNode]], jd: float) -> List[str]:
    return [p.lord for p in active_chain(tree, jd)]
