#!/usr/bin/env python3
"""
Boundary drift over a grid of birth instants.

For each birth, builds the full tree and reports, per level, the largest gap
between a parent's duration and the sum of its children's. Last children are
pinned to the parent end, so the residual is pure float rounding.
"""
from __future__ import annotations

import argparse
from typing import Dict, List, Optional

from vimdasha.dasha.sequence import MAX_DEPTH, level_name
from vimdasha.dasha.tree import build_timeline, max_boundary_drift
from vimdasha.reference import astro_args as aa


def drift_by_level(timeline) -> Dict[int, float]:
    """Worst drift among the parents at each subdivided level."""
    return {level: max_boundary_drift(timeline, level) for level in range(1, timeline.depth)}


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Report parent/children duration drift per level.")
    p.add_argument("--year-start", type=int, default=1900)
    p.add_argument("--year-end", type=int, default=2100)
    p.add_argument("--samples", type=int, default=20)
    p.add_argument("--depth", type=int, default=4, help=f"tree depth (1..{MAX_DEPTH})")
    p.add_argument("--year", default="sidereal", help="year length preset or days")
    args = p.parse_args(argv)

    jd0 = aa.J2000 + (args.year_start - 2000) * 365.25
    jd1 = aa.J2000 + (args.year_end - 2000) * 365.25
    n = max(1, args.samples)
    step = (jd1 - jd0) / n

    worst: Dict[int, float] = {}
    for i in range(n):
        tl = build_timeline(jd0 + i * step, args.depth, year_days=args.year)
        for level, d in drift_by_level(tl).items():
            worst[level] = max(worst.get(level, 0.0), d)

    print(f"{n} births, {args.year_start}..{args.year_end}, depth {args.depth}")
    if not worst:
        print("  (depth 1: no subdivisions)")
    for level in sorted(worst):
        print(f"  {level_name(level):<16} children of level {level}: max drift {worst[level]:.3e} d")
    return 0

if __name__ == "__main__":
    raise SystemExit(main())
