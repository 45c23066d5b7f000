#!/usr/bin/env python3
"""
Measure the truncated lunar longitude series against a JPL ephemeris.

The analytical longitude is referred to the mean equinox of date while
skyfield's ecliptic frame is the true equinox, so nutation (|Δψ| <= ~17")
is part of the reported residual. Sample times are UT; skyfield applies its own
ΔT when reading the kernel.
"""
from __future__ import annotations

import argparse
from typing import List, Optional

from vimdasha.ephemeris.jpl_moon import DEFAULT_KERNEL, JPLMoon
from vimdasha.reference import astro_args as aa
from vimdasha.reference.lunar import LUNAR_SERIES_VERSION, moon_tropical_longitude


def _need_numpy():
    try:
        import numpy as np
        return np
    except ImportError as e:
        raise RuntimeError('Need numpy. Install: pip install "vimdasha[diagnostics]"') from e


def _need_matplotlib():
    try:
        import matplotlib.pyplot as plt
        return plt
    except ImportError as e:
        raise RuntimeError('Need matplotlib. Install: pip install "vimdasha[diagnostics]"') from e


def main(argv: Optional[List[str]] = None) -> int:
    p = argparse.ArgumentParser(description="Validate the analytical lunar longitude against a JPL kernel.")
    p.add_argument("--year-start", type=int, default=1900)
    p.add_argument("--year-end", type=int, default=2049)
    p.add_argument("--step-days", type=float, default=7.3)
    p.add_argument("--kernel", default=DEFAULT_KERNEL)
    p.add_argument("--out-png", default=None, help="write a residual plot (needs matplotlib)")
    args = p.parse_args(argv)

    np = _need_numpy()

    print(f"Loading {args.kernel} ...")
    moon = JPLMoon.load(args.kernel)

    jd_start = aa.J2000 + (args.year_start - 2000) * 365.25
    jd_end = aa.J2000 + (args.year_end - 2000) * 365.25
    jds = np.arange(jd_start, jd_end, args.step_days)
    years = 2000 + (jds - aa.J2000) / 365.25

    print(f"Comparing {len(jds)} points from {years[0]:.0f} to {years[-1]:.0f} ({LUNAR_SERIES_VERSION})...")

    err = np.array([
        aa.wrap180(moon_tropical_longitude(float(jd)) - moon.longitude_deg_ut(float(jd))) * 3600.0
        for jd in jds
    ])

    rms = float(np.sqrt(np.mean(err * err)))
    worst = float(np.max(np.abs(err)))
    print(f"Lunar longitude residual (analytical - JPL):")
    print(f"  mean = {float(np.mean(err)):+.2f}\"")
    print(f"  rms  = {rms:.2f}\"")
    print(f"  max  = {worst:.2f}\"")
    # One pada is 3°20' = 12000"
    print(f"  max / pada width = {worst / 12000.0:.2e}")

    if args.out_png:
        plt = _need_matplotlib()
        fig, ax = plt.subplots(1, 1, figsize=(12, 5))
        ax.scatter(years, err, s=1, alpha=0.5, color="blue")
        ax.set_title(f"Lunar Longitude Error (Analytical - {args.kernel})")
        ax.set_xlabel("Year")
        ax.set_ylabel("Error (arcsec)")
        ax.grid(True, alpha=0.3)
        plt.tight_layout()
        plt.savefig(args.out_png, dpi=200)
        print(f"Plot saved to {args.out_png}")

    return 0

if __name__ == "__main__":
    raise SystemExit(main())
