from __future__ import annotations

import argparse
import importlib
import inspect
import json
import logging
import os
import re
import sys
from typing import Tuple

from vimdasha.core.errors import VimdashaError


_DATE_RE = re.compile(r"^(-?\d{1,4})-(\d{2})-(\d{2})$")
_TIME_RE = re.compile(r"^(\d{1,2}):(\d{2})(?::(\d{2}(?:\.\d+)?))?$")


def _parse_ymd(s: str) -> Tuple[int, int, int]:
    m = _DATE_RE.match(s)
    if not m:
        raise argparse.ArgumentTypeError(f"expected YYYY-MM-DD, got {s!r}")
    return int(m.group(1)), int(m.group(2)), int(m.group(3))


def _parse_hms(s: str) -> Tuple[int, int, float]:
    m = _TIME_RE.match(s)
    if not m:
        raise argparse.ArgumentTypeError(f"expected HH:MM[:SS], got {s!r}")
    return int(m.group(1)), int(m.group(2)), float(m.group(3) or 0.0)


def _fmt_jd(jd: float) -> str:
    from vimdasha.reference.time_scales import jd_to_datetime_utc

    try:
        return jd_to_datetime_utc(jd).strftime("%Y-%m-%d %H:%M")
    except (OverflowError, OSError, ValueError):
        return f"JD {jd:.4f}"


def _run_module_main(modpath: str, argv: list[str]) -> int:
    """
    Import module and run its main().

    Supports:
      - main(argv: list[str] | None = None) -> int|None
      - main() -> int|None
    """
    mod = importlib.import_module(modpath)
    if not hasattr(mod, "main"):
        raise SystemExit(f"Module {modpath} has no main()")
    fn = getattr(mod, "main")

    sig = inspect.signature(fn)
    if len(sig.parameters) == 0:
        rv = fn()
    else:
        rv = fn(argv)
    return int(rv or 0)


def _add_birth_args(p: argparse.ArgumentParser) -> None:
    from vimdasha.dasha.sequence import MAX_DEPTH

    p.add_argument("date", type=_parse_ymd, help="birth date YYYY-MM-DD")
    p.add_argument("time", type=_parse_hms, nargs="?", default=(0, 0, 0.0), help="birth time HH:MM[:SS] (local)")
    p.add_argument("--tz", type=float, default=0.0, help="zone offset in hours east of UTC (IST = 5.5)")
    p.add_argument("--depth", type=int, default=2, help=f"dasha levels to build (1..{MAX_DEPTH})")
    p.add_argument(
        "--year",
        default=os.environ.get("VIMDASHA_YEAR", "sidereal"),
        help="days per dasha year: sidereal, tropical, julian, gregorian, savana or a number "
             "(default: $VIMDASHA_YEAR or sidereal)",
    )


def _profile_from_args(args):
    from vimdasha.api import birth_profile

    y, mo, d = args.date
    h, mi, s = args.time
    return birth_profile(y, mo, d, h, mi, s, tz_offset_hours=args.tz, depth=args.depth, year_days=args.year)


def cmd_astro_args(argv: list[str]) -> int:
    from vimdasha.reference import astro_args as aa
    from vimdasha.reference.ayanamsa import lahiri_ayanamsa, precession_deg

    p = argparse.ArgumentParser(prog="vimdasha astro-args", description="Print fundamental arguments and ayanamsa at a given JD.")
    p.add_argument("--jd", type=float, default=2451545.0, help="Julian Date (default: J2000.0 = 2451545.0)")
    args = p.parse_args(argv)

    jd = float(args.jd)
    T = aa.T_centuries(jd)
    fa = aa.fundamental_args_jd(jd)

    print(f"JD = {jd:.6f}")
    print(f"T (Julian centuries from J2000.0) = {T:.12f}")
    print()
    print("Fundamental arguments (degrees, wrapped to [0,360))")
    print(f"  L'     = {fa.Lp_deg:.10f}")
    print(f"  D      = {fa.D_deg:.10f}")
    print(f"  M      = {fa.M_deg:.10f}")
    print(f"  M'     = {fa.Mp_deg:.10f}")
    print(f"  F      = {fa.F_deg:.10f}")
    print()
    print(f"Mean obliquity eps (Laskar 1986) = {aa.mean_obliquity_deg(T):.10f} deg")
    print(f"General precession since J2000   = {precession_deg(T):.10f} deg")
    print(f"Lahiri ayanamsa                  = {lahiri_ayanamsa(jd):.10f} deg")
    return 0


def cmd_lunar(argv: list[str]) -> int:
    from vimdasha.nakshatra import locate_nakshatra
    from vimdasha.reference.ayanamsa import lahiri_ayanamsa, to_sidereal
    from vimdasha.reference.lunar import LUNAR_SERIES_VERSION, lunar_position

    p = argparse.ArgumentParser(prog="vimdasha lunar", description="Tropical/sidereal Moon longitude and nakshatra.")
    p.add_argument("--jd", type=float, default=2451545.0, help="Julian Date, UT (default: J2000.0 = 2451545.0)")
    args = p.parse_args(argv)

    jd = args.jd
    moon = lunar_position(jd)
    ayan = lahiri_ayanamsa(jd)
    sid = to_sidereal(moon.tropical_deg, jd)
    nak = locate_nakshatra(sid)

    print(f"Time Input:")
    print(f"  JD = {jd:.6f}")
    print()
    print(f"Lunar Position (degrees, {LUNAR_SERIES_VERSION}):")
    print(f"  Mean Longitude     (L')     = {moon.mean_deg:.6f}")
    print(f"  Periodic terms              = {moon.periodic_microdeg * 1e-6:+.6f}")
    print(f"  Tropical Longitude          = {moon.tropical_deg:.6f}")
    print(f"  Lahiri Ayanamsa             = {ayan:.6f}")
    print(f"  Sidereal Longitude          = {sid:.6f}")
    print()
    print("Nakshatra:")
    print(f"  {nak.index + 1:2d}. {nak.name}, pada {nak.pada}, lord {nak.lord} ({nak.years} y)")
    print(f"  elapsed {nak.elapsed_fraction:.6f}, remaining {nak.remaining_fraction:.6f}")
    return 0


def cmd_timeline(argv: list[str]) -> int:
    from vimdasha.dasha.sequence import level_name
    from vimdasha.dasha.tree import format_duration, iter_periods

    p = argparse.ArgumentParser(prog="vimdasha timeline", description="Vimshottari dasha timeline for a birth time.")
    _add_birth_args(p)
    p.add_argument("--json", action="store_true", help="print the full profile as JSON")
    p.add_argument("--show-levels", type=int, default=2, help="levels to print in table mode")
    args = p.parse_args(argv)

    profile = _profile_from_args(args)

    if args.json:
        print(json.dumps(profile.to_dict(), indent=2))
        return 0

    tl = profile.timeline
    nak = tl.nakshatra
    print(f"JD (UT)   = {profile.jd_ut:.6f}   ΔT ≈ {profile.delta_t:.1f} s")
    print(f"Moon      = {profile.moon_sidereal:.6f} (sidereal), ayanamsa {profile.ayanamsa:.6f}")
    print(f"Nakshatra = {nak.name} pada {nak.pada}, lord {nak.lord}, balance {nak.remaining_fraction:.4f}")
    print()
    show = max(1, min(args.show_levels, tl.depth))
    for node in iter_periods(tl):
        if node.level > show:
            continue
        indent = "  " * (node.level - 1)
        print(
            f"{indent}{level_name(node.level):<16} {node.lord:<8} "
            f"{_fmt_jd(node.start)} -> {_fmt_jd(node.end)}  ({format_duration(node.duration)})"
        )
    return 0


def cmd_active(argv: list[str]) -> int:
    from vimdasha.api import current_chain
    from vimdasha.dasha.sequence import level_name

    p = argparse.ArgumentParser(prog="vimdasha active", description="Dasha periods active at a given date.")
    _add_birth_args(p)
    p.add_argument("--at", type=_parse_ymd, required=True, help="target date YYYY-MM-DD")
    p.add_argument("--at-time", type=_parse_hms, default=(12, 0, 0.0), help="target time HH:MM[:SS] (default 12:00)")
    p.add_argument("--at-tz", type=float, default=None, help="zone offset of the target time (default: --tz)")
    args = p.parse_args(argv)

    profile = _profile_from_args(args)
    y, mo, d = args.at
    h, mi, s = args.at_time
    at_tz = args.tz if args.at_tz is None else args.at_tz
    chain = current_chain(profile, y, mo, d, h, mi, s, tz_offset_hours=at_tz)

    if not chain:
        print("No active period (target outside the timeline).")
        return 0
    for c in chain:
        print(f"Level {c.level} {level_name(c.level):<16} {c.lord:<8} {_fmt_jd(c.start)} -> {_fmt_jd(c.end)}")
    return 0


def main(argv: list[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    p = argparse.ArgumentParser(prog="vimdasha", description="Sidereal Moon and Vimshottari dasha toolkit.")
    p.add_argument("-v", "--verbose", action="store_true", help="debug logging")
    sub = p.add_subparsers(dest="cmd", required=True)

    sub.add_parser("astro-args", help="Print fundamental arguments and ayanamsa at a given JD.")
    sub.add_parser("lunar", help="Tropical/sidereal Moon longitude and nakshatra at a given JD.")
    sub.add_parser("timeline", help="Dasha timeline for a birth time.")
    sub.add_parser("active", help="Dasha periods active at a target date.")

    p_diag = sub.add_parser("diag", help="Diagnostics tools (no ephemeris required)")
    p_diag.add_argument("tool", choices=["boundary-drift"], help="Which diagnostic to run")

    p_ephem = sub.add_parser("ephem", help="Ephemeris-based diagnostics")
    p_ephem.add_argument("tool", choices=["validate-lunar"], help="Which ephemeris diagnostic to run")

    args, rest = p.parse_known_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    commands = {
        "astro-args": cmd_astro_args,
        "lunar": cmd_lunar,
        "timeline": cmd_timeline,
        "active": cmd_active,
    }

    try:
        if args.cmd in commands:
            return commands[args.cmd](rest)

        if args.cmd == "diag":
            tool_map = {
                "boundary-drift": "vimdasha.diagnostics.boundary_drift",
            }
            return _run_module_main(tool_map[args.tool], rest)

        if args.cmd == "ephem":
            tool_map = {
                "validate-lunar": "vimdasha.diagnostics.ephem.validate_lunar",
            }
            return _run_module_main(tool_map[args.tool], rest)
    except VimdashaError as e:
        print(f"error: {e}", file=sys.stderr)
        return 2

    raise RuntimeError("unreachable")


if __name__ == "__main__":
    raise SystemExit(main())
