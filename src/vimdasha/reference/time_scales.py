from __future__ import annotations

from datetime import datetime, timezone
import math

from ..core.errors import InvalidArgumentError


# ============================================================
# Civil date/time validation
# ============================================================

def validate_civil_datetime(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: float = 0.0,
) -> None:
    """
    Reject out-of-range civil fields. Only coarse bounds are checked
    (day 1..31 regardless of month), matching what birth-data forms accept.
    """
    checks = (
        ("month", month, 1, 12),
        ("day", day, 1, 31),
        ("hour", hour, 0, 23),
        ("minute", minute, 0, 59),
    )
    for name, value, lo, hi in checks:
        if not (lo <= value <= hi):
            raise InvalidArgumentError(f"Invalid {name}: {value} (expected {lo}..{hi})")
    if not (0 <= second < 60):
        raise InvalidArgumentError(f"Invalid second: {second} (expected 0..<60)")


# ============================================================
# Gregorian calendar -> JD (Meeus, Astronomical Algorithms ch. 7)
# ============================================================

def julian_day(
    year: int,
    month: int,
    day: int,
    hour: int = 0,
    minute: int = 0,
    second: float = 0.0,
    tz_offset_hours: float = 0.0,
) -> float:
    """
    Local civil time -> JD(UT), proleptic Gregorian.

    tz_offset_hours is the zone offset east of Greenwich (5.5 for IST).
    The formula is linear in the day, so an hour shift that crosses midnight
    (or a month boundary) is absorbed by the fractional day.
    """
    day_fraction = (hour - tz_offset_hours + minute / 60.0 + second / 3600.0) / 24.0

    y, m = year, month
    if m <= 2:
        y -= 1
        m += 12

    a = y // 100
    b = 2 - a + a // 4

    return (
        math.floor(365.25 * (y + 4716))
        + math.floor(30.6001 * (m + 1))
        + day + day_fraction + b - 1524.5
    )


# ============================================================
# datetime(UTC) <-> JD(UTC)
# ============================================================

_JD_UNIX_EPOCH = 2440587.5  # JD at 1970-01-01 00:00:00 UTC


def datetime_utc_to_jd(dt: datetime) -> float:
    """
    datetime -> JD (UTC). Requires a timezone-aware datetime.
    """
    if dt.tzinfo is None:
        raise InvalidArgumentError("datetime must be timezone-aware")
    t = dt.astimezone(timezone.utc).timestamp()
    return _JD_UNIX_EPOCH + t / 86400.0


def jd_to_datetime_utc(jd: float) -> datetime:
    """
    JD (UTC) -> timezone-aware datetime in UTC.
    """
    t = (jd - _JD_UNIX_EPOCH) * 86400.0
    return datetime.fromtimestamp(t, tz=timezone.utc)


def jd_to_decimal_year(jd: float) -> float:
    """Decimal year in Julian years from J2000.0; good enough for ΔT lookups."""
    return 2000.0 + (jd - 2451545.0) / 365.25
