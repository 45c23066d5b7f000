# tests/test_time_scales.py

import pytest
import random
from datetime import datetime, timezone

from vimdasha.core.errors import InvalidArgumentError
from vimdasha.reference import deltat
from vimdasha.reference import time_scales as ts

def test_j2000_epoch():
    assert ts.julian_day(2000, 1, 1, 12) == pytest.approx(2451545.0, abs=1e-9)

def test_meeus_example_7a():
    # 1957 October 4.81 (Sputnik 1) -> JD 2436116.31
    assert ts.julian_day(1957, 10, 4, 19, 26, 24) == pytest.approx(2436116.31, abs=1e-6)

def test_january_february_use_previous_year():
    # Meeus Example 7.b-style check across the March shift
    assert ts.julian_day(2000, 3, 1) - ts.julian_day(2000, 2, 28) == pytest.approx(2.0, abs=1e-9)
    assert ts.julian_day(1999, 3, 1) - ts.julian_day(1999, 2, 28) == pytest.approx(1.0, abs=1e-9)

def test_timezone_offset():
    # 17:30 IST is 12:00 UT
    assert ts.julian_day(2000, 1, 1, 17, 30, 0, tz_offset_hours=5.5) == pytest.approx(2451545.0, abs=1e-9)

def test_timezone_crosses_midnight_and_year():
    # 02:00 IST on Jan 1 is 20:30 UT on Dec 31 of the previous year
    a = ts.julian_day(2000, 1, 1, 2, 0, 0, tz_offset_hours=5.5)
    b = ts.julian_day(1999, 12, 31, 20, 30, 0)
    assert a == pytest.approx(b, abs=1e-9)

def test_matches_datetime_conversion():
    random.seed(42)
    for _ in range(200):
        jd_in = random.uniform(2400000.5, 2500000.5)
        dt = ts.jd_to_datetime_utc(jd_in)
        jd_civil = ts.julian_day(dt.year, dt.month, dt.day, dt.hour, dt.minute, dt.second + dt.microsecond / 1e6)
        assert jd_civil == pytest.approx(jd_in, abs=1e-8)
        assert ts.datetime_utc_to_jd(dt) == pytest.approx(jd_in, abs=1e-8)

def test_unix_epoch():
    unix_dt = datetime(1970, 1, 1, tzinfo=timezone.utc)
    assert ts.datetime_utc_to_jd(unix_dt) == 2440587.5

def test_naive_datetime_rejected():
    with pytest.raises(InvalidArgumentError):
        ts.datetime_utc_to_jd(datetime(2000, 1, 1))

@pytest.mark.parametrize("fields, name", [
    ((2000, 13, 1, 0, 0, 0), "month"),
    ((2000, 0, 1, 0, 0, 0), "month"),
    ((2000, 1, 32, 0, 0, 0), "day"),
    ((2000, 1, 1, 24, 0, 0), "hour"),
    ((2000, 1, 1, 0, 60, 0), "minute"),
    ((2000, 1, 1, 0, 0, 60), "second"),
])
def test_validate_civil_datetime(fields, name):
    with pytest.raises(InvalidArgumentError, match=name):
        ts.validate_civil_datetime(*fields)

def test_validate_accepts_limits():
    ts.validate_civil_datetime(2000, 12, 31, 23, 59, 59.999)

def test_invalid_argument_is_value_error():
    with pytest.raises(ValueError):
        ts.validate_civil_datetime(2000, 2, 0)

@pytest.mark.parametrize("year, expected", [
    (2000.0, 62.92),
    (2100.0, 62.92 + 0.32217 * 100 + 0.005589 * 100 ** 2),
    (1900.0, -2.79),
    (1800.0, deltat.DELTA_T_FALLBACK),
    (2200.0, deltat.DELTA_T_FALLBACK),
])
def test_delta_t_estimate(year, expected):
    assert deltat.estimate_delta_t(year) == pytest.approx(expected, abs=1e-9)

def test_delta_t_twentieth_century_cubic():
    u = 50.0
    expected = -2.79 + 1.494119 * u - 0.0598939 * u ** 2 + 0.00061966 * u ** 3
    assert deltat.estimate_delta_t(1950.0) == pytest.approx(expected, abs=1e-9)

def test_jd_ut_to_jd_tt():
    assert deltat.jd_ut_to_jd_tt(2451545.0, 86.4) == pytest.approx(2451545.001, abs=1e-12)

@pytest.mark.parametrize("jd, year", [
    (2451545.0, 2000.0),
    (2451545.0 + 365.25, 2001.0),
    (2451545.0 - 36525.0, 1900.0),
])
def test_jd_to_decimal_year(jd, year):
    assert ts.jd_to_decimal_year(jd) == pytest.approx(year, abs=1e-12)
