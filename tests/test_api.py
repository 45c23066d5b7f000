# tests/test_api.py

import json
from unittest.mock import patch

import pytest

import vimdasha
from vimdasha.api import BirthProfile, birth_profile, current_chain
from vimdasha.core.errors import InvalidArgumentError
from vimdasha.reference.deltat import estimate_delta_t
from vimdasha.reference.time_scales import jd_to_decimal_year, julian_day


@pytest.fixture(scope="module")
def profile():
    return birth_profile(1990, 1, 1, 5, 30, tz_offset_hours=5.5, depth=3)


def test_profile_time(profile):
    assert isinstance(profile, BirthProfile)
    assert profile.jd_ut == pytest.approx(julian_day(1990, 1, 1, 0, 0), abs=1e-9)
    assert jd_to_decimal_year(profile.jd_ut) == pytest.approx(1990.0, abs=0.01)
    assert profile.delta_t == estimate_delta_t(jd_to_decimal_year(profile.jd_ut))
    assert profile.jd_tt - profile.jd_ut == pytest.approx(profile.delta_t / 86400.0, abs=1e-9)

def test_profile_astronomy(profile):
    assert 0.0 <= profile.moon_tropical < 360.0
    assert 0.0 <= profile.moon_sidereal < 360.0
    diff = (profile.moon_tropical - profile.moon_sidereal) % 360.0
    assert diff == pytest.approx(profile.ayanamsa, abs=1e-9)
    assert profile.timeline.depth == 3
    assert profile.timeline.birth_jd == profile.jd_ut
    assert profile.timeline.periods[0].lord == profile.timeline.nakshatra.lord

def test_profile_to_dict_is_json(profile):
    d = profile.to_dict()
    assert set(d) == {"metadata", "input", "astronomy", "dasha_timeline"}
    assert d["metadata"]["software_version"] == vimdasha.__version__
    assert d["metadata"]["constants_used"]["jd_epoch"] == 2451545.0
    assert d["input"]["tz_offset_hours"] == 5.5
    assert d["astronomy"]["moon_nakshatra"] == profile.timeline.nakshatra.name
    assert len(d["dasha_timeline"]) == 9
    text = json.dumps(d)
    assert json.loads(text)["input"]["year"] == 1990

def test_current_chain(profile):
    chain = current_chain(profile, 2026, 2, 25)
    assert len(chain) == 3
    jd = julian_day(2026, 2, 25, 12)
    for c in chain:
        assert c.start <= jd < c.end

def test_current_chain_accepts_timeline(profile):
    assert current_chain(profile.timeline, 2026, 2, 25) == current_chain(profile, 2026, 2, 25)

def test_current_chain_before_birth(profile):
    assert current_chain(profile, 1980, 1, 1) == ()

def test_invalid_civil_input():
    with pytest.raises(InvalidArgumentError):
        birth_profile(1990, 13, 1)
    with pytest.raises(ValueError):
        birth_profile(1990, 1, 1, 25)

def test_invalid_target(profile):
    with pytest.raises(InvalidArgumentError):
        current_chain(profile, 2026, 2, 25, 12, 61)

def test_year_length_option():
    p = birth_profile(2000, 1, 1, 12, depth=1, year_days="julian")
    assert p.timeline.year_days == 365.25
    assert p.timeline.nakshatra.name == "Swati"

def test_package_exports():
    for name in vimdasha.__all__:
        assert hasattr(vimdasha, name)

def test_delta_t_is_metadata_only():
    with patch("vimdasha.api.estimate_delta_t", return_value=0.0):
        p = birth_profile(2000, 1, 1, 12, depth=1)
    assert p.delta_t == 0.0
    assert p.jd_tt == p.jd_ut
    # Moon is evaluated at UT regardless of ΔT
    assert p.moon_sidereal == birth_profile(2000, 1, 1, 12, depth=1).moon_sidereal
