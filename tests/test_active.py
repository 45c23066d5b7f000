# tests/test_active.py

import math
import random

import pytest

from conftest import J2000
from vimdasha.core.errors import InvalidArgumentError
from vimdasha.dasha.active import active_chain, active_lords
from vimdasha.dasha.tree import build_timeline


def test_chain_at_birth(moon_periods):
    chain = active_chain(moon_periods, J2000)
    assert [c.level for c in chain] == [1, 2, 3]
    assert [c.lord for c in chain] == ["Moon", "Moon", "Moon"]
    assert all(c.start == J2000 for c in chain)

def test_chain_is_nested_everywhere(moon_periods):
    random.seed(3)
    lo, hi = moon_periods[0].start, moon_periods[-1].end
    for _ in range(300):
        jd = random.uniform(lo, hi)
        chain = active_chain(moon_periods, jd)
        assert len(chain) == 3
        for c in chain:
            assert c.start <= jd < c.end
        for outer, inner in zip(chain, chain[1:]):
            assert outer.start <= inner.start
            assert inner.end <= outer.end
            assert inner.level == outer.level + 1

def test_boundary_belongs_to_later_period(moon_periods):
    second = moon_periods[1]
    chain = active_chain(moon_periods, second.start)
    assert chain[0].lord == "Mars"
    assert chain[1].lord == "Mars"
    assert chain[0].start == second.start

def test_outside_span_is_empty(moon_periods):
    assert active_chain(moon_periods, J2000 - 1.0) == ()
    # end of the last period is excluded
    assert active_chain(moon_periods, moon_periods[-1].end) == ()
    assert active_lords(moon_periods, moon_periods[-1].end + 100.0) == []

def test_depth_one(shallow_periods):
    chain = active_chain(shallow_periods, J2000 + 1.0)
    assert len(chain) == 1
    assert chain[0].lord == "Ketu"

def test_accepts_timeline():
    tl = build_timeline(J2000, 3)
    lords = active_lords(tl, J2000 + 0.5)
    # Rahu mahadasha has about 250 days left at J2000
    assert lords == ["Rahu", "Rahu", "Rahu"]

def test_active_period_to_dict(moon_periods):
    d = active_chain(moon_periods, J2000)[0].to_dict()
    assert d == {"level": 1, "lord": "Moon", "start": J2000, "end": moon_periods[0].end}

@pytest.mark.parametrize("bad", [math.nan, math.inf])
def test_bad_query(moon_periods, bad):
    with pytest.raises(InvalidArgumentError):
        active_chain(moon_periods, bad)
