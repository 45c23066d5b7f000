# tests/conftest.py

import pytest

from vimdasha.dasha.tree import build_periods

J2000 = 2451545.0
SIDEREAL_YEAR = 365.256363


def walk(nodes):
    for n in nodes:
        yield n
        yield from walk(n.children)


@pytest.fixture
def moon_periods():
    """Moon-ruled birth at J2000, half the nakshatra left, three levels deep."""
    return build_periods(J2000, "Moon", 10, 0.5, 3, year_days=SIDEREAL_YEAR)


@pytest.fixture
def shallow_periods():
    return build_periods(J2000, "Ketu", 7, 0.25, 1, year_days=SIDEREAL_YEAR)
