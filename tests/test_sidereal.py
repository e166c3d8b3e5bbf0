# tests/test_sidereal.py

import pytest
import random

from sunmoon.reference import astro_args as aa
from sunmoon.reference.sidereal import gmst_deg, local_sidereal_time_deg


def test_gmst_at_j2000():
    assert gmst_deg(2451545.0) == pytest.approx(280.46061837, abs=1e-9)

def test_meeus_example_12a():
    """
    Jean Meeus, Astronomical Algorithms (2nd Ed), Example 12.a.
    1987 April 10, 0h UT -> GMST = 13h10m46.3668s
    """
    target = (13 + 10 / 60 + 46.3668 / 3600) * 15.0
    assert gmst_deg(2446895.5) == pytest.approx(target, abs=1e-5)

def test_meeus_example_12b():
    """
    Example 12.b: 1987 April 10, 19h21m00s UT -> GMST = 128.7378734 deg
    """
    assert gmst_deg(2446896.30625) == pytest.approx(128.7378734, abs=1e-5)

def test_lst_longitude_offset():
    jd = 2460389.5
    g = gmst_deg(jd)
    assert local_sidereal_time_deg(jd, 0.0) == pytest.approx(g)
    assert local_sidereal_time_deg(jd, 15.0) == pytest.approx(aa.wrap_deg(g + 15.0))
    assert local_sidereal_time_deg(jd, -74.006) == pytest.approx(aa.wrap_deg(g - 74.006))

def test_lst_range():
    random.seed(42)
    for _ in range(1000):
        jd = random.uniform(2400000.5, 2500000.5)
        lon = random.uniform(-180.0, 180.0)
        lst = local_sidereal_time_deg(jd, lon)
        assert 0.0 <= lst < 360.0


def test_wrap_deg_negative_inputs():
    assert aa.wrap_deg(-30.0) == pytest.approx(330.0)
    assert aa.wrap_deg(-360.0) == 0.0
    assert aa.wrap_deg(-725.5) == pytest.approx(354.5)
    assert aa.wrap_deg(725.5) == pytest.approx(5.5)
    assert aa.wrap_deg(360.0) == 0.0
    # rounds to 360.0 without the guard
    assert aa.wrap_deg(-1e-15) == 0.0

def test_wrap180():
    assert aa.wrap180(190.0) == pytest.approx(-170.0)
    assert aa.wrap180(-190.0) == pytest.approx(170.0)
    assert aa.wrap180(45.0) == pytest.approx(45.0)
    assert -180.0 <= aa.wrap180(180.0) < 180.0

def test_frac01():
    assert aa.frac01(2.25) == pytest.approx(0.25)
    assert aa.frac01(-0.25) == pytest.approx(0.75)
    assert aa.frac01(0.0) == 0.0
    assert 0.0 <= aa.frac01(-1e-17) < 1.0
