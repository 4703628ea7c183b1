"""Tests for bearing and compass helpers."""

import pytest

from yr_report.report.geomath import bearing_degrees, compass16, compass_arrow8
from yr_report.weather.models import Coordinate

ORIGIN = Coordinate(latitude=0.0, longitude=0.0)


@pytest.mark.parametrize("target, expected", [
    (Coordinate(latitude=1.0, longitude=0.0), 0.0),
    (Coordinate(latitude=0.0, longitude=1.0), 90.0),
    (Coordinate(latitude=-1.0, longitude=0.0), 180.0),
    (Coordinate(latitude=0.0, longitude=-1.0), 270.0),
])
def test_bearing_cardinal_directions(target, expected):
    assert bearing_degrees(ORIGIN, target) == pytest.approx(expected)


def test_bearing_is_normalized():
    oslo = Coordinate(latitude=59.91, longitude=10.75)
    bergen = Coordinate(latitude=60.39, longitude=5.32)
    bearing = bearing_degrees(oslo, bergen)
    assert 270 < bearing < 300


@pytest.mark.parametrize("bearing, expected", [
    (0.0, "N"),
    (359.9, "N"),
    (180.0, "S"),
    (11.24, "N"),
    (11.25, "NNE"),
    (45.0, "NE"),
    (90.0, "E"),
    (270.0, "W"),
    (348.75, "N"),
])
def test_compass16(bearing, expected):
    assert compass16(bearing) == expected


@pytest.mark.parametrize("degrees, expected", [
    (0.0, "↓"),
    (45.0, "↙"),
    (90.0, "←"),
    (135.0, "↖"),
    (180.0, "↑"),
    (225.0, "↗"),
    (270.0, "→"),
    (315.0, "↘"),
    (337.4, "↘"),
    (337.5, "↓"),
])
def test_wind_arrow_table_is_fixed(degrees, expected):
    # The glyph order is kept as-is, not re-derived from a compass rose
    assert compass_arrow8(degrees) == expected
