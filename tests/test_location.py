"""Tests for location labels."""

import pytest

from yr_report.report.location import base_label, name_location
from yr_report.weather.geocoding import geodesic_distance_meters
from yr_report.weather.models import Coordinate, Place

OSLO = Coordinate(latitude=59.91, longitude=10.75)
NORTH_OF_OSLO = Coordinate(latitude=60.01, longitude=10.75)
OSLO_PLACE = Place(coordinate=OSLO, locality="Oslo", country="Norway")


def fixed_distance(meters):
    return lambda origin, target: meters


@pytest.mark.parametrize("place, expected", [
    (Place(locality="Oslo", country="Norway"), "Oslo, Norway"),
    (Place(country="Norway"), "Norway"),
    (Place(locality="Oslo"), "Oslo"),
    (Place(), ""),
])
def test_base_label(place, expected):
    assert base_label(place) == expected


def test_close_place_is_unprefixed():
    assert name_location(NORTH_OF_OSLO, OSLO_PLACE, fixed_distance(4900)) == "Oslo, Norway"


def test_prefix_starts_at_five_km():
    assert name_location(NORTH_OF_OSLO, OSLO_PLACE, fixed_distance(5000)) == "5km N of Oslo, Norway"


def test_direction_reads_from_place_to_observer():
    south = Coordinate(latitude=59.81, longitude=10.75)
    assert name_location(south, OSLO_PLACE, fixed_distance(11000)) == "11km S of Oslo, Norway"


def test_place_without_coordinate():
    place = Place(locality="Oslo", country="Norway")
    assert name_location(NORTH_OF_OSLO, place, fixed_distance(50000)) == "Oslo, Norway"


def test_with_geodesic_distance():
    # 0.1 degree of latitude is roughly 11.1 km
    assert name_location(NORTH_OF_OSLO, OSLO_PLACE, geodesic_distance_meters) == "11km N of Oslo, Norway"
