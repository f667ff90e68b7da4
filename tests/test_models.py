import dataclasses

import pytest

from routedb import Box, GeoCoordinate, Route
from routedb.core import haversine_distance, to_micro_degrees
from routedb.models import parse_metadata


@pytest.mark.parametrize("raw, expected", [
    ("kg-osh-101", ("kg", "osh", "101")),
    ("kg-osh-7-express", ("kg", "osh", "7-express")),
    ("kg-osh-", ("kg", "osh", "")),
    ("kg-osh", ("", "", "")),
    ("", ("", "", "")),
])
def test_parse_metadata(raw, expected):
    assert parse_metadata(raw) == expected


def test_route_derives_fields():
    route = Route("kg-bishkek-42", [GeoCoordinate(42.87, 74.59)])
    assert (route.country, route.city, route.name) == ("kg", "bishkek", "42")
    assert isinstance(route.points, tuple)


def test_route_is_immutable():
    route = Route("kg-osh-1", [])
    with pytest.raises(dataclasses.FrozenInstanceError):
        route.name = "2"


def test_zero_box():
    assert Box() == Box(0.0, 0.0, 0.0, 0.0)
    assert not Box(n=1.0).is_empty


def test_haversine_one_degree_of_latitude():
    assert haversine_distance(0, 0, 1, 0) == pytest.approx(111195, rel=1e-4)


def test_haversine_zero_distance():
    assert haversine_distance(40.5, 72.8, 40.5, 72.8) == 0


def test_route_length_km():
    route = Route("a-b-c", [GeoCoordinate(0, 0), GeoCoordinate(1, 0), GeoCoordinate(2, 0)])
    assert route.length_km() == pytest.approx(222.39, rel=1e-3)


@pytest.mark.parametrize("degrees, expected", [
    (40.50263, 40502630),
    (72.821976, 72821976),
    (40.5000009, 40500000),
    (-72.8000009, -72800000),
    (-0.5, -500000),
    (0.0, 0),
])
def test_to_micro_degrees(degrees, expected):
    assert to_micro_degrees(degrees) == expected
