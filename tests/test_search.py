import pytest

from routedb import Database, GeoCoordinate, NotFoundError, Route, Stop
from routedb.search import find_nearest

from conftest import make_archive, make_gpx


def test_nearest_known_point(osh_db):
    stop = osh_db.nearest(40.50265, 72.821978)
    assert stop == Stop(lat=40.50263, lon=72.821976)


def test_nearest_returns_stored_coordinates(osh_db):
    stop = osh_db.nearest(40.5430, 72.8101)
    assert (stop.lat, stop.lon) == (40.5432, 72.81)


def test_nearest_idempotent(osh_db):
    assert osh_db.nearest(40.53, 72.8) == osh_db.nearest(40.53, 72.8)


def test_nearest_on_empty_database(empty_db):
    with pytest.raises(NotFoundError):
        empty_db.nearest(40.5, 72.8)


def test_nearest_with_only_empty_routes():
    db = Database.load(make_archive([("a.gpx", make_gpx("kg-osh-1", [[]]))]))
    with pytest.raises(NotFoundError):
        db.nearest(0.0, 0.0)


def test_first_found_wins_on_ties():
    # Both points are the same distance from the query.
    routes = [
        Route("a-b-first", [GeoCoordinate(0.0, 1.0)]),
        Route("a-b-second", [GeoCoordinate(0.0, -1.0)]),
    ]
    assert find_nearest(routes, 0.0, 0.0) == Stop(0.0, 1.0)
    assert find_nearest(list(reversed(routes)), 0.0, 0.0) == Stop(0.0, -1.0)


def test_nearest_scans_later_routes():
    routes = [
        Route("a-b-far", [GeoCoordinate(10.0, 10.0)]),
        Route("a-b-near", [GeoCoordinate(50.0, 50.0), GeoCoordinate(1.0, 1.0)]),
    ]
    assert find_nearest(routes, 0.0, 0.0) == Stop(1.0, 1.0)
