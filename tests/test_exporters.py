from pathlib import Path

import pandas as pd
import pytest

from routedb import Database, OutOfRangeError
from routedb.exporters import GpxExporter, TableExporter
from routedb.ingest import parse_track

from conftest import OSH_101, OSH_7_EXPRESS, make_archive, make_gpx


def test_exported_gpx_ingests_back(osh_db, tmp_path):
    output = tmp_path / "osh-101.gpx"
    GpxExporter(osh_db).export_route(0, str(output))

    route = parse_track(output.name, output.read_bytes())
    assert route == osh_db.get_route(0)


def test_export_all_round_trips_database(osh_db, tmp_path):
    files = GpxExporter(osh_db).export_all(str(tmp_path / "gpx"))
    assert len(files) == 2

    entries = [(f.split("/")[-1], open(f, "rb").read()) for f in files]
    reloaded = Database.load(make_archive(entries))
    assert list(reloaded) == list(osh_db)
    assert reloaded.bounds() == osh_db.bounds()


def test_gpx_export_bad_index(osh_db, tmp_path):
    with pytest.raises(OutOfRangeError):
        GpxExporter(osh_db).export_route(5, str(tmp_path / "x.gpx"))


def test_routes_frame(osh_db):
    frame = TableExporter(osh_db).routes_frame()
    assert list(frame["name"]) == ["101", "7-express"]
    assert list(frame["points"]) == [len(OSH_101), len(OSH_7_EXPRESS)]
    assert frame.loc[0, "first_lat"] == OSH_101[0][0]
    assert frame.loc[1, "last_lon"] == OSH_7_EXPRESS[-1][1]


def test_points_frame_and_csv(osh_db, tmp_path):
    exporter = TableExporter(osh_db)
    frame = exporter.points_frame(0)
    assert list(frame["lat_e6"])[0] == 40502630

    output = tmp_path / "csv" / "points.csv"
    exporter.save_csv(frame, str(output))
    loaded = pd.read_csv(output)
    assert len(loaded) == len(OSH_101)
    assert list(loaded["seq"]) == list(range(len(OSH_101)))


def test_export_all_names_never_collide(tmp_path):
    points = [[(1.0, 2.0)]]
    db = Database.load(make_archive([
        ("a.gpx", make_gpx("kg-osh-1", points)),
        ("b.gpx", make_gpx("kg-osh-1", points)),
        ("c.gpx", make_gpx("kg-osh-1-1", points)),
        ("d.gpx", make_gpx("kg/osh\\..:1", points)),
        ("e.gpx", make_gpx(None, points)),
    ]))

    files = GpxExporter(db).export_all(str(tmp_path))
    names = [Path(f).name for f in files]
    assert names == [
        "kg-osh-1.gpx",
        "kg-osh-1-1.gpx",
        "kg-osh-1-1-1.gpx",
        "kg_osh_.._1.gpx",
        "route-4.gpx",
    ]
    assert all(Path(f).parent == tmp_path for f in files)
    assert len(list(tmp_path.iterdir())) == 5
