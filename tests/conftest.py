import io
import zipfile

import pytest

from routedb import Database

# Two routes around Osh; together their points span the bounds below.
OSH_101 = [
    (40.50263, 72.821976),
    (40.501026, 72.8205),
    (40.5123, 72.822586),
    (40.5432, 72.81),
]
OSH_7_EXPRESS = [
    (40.52, 72.796295),
    (40.53, 72.80),
    (40.5311, 72.8012),
]

OSH_BOUNDS = {"n": 40.5432, "s": 40.501026, "e": 72.822586, "w": 72.796295}


def make_gpx(name, segments, tracks=1):
    """Build a GPX 1.1 document; ``segments`` is a list of point lists."""
    metadata = f"<metadata><name>{name}</name></metadata>" if name is not None else ""
    segs = "".join(
        "<trkseg>"
        + "".join(f'<trkpt lat="{lat!r}" lon="{lon!r}"></trkpt>' for lat, lon in points)
        + "</trkseg>"
        for points in segments
    )
    trks = "".join(f"<trk>{segs}</trk>" for _ in range(tracks))
    return (
        '<?xml version="1.0" encoding="UTF-8"?>'
        '<gpx version="1.1" creator="tests" xmlns="http://www.topografix.com/GPX/1/1">'
        f"{metadata}{trks}</gpx>"
    ).encode("utf-8")


def make_archive(entries):
    """Zip ``(filename, bytes)`` entries, preserving their order."""
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w", zipfile.ZIP_DEFLATED) as zf:
        for filename, content in entries:
            zf.writestr(filename, content)
    return buf.getvalue()


@pytest.fixture(scope="session")
def osh_archive():
    return make_archive([
        ("kg-osh-101.gpx", make_gpx("kg-osh-101", [OSH_101])),
        ("kg-osh-7-express.gpx", make_gpx("kg-osh-7-express", [OSH_7_EXPRESS])),
    ])


@pytest.fixture(scope="session")
def osh_db(osh_archive):
    # Read-only: the database is immutable once loaded.
    return Database.load(osh_archive)


@pytest.fixture
def empty_db():
    return Database.load(make_archive([]))
