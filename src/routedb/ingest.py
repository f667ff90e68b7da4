"""Route archive ingestion: ZIP of GPX tracks -> list of routes."""

import io
import zipfile
from typing import List

import gpxpy
import gpxpy.gpx

from .errors import ArchiveError, ParseError, StructureError
from .models import GeoCoordinate, Route


def open_archive(data: bytes) -> zipfile.ZipFile:
    """
    Open raw bytes as a ZIP archive.

    Raises:
        ArchiveError: If the bytes are not a readable archive
    """
    try:
        return zipfile.ZipFile(io.BytesIO(data))
    except (zipfile.BadZipFile, zipfile.LargeZipFile, OSError) as e:
        raise ArchiveError(f"Failed to open route archive: {e}") from e


def parse_track(file: str, data: bytes) -> Route:
    """
    Parse one GPX document into a Route.

    The document must hold exactly one track with exactly one segment.
    The document name (``<metadata><name>``) is kept as raw metadata.

    Args:
        file: Archive entry name, used in error messages
        data: Raw GPX bytes

    Returns:
        Route with points in document order

    Raises:
        ParseError: If the document is not valid GPX
        StructureError: If the track or segment count is not 1
    """
    try:
        gpx = gpxpy.parse(data.decode("utf-8"))
    except (UnicodeDecodeError, ValueError, gpxpy.gpx.GPXException) as e:
        raise ParseError(file, e) from e

    if len(gpx.tracks) != 1:
        raise StructureError(file, 1, len(gpx.tracks), "track")

    segments = gpx.tracks[0].segments
    if len(segments) != 1:
        raise StructureError(file, 1, len(segments), "track segment")

    points = [
        GeoCoordinate(point.latitude, point.longitude)
        for point in segments[0].points
    ]
    return Route(metadata_raw=gpx.name or "", points=points)


def load_routes(data: bytes) -> List[Route]:
    """
    Read every track of a route archive, in archive order.

    Args:
        data: ZIP archive bytes, one GPX document per entry

    Returns:
        List of routes. No deduplication or sorting is applied.

    Raises:
        ArchiveError: If the archive or one of its entries cannot be read
        ParseError: If an entry is not valid GPX
        StructureError: If an entry breaks the one-track/one-segment rule
    """
    routes = []

    with open_archive(data) as archive:
        for info in archive.infolist():
            if info.is_dir():
                continue

            try:
                content = archive.read(info)
            except (zipfile.BadZipFile, OSError, RuntimeError, NotImplementedError) as e:
                raise ArchiveError(
                    f"Failed to read file {info.filename}: {e}",
                    file=info.filename,
                ) from e

            routes.append(parse_track(info.filename, content))

    return routes
