"""GPX exporter for database routes."""

import re
import gpxpy.gpx
from pathlib import Path
from typing import List, Optional

from ..core import Config
from ..database import Database

UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9._-]+")


def route_file_stem(metadata: str, index: int) -> str:
    """File stem for a route: its metadata with unsafe characters replaced."""
    stem = UNSAFE_FILENAME_CHARS.sub("_", metadata).lstrip(".")
    return stem or f"route-{index}"


class GpxExporter:
    """Write routes back out as single-track GPX files."""

    def __init__(self, db: Database, config: Optional[Config] = None):
        """
        Initialize GPX Exporter.

        Args:
            db: Loaded route database
            config: Configuration object (uses defaults if None)
        """
        self.db = db
        self.config = config or Config()

    def build_gpx(self, index: int) -> gpxpy.gpx.GPX:
        """
        Build a GPX document for one route.

        The document has one track with one segment and carries the raw
        metadata as its name, so it can be ingested again.
        """
        route = self.db.get_route(index)

        gpx = gpxpy.gpx.GPX()
        gpx.creator = self.config.get_gpx_creator()
        gpx.name = route.metadata_raw

        track = gpxpy.gpx.GPXTrack(name=route.name or None)
        segment = gpxpy.gpx.GPXTrackSegment()
        for point in route.points:
            segment.points.append(
                gpxpy.gpx.GPXTrackPoint(latitude=point.lat, longitude=point.lon)
            )
        track.segments.append(segment)
        gpx.tracks.append(track)

        return gpx

    def export_route(self, index: int, output_file: str) -> str:
        """
        Export one route to a GPX file.

        Args:
            index: Route index
            output_file: Output GPX file path

        Returns:
            Path to output file
        """
        gpx = self.build_gpx(index)

        # Ensure output directory exists
        output_path = Path(output_file)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        with open(output_path, "w", encoding="utf-8") as f:
            f.write(gpx.to_xml())

        points = len(gpx.tracks[0].segments[0].points)
        print(f"✓ Exported route {index} ({points} points) to {output_file}")
        return str(output_file)

    def export_all(self, output_dir: Optional[str] = None) -> List[str]:
        """
        Export every route to its own GPX file.

        Files are named ``<metadata>.gpx``, or ``route-<index>.gpx`` when
        the route has no metadata. Characters outside ``[A-Za-z0-9._-]``
        become ``_`` and clashing names get a ``-<n>`` suffix.

        Args:
            output_dir: Output directory (default: from config)

        Returns:
            List of output file paths
        """
        output_dir = Path(output_dir or self.config.get_output_dir())
        output_dir.mkdir(parents=True, exist_ok=True)

        print(f"\nExporting {self.db.routes()} routes to {output_dir}")

        files = []
        used = set()
        for index, route in enumerate(self.db):
            stem = route_file_stem(route.metadata_raw, index)
            candidate = stem
            suffix = 1
            # Compared case-insensitively for case-folding filesystems.
            while candidate.lower() in used:
                candidate = f"{stem}-{suffix}"
                suffix += 1
            used.add(candidate.lower())

            output_file = output_dir / f"{candidate}.gpx"
            files.append(self.export_route(index, str(output_file)))

        print(f"\n✓ Exported {len(files)} route files")
        return files
