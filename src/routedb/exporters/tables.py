"""Tabular (CSV) exports of the route database."""

import pandas as pd
from pathlib import Path

from ..core.utils import to_micro_degrees
from ..database import Database

ROUTE_COLUMNS = [
    "index", "country", "city", "name", "points",
    "first_lat", "first_lon", "last_lat", "last_lon", "length_km",
]


class TableExporter:
    """Summarize routes and paths as DataFrames."""

    def __init__(self, db: Database):
        self.db = db

    def routes_frame(self) -> pd.DataFrame:
        """One row per route, in database order."""
        rows = []
        for index, route in enumerate(self.db):
            first = route.points[0] if route.points else None
            last = route.points[-1] if route.points else None
            rows.append({
                "index": index,
                "country": route.country,
                "city": route.city,
                "name": route.name,
                "points": len(route.points),
                "first_lat": first.lat if first else None,
                "first_lon": first.lon if first else None,
                "last_lat": last.lat if last else None,
                "last_lon": last.lon if last else None,
                "length_km": round(route.length_km(), 3),
            })
        return pd.DataFrame(rows, columns=ROUTE_COLUMNS)

    def points_frame(self, index: int) -> pd.DataFrame:
        """One row per point of route ``index``, in path order."""
        route = self.db.get_route(index)
        return pd.DataFrame({
            "seq": range(len(route.points)),
            "lat": [p.lat for p in route.points],
            "lon": [p.lon for p in route.points],
            "lat_e6": [to_micro_degrees(p.lat) for p in route.points],
            "lon_e6": [to_micro_degrees(p.lon) for p in route.points],
        })

    def save_csv(self, frame: pd.DataFrame, output_file: str) -> str:
        """
        Save a frame to CSV.

        Args:
            frame: DataFrame from ``routes_frame`` or ``points_frame``
            output_file: Path to output CSV file

        Returns:
            Path to output file
        """
        output_path = Path(output_file)
        output_path.parent.mkdir(parents=True, exist_ok=True)

        frame.to_csv(output_path, index=False, encoding="utf-8")

        print(f"✓ Saved {len(frame)} rows to {output_file}")
        return str(output_file)
