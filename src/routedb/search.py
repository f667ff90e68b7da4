"""Nearest stop search."""

from typing import Sequence

from .core.utils import haversine_distance
from .errors import NotFoundError
from .models import Route, Stop


def find_nearest(routes: Sequence[Route], lat: float, lon: float) -> Stop:
    """
    Find the stored point closest to (lat, lon) by great-circle distance.

    Every point of every route is scanned in order; on equal distances the
    first point encountered wins.

    Args:
        routes: Routes to scan
        lat, lon: Query coordinate in degrees

    Returns:
        Stop with the matched point's stored coordinates

    Raises:
        NotFoundError: If the routes hold no points
    """
    best = None
    min_distance = float("inf")

    for route in routes:
        for point in route.points:
            distance = haversine_distance(lat, lon, point.lat, point.lon)
            if distance < min_distance:
                min_distance = distance
                best = point

    if best is None:
        raise NotFoundError()

    return Stop(lat=best.lat, lon=best.lon)
