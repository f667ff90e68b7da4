"""Bounding box over every point of every route."""

from typing import Sequence

from .models import Box, Route


def compute_bounds(routes: Sequence[Route]) -> Box:
    """
    Compute the box bounding all points in all routes.

    The first point of the first route anchors the box, which then grows
    to cover every point. If there are no routes, or the first route has
    no points, the zero Box is returned.
    """
    if not routes or not routes[0].points:
        return Box()

    first = routes[0].points[0]
    north = south = first.lat
    east = west = first.lon

    for route in routes:
        for point in route.points:
            if point.lat > north:
                north = point.lat
            if point.lon > east:
                east = point.lon
            if point.lat < south:
                south = point.lat
            if point.lon < west:
                west = point.lon

    return Box(n=north, s=south, e=east, w=west)
