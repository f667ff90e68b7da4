"""Shared geometry helpers."""

from math import radians, sin, cos, sqrt, atan2

EARTH_RADIUS_M = 6371000  # mean Earth radius in meters

MICRO_DEGREES = 1e6


def haversine_distance(lat1, lon1, lat2, lon2, radius=EARTH_RADIUS_M):
    """
    Calculate great-circle distance between two points using Haversine formula.

    Args:
        lat1, lon1: Coordinates of first point
        lat2, lon2: Coordinates of second point
        radius: Sphere radius, defaults to the Earth's in meters

    Returns:
        Distance in the unit of ``radius`` (meters by default)
    """
    lat1, lon1, lat2, lon2 = map(radians, [lat1, lon1, lat2, lon2])
    dlat = lat2 - lat1
    dlon = lon2 - lon1

    a = sin(dlat/2)**2 + cos(lat1) * cos(lat2) * sin(dlon/2)**2
    c = 2 * atan2(sqrt(a), sqrt(1-a))

    return radius * c


def calculate_route_length(points):
    """
    Calculate total route length in kilometers.

    Args:
        points: List of (lat, lon) tuples

    Returns:
        Total length in kilometers
    """
    total = 0
    for i in range(len(points) - 1):
        total += haversine_distance(
            points[i][0], points[i][1],
            points[i+1][0], points[i+1][1]
        )
    return total / 1000  # Convert to km


def to_micro_degrees(degrees):
    """Convert degrees to integer micro-degrees, truncating toward zero."""
    return int(degrees * MICRO_DEGREES)
