"""Core utilities for routedb."""

from .utils import (
    EARTH_RADIUS_M,
    haversine_distance,
    calculate_route_length,
    to_micro_degrees,
)
from .config import Config

__all__ = [
    "EARTH_RADIUS_M",
    "haversine_distance",
    "calculate_route_length",
    "to_micro_degrees",
    "Config",
]
