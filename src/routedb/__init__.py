"""routedb - In-memory database of transport routes loaded from GPX archives."""

__version__ = "0.1.0"

# Expose main classes for programmatic use
from .core import Config
from .database import Database
from .encoding import decode_points, decode_route, encode_points, encode_route
from .errors import (
    RouteDbError,
    ArchiveError,
    ParseError,
    StructureError,
    NotFoundError,
    OutOfRangeError,
    EncodingError,
)
from .models import Box, GeoCoordinate, Route, Stop

__all__ = [
    "__version__",
    "Config",
    "Database",
    "encode_route",
    "decode_route",
    "encode_points",
    "decode_points",
    "RouteDbError",
    "ArchiveError",
    "ParseError",
    "StructureError",
    "NotFoundError",
    "OutOfRangeError",
    "EncodingError",
    "Box",
    "GeoCoordinate",
    "Route",
    "Stop",
]
