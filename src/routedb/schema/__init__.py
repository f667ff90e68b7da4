"""FlatBuffers accessors for the Route schema (see route.fbs)."""

from .GeoPoint import GeoPoint, CreateGeoPoint
from .Route import Route

__all__ = ["GeoPoint", "CreateGeoPoint", "Route"]
