"""Binary encodings of a route for downstream clients.

Two independent formats are produced:

* ``encode_route``: a FlatBuffers ``Route`` table (see ``schema/route.fbs``)
  holding country, city, name and the path as int32 micro-degrees.
* ``encode_points``: the bare path as little-endian int64 micro-degree
  (lat, lon) pairs, 16 bytes per point, with no header.
"""

import struct
from typing import List, Tuple

import flatbuffers

from .core.utils import to_micro_degrees
from .errors import EncodingError
from .models import Route
from .schema import CreateGeoPoint
from .schema import Route as RouteTable
from .schema.Route import (
    RouteStart,
    RouteAddCountry,
    RouteAddCity,
    RouteAddName,
    RouteAddPath,
    RouteStartPathVector,
    RouteEnd,
)

POINT_RECORD = struct.Struct("<qq")


def _micro_degrees(degrees: float, bits: int) -> int:
    """Micro-degrees of ``degrees``, checked against a signed integer width."""
    try:
        value = to_micro_degrees(degrees)
    except (ValueError, OverflowError) as e:
        raise EncodingError(degrees, bits) from e

    limit = 1 << (bits - 1)
    if not -limit <= value < limit:
        raise EncodingError(degrees, bits)
    return value


def encode_route(route: Route) -> bytes:
    """
    Serialize a route as a finished FlatBuffers ``Route`` table.

    Args:
        route: Route to encode

    Returns:
        Buffer bytes, starting at the builder's head

    Raises:
        EncodingError: If a coordinate does not fit in int32 micro-degrees
    """
    builder = flatbuffers.Builder(64 + 8 * len(route.points))

    # Strings and vectors must be written before the table is started.
    country = builder.CreateString(route.country)
    city = builder.CreateString(route.city)
    name = builder.CreateString(route.name)

    RouteStartPathVector(builder, len(route.points))
    for point in reversed(route.points):
        CreateGeoPoint(builder, _micro_degrees(point.lat, 32), _micro_degrees(point.lon, 32))
    path = builder.EndVector()

    RouteStart(builder)
    RouteAddCountry(builder, country)
    RouteAddCity(builder, city)
    RouteAddName(builder, name)
    RouteAddPath(builder, path)
    table = RouteEnd(builder)

    builder.Finish(table)
    return bytes(builder.Output())


def decode_route(buf: bytes) -> RouteTable:
    """Return a reader over a buffer produced by ``encode_route``."""
    return RouteTable.GetRootAs(buf, 0)


def encode_points(route: Route) -> bytes:
    """
    Serialize a route's path as (lat, lon) int64 little-endian pairs.

    Args:
        route: Route to encode

    Returns:
        ``16 * len(route.points)`` bytes

    Raises:
        EncodingError: If a coordinate does not fit in int64 micro-degrees
    """
    return b"".join(
        POINT_RECORD.pack(_micro_degrees(point.lat, 64), _micro_degrees(point.lon, 64))
        for point in route.points
    )


def decode_points(buf: bytes) -> List[Tuple[int, int]]:
    """Split a buffer produced by ``encode_points`` into (lat, lon) pairs."""
    if len(buf) % POINT_RECORD.size:
        raise ValueError(
            f"Point buffer length {len(buf)} is not a multiple of {POINT_RECORD.size}"
        )
    return list(POINT_RECORD.iter_unpack(buf))
