"""In-memory route database."""

from pathlib import Path
from typing import Iterator, Sequence, Tuple

from .bounds import compute_bounds
from .encoding import encode_points, encode_route
from .errors import OutOfRangeError
from .ingest import load_routes
from .models import Box, Route, Stop
from .search import find_nearest


class Database:
    """
    Immutable copy of a transport route database.

    Build one with ``Database.load(archive_bytes)`` or ``Database.from_file``.
    Once loaded, every method is a pure read, so a single instance can be
    shared between callers.
    """

    __slots__ = ("_routes", "_bounds")

    def __init__(self, routes: Sequence[Route] = ()):
        """
        Initialize database from already parsed routes.

        Args:
            routes: Routes in ingestion order
        """
        self._routes: Tuple[Route, ...] = tuple(routes)
        self._bounds = compute_bounds(self._routes)

    @classmethod
    def load(cls, data: bytes) -> "Database":
        """
        Load a database from a ZIP archive of GPX tracks.

        Loading is all-or-nothing: any archive, parse or structure error
        propagates and no database is returned.
        """
        return cls(load_routes(data))

    @classmethod
    def from_file(cls, path) -> "Database":
        """Load a database from an archive file on disk."""
        return cls.load(Path(path).read_bytes())

    def __len__(self) -> int:
        return len(self._routes)

    def __iter__(self) -> Iterator[Route]:
        return iter(self._routes)

    def __repr__(self) -> str:
        return f"Database(routes={len(self._routes)}, bounds={self._bounds!r})"

    def routes(self) -> int:
        """Return the number of routes."""
        return len(self._routes)

    def bounds(self) -> Box:
        """Return the box bounding every point of every route."""
        return self._bounds

    def nearest(self, lat: float, lon: float) -> Stop:
        """
        Return the stored point nearest to (lat, lon).

        Raises:
            NotFoundError: If the database holds no points
        """
        return find_nearest(self._routes, lat, lon)

    def get_route(self, i: int) -> Route:
        """
        Return the parsed route at index ``i``.

        Raises:
            OutOfRangeError: If ``i`` is not in ``[0, routes())``
        """
        if not 0 <= i < len(self._routes):
            raise OutOfRangeError(i, len(self._routes))
        return self._routes[i]

    def route(self, i: int) -> bytes:
        """Return route ``i`` encoded as a FlatBuffers ``Route`` table."""
        return encode_route(self.get_route(i))

    def points(self, i: int) -> bytes:
        """
        Return the path of route ``i`` as pairs of int64(lat*1e6),
        int64(lon*1e6) in little endian format.
        """
        return encode_points(self.get_route(i))
