"""Data models for the route database."""

from dataclasses import dataclass, field
from typing import Tuple


@dataclass(frozen=True)
class GeoCoordinate:
    """A point in degrees. Values are stored as read, without range checks."""

    lat: float
    lon: float


@dataclass(frozen=True)
class Stop:
    """A place where a bus stops (or could be hailed)."""

    lat: float
    lon: float


@dataclass(frozen=True)
class Box:
    """Region bounded by two latitudes (n, s) and two longitudes (e, w)."""

    n: float = 0.0
    s: float = 0.0
    e: float = 0.0
    w: float = 0.0

    def __repr__(self) -> str:
        return f"Box(N={self.n}, S={self.s}, E={self.e}, W={self.w})"

    @property
    def is_empty(self) -> bool:
        """True for the zero box used when the database holds no points."""
        return self.n == self.s == self.e == self.w == 0.0


def parse_metadata(raw: str) -> Tuple[str, str, str]:
    """
    Split metadata of the form ``kg-osh-101`` into (country, city, name).

    Only the first two hyphens separate fields, so the name may contain
    hyphens itself. Anything with fewer than three parts yields empty strings.
    """
    parts = raw.split("-", 2)
    if len(parts) != 3:
        return "", "", ""
    return parts[0], parts[1], parts[2]


@dataclass(frozen=True)
class Route:
    """One ingested track: its metadata and its ordered path."""

    metadata_raw: str
    points: Tuple[GeoCoordinate, ...] = field(default_factory=tuple)
    country: str = field(init=False)
    city: str = field(init=False)
    name: str = field(init=False)

    def __post_init__(self):
        country, city, name = parse_metadata(self.metadata_raw)
        object.__setattr__(self, "country", country)
        object.__setattr__(self, "city", city)
        object.__setattr__(self, "name", name)
        object.__setattr__(self, "points", tuple(self.points))

    def __repr__(self) -> str:
        return (
            f"Route(country='{self.country}', city='{self.city}', "
            f"name='{self.name}', points={len(self.points)})"
        )

    def length_km(self) -> float:
        """Approximate path length in kilometers."""
        from .core.utils import calculate_route_length

        return calculate_route_length([(p.lat, p.lon) for p in self.points])
